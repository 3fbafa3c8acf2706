"""
Rank and leading-entry columns.

The forward sweep only looks for pivots on the diagonal, so when a column
is skipped the next leading entry can sit to the right of the diagonal
and go unreported. These helpers run a staircase echelon pass instead
(the row pointer only advances when a pivot is found) on a private copy,
so every leading entry is found. Zero tests are exact, as in the sweeps.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyechelon.elimination.fields import ScalarField


def leading_columns(matrix: NDArray[np.floating[Any]]) -> tuple[int, ...]:
    """
    Columns holding the leading entries of a staircase echelon form.

    The input is not modified. len() of the result is the rank.
    """
    m = np.array(matrix, copy=True)
    n_rows, n_cols = m.shape
    leads = []
    r = 0

    for c in range(n_cols):
        if r == n_rows:
            break
        nonzero = np.flatnonzero(m[r:, c])
        if nonzero.size == 0:
            continue
        i = r + int(nonzero[0])
        if i != r:
            m[[r, i]] = m[[i, r]]
        factors = m[r + 1:, c] / m[r, c]
        m[r + 1:, c + 1:] -= np.outer(factors, m[r, c + 1:])
        m[r + 1:, c] = 0
        leads.append(c)
        r += 1

    return tuple(leads)


def leading_columns_generic(
    rows: Sequence[Sequence[Any]],
    field: ScalarField,
) -> tuple[int, ...]:
    """Sequence-of-rows counterpart of leading_columns."""
    m = [list(row) for row in rows]
    n_rows, n_cols = len(m), len(m[0])
    leads = []
    r = 0

    for c in range(n_cols):
        if r == n_rows:
            break
        i = next((k for k in range(r, n_rows) if not field.is_zero(m[k][c])), None)
        if i is None:
            continue
        m[r], m[i] = m[i], m[r]
        pivot_row = m[r]
        for k in range(r + 1, n_rows):
            row = m[k]
            factor = field.div(row[c], pivot_row[c])
            row[c] = field.sub(row[c], row[c])
            for j in range(c + 1, n_cols):
                row[j] = field.sub(row[j], field.mul(factor, pivot_row[j]))
        leads.append(c)
        r += 1

    return tuple(leads)
