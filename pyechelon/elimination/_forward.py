"""
Forward elimination on float arrays.

Row operations are vectorized per pivot: every row below the pivot is
updated with one outer product. The values are identical to an
element-wise loop in the array's dtype, since each entry still sees
exactly one multiply and one subtract.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyechelon.elimination._common import EliminationMode
from pyechelon.elimination._pivot import find_pivot_row


def forward_sweep(
    matrix: NDArray[np.floating[Any]],
    mode: EliminationMode,
) -> tuple[int, ...]:
    """
    Reduce a validated matrix to row-echelon form in place.

    For each column c < n_rows:
        1. Find the first row i >= c with a nonzero in column c; if none,
           leave the matrix alone and move on.
        2. Subtract (m[r, c] / m[i, c]) * m[i, c:] from m[r, c:] for every
           row r below i.
        3. Swap rows i and c so the pivot sits on the diagonal.
        4. Under 'prepare_reduce', scale m[c, c:] by 1 / m[c, c].

    Rows between c and i are already zero in column c and are not touched.
    The eliminated entries are stored as exact zeros and a normalized pivot
    as an exact one; elsewhere rounding is whatever the dtype gives.

    Args:
        matrix: 2D floating array, n_cols >= n_rows (mutated)
        mode: 'just_echelon' or 'prepare_reduce'

    Returns:
        Columns in which a pivot was found, ascending
    """
    n_rows = matrix.shape[0]
    one = matrix.dtype.type(1)
    pivots = []

    for c in range(n_rows):
        i = find_pivot_row(matrix, c)
        if i is None:
            continue

        if i + 1 < n_rows:
            factors = matrix[i + 1:, c] / matrix[i, c]
            matrix[i + 1:, c + 1:] -= np.outer(factors, matrix[i, c + 1:])
            matrix[i + 1:, c] = 0

        if i != c:
            matrix[[c, i]] = matrix[[i, c]]

        if mode == 'prepare_reduce':
            matrix[c, c + 1:] *= one / matrix[c, c]
            matrix[c, c] = one

        pivots.append(c)

    return tuple(pivots)
