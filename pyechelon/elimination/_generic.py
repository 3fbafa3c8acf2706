"""
Forward and back elimination over an arbitrary ScalarField.

Same algorithms as _forward and _backward, written element by element
against a list of rows so that any scalar type can flow through. Every
arithmetic step goes through the field.
"""

from typing import MutableSequence

from pyechelon.core.protocols import Scalar
from pyechelon.elimination._common import EliminationMode
from pyechelon.elimination._pivot import (
    find_pivot_column_generic,
    find_pivot_row_generic,
)
from pyechelon.elimination.fields import ScalarField

Rows = MutableSequence[MutableSequence[Scalar]]


def forward_sweep_generic(
    rows: Rows,
    mode: EliminationMode,
    field: ScalarField,
) -> tuple[int, ...]:
    """
    Reduce a validated list of rows to row-echelon form in place.

    Returns:
        Columns in which a pivot was found, ascending
    """
    n_rows = len(rows)
    pivots = []

    for c in range(n_rows):
        i = find_pivot_row_generic(rows, c, field.is_zero)
        if i is None:
            continue

        pivot_row = rows[i]
        for r in range(i + 1, n_rows):
            row = rows[r]
            factor = field.div(row[c], pivot_row[c])
            row[c] = field.sub(row[c], row[c])
            for k in range(c + 1, len(row)):
                row[k] = field.sub(row[k], field.mul(factor, pivot_row[k]))

        if i != c:
            rows[i], rows[c] = rows[c], rows[i]

        if mode == 'prepare_reduce':
            row = rows[c]
            factor = field.div(field.one, row[c])
            row[c] = field.div(row[c], row[c])
            for k in range(c + 1, len(row)):
                row[k] = field.mul(row[k], factor)

        pivots.append(c)

    return tuple(pivots)


def back_sweep_generic(rows: Rows, field: ScalarField) -> None:
    """Clear every pivot column above its pivot; rows must be normalized."""
    n_rows = len(rows)

    for d in range(n_rows - 1, 0, -1):
        i = find_pivot_column_generic(rows, d, field.is_zero)
        if i is None:
            continue

        pivot_row = rows[d]
        for r in range(d - 1, -1, -1):
            row = rows[r]
            factor = row[i]
            for k in range(d, len(pivot_row)):
                row[k] = field.sub(row[k], field.mul(factor, pivot_row[k]))
