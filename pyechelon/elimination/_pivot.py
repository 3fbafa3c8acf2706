"""
Pivot search.

Pivot selection is "first nonzero", tested exactly against zero. No
tolerance is applied: a tiny but nonzero entry is a valid pivot.
"""

from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import NDArray


def find_pivot_row(matrix: NDArray[np.floating[Any]], d: int) -> int | None:
    """
    First row at or below d with a nonzero entry in column d.

    Returns:
        Row index, or None if column d is zero from row d down
    """
    nonzero = np.flatnonzero(matrix[d:, d])
    if nonzero.size == 0:
        return None
    return d + int(nonzero[0])


def find_pivot_column(matrix: NDArray[np.floating[Any]], d: int) -> int | None:
    """
    First column in d..n_rows with a nonzero entry in row d.

    The search stops at the row count, not the row width: trailing
    (augmented) columns are never pivot candidates.

    Returns:
        Column index, or None if there is no pivot in the square region
    """
    nonzero = np.flatnonzero(matrix[d, d:matrix.shape[0]])
    if nonzero.size == 0:
        return None
    return d + int(nonzero[0])


def find_pivot_row_generic(
    rows: Sequence[Sequence[Any]],
    d: int,
    is_zero: Callable[[Any], bool],
) -> int | None:
    """Sequence-of-rows counterpart of find_pivot_row."""
    return next((i for i in range(d, len(rows)) if not is_zero(rows[i][d])), None)


def find_pivot_column_generic(
    rows: Sequence[Sequence[Any]],
    d: int,
    is_zero: Callable[[Any], bool],
) -> int | None:
    """Sequence-of-rows counterpart of find_pivot_column."""
    return next((i for i in range(d, len(rows)) if not is_zero(rows[d][i])), None)
