"""
Back elimination on float arrays.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyechelon.elimination._pivot import find_pivot_column


def back_sweep(matrix: NDArray[np.floating[Any]]) -> None:
    """
    Clear every pivot column above its pivot, in place.

    Requires normalized row-echelon form (pivots equal to one), as left by
    forward_sweep(matrix, 'prepare_reduce'). Rows are visited from the
    bottom up to row 1. For row d with pivot column i, every row r < d has
    m[r, i] * m[d, d:] subtracted from m[r, d:].

    Args:
        matrix: 2D floating array in normalized echelon form (mutated)
    """
    n_rows = matrix.shape[0]

    for d in range(n_rows - 1, 0, -1):
        i = find_pivot_column(matrix, d)
        if i is None:
            continue
        factors = matrix[:d, i].copy()
        matrix[:d, d:] -= np.outer(factors, matrix[d, d:])
