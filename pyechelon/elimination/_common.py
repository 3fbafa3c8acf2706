"""
Common types and checks for elimination.

Contains the mode aliases, the frozen parameter payload that goes inside
Result[P] envelopes, and the composite validators run at every public
boundary before the caller's matrix is touched.
"""

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pyechelon.core.exceptions import ValidationError
from pyechelon.core.validation import (
    check_2d,
    check_float_ndarray,
    check_min_columns,
    check_mutable_rows,
    check_nonempty,
    check_rectangular,
)


# Forward-pass behavior: stop at echelon form, or normalize every pivot
# to one so that back elimination can follow.
EliminationMode = Literal['just_echelon', 'prepare_reduce']

ELIMINATION_MODES: tuple[str, ...] = ('just_echelon', 'prepare_reduce')

# Front-door modes: the two forward modes plus full Gauss-Jordan.
ReductionMode = Literal['reduce', 'just_echelon', 'prepare_reduce']

REDUCTION_MODES: tuple[str, ...] = ('reduce',) + ELIMINATION_MODES


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for an elimination run.

    matrix is either a float ndarray (cpu backend) or a list of rows
    (generic backend).
    """
    matrix: NDArray[np.floating[Any]] | list[list[Any]]
    diagonal_pivots: tuple[int, ...]    # columns c whose pivot the sweep placed at (c, c)
    pivot_columns: tuple[int, ...]      # leading-entry columns of the row space
    rank: int                           # len(pivot_columns)
    n_rows: int
    n_cols: int


def check_mode(mode: str, allowed: tuple[str, ...] = ELIMINATION_MODES) -> None:
    """Raise ValueError for a mode outside the closed set."""
    if mode not in allowed:
        raise ValueError(f"Unknown mode: {mode!r}. Expected one of {allowed}")


def validate_float_matrix(matrix: Any, name: str) -> None:
    """
    Full boundary check for the in-place float path.

    Raises:
        ValidationError: Not a floating ndarray
        EmptyMatrixError: No rows
        DimensionError: Not 2D, or fewer columns than rows
    """
    check_float_ndarray(matrix, name)
    if matrix.ndim >= 1:
        check_nonempty(matrix, name)
    check_2d(matrix, name)
    check_min_columns(matrix.shape[0], matrix.shape[1], name)


def validate_rows(rows: Any, name: str) -> None:
    """
    Full boundary check for the in-place generic path.

    Raises:
        ValidationError: Container or rows cannot be mutated in place
        EmptyMatrixError: No rows
        RaggedMatrixError: Rows of differing lengths
        DimensionError: Fewer columns than rows
    """
    if isinstance(rows, np.ndarray):
        raise ValidationError(
            f"{name}: numpy arrays are eliminated with eliminate()/reduce(); "
            f"the generic path expects a list of rows"
        )
    check_mutable_rows(rows, name)
    check_nonempty(rows, name)
    check_rectangular(rows, name)
    check_min_columns(len(rows), len(rows[0]), name)


def elimination_warnings(
    diagonal_pivots: tuple[int, ...],
    rank: int,
    n_rows: int,
) -> tuple[str, ...]:
    """Describe rank deficiency and diagonal positions the sweep skipped."""
    messages = []
    if rank < n_rows:
        messages.append(f"rank-deficient: rank={rank}, rows={n_rows}")
    missing = [c for c in range(n_rows) if c not in diagonal_pivots]
    if missing:
        messages.append(f"no pivot on the diagonal in column(s) {missing}")
    return tuple(messages)
