"""
Elimination Design.

A design is a validated, private copy of the caller's matrix plus the
requested reduction mode. Backends never touch the caller's data: they
ask the design for a fresh working copy and mutate that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import ValidationError
from pyechelon.core.validation import check_array, check_finite
from pyechelon.elimination._common import (
    REDUCTION_MODES,
    ReductionMode,
    check_mode,
    validate_float_matrix,
    validate_rows,
)


@dataclass(frozen=True)
class EliminationDesign:
    """
    Matrix and mode for one front-door elimination.

    Construction:
        EliminationDesign.from_array(A)            # float array (cpu backend)
        EliminationDesign.from_rows(rows)          # any scalars (generic backend)
    """
    _data: NDArray[np.floating[Any]] | tuple[tuple[Any, ...], ...]
    _n_rows: int
    _n_cols: int
    _mode: ReductionMode
    _is_array: bool

    @classmethod
    def from_array(cls, A: ArrayLike, *, mode: ReductionMode = 'reduce') -> EliminationDesign:
        """
        Build a design from a numeric array-like.

        Integer input is promoted to float64; float32 input stays float32.

        Raises:
            ValidationError: Non-numeric or non-finite input
            EmptyMatrixError: No rows
            DimensionError: Not 2D, or fewer columns than rows
        """
        check_mode(mode, REDUCTION_MODES)
        arr = np.array(check_array(A, 'A'), copy=True)
        validate_float_matrix(arr, 'A')
        check_finite(arr, 'A')
        arr.flags.writeable = False
        n, m = arr.shape
        return cls(_data=arr, _n_rows=n, _n_cols=m, _mode=mode, _is_array=True)

    @classmethod
    def from_rows(cls, rows: Any, *, mode: ReductionMode = 'reduce') -> EliminationDesign:
        """
        Build a design from a sequence of rows of arbitrary scalars.

        Raises:
            ValidationError: Input is not a sequence of sequences
            EmptyMatrixError: No rows
            RaggedMatrixError: Rows of differing lengths
            DimensionError: Fewer columns than rows
        """
        check_mode(mode, REDUCTION_MODES)
        if isinstance(rows, np.ndarray):
            rows = rows.tolist()
        if isinstance(rows, (str, bytes)):
            raise ValidationError("A: expected a sequence of rows, got a string")
        try:
            copied = [_copy_row(row, index) for index, row in enumerate(rows)]
        except TypeError as e:
            raise ValidationError(f"A: expected a sequence of rows: {e}") from e
        validate_rows(copied, 'A')
        return cls(
            _data=tuple(tuple(row) for row in copied),
            _n_rows=len(copied),
            _n_cols=len(copied[0]),
            _mode=mode,
            _is_array=False,
        )

    def working_copy(self) -> NDArray[np.floating[Any]] | list[list[Any]]:
        """Fresh mutable copy of the matrix for a backend to reduce."""
        if self._is_array:
            return np.array(self._data, copy=True)
        return [list(row) for row in self._data]

    # === Properties ===

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n_rows, self._n_cols)

    @property
    def mode(self) -> ReductionMode:
        return self._mode

    @property
    def is_array(self) -> bool:
        """True if the matrix is a float ndarray (cpu backend input)."""
        return self._is_array


def _copy_row(row: Any, index: int) -> list[Any]:
    if isinstance(row, (str, bytes)):
        raise ValidationError(f"A: row {index} is a string, expected a sequence of scalars")
    return list(row)
