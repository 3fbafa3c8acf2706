"""
Input validation utilities for PyEchelon.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Nothing here mutates its input
"""

from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyechelon.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyMatrixError,
    RaggedMatrixError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype (float32 input is preserved)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_float_ndarray(matrix: Any, name: str) -> None:
    """
    Verify the input is a numpy array with a floating dtype.

    In-place operations cannot work on a converted copy, so no coercion
    is attempted here.

    Args:
        matrix: Object to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If matrix is not a floating numpy.ndarray
    """
    if not isinstance(matrix, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(matrix).__name__}. "
            f"Use the *_generic functions for Python sequences."
        )
    if not np.issubdtype(matrix.dtype, np.floating):
        raise ValidationError(
            f"{name}: expected floating dtype, got {matrix.dtype}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
        )


def check_nonempty(matrix: Sequence[Any] | NDArray[Any], name: str) -> None:
    """
    Verify the matrix has at least one row.

    Args:
        matrix: Matrix as ndarray or sequence of rows
        name: Parameter name for error messages

    Raises:
        EmptyMatrixError: If matrix has zero rows
    """
    if len(matrix) == 0:
        raise EmptyMatrixError(f"{name}: matrix has no rows")


def check_mutable_rows(rows: Any, name: str) -> None:
    """
    Verify a sequence-of-rows matrix supports in-place mutation.

    The outer container must support item assignment (rows are swapped)
    and so must every row (entries are overwritten).

    Args:
        rows: Matrix as a sequence of rows
        name: Parameter name for error messages

    Raises:
        ValidationError: If the container or any row is immutable
    """
    if not isinstance(rows, Sequence) or not hasattr(rows, '__setitem__'):
        raise ValidationError(
            f"{name}: expected a mutable sequence of rows, got {type(rows).__name__}"
        )
    for index, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__setitem__'):
            raise ValidationError(
                f"{name}: row {index} is not a mutable sequence "
                f"(got {type(row).__name__})"
            )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify every row has the same length.

    Args:
        rows: Matrix as a sequence of rows
        name: Parameter name for error messages

    Raises:
        RaggedMatrixError: If row lengths differ
    """
    lengths = tuple(len(row) for row in rows)
    if len(set(lengths)) > 1:
        bad = [i for i, length in enumerate(lengths) if length != lengths[0]]
        raise RaggedMatrixError(
            f"{name}: rows have differing lengths; row 0 has {lengths[0]} "
            f"columns but rows {bad} have {[lengths[i] for i in bad]}",
            row_lengths=lengths,
        )


def check_min_columns(n_rows: int, n_cols: int, name: str) -> None:
    """
    Verify the matrix is at least as wide as it is tall.

    Pivots are searched on the diagonal for every row index, so a matrix
    with fewer columns than rows cannot be eliminated.

    Args:
        n_rows: Number of rows
        n_cols: Number of columns
        name: Parameter name for error messages

    Raises:
        DimensionError: If n_cols < n_rows
    """
    if n_cols < n_rows:
        raise DimensionError(
            f"{name}: has {n_rows} rows but only {n_cols} columns; "
            f"expected at least {n_rows} columns",
            shape=(n_rows, n_cols),
        )
