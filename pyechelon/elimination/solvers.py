"""
Public entry points for elimination.

Two families share one algorithm description:

    In place (the caller owns the matrix and receives None):
        eliminate(matrix, mode)           float ndarray
        back_eliminate(matrix)            float ndarray
        reduce(matrix)                    float ndarray
        eliminate_generic(rows, mode)     list of rows, any ScalarField
        back_eliminate_generic(rows)
        reduce_generic(rows)

    Copying front door:
        rref(A, ...) -> EliminationSolution

The in-place functions require exclusive access to the matrix for the
duration of the call: no other reader or writer may touch it concurrently.
All validation happens before the first write, so a rejected matrix is
left exactly as it was.
"""

from typing import Any, Literal
import warnings

import numpy as np
from numpy.typing import NDArray

from pyechelon.elimination._backward import back_sweep
from pyechelon.elimination._common import (
    REDUCTION_MODES,
    EliminationMode,
    ReductionMode,
    check_mode,
    validate_float_matrix,
    validate_rows,
)
from pyechelon.elimination._forward import forward_sweep
from pyechelon.elimination._generic import back_sweep_generic, forward_sweep_generic
from pyechelon.elimination.backends.cpu import CPUGaussJordanBackend
from pyechelon.elimination.backends.generic import GenericGaussJordanBackend
from pyechelon.elimination.design import EliminationDesign
from pyechelon.elimination.fields import OPERATOR_FIELD, ScalarField
from pyechelon.elimination.solution import EliminationSolution


BackendChoice = Literal['auto', 'cpu', 'generic']


# ═══════════════════════════════════════════════════════════════════════
# In place, float arrays
# ═══════════════════════════════════════════════════════════════════════


def eliminate(matrix: NDArray[np.floating[Any]], mode: EliminationMode) -> None:
    """
    Forward elimination in place.

    Sweeps columns 0..n_rows-1. For each column the first nonzero entry at
    or below the diagonal is the pivot; entries below it are eliminated,
    the pivot row is swapped onto the diagonal and, under
    'prepare_reduce', scaled so the pivot is exactly one. Columns with no
    pivot are skipped without touching the matrix.

    Args:
        matrix: 2D floating ndarray with n_cols >= n_rows. float32 is the
            reference precision; float64 works the same way.
        mode: 'just_echelon' or 'prepare_reduce'

    Raises:
        ValueError: Unknown mode
        ValidationError: Not a floating ndarray
        EmptyMatrixError: No rows
        DimensionError: Not 2D, or fewer columns than rows

    Example:
        >>> m = np.array([[1, 2, 1, 10], [2, 3, 2, 12], [3, 1, 4, 11]], dtype=np.float32)
        >>> eliminate(m, 'just_echelon')
        >>> m
        array([[ 1.,  2.,  1., 10.],
               [ 0., -1.,  0., -8.],
               [ 0.,  0.,  1., 21.]], dtype=float32)
    """
    check_mode(mode)
    validate_float_matrix(matrix, 'matrix')
    forward_sweep(matrix, mode)


def back_eliminate(matrix: NDArray[np.floating[Any]]) -> None:
    """
    Back elimination in place.

    The matrix must already be in normalized row-echelon form, i.e. the
    output of eliminate(matrix, 'prepare_reduce'). Anything else gives a
    meaningless result; this is not checked.

    Raises:
        ValidationError: Not a floating ndarray
        EmptyMatrixError: No rows
        DimensionError: Not 2D, or fewer columns than rows
    """
    validate_float_matrix(matrix, 'matrix')
    back_sweep(matrix)


def reduce(matrix: NDArray[np.floating[Any]]) -> None:
    """
    Gauss-Jordan elimination in place: forward with pivot normalization,
    then back elimination, leaving reduced row-echelon form.

    Raises:
        ValidationError: Not a floating ndarray
        EmptyMatrixError: No rows
        DimensionError: Not 2D, or fewer columns than rows
    """
    validate_float_matrix(matrix, 'matrix')
    forward_sweep(matrix, 'prepare_reduce')
    back_sweep(matrix)


# ═══════════════════════════════════════════════════════════════════════
# In place, any scalar field
# ═══════════════════════════════════════════════════════════════════════


def eliminate_generic(
    matrix: list[list[Any]],
    mode: EliminationMode,
    field: ScalarField | None = None,
) -> None:
    """
    Forward elimination in place over a list of rows.

    Behaves exactly like eliminate(), with every arithmetic step and the
    zero-test delegated to field.

    Args:
        matrix: Mutable sequence of mutable rows, rectangular, n_cols >= n_rows
        mode: 'just_echelon' or 'prepare_reduce'
        field: Arithmetic; Python operators with 0/1 identities if None

    Raises:
        ValueError: Unknown mode
        ValidationError: Immutable container or rows
        EmptyMatrixError: No rows
        RaggedMatrixError: Rows of differing lengths
        DimensionError: Fewer columns than rows
    """
    check_mode(mode)
    validate_rows(matrix, 'matrix')
    forward_sweep_generic(matrix, mode, field or OPERATOR_FIELD)


def back_eliminate_generic(
    matrix: list[list[Any]],
    field: ScalarField | None = None,
) -> None:
    """Back elimination in place over a list of rows; see back_eliminate()."""
    validate_rows(matrix, 'matrix')
    back_sweep_generic(matrix, field or OPERATOR_FIELD)


def reduce_generic(
    matrix: list[list[Any]],
    field: ScalarField | None = None,
) -> None:
    """
    Gauss-Jordan elimination in place over a list of rows.

    Example:
        >>> from fractions import Fraction
        >>> from pyechelon.elimination.fields import RATIONAL_FIELD
        >>> m = [[Fraction(2), Fraction(1), Fraction(3)],
        ...      [Fraction(1), Fraction(1), Fraction(1)]]
        >>> reduce_generic(m, RATIONAL_FIELD)
        >>> m
        [[Fraction(1, 1), Fraction(0, 1), Fraction(2, 1)], [Fraction(0, 1), Fraction(1, 1), Fraction(-1, 1)]]
    """
    validate_rows(matrix, 'matrix')
    field = field or OPERATOR_FIELD
    forward_sweep_generic(matrix, 'prepare_reduce', field)
    back_sweep_generic(matrix, field)


# ═══════════════════════════════════════════════════════════════════════
# Copying front door
# ═══════════════════════════════════════════════════════════════════════


def rref(
    A: Any,
    *,
    mode: ReductionMode = 'reduce',
    backend: BackendChoice = 'auto',
    field: ScalarField | None = None,
    warn: bool = False,
) -> EliminationSolution:
    """
    Reduce a copy of A and report pivots, rank and timing.

    A is never modified. This is the convenience API; the in-place
    functions above are the primitive.

    Args:
        A: Matrix as an array-like or a sequence of rows
        mode: 'reduce' (full Gauss-Jordan), 'just_echelon' or 'prepare_reduce'
        backend: Computational backend to use:
            - 'auto': 'generic' if field is given or the entries are not
              numeric to numpy (e.g. Fraction), else 'cpu'
            - 'cpu': NumPy float arrays (float32 input is kept as float32)
            - 'generic': Element-wise over a ScalarField
        field: Arithmetic for the generic backend
        warn: If True, also emit each result warning via warnings.warn

    Returns:
        EliminationSolution with the reduced matrix and pivot information

    Raises:
        ValueError: Unknown mode or backend, or field given with backend='cpu'
        ValidationError: Invalid input
        EmptyMatrixError, RaggedMatrixError, DimensionError: Bad shape

    Example:
        >>> result = rref([[1, 2, 1, 10], [2, 3, 2, 12], [3, 1, 4, 11]])
        >>> result.matrix[:, -1]
        array([-27.,   8.,  21.])
        >>> result.rank
        3
    """
    # === Input Validation ===
    check_mode(mode, REDUCTION_MODES)
    choice = _resolve_backend(backend, A, field)

    # === Construct Design and Backend ===
    if choice == 'cpu':
        design = EliminationDesign.from_array(A, mode=mode)
        backend_impl = CPUGaussJordanBackend()
    else:
        design = EliminationDesign.from_rows(A, mode=mode)
        backend_impl = GenericGaussJordanBackend(field)

    # === Solve ===
    result = backend_impl.solve(design)

    if warn:
        for message in result.warnings:
            warnings.warn(message, UserWarning, stacklevel=2)

    # === Wrap and Return ===
    return EliminationSolution(_result=result, _design=design)


def _resolve_backend(choice: BackendChoice, A: Any, field: ScalarField | None) -> str:
    """
    Turn the user's backend preference into 'cpu' or 'generic'.

    Raises:
        ValueError: Unknown backend, or a field combined with 'cpu'
    """
    if choice == 'cpu':
        if field is not None:
            raise ValueError("field is only supported by the 'generic' backend")
        return 'cpu'

    elif choice == 'generic':
        return 'generic'

    elif choice == 'auto':
        if field is not None:
            return 'generic'
        if isinstance(A, np.ndarray):
            return 'generic' if A.dtype == object else 'cpu'
        try:
            converted = np.asarray(A)
        except (ValueError, TypeError):
            # Ragged or otherwise irregular; the generic design reports why.
            return 'generic'
        return 'generic' if converted.dtype == object else 'cpu'

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
