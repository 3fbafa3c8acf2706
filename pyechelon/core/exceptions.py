"""
Exception hierarchy for PyEchelon.

All exceptions inherit from PyEchelonError to allow catching any
library-specific error. Matrix-shape problems are DimensionErrors so that
callers can catch every "this matrix cannot be eliminated" case at once.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Validation errors are raised before any mutation of the caller's matrix
"""


class PyEchelonError(Exception):
    """Base exception for all PyEchelon errors."""
    pass


class ValidationError(PyEchelonError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a matrix is not two-dimensional or has fewer columns
    than rows (pivot search is bounded by the row count).

    Attributes:
        shape: The offending shape as (n_rows, n_cols), if known
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class EmptyMatrixError(DimensionError):
    """Matrix has zero rows."""

    def __init__(self, message: str):
        super().__init__(message, shape=(0,))


class RaggedMatrixError(DimensionError):
    """
    Rows of the matrix have differing lengths.

    Attributes:
        row_lengths: Length of every row, in row order
        expected_length: Length of the first row
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...]):
        super().__init__(message)
        self.row_lengths = row_lengths
        self.expected_length = row_lengths[0] if row_lengths else None
