"""
Core infrastructure for PyEchelon.

This module provides shared abstractions and utilities used by the
elimination package.

Key components:
    protocols: Scalar, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pyechelon.core.protocols import Scalar, Backend
from pyechelon.core.result import Result
from pyechelon.core.exceptions import (
    PyEchelonError,
    ValidationError,
    DimensionError,
    EmptyMatrixError,
    RaggedMatrixError,
)

__all__ = [
    # Protocols
    "Scalar",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "EmptyMatrixError",
    "RaggedMatrixError",
]
