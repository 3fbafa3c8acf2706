"""
Generic result container for PyEchelon computations.

The Result class provides a standardized envelope for everything the
front-door functions return. It carries timing and non-fatal warnings
alongside the domain payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (mode, shape, field)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Payload (reduced matrix, pivots, rank)
        info: Structured metadata (mode, shape, field name)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EliminationParams(
        ...         matrix=m,
        ...         diagonal_pivots=(0, 1, 2),
        ...         pivot_columns=(0, 1, 2),
        ...         rank=3,
        ...         n_rows=3,
        ...         n_cols=4,
        ...     ),
        ...     info={'mode': 'reduce', 'shape': (3, 4)},
        ...     timing={'total_seconds': 0.01, 'forward': 0.008},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

