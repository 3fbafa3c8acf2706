"""
Core protocols for PyEchelon.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that numbers from any library (fractions, decimal, numpy, sympy, ...)
qualify as scalars without registering anywhere.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms actually touch
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Scalar(Protocol):
    """
    Arithmetic a matrix entry must support for elimination.

    Only the four operators are required. Identities and the zero-test are
    supplied separately by a ScalarField, because Python values carry no
    notion of "the one of my type".
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless: all configuration lives
    in the design or is passed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cpu_gauss_jordan', 'generic_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the elimination.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
