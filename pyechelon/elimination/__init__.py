"""
Gaussian and Gauss-Jordan elimination.

Public API:
    eliminate(matrix, mode)            forward elimination, in place
    back_eliminate(matrix)             back elimination, in place
    reduce(matrix)                     Gauss-Jordan, in place
    eliminate_generic / back_eliminate_generic / reduce_generic
                                       the same over any ScalarField
    rref(A, ...) -> EliminationSolution
                                       copying front door with pivot report

Example:
    >>> import numpy as np
    >>> from pyechelon.elimination import reduce
    >>> m = np.array([[1, 2, 1, 10], [2, 3, 2, 12], [3, 1, 4, 11]], dtype=np.float32)
    >>> reduce(m)
    >>> m[:, -1]
    array([-27.,   8.,  21.], dtype=float32)
"""

from pyechelon.elimination._common import (
    EliminationMode,
    EliminationParams,
    ReductionMode,
)
from pyechelon.elimination.design import EliminationDesign
from pyechelon.elimination.fields import (
    GF2,
    OPERATOR_FIELD,
    RATIONAL_FIELD,
    ScalarField,
    prime_field,
)
from pyechelon.elimination.solution import EliminationSolution
from pyechelon.elimination.solvers import (
    back_eliminate,
    back_eliminate_generic,
    eliminate,
    eliminate_generic,
    reduce,
    reduce_generic,
    rref,
)

__all__ = [
    # In place
    "eliminate",
    "back_eliminate",
    "reduce",
    "eliminate_generic",
    "back_eliminate_generic",
    "reduce_generic",
    # Front door
    "rref",
    "EliminationDesign",
    "EliminationSolution",
    "EliminationParams",
    # Modes
    "EliminationMode",
    "ReductionMode",
    # Fields
    "ScalarField",
    "OPERATOR_FIELD",
    "RATIONAL_FIELD",
    "GF2",
    "prime_field",
]
