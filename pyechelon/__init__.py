"""
PyEchelon: Gaussian and Gauss-Jordan elimination for Python.

Reduces dense matrices to row-echelon or reduced row-echelon form with
in-place row operations, over NumPy float arrays or over any exact
scalar field (rationals, integers modulo a prime).

Submodules:
    elimination: Forward/back elimination and the rref() front door
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pyechelon import elimination
from pyechelon.elimination import (
    eliminate,
    back_eliminate,
    reduce,
    eliminate_generic,
    back_eliminate_generic,
    reduce_generic,
    rref,
)

__all__ = [
    "__version__",
    "elimination",
    "eliminate",
    "back_eliminate",
    "reduce",
    "eliminate_generic",
    "back_eliminate_generic",
    "reduce_generic",
    "rref",
]
