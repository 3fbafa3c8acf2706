"""
Shared compute infrastructure for PyEchelon.

Submodules:
    timing: Execution timing utilities
"""

from pyechelon.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
