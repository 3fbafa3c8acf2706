"""
Elimination solution types.

Contains the user-facing wrapper around a backend Result.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyechelon.core.result import Result
from pyechelon.elimination._common import EliminationParams

if TYPE_CHECKING:
    from pyechelon.elimination.design import EliminationDesign


@dataclass
class EliminationSolution:
    """
    User-facing elimination results.

    Wraps the backend Result and exposes the reduced matrix together
    with pivot bookkeeping.
    """
    _result: Result[EliminationParams]
    _design: 'EliminationDesign'

    @property
    def matrix(self) -> NDArray[np.floating[Any]] | list[list[Any]]:
        """Reduced matrix (ndarray for the cpu backend, list of rows otherwise)."""
        return self._result.params.matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        """Columns holding a leading entry of the row space; len() is the rank."""
        return self._result.params.pivot_columns

    @property
    def diagonal_pivots(self) -> tuple[int, ...]:
        """Columns c where the forward sweep placed a pivot at (c, c)."""
        return self._result.params.diagonal_pivots

    @property
    def free_columns(self) -> tuple[int, ...]:
        """
        Columns of the square region holding no leading entry.

        Only columns 0..n_rows-1 are reported; trailing columns (e.g.
        right-hand sides) are left out even when they hold no leading entry.
        """
        pivots = set(self.pivot_columns)
        return tuple(c for c in range(self._design.n_rows) if c not in pivots)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_full_rank(self) -> bool:
        return self.rank == self._design.n_rows

    @property
    def mode(self) -> str:
        return self._design.mode

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary with the reduced matrix."""
        n, m = self._design.shape
        lines = [
            "Elimination Results",
            "=" * 60,
            f"Mode: {self.mode}",
            f"Shape: {n} x {m}",
            f"Rank: {self.rank}",
            f"Pivot columns: {list(self.pivot_columns)}",
            f"Free columns: {list(self.free_columns)}",
            "",
            "Matrix:",
            "-" * 60,
        ]

        for row in self.matrix:
            lines.append("  " + " ".join(f"{str(v):>12}" for v in _plain(row)))

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        n, m = self._design.shape
        return (
            f"EliminationSolution(shape=({n}, {m}), mode={self.mode!r}, "
            f"rank={self.rank})"
        )


def _plain(row: Any) -> list[Any]:
    if isinstance(row, np.ndarray):
        return row.tolist()
    return list(row)
