"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

from pyechelon.core.result import Result
from pyechelon.elimination._common import EliminationParams


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"mode": "reduce"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss_jordan",
        )
        assert result.params.value == 42.0
        assert result.info["mode"] == "reduce"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_jordan"

    def test_elimination_payload(self):
        m = np.eye(3, 4)
        result = Result(
            params=EliminationParams(
                matrix=m,
                diagonal_pivots=(0, 1, 2),
                pivot_columns=(0, 1, 2),
                rank=3,
                n_rows=3,
                n_cols=4,
            ),
            info={"mode": "reduce", "shape": (3, 4)},
            timing={"total_seconds": 0.01, "forward": 0.008},
            backend_name="cpu_gauss_jordan",
        )
        assert result.params.rank == 3
        assert result.params.matrix is m

    def test_timing_may_be_none(self):
        result = Result(params=1, info={}, timing=None, backend_name="x")
        assert result.timing is None

    def test_warnings_default_empty(self):
        result = Result(params=1, info={}, timing=None, backend_name="x")
        assert result.warnings == ()


class TestResultImmutability:
    """Frozen dataclass rejects attribute assignment."""

    def test_cannot_reassign_params(self):
        result = Result(params=1, info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.params = 2

    def test_cannot_reassign_warnings(self):
        result = Result(params=1, info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)

