"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def system_rows():
    """Augmented 3x4 system used by the literal elimination scenarios."""
    return [
        [1.0, 2.0, 1.0, 10.0],
        [2.0, 3.0, 2.0, 12.0],
        [3.0, 1.0, 4.0, 11.0],
    ]


@pytest.fixture
def zero_pivot_rows():
    """Same shape, but column 1 has no pivot on the diagonal after step one."""
    return [
        [1.0, 2.0, 1.0, 10.0],
        [0.0, 0.0, 2.0, 12.0],
        [3.0, 1.0, 4.0, 11.0],
    ]


@pytest.fixture
def rank_deficient_rows():
    """Row 2 = row 0 + row 1, so the coefficient block has rank 2."""
    return [
        [1.0, 2.0, 3.0, 1.0],
        [0.0, 1.0, 1.0, 2.0],
        [1.0, 3.0, 4.0, 3.0],
    ]


@pytest.fixture
def rational_system(system_rows):
    """system_rows with exact Fraction entries."""
    return [[Fraction(int(v)) for v in row] for row in system_rows]


@pytest.fixture
def random_full_rank(rng):
    """Well-conditioned 5x7 float64 matrix (diagonally dominant block)."""
    n = 5
    A = rng.standard_normal((n, n + 2))
    A[:, :n] += np.eye(n) * 10.0
    return A
