"""
Tests for the generic (ScalarField) elimination path.

The generic path must agree with the float path on the literal
scenarios and give exact answers over rationals and prime fields.
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pyechelon.elimination import (
    GF2,
    RATIONAL_FIELD,
    back_eliminate_generic,
    eliminate_generic,
    prime_field,
    reduce,
    reduce_generic,
)


# ═══════════════════════════════════════════════════════════════════════
# Literal scenarios with Python floats (default operator field)
# ═══════════════════════════════════════════════════════════════════════


class TestLiteralScenariosFloat:

    def test_just_echelon(self, system_rows):
        assert eliminate_generic(system_rows, 'just_echelon') is None
        assert system_rows == [
            [1.0, 2.0, 1.0, 10.0],
            [0.0, -1.0, 0.0, -8.0],
            [0.0, 0.0, 1.0, 21.0],
        ]

    def test_prepare_reduce(self, system_rows):
        eliminate_generic(system_rows, 'prepare_reduce')
        assert system_rows == [
            [1.0, 2.0, 1.0, 10.0],
            [0.0, 1.0, 0.0, 8.0],
            [0.0, 0.0, 1.0, 21.0],
        ]

    def test_gauss_jordan(self, system_rows):
        reduce_generic(system_rows)
        assert system_rows == [
            [1.0, 0.0, 0.0, -27.0],
            [0.0, 1.0, 0.0, 8.0],
            [0.0, 0.0, 1.0, 21.0],
        ]

    def test_zero_pivot(self, zero_pivot_rows):
        eliminate_generic(zero_pivot_rows, 'just_echelon')
        assert zero_pivot_rows == [
            [1.0, 2.0, 1.0, 10.0],
            [0.0, -5.0, 1.0, -19.0],
            [0.0, 0.0, 2.0, 12.0],
        ]

    def test_rows_are_swapped_not_copied(self, zero_pivot_rows):
        """Row objects move between positions; the outer list is the same."""
        outer = zero_pivot_rows
        third = zero_pivot_rows[2]
        eliminate_generic(zero_pivot_rows, 'just_echelon')
        assert zero_pivot_rows is outer
        assert zero_pivot_rows[1] is third


class TestAgreesWithFloatPath:

    def test_random_matrices(self, rng):
        for _ in range(10):
            A = rng.standard_normal((4, 6))
            rows = A.tolist()
            reduce(A)
            reduce_generic(rows)
            np.testing.assert_array_equal(np.array(rows), A)


# ═══════════════════════════════════════════════════════════════════════
# Exact arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestRational:

    def test_gauss_jordan_exact(self, rational_system):
        reduce_generic(rational_system, RATIONAL_FIELD)
        assert rational_system == [
            [1, 0, 0, -27],
            [0, 1, 0, 8],
            [0, 0, 1, 21],
        ]
        assert all(isinstance(v, Fraction) for row in rational_system for v in row)

    def test_fractions_with_operator_field(self):
        rows = [[Fraction(2), Fraction(1), Fraction(3)],
                [Fraction(1), Fraction(1), Fraction(1)]]
        reduce_generic(rows)
        assert rows == [[1, 0, 2], [0, 1, -1]]

    def test_non_integer_solution(self):
        """x + 2y = 1, 3x + 4y = 1  ->  x = -1, y = 1."""
        rows = [[1, 2, 1], [3, 4, 1]]
        reduce_generic(rows, RATIONAL_FIELD)
        assert rows == [[1, 0, -1], [0, 1, 1]]

    def test_thirds_stay_exact(self):
        rows = [[3, 1]]
        eliminate_generic(rows, 'prepare_reduce', RATIONAL_FIELD)
        assert rows == [[Fraction(1), Fraction(1, 3)]]

    def test_rank_deficient(self, rank_deficient_rows):
        rows = [[Fraction(int(v)) for v in row] for row in rank_deficient_rows]
        reduce_generic(rows, RATIONAL_FIELD)
        assert rows == [[1, 0, 1, -3], [0, 1, 1, 2], [0, 0, 0, 0]]

    def test_idempotent(self, rational_system):
        reduce_generic(rational_system, RATIONAL_FIELD)
        snapshot = [list(row) for row in rational_system]
        reduce_generic(rational_system, RATIONAL_FIELD)
        assert rational_system == snapshot

    def test_decimal_entries(self):
        rows = [[Decimal(2), Decimal(4)], [Decimal(1), Decimal(3)]]
        reduce_generic(rows)
        assert rows == [[Decimal(1), Decimal(0)], [Decimal(0), Decimal(1)]]


class TestPrimeField:

    def test_gf7(self):
        # 3x + y = 2, 4x + 2y = 5 (mod 7)  ->  x = 3, y = 0
        rows = [[3, 1, 2], [4, 2, 5]]
        reduce_generic(rows, prime_field(7))
        assert rows == [[1, 0, 3], [0, 1, 0]]

    def test_gf5_rank_deficient(self):
        rows = [[2, 3, 1], [1, 4, 2]]
        reduce_generic(rows, prime_field(5))
        assert rows == [[1, 4, 3], [0, 0, 4]]

    def test_gf2(self):
        rows = [[1, 1, 0], [1, 0, 1]]
        reduce_generic(rows, GF2)
        assert rows == [[1, 0, 1], [0, 1, 1]]

    def test_gf2_just_echelon_swaps(self):
        rows = [[0, 1, 1], [1, 1, 0]]
        eliminate_generic(rows, 'just_echelon', GF2)
        assert rows == [[1, 1, 0], [0, 1, 1]]


class TestBackEliminateGeneric:

    def test_clears_above_pivot(self):
        rows = [[Fraction(1), Fraction(2), Fraction(3)],
                [Fraction(0), Fraction(1), Fraction(4)]]
        back_eliminate_generic(rows, RATIONAL_FIELD)
        assert rows == [[1, 0, -5], [0, 1, 4]]

    def test_augmented_column_not_a_pivot(self):
        rows = [[1, 1, 5], [0, 0, 3]]
        back_eliminate_generic(rows, RATIONAL_FIELD)
        assert rows == [[1, 1, 5], [0, 0, 3]]
