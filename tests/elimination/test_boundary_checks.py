"""
Tests for validation at the in-place entry points.

Every rejected matrix must come back exactly as it was passed in.
"""

import copy

import numpy as np
import pytest

from pyechelon.core.exceptions import (
    DimensionError,
    EmptyMatrixError,
    PyEchelonError,
    RaggedMatrixError,
    ValidationError,
)
from pyechelon.elimination import (
    back_eliminate,
    back_eliminate_generic,
    eliminate,
    eliminate_generic,
    reduce,
    reduce_generic,
)


# ═══════════════════════════════════════════════════════════════════════
# Float path
# ═══════════════════════════════════════════════════════════════════════


class TestFloatPathValidation:

    @pytest.mark.parametrize("op", [reduce, back_eliminate, lambda m: eliminate(m, 'just_echelon')])
    def test_empty_matrix(self, op):
        with pytest.raises(EmptyMatrixError):
            op(np.zeros((0, 3)))

    def test_empty_1d_is_empty_not_dimension(self):
        with pytest.raises(EmptyMatrixError):
            reduce(np.zeros(0))

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            reduce(np.array([1.0, 2.0]))

    def test_0d_rejected(self):
        with pytest.raises(DimensionError):
            reduce(np.array(1.0))

    def test_tall_matrix_rejected_unchanged(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        original = m.copy()
        with pytest.raises(DimensionError, match="3 rows but only 2 columns"):
            reduce(m)
        np.testing.assert_array_equal(m, original)

    def test_list_rejected(self, system_rows):
        with pytest.raises(ValidationError, match="_generic"):
            reduce(system_rows)

    def test_int_array_rejected_unchanged(self):
        m = np.array([[1, 2], [3, 4]])
        with pytest.raises(ValidationError, match="floating dtype"):
            eliminate(m, 'just_echelon')
        np.testing.assert_array_equal(m, [[1, 2], [3, 4]])

    def test_unknown_mode(self, system_rows):
        m = np.array(system_rows)
        original = m.copy()
        with pytest.raises(ValueError, match="Unknown mode"):
            eliminate(m, 'reduce')
        np.testing.assert_array_equal(m, original)

    def test_readonly_array_fails_loudly(self, system_rows):
        m = np.array(system_rows)
        m.flags.writeable = False
        with pytest.raises(ValueError):
            reduce(m)


# ═══════════════════════════════════════════════════════════════════════
# Generic path
# ═══════════════════════════════════════════════════════════════════════


class TestGenericPathValidation:

    @pytest.mark.parametrize("op", [reduce_generic, back_eliminate_generic,
                                    lambda m: eliminate_generic(m, 'prepare_reduce')])
    def test_empty_matrix(self, op):
        with pytest.raises(EmptyMatrixError):
            op([])

    def test_ragged_rejected_unchanged(self):
        rows = [[1.0, 2.0, 3.0], [4.0, 5.0], [7.0, 8.0, 9.0]]
        original = copy.deepcopy(rows)
        with pytest.raises(RaggedMatrixError) as exc_info:
            reduce_generic(rows)
        assert exc_info.value.row_lengths == (3, 2, 3)
        assert rows == original

    def test_ragged_is_catchable_as_library_error(self):
        with pytest.raises(PyEchelonError):
            eliminate_generic([[1, 2], [3]], 'just_echelon')

    def test_tall_rejected(self):
        with pytest.raises(DimensionError, match="only 1 columns"):
            reduce_generic([[1], [2]])

    def test_tuple_rows_rejected(self):
        with pytest.raises(ValidationError, match="row 0"):
            reduce_generic([(1, 2), (3, 4)])

    def test_tuple_container_rejected(self):
        with pytest.raises(ValidationError, match="mutable sequence"):
            reduce_generic(([1, 2], [3, 4]))

    def test_ndarray_rejected(self):
        with pytest.raises(ValidationError, match="reduce"):
            reduce_generic(np.eye(2))

    def test_unknown_mode(self):
        rows = [[1, 2], [3, 4]]
        with pytest.raises(ValueError, match="Unknown mode"):
            eliminate_generic(rows, 'JustEchelon')
        assert rows == [[1, 2], [3, 4]]
