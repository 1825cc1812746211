"""
Tests for the Matrix container.

Validates:
    - Construction from rows and arrays, with field coercion
    - Rectangularity invariant (jagged input rejected)
    - Shape accessors, transpose, reshape, to_vector
    - Immutability and absence of aliasing
"""

from dataclasses import FrozenInstanceError
from fractions import Fraction

import numpy as np
import pytest

from pyechelon import COMPLEX, RATIONAL, REAL, Matrix, Vector
from pyechelon.core.exceptions import InvalidReshapeError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_basic(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.size == 6
        assert m.field == REAL
        assert m[1, 2] == 6.0
        assert isinstance(m[0, 0], float)

    def test_jagged_rejected(self):
        with pytest.raises(ValidationError, match="jagged"):
            Matrix.from_rows([[1, 2], [3, 4, 5]])

    def test_bad_entry_rejected_with_position(self):
        with pytest.raises(ValidationError, match=r"entry \(1, 0\)"):
            Matrix.from_rows([[1, 2], ["x", 4]])

    def test_empty_is_0x0(self):
        m = Matrix.from_rows([])
        assert m.shape == (0, 0)
        assert m.is_square

    def test_empty_with_cols(self):
        m = Matrix.from_rows([], cols=3)
        assert m.shape == (0, 3)

    def test_cols_must_match_rows(self):
        with pytest.raises(ValidationError, match="cols=3"):
            Matrix.from_rows([[1, 2]], cols=3)

    def test_rows_with_no_columns(self):
        m = Matrix.from_rows([[], []])
        assert m.shape == (2, 0)

    def test_accepts_generator_and_tuples(self):
        m = Matrix.from_rows(((i, i + 1) for i in range(3)))
        assert m.shape == (3, 2)

    def test_rational_field(self):
        m = Matrix.from_rows([["1/2", 1], [0, "2/3"]], RATIONAL)
        assert m[0, 0] == Fraction(1, 2)
        assert m[1, 1] == Fraction(2, 3)

    def test_complex_field(self):
        m = Matrix.from_rows([[1 + 1j, 0], [0, 2]], COMPLEX)
        assert m[0, 0] == 1 + 1j
        assert isinstance(m[1, 1], complex)


class TestFromArray:

    def test_real_array(self):
        m = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert m.shape == (2, 3)
        assert m.field == REAL
        assert m[1, 0] == 3.0

    def test_complex_array(self):
        m = Matrix.from_array(np.array([[1j, 2], [3, 4]]))
        assert m.field == COMPLEX
        assert m[0, 0] == 1j

    def test_rejects_1d(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            Matrix.from_array([1.0, 2.0])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_array([[1.0, np.nan]])

    def test_zero_rows_keeps_cols(self):
        m = Matrix.from_array(np.zeros((0, 4)))
        assert m.shape == (0, 4)


class TestFactories:

    def test_zeros(self):
        m = Matrix.zeros(2, 3)
        assert m.shape == (2, 3)
        assert all(v == 0.0 for row in m.data for v in row)

    def test_identity(self):
        m = Matrix.identity(3)
        assert m == Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_identity_rational(self):
        m = Matrix.identity(2, RATIONAL)
        assert m[0, 0] == Fraction(1)
        assert m.field == RATIONAL

    def test_negative_dimensions_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.zeros(-1, 2)
        with pytest.raises(ValidationError):
            Matrix.identity(-1)


# ═══════════════════════════════════════════════════════════════════════
# Shape operations
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_swaps_dimensions(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t == Matrix.from_rows([[1, 4], [2, 5], [3, 6]])

    def test_involution(self, random_rectangular_matrices):
        for m in random_rectangular_matrices:
            assert m.transpose().transpose() == m

    def test_empty(self):
        m = Matrix.from_rows([], cols=3)
        assert m.transpose().shape == (3, 0)

    def test_preserves_field(self):
        m = Matrix.from_rows([[1j, 2]], COMPLEX)
        assert m.transpose().field == COMPLEX


class TestReshape:

    def test_row_major(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        r = m.reshape(3, 2)
        assert r == Matrix.from_rows([[1, 2], [3, 4], [5, 6]])

    def test_to_single_row(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.reshape(1, 4).row(0) == (1.0, 2.0, 3.0, 4.0)

    def test_mismatch_raises(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(InvalidReshapeError) as exc_info:
            m.reshape(4, 2)
        assert exc_info.value.size == 6
        assert exc_info.value.requested == (4, 2)

    def test_round_trip_through_vector(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        v = m.to_vector()
        assert isinstance(v, Vector)
        assert v.data == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
        assert v.to_matrix(2, 3) == m


class TestAccess:

    def test_row_and_column(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.row(1) == (3.0, 4.0)
        assert m.column(0) == (1.0, 3.0)

    def test_is_square(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).is_square
        assert not Matrix.from_rows([[1, 2]]).is_square

    def test_to_numpy_real(self):
        arr = Matrix.from_rows([[1, 2], [3, 4]]).to_numpy()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4]])

    def test_to_numpy_complex(self):
        arr = Matrix.from_rows([[1j]], COMPLEX).to_numpy()
        assert arr.dtype == np.complex128

    def test_to_numpy_rational_is_object(self):
        arr = Matrix.from_rows([["1/3"]], RATIONAL).to_numpy()
        assert arr.dtype == object
        assert arr[0, 0] == Fraction(1, 3)

    def test_repr_and_str(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert repr(m) == "Matrix(rows=2, cols=2, field=real)"
        assert "[1.0, 2.0]" in str(m)


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_frozen(self):
        m = Matrix.identity(2)
        with pytest.raises(FrozenInstanceError):
            m._rows = 3

    def test_source_list_mutation_not_observed(self):
        rows = [[1, 2], [3, 4]]
        m = Matrix.from_rows(rows)
        rows[0][0] = 99
        assert m[0, 0] == 1.0

    def test_working_copy_is_independent(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        work = m.to_lists()
        work[0][0] = 99.0
        assert m[0, 0] == 1.0
        assert m.to_lists()[0][0] == 1.0

    def test_equality_and_hash(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        assert a == b
        assert hash(a) == hash(b)


# ═══════════════════════════════════════════════════════════════════════
# Direct construction and finiteness
# ═══════════════════════════════════════════════════════════════════════


class TestInvariantsOnDirectConstruction:

    def test_jagged_data_rejected(self):
        with pytest.raises(ValidationError, match="jagged rows, row 1 has 1 entries"):
            Matrix(_data=((1.0, 2.0), (3.0,)), _rows=2, _cols=2, _field=REAL)

    def test_row_count_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="rows=3 but data has 2 rows"):
            Matrix(_data=((1.0,), (2.0,)), _rows=3, _cols=1, _field=REAL)

    def test_negative_dimensions_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Matrix(_data=(), _rows=0, _cols=-1, _field=REAL)

    def test_list_storage_rejected(self):
        with pytest.raises(ValidationError, match="tuple"):
            Matrix(_data=[[1.0]], _rows=1, _cols=1, _field=REAL)

    def test_valid_direct_construction(self):
        m = Matrix(_data=((1.0, 2.0),), _rows=1, _cols=2, _field=REAL)
        assert m == Matrix.from_rows([[1, 2]])


class TestFiniteEntries:

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_from_rows_rejects_non_finite(self, bad):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_rows([[1.0, bad]])

    def test_from_rows_rejects_complex_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            Matrix.from_rows([[complex(float("nan"), 0.0)]], COMPLEX)

    def test_empty_rows_pass(self):
        assert Matrix.from_rows([], cols=2).shape == (0, 2)
