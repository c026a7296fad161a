"""
Tests for FixedMatrix construction.

Validates:
    - Shaped classes: caching, parameter validation, generic class refusal
    - from_array / from_slice: row-major consumption, length checks
    - filled / empty / identity_elems / identity
    - Default construction equals identity
    - from_rows, copy, pickle
"""

import copy
import pickle
import warnings

import numpy as np
import pytest

from pyfixedmatrix import (
    FixedMatrix,
    Matrix2,
    Matrix3,
    Matrix4,
    NumericalWarning,
    ShapeMismatchError,
    DimensionError,
    ValidationError,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)


# ═══════════════════════════════════════════════════════════════════════
# Shaped classes
# ═══════════════════════════════════════════════════════════════════════


class TestShapedClasses:
    """Subscripting FixedMatrix yields one cached class per shape."""

    def test_same_shape_same_class(self):
        assert FixedMatrix[2, 3] is FixedMatrix[2, 3]

    def test_different_shapes_different_classes(self):
        assert FixedMatrix[2, 3] is not FixedMatrix[3, 2]

    def test_shaped_class_is_subclass(self):
        assert issubclass(FixedMatrix[2, 3], FixedMatrix)

    def test_class_constants(self):
        shaped = FixedMatrix[2, 3]
        assert shaped.ROWS == 2
        assert shaped.COLS == 3
        assert shaped.LAYOUT == "row_major"

    def test_class_name(self):
        assert FixedMatrix[2, 3].__name__ == "FixedMatrix[2, 3]"

    def test_aliases(self):
        assert Matrix2 is FixedMatrix[2, 2]
        assert Matrix3 is FixedMatrix[3, 3]
        assert Matrix4 is FixedMatrix[4, 4]
        assert Vector2 is FixedMatrix[2, 1]
        assert Vector3 is FixedMatrix[3, 1]
        assert Vector4 is FixedMatrix[4, 1]

    def test_vector_subscript(self):
        assert Vector[5] is FixedMatrix[5, 1]

    @pytest.mark.parametrize("shape", [(0, 2), (2, 0)])
    def test_zero_sized_rejected(self, shape):
        with pytest.raises(ValidationError):
            FixedMatrix[shape]

    def test_reparameterizing_rejected(self):
        with pytest.raises(TypeError, match="already parameterized"):
            Matrix2[3, 3]

    def test_generic_class_not_constructible(self):
        with pytest.raises(TypeError, match="parameterized"):
            FixedMatrix()

    def test_generic_from_array_rejected(self):
        with pytest.raises(TypeError, match="parameterized"):
            FixedMatrix.from_array([1.0])


# ═══════════════════════════════════════════════════════════════════════
# from_array / from_slice
# ═══════════════════════════════════════════════════════════════════════


class TestFromArray:

    def test_row_major_order(self):
        # Matrix of the form:
        # 0.5  10.0
        # 0.0   2.0
        m = Matrix2.from_array([0.5, 10.0, 0.0, 2.0])
        assert m[0, 0] == 0.5
        assert m[0, 1] == 10.0
        assert m[1, 0] == 0.0
        assert m[1, 1] == 2.0

    def test_elems_exposed_in_input_order(self):
        m = FixedMatrix[2, 3].from_array([1, 2, 3, 4, 5, 6])
        np.testing.assert_array_equal(m.elems, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        assert m.elems.dtype == np.float64

    def test_constructor_equivalent(self):
        assert Matrix2([1.0, 2.0, 3.0, 4.0]) == Matrix2.from_array([1.0, 2.0, 3.0, 4.0])

    def test_input_is_copied(self):
        source = np.array([1.0, 2.0, 3.0, 4.0])
        m = Matrix2.from_array(source)
        source[0] = 99.0
        assert m[0, 0] == 1.0

    def test_too_short_rejected(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            Matrix2.from_array([1.0, 2.0, 3.0])
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_too_long_rejected(self):
        with pytest.raises(ShapeMismatchError):
            Matrix2.from_array([1.0] * 5)

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            Matrix2.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix2.from_array(["a", "b", "c", "d"])

    def test_nan_warns(self):
        with pytest.warns(NumericalWarning, match="1 NaN"):
            Matrix2.from_array([1.0, np.nan, 3.0, 4.0])

    @pytest.mark.parametrize("build", [
        lambda elems: Matrix2.from_array(elems),
        lambda elems: Matrix2(elems),
        lambda elems: Matrix2.from_slice(elems),
    ], ids=["from_array", "constructor", "from_slice"])
    def test_warning_points_at_caller(self, build):
        with pytest.warns(NumericalWarning) as record:
            build([np.inf, 2.0, 3.0, 4.0])
        assert record[0].filename == __file__

    def test_filled_warning_points_at_caller(self):
        with pytest.warns(NumericalWarning) as record:
            Matrix2.filled(np.nan)
        assert record[0].filename == __file__

    def test_finite_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Matrix2.from_array([1.0, 2.0, 3.0, 4.0])


class TestFromSlice:

    def test_matching_length(self):
        m = Matrix2.from_slice([1.0, 2.0, 3.0, 4.0])
        assert m == Matrix2.from_array([1.0, 2.0, 3.0, 4.0])

    def test_three_into_two_by_two_is_none(self):
        assert Matrix2.from_slice([1.0, 2.0, 3.0]) is None

    def test_too_long_is_none(self):
        assert Matrix2.from_slice(np.zeros(9)) is None

    def test_empty_is_none(self):
        assert Matrix2.from_slice([]) is None

    def test_non_numeric_still_raises(self):
        """Only a length mismatch is reported as None."""
        with pytest.raises(ValidationError):
            Matrix2.from_slice(["a", "b", "c", "d"])


# ═══════════════════════════════════════════════════════════════════════
# filled / empty / identity
# ═══════════════════════════════════════════════════════════════════════


class TestFilledAndEmpty:

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 2), (3, 5), (4, 1)])
    def test_empty_is_all_zeros(self, rows, cols):
        m = FixedMatrix[rows, cols].empty()
        assert m.elems.shape == (rows * cols,)
        assert np.all(m.elems == 0.0)

    def test_filled(self):
        m = FixedMatrix[2, 3].filled(7.5)
        np.testing.assert_array_equal(m.elems, [7.5] * 6)

    def test_filled_rejects_non_scalar(self):
        with pytest.raises(ValidationError):
            Matrix2.filled([1.0])

    def test_empty_matches_filled_zero(self):
        assert Matrix3.empty() == Matrix3.filled(0.0)


class TestIdentity:

    def test_square_identity(self):
        np.testing.assert_array_equal(Matrix3.identity().to_numpy(), np.eye(3))

    def test_identity_elems(self):
        m = Matrix2.identity_elems(4.0)
        np.testing.assert_array_equal(m.elems, [4.0, 0.0, 0.0, 4.0])

    def test_wide_identity(self):
        m = FixedMatrix[2, 4].identity_elems(3.0)
        np.testing.assert_array_equal(m.to_numpy(), 3.0 * np.eye(2, 4))

    def test_tall_identity(self):
        m = FixedMatrix[4, 2].identity()
        np.testing.assert_array_equal(m.to_numpy(), np.eye(4, 2))

    def test_vector_identity_sets_first_element(self):
        np.testing.assert_array_equal(Vector3.identity().elems, [1.0, 0.0, 0.0])


class TestDefault:
    """The default value is the identity."""

    def test_default_is_identity(self):
        assert Matrix4() == Matrix4.identity()

    def test_default_rectangular(self):
        assert FixedMatrix[2, 3]() == FixedMatrix[2, 3].identity()

    def test_default_times_matrix_is_noop(self, random_matrix):
        b = random_matrix(3, 3)
        assert Matrix3() * b == b


# ═══════════════════════════════════════════════════════════════════════
# from_rows
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_matches_from_array(self):
        m = FixedMatrix[2, 3].from_rows([[1, 2, 3], [4, 5, 6]])
        assert m == FixedMatrix[2, 3].from_array([1, 2, 3, 4, 5, 6])

    def test_accepts_ndarray(self):
        grid = np.arange(6.0).reshape(3, 2)
        m = FixedMatrix[3, 2].from_rows(grid)
        np.testing.assert_array_equal(m.to_numpy(), grid)

    def test_wrong_shape_rejected(self):
        with pytest.raises(ShapeMismatchError, match=r"expected shape \(2, 3\)"):
            FixedMatrix[2, 3].from_rows([[1, 2], [3, 4], [5, 6]])

    def test_flat_rejected(self):
        with pytest.raises(DimensionError):
            Matrix2.from_rows([1.0, 2.0, 3.0, 4.0])


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_copy_is_independent(self):
        a = Matrix2.from_array([1.0, 2.0, 3.0, 4.0])
        b = a.copy()
        b[0, 0] = 100.0
        assert a[0, 0] == 1.0
        assert type(b) is Matrix2

    def test_copy_module(self):
        a = Matrix2.from_array([1.0, 2.0, 3.0, 4.0])
        assert copy.copy(a) == a
        assert copy.deepcopy(a) == a
        assert copy.copy(a) is not a

    def test_pickle_round_trip(self):
        a = FixedMatrix[2, 3].from_array([1, 2, 3, 4, 5, 6])
        b = pickle.loads(pickle.dumps(a))
        assert type(b) is FixedMatrix[2, 3]
        assert b == a

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix2())

    def test_elems_is_read_only(self):
        m = Matrix2()
        with pytest.raises(ValueError):
            m.elems[0] = 5.0

    def test_elems_cannot_be_made_writeable_into_matrix(self):
        m = Matrix2.from_array([1.0, 2.0, 3.0, 4.0])
        elems = m.elems
        elems.flags.writeable = True
        elems[0] = 42.0
        assert m[0, 0] == 1.0

    def test_to_numpy_is_a_copy(self):
        m = Matrix2()
        grid = m.to_numpy()
        grid[0, 0] = 5.0
        assert m[0, 0] == 1.0

    def test_repr(self):
        m = Matrix2.from_array([1.0, 2.0, 3.0, 4.0])
        assert repr(m) == "FixedMatrix[2, 2]([[1.0, 2.0], [3.0, 4.0]])"

    def test_shape(self):
        assert FixedMatrix[3, 5]().shape == (3, 5)
