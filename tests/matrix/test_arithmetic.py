"""
Tests for Matrix arithmetic: scalar, element-wise and matrix products,
in place and value-returning, including failure atomicity.
"""

import numpy as np
import pytest

from linmath import Matrix
from linmath.core.exceptions import DimensionError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Scalar arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_mult_eq(self):
        a = Matrix.unity(10)
        a *= 666
        for i in range(10):
            assert a[i][i] == 666

    def test_div_eq(self):
        a = Matrix.unity(10)
        a *= 100
        a /= 5
        for i in range(10):
            assert a[i][i] == 20

    def test_multiplication(self):
        a = Matrix.unity(10)
        b = a * 666.0
        for i in range(10):
            assert b[i][i] == 666
        assert a[0][0] == 1.0

    def test_left_multiplication(self):
        b = 3 * Matrix.unity(2)
        assert b == Matrix.from_array([[3.0, 0.0], [0.0, 3.0]])

    def test_numpy_scalar_left_multiplication(self):
        b = np.float64(2.0) * Matrix.unity(2)
        assert isinstance(b, Matrix)
        assert b[1][1] == 2.0

    def test_division(self):
        a = Matrix.unity(10)
        a *= 100
        b = a / 5.0
        for i in range(10):
            assert b[i][i] == 20

    def test_divide_by_matrix_unsupported(self):
        with pytest.raises(TypeError):
            Matrix.unity(2) / Matrix.unity(2)

    def test_negation(self):
        a = Matrix.from_iterable(1, 3, [1, -2, 3])
        assert (-a).tolist() == [[-1.0, 2.0, -3.0]]

    def test_scalar_applies_to_swapped_matrix(self, a43):
        a43.swap_rows(0, 3)
        a43 *= 2
        assert a43[0].tolist() == [20.0, 22.0, 24.0]

    def test_integer_division_at_type_minimum(self):
        low = np.iinfo(np.int64).min
        a = Matrix.from_iterable(1, 1, [low], dtype=np.int64)
        a /= 2
        assert a[0, 0] == low // 2

    def test_negative_scalar_on_unsigned_rejected(self):
        a = Matrix.unity(2, dtype=np.uint8)
        with pytest.raises(ValidationError, match="not representable"):
            a *= -1
        assert a == Matrix.unity(2, dtype=np.uint8)


# ═══════════════════════════════════════════════════════════════════════
# Element-wise arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self, a43):
        result = a43 + a43
        assert result == a43 * 2

    def test_sub_to_zero(self, a43):
        assert a43 - a43 == Matrix.zero(4, 3)

    def test_add_in_place_returns_self(self, a43):
        other = Matrix(4, 3, 1.0)
        target = a43
        target += other
        assert target is a43
        assert a43[0].tolist() == [2.0, 3.0, 4.0]

    def test_add_logical_order(self):
        """Both operands are combined row by logical row."""
        a = Matrix.from_iterable(2, 2, [1, 2, 3, 4])
        b = Matrix.from_iterable(2, 2, [30, 40, 10, 20])
        b.swap_rows(0, 1)
        assert (a + b).tolist() == [[11.0, 22.0], [33.0, 44.0]]

    def test_add_shape_mismatch(self):
        a = Matrix.unity(2)
        before = a.copy()
        with pytest.raises(DimensionError, match="mismatched matrix sizes"):
            a += Matrix.unity(3)
        assert a == before

    def test_sub_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix.zero(2, 3) - Matrix.zero(3, 2)

    def test_dtype_mismatch(self):
        a = Matrix.unity(2)
        with pytest.raises(ValidationError, match="element types differ"):
            a + Matrix.unity(2, dtype=np.int64)

    def test_add_scalar_unsupported(self):
        with pytest.raises(TypeError):
            Matrix.unity(2) + 1.0


# ═══════════════════════════════════════════════════════════════════════
# Matrix product
# ═══════════════════════════════════════════════════════════════════════


class TestProduct:

    def test_small_product(self):
        a = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])
        assert (a * b).tolist() == [[19.0, 22.0], [43.0, 50.0]]

    def test_matmul_operator(self):
        a = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])
        assert a @ b == a * b

    def test_rectangular_shape(self, a43):
        b = Matrix(3, 5, 1.0)
        result = a43 * b
        assert result.shape == (4, 5)
        assert result[0].tolist() == [6.0] * 5

    def test_in_place_product(self, a43):
        b = Matrix.unity(3)
        target = a43
        target *= b
        assert target is a43
        assert a43.shape == (4, 3)
        assert a43 == Matrix.from_iterable(4, 3, range(1, 13))

    def test_in_place_changes_shape(self, a43):
        a43 @= Matrix(3, 1, 1.0)
        assert a43.shape == (4, 1)
        assert a43.tolist() == [[6.0], [15.0], [24.0], [33.0]]

    def test_square_self_product(self):
        a = Matrix.from_array([[1.0, 1.0], [0.0, 1.0]])
        a *= a
        assert a.tolist() == [[1.0, 2.0], [0.0, 1.0]]

    def test_product_uses_logical_order(self):
        a = Matrix.from_array([[0.0, 1.0], [1.0, 0.0]])
        b = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        swapped = b.copy()
        swapped.swap_rows(0, 1)
        assert a * b == swapped

    def test_integer_product(self):
        a = Matrix.from_array([[1, 2], [3, 4]], dtype=np.int64)
        result = a * a
        assert result.dtype == np.int64
        assert result.tolist() == [[7, 10], [15, 22]]

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((3, 4))
        y = rng.standard_normal((4, 2))
        result = Matrix.from_array(x) * Matrix.from_array(y)
        np.testing.assert_allclose(result.to_array(), x @ y, rtol=1e-12)

    def test_inner_dimension_mismatch_leaves_target(self, a43):
        before = a43.copy()
        with pytest.raises(DimensionError) as excinfo:
            a43 *= Matrix.unity(4)
        assert excinfo.value.actual == (4, 4)
        assert a43 == before
        assert a43.shape == (4, 3)

    def test_product_dtype_mismatch(self):
        with pytest.raises(ValidationError):
            Matrix.unity(2) * Matrix.unity(2, dtype=np.float32)
