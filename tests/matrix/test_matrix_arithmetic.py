"""
Tests for TMatrix arithmetic: element-wise + and -, matrix-vector and
matrix-matrix products, dimension compatibility.

Products are checked against hand-computed textbook values and against
numpy's ``@`` on integer-valued data (exact in float64).
"""

from fractions import Fraction

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pyvecmat.core.exceptions import CapabilityError, DimensionError, ScalarTypeError
from pyvecmat.matrix import DMat2, Mat2, Mat3, TMatrix
from pyvecmat.matrix._product import dot, matmul, matvec
from pyvecmat.vector import DVec2, TVector, Vec2, Vec3


class AddOnly:
    """Scalar with addition and an additive identity but no multiplication."""

    def __init__(self, value):
        self.value = value.value if isinstance(value, AddOnly) else value

    def __add__(self, other):
        return AddOnly(self.value + other.value)

    def __eq__(self, other):
        return isinstance(other, AddOnly) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


# ═══════════════════════════════════════════════════════════════════════
# Product kernels
# ═══════════════════════════════════════════════════════════════════════


class TestKernels:

    def test_dot(self):
        assert dot((1, 2, 3), (4, 5, 6), 0) == 32

    def test_dot_summation_order_is_ascending(self):
        """((0 + 1e16) + 1.0) - 1e16 == 0.0; compensated summation would give 1.0."""
        assert dot((1e16, 1.0, -1e16), (1.0, 1.0, 1.0), 0.0) == 0.0

    def test_matvec_column_major(self):
        # [[1, 2], [3, 4]] stored as columns (1, 3), (2, 4)
        assert matvec(((1, 3), (2, 4)), 2, (5, 6), 0) == (17, 39)

    def test_matmul_column_major(self):
        left = ((1, 3), (2, 4))
        right = ((5, 7), (6, 8))
        assert matmul(left, 2, right, 0) == ((19, 43), (22, 50))


# ═══════════════════════════════════════════════════════════════════════
# Element-wise
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self):
        m = Mat2(1, 2, 3, 4) + Mat2(10, 20, 30, 40)
        assert m == Mat2(11, 22, 33, 44)

    def test_sub(self):
        m = Mat2(1, 2, 3, 4) - Mat2(4, 3, 2, 1)
        assert m == Mat2(-3, -1, 1, 3)

    def test_non_square(self, small_ints):
        cls = TMatrix[np.float64, 2, 3]
        a_arr, b_arr = small_ints(2, 3), small_ints(2, 3)
        a, b = cls.from_numpy(a_arr), cls.from_numpy(b_arr)
        assert_array_equal((a + b).to_numpy(), a_arr + b_arr)
        assert_array_equal((a - b).to_numpy(), a_arr - b_arr)

    def test_add_then_sub_roundtrip_int(self, rng):
        cls = TMatrix[int, 3, 4]
        for _ in range(10):
            a = cls.from_array(rng.integers(-50, 50, 12).tolist())
            b = cls.from_array(rng.integers(-50, 50, 12).tolist())
            assert (a + b) - b == a

    def test_add_then_sub_roundtrip_float(self, rng):
        cls = TMatrix[np.float64, 3, 3]
        for _ in range(10):
            a = cls.from_numpy(rng.standard_normal((3, 3)))
            b = cls.from_numpy(rng.standard_normal((3, 3)) * 1e3)
            assert ((a + b) - b).is_close(a, rtol=1e-9, atol=1e-9)

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError, match="matrix addition"):
            TMatrix[int, 2, 3].zero() + TMatrix[int, 3, 2].zero()

    def test_scalar_type_mismatch(self):
        with pytest.raises(ScalarTypeError):
            Mat2.zero() - DMat2.zero()

    def test_non_matrix_operand(self):
        with pytest.raises(TypeError):
            Mat2.zero() + 1.0


# ═══════════════════════════════════════════════════════════════════════
# Matrix x vector
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixVector:

    def test_mat2_times_vec2(self):
        assert Mat2(1, 2, 3, 4) @ Vec2(5, 6) == Vec2(17, 39)

    def test_star_operator(self):
        assert Mat2(1, 2, 3, 4) * Vec2(5, 6) == Vec2(17, 39)

    def test_non_square(self):
        m = TMatrix[int, 2, 3](1, 2, 3,
                               4, 5, 6)
        v = TVector[int, 3](1, 0, -1)
        result = m @ v
        assert type(result) is TVector[int, 2]
        assert result == TVector[int, 2](-2, -2)

    def test_identity_leaves_vector(self):
        v = Vec3(1.5, -2.0, 3.25)
        assert Mat3.identity() @ v == v

    @pytest.mark.parametrize("rows, cols", [(1, 1), (2, 4), (4, 2), (3, 3), (5, 7)])
    def test_against_numpy(self, small_ints, rows, cols):
        m_arr, v_arr = small_ints(rows, cols), small_ints(cols)
        m = TMatrix[np.float64, rows, cols].from_numpy(m_arr)
        v = TVector[np.float64, cols].from_numpy(v_arr)
        assert_array_equal((m @ v).to_numpy(), m_arr @ v_arr)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions disagree"):
            Mat2.zero() @ Vec3.zero()

    def test_scalar_type_mismatch(self):
        with pytest.raises(ScalarTypeError):
            Mat2.zero() @ DVec2.zero()

    def test_vector_times_matrix_unsupported(self):
        with pytest.raises(TypeError):
            Vec2(1, 2) * Mat2.zero()


# ═══════════════════════════════════════════════════════════════════════
# Matrix x matrix
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixMatrix:

    def test_mat2_product(self):
        m = Mat2(1, 2, 3, 4) @ Mat2(5, 6, 7, 8)
        assert m[0, 0] == 19
        assert m[0, 1] == 22
        assert m[1, 0] == 43
        assert m[1, 1] == 50

    def test_star_operator(self):
        assert Mat2(1, 2, 3, 4) * Mat2(5, 6, 7, 8) == Mat2(19, 22, 43, 50)

    def test_2x3_times_3x2(self):
        a = TMatrix[int, 2, 3](1, 2, 3,
                               4, 5, 6)
        b = TMatrix[int, 3, 2](7, 8,
                               9, 10,
                               11, 12)
        result = a @ b
        assert type(result) is TMatrix[int, 2, 2]
        assert result == TMatrix[int, 2, 2](58, 64,
                                            139, 154)

    def test_3x2_times_2x3(self):
        a = TMatrix[int, 3, 2](1, 2,
                               3, 4,
                               5, 6)
        b = TMatrix[int, 2, 3](1, 0, 2,
                               0, 1, 3)
        assert a @ b == TMatrix[int, 3, 3](1, 2, 8,
                                           3, 4, 18,
                                           5, 6, 28)

    @pytest.mark.parametrize("l, m, n", [(1, 1, 1), (2, 3, 4), (4, 3, 2), (1, 5, 1), (5, 1, 5), (4, 4, 4)])
    def test_against_numpy(self, small_ints, l, m, n):
        a_arr, b_arr = small_ints(l, m), small_ints(m, n)
        a = TMatrix[np.float64, l, m].from_numpy(a_arr)
        b = TMatrix[np.float64, m, n].from_numpy(b_arr)
        result = a @ b
        assert result.shape == (l, n)
        assert_array_equal(result.to_numpy(), a_arr @ b_arr)

    def test_identity_is_neutral(self):
        m = Mat3(*range(9))
        assert Mat3.identity() @ m == m
        assert m @ Mat3.identity() == m

    def test_product_matches_column_by_column(self):
        a = TMatrix[int, 2, 3](1, 2, 3, 4, 5, 6)
        b = TMatrix[int, 3, 2](1, -1, 2, 0, 0, 3)
        result = a @ b
        for j in range(2):
            assert result.column(j) == a @ b.column(j)

    def test_fraction_product_is_exact(self):
        cls = TMatrix[Fraction, 2, 2]
        a = cls(Fraction(1, 2), Fraction(1, 3), Fraction(1, 4), Fraction(1, 5))
        result = a @ cls.identity()
        assert result == a

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionError) as exc:
            TMatrix[int, 2, 3].zero() @ TMatrix[int, 4, 2].zero()
        assert exc.value.expected == 3
        assert exc.value.actual == 4
        assert exc.value.operation == "matrix-matrix product"

    def test_non_matrix_operand(self):
        with pytest.raises(TypeError):
            Mat2.zero() @ 2.0

    def test_missing_multiplication(self):
        a = TMatrix[AddOnly, 1, 1](AddOnly(1))
        assert (a + a)[0, 0] == AddOnly(2)
        with pytest.raises(CapabilityError, match="'mul'"):
            a @ a

    def test_str_product_reports_missing_multiplication(self):
        words = TMatrix[str, 1, 1]("a")
        with pytest.raises(CapabilityError, match="'mul'") as exc:
            words @ words
        assert exc.value.operation == "matrix-matrix product"
