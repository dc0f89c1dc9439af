"""Tests for det-engine: shape dispatch and determinant values."""
import copy
from decimal import Decimal
from fractions import Fraction

import numpy as np
from scipy import sparse
import pytest

import deteng
from deteng import det, ShapeError, DimensionError, Operations


def test_version():
    assert deteng.__version__ == "0.1.0"
    assert deteng.__author__


# ============================================================
# Concrete values
# ============================================================

def test_det_2x2():
    assert det([[1, 2], [3, 4]]) == -2


def test_det_3x3():
    assert det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]) == 6


def test_det_identity_list():
    assert det([[1, 0, 0], [0, 1, 0], [0, 0, 1]]) == 1


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_det_identity(n):
    assert det(np.eye(n)) == 1
    assert det(np.eye(n, dtype=int)) == 1


def test_det_1x1_matrix():
    assert det([[5]]) == 5


def test_det_single_element_vector():
    assert det([7]) == 7


def test_det_integer_result_is_int():
    d = det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]])
    assert d == 6
    assert isinstance(d, int)


def test_det_big_integers_exact():
    big = 10 ** 20
    A = [[big, 0, 0], [0, big, 0], [0, 0, 3]]
    assert det(A) == 3 * 10 ** 40


def test_det_fractions_exact():
    A = [[Fraction(1, 2), Fraction(1, 3), 0],
         [Fraction(1, 4), 1, Fraction(2, 3)],
         [0, Fraction(1, 5), 1]]
    # 1/2 * (1 - 2/15) - 1/3 * (1/4 - 0)
    expected = Fraction(1, 2) * Fraction(13, 15) - Fraction(1, 12)
    d = det(A)
    assert d == expected
    assert isinstance(d, Fraction)


def test_det_decimal_generic():
    D = Decimal
    A = [[D(2), D(1), D(0)], [D(1), D(3), D(1)], [D(0), D(1), D(4)]]
    assert det(A) == 18


def test_det_complex():
    A = np.diag([1j, 1.0, 2.0])
    assert np.isclose(det(A), 2j)


def test_det_sparse_input():
    A = sparse.eye(4, format="csr") * 2.0
    assert np.isclose(det(A), 16.0)


def test_det_singular_integer():
    assert det([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 0


def test_det_zero_column():
    assert det([[0, 1, 2], [0, 3, 4], [0, 5, 6]]) == 0


def test_det_empty_matrix():
    assert det(np.zeros((0, 0))) == 1


# ============================================================
# Algebraic properties
# ============================================================

def test_row_swap_negates_3x3():
    A = [[2, -1, 0], [1, 3, 4], [5, 2, -2]]
    B = [A[1], A[0], A[2]]
    assert det(B) == -det(A)
    assert det(A) != 0


def test_row_swap_negates_4x4():
    A = [[1, 2, 0, 3], [0, 1, 4, 1], [2, 0, 1, 5], [3, 1, 1, 0]]
    B = [A[3], A[1], A[2], A[0]]
    assert det(B) == -det(A)
    assert det(A) != 0


@pytest.mark.parametrize("row", [0, 1, 2, 3])
def test_row_scaling(row):
    A = [[1, 2, 0, 3], [0, 1, 4, 1], [2, 0, 1, 5], [3, 1, 1, 0]]
    k = 7
    B = [list(r) for r in A]
    B[row] = [k * v for v in B[row]]
    assert det(B) == k * det(A)


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_multiplicative_integers(n):
    np.random.seed(n)
    A = np.random.randint(-5, 6, size=(n, n))
    B = np.random.randint(-5, 6, size=(n, n))
    assert det(A @ B) == det(A) * det(B)


@pytest.mark.parametrize("n", [2, 3, 4, 6])
def test_multiplicative_floats(n):
    np.random.seed(42 + n)
    A = np.random.randn(n, n)
    B = np.random.randn(n, n)
    assert np.isclose(det(A @ B), det(A) * det(B))


def test_matches_numpy():
    np.random.seed(42)
    A = np.random.randn(8, 8)
    assert np.isclose(det(A), np.linalg.det(A))


def test_generic_and_lapack_agree():
    np.random.seed(7)
    A = np.random.randn(6, 6)
    assert np.isclose(det(A, method="generic"), det(A, method="lapack"))


def test_lapack_on_integer_input():
    A = [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]
    assert np.isclose(det(A, method="lapack"), 6.0)


# ============================================================
# Shape dispatch
# ============================================================

def test_non_square_raises():
    with pytest.raises(ShapeError) as exc:
        det([[1, 2, 3], [4, 5, 6]])
    assert exc.value.size == (2, 3)
    assert "Matrix must be square (size: [2, 3])" in str(exc.value)


def test_vector_raises():
    with pytest.raises(ShapeError) as exc:
        det([1, 2])
    assert exc.value.size == (2,)


def test_empty_vector_raises():
    with pytest.raises(ShapeError):
        det([])


def test_ragged_raises():
    with pytest.raises(ShapeError):
        det([[1, 2], [3]])


def test_three_dimensional_raises():
    with pytest.raises(DimensionError) as exc:
        det(np.zeros((2, 2, 2)))
    assert exc.value.size == (2, 2, 2)
    assert "two dimensional" in str(exc.value)


def test_three_dimensional_list_raises():
    with pytest.raises(DimensionError):
        det([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])


def test_errors_are_value_errors():
    assert issubclass(ShapeError, ValueError)
    assert issubclass(DimensionError, ValueError)


def test_unknown_method():
    with pytest.raises(ValueError):
        det([[1]], method="qr")


def test_nan_propagates_from_decomposition():
    A = np.eye(3)
    A[1, 1] = np.nan
    with pytest.raises(ValueError):
        det(A)


# ============================================================
# Cloning and immutability
# ============================================================

def test_scalar_returns_clone():
    assert det(3) == 3
    assert det(Fraction(3, 4)) == Fraction(3, 4)


def test_scalar_clone_is_independent():
    x = {"value": [1, 2]}
    first = det(x)
    second = det(x)
    assert first == x and second == x
    assert first is not x
    first["value"].append(3)
    assert x == {"value": [1, 2]}


def test_input_not_mutated():
    A = [[-2, 2, 3], [-1, 1, 3], [2, 0, -1]]
    before = copy.deepcopy(A)
    det(A)
    assert A == before

    M = np.random.randn(5, 5)
    saved = M.copy()
    det(M)
    det(M, method="generic")
    assert np.array_equal(M, saved)


# ============================================================
# Operations tables
# ============================================================

def test_custom_operations_modular():
    mod = 7
    ops = Operations(
        add=lambda a, b: (a + b) % mod,
        subtract=lambda a, b: (a - b) % mod,
        multiply=lambda a, b: (a * b) % mod,
        negate=lambda a: (-a) % mod,
        divide=lambda a, b: (a * pow(b, -1, mod)) % mod,
    )
    A = [[1, 2, 3], [4, 5, 6], [0, 1, 3]]
    assert det(A) == -3
    assert det(A, ops=ops) == (-3) % mod


def test_symbolic_2x2():
    sympy = pytest.importorskip("sympy")
    x, y = sympy.symbols("x y")
    d = det([[x, y], [y, x]])
    assert sympy.expand(d - (x ** 2 - y ** 2)) == 0


def test_symbolic_3x3():
    sympy = pytest.importorskip("sympy")
    x = sympy.symbols("x")
    A = [[x, 1, 0], [1, x, 1], [0, 1, x]]
    d = det(A, ops=deteng.SYMBOLIC_OPERATIONS)
    assert sympy.simplify(d - (x ** 3 - 2 * x)) == 0


def test_symbolic_3x3_default_operations():
    sympy = pytest.importorskip("sympy")
    x = sympy.symbols("x")
    A = [[x, 1, 0], [1, x, 1], [0, 1, x]]
    assert deteng.detect_matrix(A)["strategy"] == "symbolic"
    d = det(A)
    assert sympy.simplify(d - (x ** 3 - 2 * x)) == 0


def test_symbolic_4x4_default_operations():
    sympy = pytest.importorskip("sympy")
    a, b = sympy.symbols("a b")
    A = [[a, 0, 0, 0], [0, b, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]]
    d = det(A)
    assert sympy.simplify(d + a * b) == 0


def test_custom_operations_reject_lapack():
    ops = deteng.DEFAULT_OPERATIONS._replace(multiply=lambda a, b: a * b)
    with pytest.raises(ValueError):
        det([[1, 2, 3], [4, 5, 6], [0, 1, 3]], ops=ops, method="lapack")
    with pytest.raises(ValueError):
        deteng.lup(np.eye(3), ops=ops, method="lapack")
    assert det([[1, 2, 3], [4, 5, 6], [0, 1, 3]], ops=ops, method="generic") == -3


# ============================================================
# Verbose output
# ============================================================

def test_verbose_prints_strategy(capsys):
    det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]], verbose=True)
    out = capsys.readouterr().out
    assert "[deteng] 3 x 3" in out
    assert "strategy=exact_integer" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
