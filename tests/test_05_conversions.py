"""Conversion tests between RationalMatrix and numpy, scipy.sparse and sympy."""
import numpy as np
import pytest
from fractions import Fraction
from scipy import sparse
from sympy import Matrix, Rational
from exactmatrix import BigFraction, RationalMatrix, RationalMath, ShapeMismatch

F = BigFraction


def test_from_numpy_integer():
    matrix = RationalMatrix.from_numpy(np.array([[1, 2], [3, 4]]))
    assert matrix == RationalMatrix(2, 2, [1, 2, 3, 4])


def test_from_numpy_object():
    array = np.array([[Fraction(1, 2), 3], ["1/3", F(2, 5)]], dtype=object)
    matrix = RationalMatrix.from_numpy(array)
    assert matrix == RationalMatrix(2, 2, ["1/2", 3, "1/3", "2/5"])


def test_from_numpy_rejects_floats():
    with pytest.raises(TypeError):
        RationalMatrix.from_numpy(np.array([[0.5, 1.0]]))


def test_from_numpy_requires_2d():
    with pytest.raises(ShapeMismatch):
        RationalMatrix.from_numpy(np.array([1, 2, 3]))


def test_to_numpy():
    matrix = RationalMatrix(2, 2, ["1/2", 3, "-1/4", 0])
    array = matrix.to_numpy()
    assert array.shape == (2, 2)
    assert array.dtype == object
    assert array[0, 0] == Fraction(1, 2)
    assert array[1, 0] == Fraction(-1, 4)
    assert np.allclose(matrix.to_numpy(as_float=True), [[0.5, 3.0], [-0.25, 0.0]])
    assert RationalMatrix.from_numpy(array) == matrix


def test_from_sparse():
    source = sparse.csr_matrix(np.array([[0, 2, 0], [3, 0, -1]]))
    matrix = RationalMatrix.from_sparse(source)
    assert matrix == RationalMatrix(2, 3, [0, 2, 0, 3, 0, -1])


def test_from_sparse_sums_duplicates():
    source = sparse.coo_matrix((np.array([1, 2]), (np.array([0, 0]), np.array([1, 1]))), shape=(2, 2))
    assert RationalMatrix.from_sparse(source) == RationalMatrix(2, 2, [0, 3, 0, 0])


def test_from_sparse_rejects_floats():
    with pytest.raises(TypeError):
        RationalMatrix.from_sparse(sparse.csr_matrix(np.array([[0.5, 0.0]])))


def test_sympy_round_trip():
    source = Matrix([[Rational(1, 2), 1], [0, Rational(-7, 3)]])
    matrix = RationalMatrix.from_sympy(source)
    assert matrix == RationalMatrix(2, 2, ["1/2", 1, 0, "-7/3"])
    assert matrix.to_sympy() == source
    assert matrix.determinant() == RationalMath.to_big_fraction(source.det())


def test_sympy_inverse_agrees():
    matrix = RationalMatrix(3, 3, [2, -1, 0, -1, 2, -1, 0, -1, 2])
    assert RationalMatrix.from_sympy(matrix.to_sympy().inv()) == matrix.inverse()


def test_to_lists():
    assert RationalMatrix(2, 1, ["1/2", 4]).to_lists() == [[F(1, 2)], [F(4)]]


def test_rational_math_helpers():
    assert RationalMath.to_big_fraction("6/4") == F(3, 2)
    assert RationalMath.to_fraction(F(3, 2)) == Fraction(3, 2)
    assert RationalMath.to_sympy_rational(Fraction(-1, 3)) == Rational(-1, 3)
    assert RationalMath.is_zero("0/5")
    assert RationalMath.to_big_fraction(np.int64(7)) == F(7)


def test_array_conversions():
    values = RationalMath.array_to_big_fractions(np.array([[1, -2], [0, 3]]))
    assert values.dtype == object
    assert values[0, 1] == F(-2)
    assert np.array_equal(RationalMath.big_fractions_to_floats(values), np.array([[1.0, -2.0], [0.0, 3.0]]))
