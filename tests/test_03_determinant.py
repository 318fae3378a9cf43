"""Determinant tests: elimination steps, cofactor expansion and their agreement."""
import logging
import pytest
from exactmatrix import BigFraction, RationalMatrix, Gauss, CofactorExpansion, ShapeMismatch, IndexOutOfRange, \
    RationalMath, ELIMINATION, COFACTOR

F = BigFraction


@pytest.fixture
def gauss():
    return Gauss.instance()


def test_row_operation(gauss, matrix_1234):
    """Adding -3 times row 0 to row 1 leaves [0, -2] and row 0 unchanged."""
    result = gauss.row_operation(matrix_1234, 0, 1, F(-3))
    assert result.get_row(1) == (F(0), F(-2))
    assert result.get_row(0) == (F(1), F(2))
    assert matrix_1234 == RationalMatrix(2, 2, [1, 2, 3, 4])
    assert matrix_1234.row_operation(0, 1, -3) == result


def test_row_operation_fraction_multiplier(gauss):
    matrix = RationalMatrix(3, 2, [2, 4, 1, 1, 5, 5])
    result = gauss.row_operation(matrix, 0, 2, F(-1, 2))
    assert result == RationalMatrix(3, 2, [2, 4, 1, 1, 4, 3])
    assert result.get_row(1) is matrix.get_row(1)


def test_row_operation_invalid_rows(gauss, matrix_1234):
    with pytest.raises(IndexOutOfRange):
        gauss.row_operation(matrix_1234, 0, 2, F(1))
    with pytest.raises(IndexOutOfRange):
        gauss.row_operation(matrix_1234, -1, 1, F(1))
    with pytest.raises(ValueError):
        gauss.row_operation(matrix_1234, 1, 1, F(1))


def test_find_usable_row(gauss):
    matrix = RationalMatrix(4, 2, [0, 1, 0, 2, 0, 3, 5, 4])
    assert gauss.find_usable_row(matrix, 0, 0) == 3
    assert gauss.find_usable_row(matrix, 0, 1) == 1
    assert gauss.find_usable_row(matrix, 3, 0) is None
    assert gauss.find_usable_row(RationalMatrix(3, 3), 0, 0) is None


def test_make_usable(gauss):
    matrix = RationalMatrix(3, 3, [0, 1, 2, 0, 3, 4, 5, 6, 7])
    result = gauss.make_usable(matrix, 0, 0)
    assert result.get_row(0) == (F(5), F(7), F(9))
    assert result.get_row(1) == matrix.get_row(1)
    assert result.get_row(2) == matrix.get_row(2)


def test_make_usable_without_usable_row(gauss, caplog):
    matrix = RationalMatrix(2, 2, [0, 1, 0, 2])
    caplog.set_level(logging.DEBUG)
    assert gauss.make_usable(matrix, 0, 0) is matrix
    assert "No usable row" in caplog.text


def test_make_usable_logs_repair(gauss, caplog):
    caplog.set_level(logging.DEBUG)
    gauss.make_usable(RationalMatrix(2, 2, [0, 1, 1, 0]), 0, 0)
    assert "Zero pivot at (0, 0)" in caplog.text


def test_subtract_down(gauss):
    matrix = RationalMatrix(3, 3, [2, 1, 1, 4, 3, 3, 8, 7, 9])
    result = gauss.subtract_down(matrix, 0, 0)
    assert result == RationalMatrix(3, 3, [2, 1, 1, 0, 1, 1, 0, 3, 5])


def test_subtract_down_zero_pivot(gauss):
    matrix = RationalMatrix(2, 2, [0, 1, 3, 4])
    assert gauss.subtract_down(matrix, 0, 0) is matrix


def test_upper_triangular(gauss):
    matrix = RationalMatrix(3, 3, [1, 2, 3, 2, 4, 7, 5, 6, 8])
    triangular = gauss.upper_triangular(matrix)
    assert triangular == RationalMatrix(3, 3, [1, 2, 3, 0, -4, -6, 0, 0, -1])
    assert matrix.upper_triangular() == triangular


def test_upper_triangular_zeroes_below_diagonal(gauss, random_fraction_matrix):
    for _ in range(10):
        matrix = random_fraction_matrix(4, 4)
        triangular = gauss.upper_triangular(matrix)
        if triangular.determinant().is_zero():
            continue
        for row in range(4):
            for col in range(row):
                assert triangular.get_value_at(row, col).is_zero()


def test_upper_triangular_non_square(gauss):
    matrix = RationalMatrix(2, 3, [2, 4, 6, 1, 3, 5])
    assert gauss.upper_triangular(matrix) == RationalMatrix(2, 3, [2, 4, 6, 0, 1, 2])


@pytest.mark.parametrize("method", [ELIMINATION, COFACTOR])
def test_determinant_2x2(method, matrix_1234):
    assert matrix_1234.determinant(method=method) == F(-2)


@pytest.mark.parametrize("method", [ELIMINATION, COFACTOR])
def test_determinant_identity(method):
    assert RationalMatrix.identity(3).determinant(method=method) == F(1)


@pytest.mark.parametrize("entries,expected", [
    ([7], 7),
    (["-2/3"], "-2/3"),
    ([0, 1, 1, 0], -1),
    ([0, 0, 1, 0, 1, 0, 1, 0, 0], -1),
    ([1, 2, 3, 2, 4, 7, 5, 6, 8], 4),
    ([1, 2, 2, 4], 0),
    ([0, 1, 0, 2], 0),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9], 0),
    ([2, 0, 0, 0, 3, 0, 0, 0, 4], 24),
    (["1/2", "1/3", "1/4", "1/5"], "1/60"),
    ([0, 2, 0, 0, 0, 0, 3, 0, 0, 0, 0, 4, 5, 0, 0, 0], -120),
])
@pytest.mark.parametrize("method", [ELIMINATION, COFACTOR])
def test_determinant_values(method, entries, expected):
    size = {1: 1, 4: 2, 9: 3, 16: 4}[len(entries)]
    matrix = RationalMatrix(size, size, entries)
    assert matrix.determinant(method=method) == F.value_of(expected)


@pytest.mark.parametrize("method", [ELIMINATION, COFACTOR])
def test_determinant_non_square(method):
    with pytest.raises(ShapeMismatch, match="Rows must equal columns"):
        RationalMatrix(2, 3).determinant(method=method)


def test_determinant_default_is_elimination(matrix_1234):
    assert matrix_1234.determinant() == Gauss.instance().determinant(matrix_1234)


def test_determinant_unknown_method(matrix_1234):
    with pytest.raises(ValueError, match="Unknown determinant method"):
        matrix_1234.determinant(method='lu')
    with pytest.raises(ValueError, match="not supported"):
        matrix_1234.determinant(pivoting=True)


def test_cofactor_expansion_entry_point(matrix_1234):
    assert CofactorExpansion.instance().determinant(matrix_1234) == F(-2)
    assert matrix_1234.cofactor_determinant() == F(-2)


@pytest.mark.timeout(60)
def test_determinants_agree_integer(size, random_matrix):
    for _ in range(20):
        matrix = random_matrix(size, size)
        assert matrix.determinant(method=ELIMINATION) == matrix.determinant(method=COFACTOR), repr(matrix)


@pytest.mark.timeout(60)
def test_determinants_agree_fractions(size, random_fraction_matrix):
    for _ in range(20):
        matrix = random_fraction_matrix(size, size)
        assert matrix.determinant(method=ELIMINATION) == matrix.determinant(method=COFACTOR), repr(matrix)


@pytest.mark.timeout(60)
def test_determinants_agree_sparse_6x6(random_matrix):
    """Mostly-zero matrices exercise the zero pivot repair."""
    for _ in range(5):
        matrix = random_matrix(6, 6, low=-1, high=2)
        assert matrix.determinant(method=ELIMINATION) == matrix.determinant(method=COFACTOR), repr(matrix)


def test_determinant_matches_sympy(size, random_fraction_matrix):
    for _ in range(10):
        matrix = random_fraction_matrix(size, size)
        assert matrix.determinant() == RationalMath.to_big_fraction(matrix.to_sympy().det())


def test_determinant_is_multiplicative(size, random_fraction_matrix):
    for _ in range(10):
        a = random_fraction_matrix(size, size)
        b = random_fraction_matrix(size, size)
        assert a.multiply(b).determinant() == a.determinant().multiply(b.determinant())


def test_determinant_of_transpose(size, random_matrix):
    for _ in range(10):
        matrix = random_matrix(size, size)
        assert matrix.transpose().determinant() == matrix.determinant()
