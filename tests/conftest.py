import pytest
import numpy as np
from exactmatrix import BigFraction, RationalMatrix

SEED = 20221


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random generator so that property checks are reproducible."""
    return np.random.default_rng(SEED)


@pytest.fixture(params=[1, 2, 3, 4, 5], scope="session")
def size(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for parametrized square matrix sizes."""
    return request.param


@pytest.fixture
def random_matrix(rng):
    """Provide a factory for random matrices with small integer entries (many zeros)."""

    def make(rows, columns, low=-3, high=4):
        return RationalMatrix.from_numpy(rng.integers(low, high, size=(rows, columns)))

    return make


@pytest.fixture
def random_fraction_matrix(rng):
    """Provide a factory for random matrices with small fractional entries."""

    def make(rows, columns):
        numerators = rng.integers(-5, 6, size=rows * columns)
        denominators = rng.integers(1, 5, size=rows * columns)
        return RationalMatrix(rows, columns, [BigFraction(int(n), int(d)) for n, d in zip(numerators, denominators)])

    return make


@pytest.fixture
def random_invertible(random_fraction_matrix):
    """Provide a factory for random non-singular square matrices."""

    def make(size):
        while True:
            matrix = random_fraction_matrix(size, size)
            if not matrix.determinant().is_zero():
                return matrix

    return make


@pytest.fixture
def matrix_1234() -> RationalMatrix:
    return RationalMatrix(2, 2, [1, 2, 3, 4])
