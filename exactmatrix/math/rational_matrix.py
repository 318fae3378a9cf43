#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Immutable matrices of exact rational numbers.

A RationalMatrix stores its entries as a tuple of row tuples holding
BigFraction values. Nothing can be written after construction, so every
transformation (transpose, minor extraction, row operations, arithmetic)
returns a new matrix. Rows that a transformation leaves untouched are shared
between the old and the new matrix, which is safe because tuples never
change.

The determinant and the inverse are computed by the algorithms in gauss.py
(elimination) and cofactor.py (cofactor expansion, adjugate); the methods
here only dispatch to them.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy import sparse
from sympy import Matrix as SympyMatrix

from ..errors import ShapeMismatch, IndexOutOfRange
from ..names import METHOD, ELIMINATION, COFACTOR, DET_METHODS, ROWS_IN_DIM1
from .big_fraction import BigFraction
from .rational_math import RationalMath, Exact, ZERO, ONE

Row = Tuple[BigFraction, ...]


class RationalMatrix:
    """
    Matrix with BigFraction entries.

    RationalMatrix(rows, cols) creates the zero matrix of that shape,
    RationalMatrix(rows, cols, entries) fills it row-major from a flat
    sequence of exact values.

    Args:
        rows: Number of rows, positive
        columns: Number of columns, positive
        entries: Optional flat row-major sequence of rows * columns values

    Raises:
        ShapeMismatch: If a size is not positive or the number of entries
            differs from rows * columns
    """

    __slots__ = ('_rows', '_columns', '_data', '_hash')

    def __init__(self, rows: int, columns: int, entries: Optional[Iterable[Exact]] = None):
        _check_shape(rows, columns)
        if entries is None:
            zero_row = (ZERO,) * columns
            data = (zero_row,) * rows
        else:
            values = [RationalMath.to_big_fraction(value) for value in entries]
            if len(values) != rows * columns:
                raise ShapeMismatch(f"Matrix has {rows * columns} entries and {len(values)} entries were supplied.")
            data = tuple(tuple(values[row * columns:(row + 1) * columns]) for row in range(rows))
        self._init(rows, columns, data)

    def _init(self, rows: int, columns: int, data: Tuple[Row, ...]):
        object.__setattr__(self, '_rows', rows)
        object.__setattr__(self, '_columns', columns)
        object.__setattr__(self, '_data', data)
        object.__setattr__(self, '_hash', None)

    @classmethod
    def _from_data(cls, data: Tuple[Row, ...]) -> 'RationalMatrix':
        """Wrap already validated row tuples without copying them"""
        matrix = cls.__new__(cls)
        matrix._init(len(data), len(data[0]), data)
        return matrix

    def __setattr__(self, name, value):
        raise AttributeError(f"RationalMatrix is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"RationalMatrix is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (RationalMatrix, (self._rows, self._columns, [v for row in self._data for v in row]))

    # Construction
    @classmethod
    def zero(cls, rows: int, columns: int) -> 'RationalMatrix':
        return cls(rows, columns)

    @classmethod
    def identity(cls, size: int) -> 'RationalMatrix':
        """Identity matrix of the given size"""
        _check_shape(size, size)
        return cls._from_data(tuple(
            tuple(ONE if row == col else ZERO for col in range(size)) for row in range(size)))

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Exact]], **kwargs) -> 'RationalMatrix':
        """
        Create a matrix from nested sequences.

        Args:
            data: 2D data; data[i][j] is row i, column j unless rows_in_dim1 is False
            rows_in_dim1 (optional (bool)): (Default: True) If False, data[i][j] is column i, row j

        Raises:
            ShapeMismatch: If data is empty or ragged
        """
        rows_in_dim1 = kwargs.pop(ROWS_IN_DIM1, True)
        for key in kwargs:
            raise ValueError(f"Key {key} is not supported.")
        lines = [list(line) for line in data]
        if not lines or not lines[0]:
            raise ShapeMismatch("data must not be empty")
        width = len(lines[0])
        for i, line in enumerate(lines):
            if len(line) != width:
                raise ShapeMismatch(f"Ragged data: line {i} has {len(line)} entries, expected {width}")
        matrix = cls(len(lines), width, [value for line in lines for value in line])
        return matrix if rows_in_dim1 else matrix.transpose()

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'RationalMatrix':
        """
        Create a RationalMatrix from a 2D numpy array.

        Args:
            array: Integer array, or object array of exact values

        Raises:
            TypeError: For float or complex arrays
            ShapeMismatch: If the array is not two dimensional
        """
        values = RationalMath.array_to_big_fractions(array)
        if values.ndim != 2:
            raise ShapeMismatch(f"Expected a 2D array, got {values.ndim} dimensions")
        rows, columns = values.shape
        return cls(rows, columns, values.flat)

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix) -> 'RationalMatrix':
        """
        Create a RationalMatrix from a scipy sparse matrix with integer data.

        The result is stored densely like every other RationalMatrix.
        """
        if sparse_matrix.dtype.kind in ('f', 'c'):
            raise TypeError(f"Cannot convert {sparse_matrix.dtype} sparse matrix to exact fractions")
        rows, columns = sparse_matrix.shape
        _check_shape(rows, columns)
        data = [[ZERO] * columns for _ in range(rows)]
        # Convert to COO format for easy iteration, duplicates are summed
        coo = sparse.coo_matrix(sparse_matrix)
        coo.sum_duplicates()
        for i, j, v in zip(coo.row, coo.col, coo.data):
            data[i][j] = BigFraction.value_of(v)
        return cls._from_data(tuple(tuple(row) for row in data))

    @classmethod
    def from_sympy(cls, matrix: SympyMatrix) -> 'RationalMatrix':
        """Create a RationalMatrix from a sympy Matrix of rational entries"""
        rows, columns = matrix.shape
        return cls(rows, columns, list(matrix))

    # Shape and access
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def get_row_count(self) -> int:
        return self._rows

    def get_column_count(self) -> int:
        return self._columns

    def is_square(self) -> bool:
        return self._rows == self._columns

    def get_value_at(self, row: int, col: int) -> BigFraction:
        """
        Get value at position (row, col).

        Indices are not checked. Passing an index outside the matrix is
        undefined behaviour the caller must avoid: it may raise IndexError
        or, for negative indices, silently return another entry.
        """
        return self._data[row][col]

    def get_row(self, row: int) -> Row:
        return self._data[row]

    def get_column(self, col: int) -> Row:
        """Entries of column col, top to bottom"""
        return tuple(line[col] for line in self._data)

    def get_rows(self) -> Tuple[Row, ...]:
        return self._data

    def replace_row(self, row: int, values: Sequence[Exact]) -> 'RationalMatrix':
        """
        Return a new matrix with row replaced by values, all other rows shared.

        Raises:
            IndexOutOfRange: If row is outside the matrix
            ShapeMismatch: If values does not have one entry per column
        """
        self._check_row(row)
        new_row = tuple(RationalMath.to_big_fraction(value) for value in values)
        if len(new_row) != self._columns:
            raise ShapeMismatch(f"Row has {len(new_row)} entries, matrix has {self._columns} columns")
        return RationalMatrix._from_data(self._data[:row] + (new_row,) + self._data[row + 1:])

    # Conversion
    def to_lists(self) -> List[List[BigFraction]]:
        return [list(line) for line in self._data]

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """
        Convert to a numpy array.

        Args:
            as_float: If True, return float64 values for display or plotting,
                otherwise an object array of fractions.Fraction

        Returns:
            Numpy array of shape (rows, columns)
        """
        result = np.empty((self._rows, self._columns), dtype=object)
        for i, line in enumerate(self._data):
            for j, value in enumerate(line):
                result[i, j] = value.to_fraction()
        if as_float:
            return result.astype(float)
        return result

    def to_sympy(self) -> SympyMatrix:
        return SympyMatrix(self._rows, self._columns, [value.to_sympy() for line in self._data for value in line])

    # Structural transforms
    def transpose(self) -> 'RationalMatrix':
        """Return the columns x rows matrix with result[i][j] = self[j][i]"""
        return RationalMatrix._from_data(tuple(zip(*self._data)))

    def identity_like(self) -> 'RationalMatrix':
        """
        Identity matrix of the same size as this square matrix.

        Raises:
            ShapeMismatch: If the matrix is not square
        """
        if not self.is_square():
            raise ShapeMismatch(f"Identity requires a square matrix, got {self._rows}x{self._columns}")
        return RationalMatrix.identity(self._rows)

    def minor_matrix(self, row: int, col: int) -> 'RationalMatrix':
        """
        Return the matrix formed by deleting row and col.

        Raises:
            IndexOutOfRange: If row or col is outside the matrix
            ShapeMismatch: If the matrix has a single row or column, its
                minors would be empty
        """
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexOutOfRange(f"Entry ({row}, {col}) out of range for {self._rows}x{self._columns} matrix")
        if self._rows == 1 or self._columns == 1:
            raise ShapeMismatch(f"{self._rows}x{self._columns} matrix has no minor matrices")
        return RationalMatrix._from_data(tuple(
            line[:col] + line[col + 1:] for i, line in enumerate(self._data) if i != row))

    def row_operation(self, operator_row: int, operating_row: int, multiplier: Exact) -> 'RationalMatrix':
        """Replace operating_row with operating_row + multiplier * operator_row, see Gauss.row_operation"""
        from .gauss import Gauss
        return Gauss.instance().row_operation(self, operator_row, operating_row, multiplier)

    # Arithmetic
    def add(self, other: 'RationalMatrix') -> 'RationalMatrix':
        """Add two matrices element-wise"""
        self._check_same_shape(other)
        return RationalMatrix._from_data(tuple(
            tuple(a.add(b) for a, b in zip(line_a, line_b)) for line_a, line_b in zip(self._data, other._data)))

    def subtract(self, other: 'RationalMatrix') -> 'RationalMatrix':
        """Subtract other from this matrix element-wise"""
        self._check_same_shape(other)
        return RationalMatrix._from_data(tuple(
            tuple(a.subtract(b) for a, b in zip(line_a, line_b)) for line_a, line_b in zip(self._data, other._data)))

    def multiply(self, other: 'RationalMatrix') -> 'RationalMatrix':
        """
        Matrix product self * other.

        Raises:
            ShapeMismatch: If self.columns != other.rows
        """
        if self._columns != other._rows:
            raise ShapeMismatch(f"Matrix dimensions incompatible: {self._rows}x{self._columns} * "
                                f"{other._rows}x{other._columns}")
        other_columns = other.transpose()._data
        result = []
        for line in self._data:
            result_row = []
            for column in other_columns:
                total = ZERO
                for a, b in zip(line, column):
                    total = total.add(a.multiply(b))
                result_row.append(total)
            result.append(tuple(result_row))
        return RationalMatrix._from_data(tuple(result))

    def scale(self, scalar: Exact) -> 'RationalMatrix':
        """Multiply every entry by scalar"""
        factor = RationalMath.to_big_fraction(scalar)
        return RationalMatrix._from_data(tuple(tuple(value.multiply(factor) for value in line) for line in self._data))

    def negate(self) -> 'RationalMatrix':
        return self.scale(BigFraction.MINUS_ONE)

    def __add__(self, other):
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar):
        if isinstance(scalar, RationalMatrix):
            return NotImplemented
        try:
            factor = RationalMath.to_big_fraction(scalar)
        except TypeError:
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()

    # Determinant and inverse
    def determinant(self, **kwargs) -> BigFraction:
        """
        Compute the determinant.

        Args:
            method (optional (str)): (Default: 'elimination')
                'elimination' triangularizes with row additions (polynomial cost),
                'cofactor' expands along the first column (exponential cost, used
                as a reference).

        Returns:
            (BigFraction): The exact determinant

        Raises:
            ShapeMismatch: If the matrix is not square
            ValueError: For unknown methods or keywords
        """
        method = kwargs.pop(METHOD, ELIMINATION)
        for key in kwargs:
            raise ValueError(f"Key {key} is not supported.")
        if method not in DET_METHODS:
            raise ValueError(f"Unknown determinant method '{method}', use one of {', '.join(DET_METHODS)}.")
        if method == COFACTOR:
            return self.cofactor_determinant()
        from .gauss import Gauss
        return Gauss.instance().determinant(self)

    def cofactor_determinant(self) -> BigFraction:
        from .cofactor import CofactorExpansion
        return CofactorExpansion.instance().determinant(self)

    def upper_triangular(self) -> 'RationalMatrix':
        from .gauss import Gauss
        return Gauss.instance().upper_triangular(self)

    def inverse(self) -> 'RationalMatrix':
        """
        Inverse by the adjugate method.

        Raises:
            ShapeMismatch: If the matrix is not square
            SingularMatrix: If the determinant is zero
        """
        from .cofactor import CofactorExpansion
        return CofactorExpansion.instance().invert(self)

    # Predicates
    def is_equal_to(self, other: 'RationalMatrix') -> bool:
        """True iff the shapes match and all entries are equal"""
        if self._rows != other._rows or self._columns != other._columns:
            return False
        return self._data == other._data

    def is_orthogonal(self) -> bool:
        """
        True iff self * transpose(self) is the identity.

        Non-square matrices are never orthogonal.
        """
        if not self.is_square():
            logging.debug(f"{self._rows}x{self._columns} matrix is not square, hence not orthogonal.")
            return False
        return self.multiply(self.transpose()).is_equal_to(self.identity_like())

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, '_hash', hash((self._rows, self._columns, self._data)))
        return self._hash

    def __repr__(self) -> str:
        entries = ', '.join(f"'{value}'" for line in self._data for value in line)
        return f"RationalMatrix({self._rows}, {self._columns}, [{entries}])"

    # Checks
    def _check_row(self, row: int):
        if not 0 <= row < self._rows:
            raise IndexOutOfRange(f"Row {row} out of range for {self._rows}x{self._columns} matrix")

    def _check_same_shape(self, other: 'RationalMatrix'):
        if self._rows != other._rows or self._columns != other._columns:
            raise ShapeMismatch(f"Matrix dimensions don't match: {self._rows}x{self._columns} vs "
                                f"{other._rows}x{other._columns}")


def _check_shape(rows: int, columns: int):
    if not isinstance(rows, int) or not isinstance(columns, int) or isinstance(rows, bool) or isinstance(columns, bool):
        raise TypeError(f"Matrix dimensions must be ints, got {rows!r} and {columns!r}")
    if rows <= 0 or columns <= 0:
        raise ShapeMismatch(f"Matrix dimensions must be positive, got {rows}x{columns}")
