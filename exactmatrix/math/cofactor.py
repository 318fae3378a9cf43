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
Cofactor expansion and the adjugate inverse.

CofactorExpansion.determinant expands recursively along the first column. Its
cost grows factorially with the size, it is kept as an independent reference
for the elimination-based determinant in gauss.py, which it must always agree
with.

The inverse is computed as adjugate / determinant. The minors that make up
the adjugate are evaluated with the elimination determinant, expanding them
by cofactors again would bring back the factorial cost.
"""

import logging

from ..errors import ShapeMismatch, SingularMatrix
from .big_fraction import BigFraction
from .rational_math import ZERO, ONE
from .rational_matrix import RationalMatrix
from .gauss import Gauss


class CofactorExpansion:
    """
    Determinant by cofactor expansion, and the matrices derived from cofactors.

    Stateless, use the shared instance returned by CofactorExpansion.instance().
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'CofactorExpansion':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def determinant(self, matrix: RationalMatrix) -> BigFraction:
        """
        Determinant by expansion along column 0.

        det = sum over rows of (-1)^row * entry(row, 0) * det(minor(row, 0)),
        with 1x1 and 2x2 matrices evaluated directly.

        Raises:
            ShapeMismatch: If the matrix is not square
        """
        if not matrix.is_square():
            raise ShapeMismatch(f"Rows must equal columns to get determinant, got "
                                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        return self._expand(matrix)

    def _expand(self, matrix: RationalMatrix) -> BigFraction:
        size = matrix.get_row_count()
        if size == 1:
            return matrix.get_value_at(0, 0)
        if size == 2:
            return matrix.get_value_at(0, 0).multiply(matrix.get_value_at(1, 1)).subtract(
                matrix.get_value_at(0, 1).multiply(matrix.get_value_at(1, 0)))
        result = ZERO
        for row in range(size):
            entry = matrix.get_value_at(row, 0)
            if entry.is_zero():
                continue
            term = entry.multiply(self._expand(matrix.minor_matrix(row, 0)))
            result = result.add(term) if row % 2 == 0 else result.subtract(term)
        return result

    def minors_matrix(self, matrix: RationalMatrix) -> RationalMatrix:
        """
        Matrix of minors, M[r][c] = det(minor(r, c)).

        The minor of a 1x1 matrix is empty and its determinant is 1.

        Raises:
            ShapeMismatch: If the matrix is not square
        """
        if not matrix.is_square():
            raise ShapeMismatch(f"Matrix of minors requires a square matrix, got "
                                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        size = matrix.get_row_count()
        if size == 1:
            return RationalMatrix(1, 1, [ONE])
        gauss = Gauss.instance()
        return RationalMatrix(size, size,
                              [gauss.determinant(matrix.minor_matrix(row, col)) for row in range(size) for col in range(size)])

    def cofactor_matrix(self, matrix: RationalMatrix) -> RationalMatrix:
        """Matrix of minors with the sign flipped where row + col is odd"""
        minors = self.minors_matrix(matrix)
        size = minors.get_row_count()
        return RationalMatrix(size, size, [
            minors.get_value_at(row, col).negate() if (row + col) % 2 else minors.get_value_at(row, col)
            for row in range(size)
            for col in range(size)
        ])

    def adjugate(self, matrix: RationalMatrix) -> RationalMatrix:
        """Transpose of the cofactor matrix"""
        return self.cofactor_matrix(matrix).transpose()

    def invert(self, matrix: RationalMatrix) -> RationalMatrix:
        """
        Compute the inverse of a square matrix as adjugate / determinant.

        Args:
            matrix: Square matrix to invert

        Returns:
            The inverse matrix

        Raises:
            ShapeMismatch: If matrix is not square
            SingularMatrix: If the determinant is zero
        """
        if not matrix.is_square():
            raise ShapeMismatch(f"Matrix must be square for inversion: "
                                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        det = Gauss.instance().determinant(matrix)
        if det.is_zero():
            raise SingularMatrix(f"Matrix is singular (determinant 0), "
                                 f"{matrix.get_row_count()}x{matrix.get_column_count()} inverse does not exist")
        logging.debug(f"Inverting {matrix.get_row_count()}x{matrix.get_column_count()} matrix, determinant {det}.")
        return self.adjugate(matrix).scale(BigFraction.quotient(ONE, det))
