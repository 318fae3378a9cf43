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
Gauss operations - elimination-based determinant for exact rational matrices.

The matrix is brought to upper triangular form with a single kind of
elementary operation: adding a multiple of one row to another row. Row swaps
and row scaling are never used, so the determinant of every intermediate
matrix equals the determinant of the input and the result is simply the
product of the diagonal. No sign or scale bookkeeping is needed.

The price is the zero-pivot repair: when the pivot (col, col) is zero, the
first row below it with a nonzero entry in that column is added onto the
pivot row. If no such row exists, the pivot stays zero and the determinant
is zero.

All operations return new matrices, the input is never modified.
"""

import logging
from typing import Optional

from ..errors import IndexOutOfRange, ShapeMismatch
from .big_fraction import BigFraction
from .rational_math import RationalMath, Exact, ONE
from .rational_matrix import RationalMatrix


class Gauss:
    """
    Elimination operations on RationalMatrix instances.

    Stateless, use the shared instance returned by Gauss.instance().
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'Gauss':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def row_operation(self, matrix: RationalMatrix, operator_row: int, operating_row: int,
                      multiplier: Exact) -> RationalMatrix:
        """
        Replace operating_row with operating_row + multiplier * operator_row.

        Args:
            matrix: Input matrix, left unchanged
            operator_row: Index of the row that is scaled and added
            operating_row: Index of the row that is replaced
            multiplier: Factor applied to operator_row

        Returns:
            New matrix in which only operating_row differs from the input

        Raises:
            IndexOutOfRange: If a row index is outside the matrix
            ValueError: If operator_row and operating_row are the same row
        """
        rows = matrix.get_row_count()
        for row in (operator_row, operating_row):
            if not 0 <= row < rows:
                raise IndexOutOfRange(f"Row {row} out of range for {rows}x{matrix.get_column_count()} matrix")
        if operator_row == operating_row:
            raise ValueError(f"Row operation needs two different rows, got {operator_row} twice")
        factor = RationalMath.to_big_fraction(multiplier)
        source = matrix.get_row(operator_row)
        target = matrix.get_row(operating_row)
        new_row = [dst.add(src.multiply(factor)) for src, dst in zip(source, target)]
        return matrix.replace_row(operating_row, new_row)

    def find_usable_row(self, matrix: RationalMatrix, row: int, col: int) -> Optional[int]:
        """
        Find the first row strictly below row with a nonzero entry in column col.

        Returns:
            The index of that row, or None if all entries below are zero
        """
        for candidate in range(row + 1, matrix.get_row_count()):
            if not matrix.get_value_at(candidate, col).is_zero():
                return candidate
        return None

    def make_usable(self, matrix: RationalMatrix, row: int, col: int) -> RationalMatrix:
        """
        Repair a zero pivot at (row, col).

        Adds the first usable row below (see find_usable_row) onto row. If
        there is none, the matrix is returned unchanged and the pivot stays zero.
        """
        usable_row = self.find_usable_row(matrix, row, col)
        if usable_row is None:
            logging.debug(f"No usable row below pivot ({row}, {col}), column is singular.")
            return matrix
        logging.debug(f"Zero pivot at ({row}, {col}), adding row {usable_row}.")
        return self.row_operation(matrix, usable_row, row, ONE)

    def subtract_down(self, matrix: RationalMatrix, row: int, col: int) -> RationalMatrix:
        """
        Eliminate all entries below the pivot (row, col).

        Each row below gets -(its entry in col) / pivot times the pivot row
        added. The multipliers come from column col only, so columns left of
        col that are already zero below the diagonal stay zero. A zero pivot
        leaves the matrix unchanged.
        """
        pivot = matrix.get_value_at(row, col)
        if pivot.is_zero():
            return matrix
        for row_below in range(row + 1, matrix.get_row_count()):
            entry = matrix.get_value_at(row_below, col)
            if entry.is_zero():
                continue
            multiplier = BigFraction.quotient(entry, pivot).negate()
            matrix = self.row_operation(matrix, row, row_below, multiplier)
        return matrix

    def upper_triangular(self, matrix: RationalMatrix) -> RationalMatrix:
        """
        Reduce to upper triangular form using row additions only.

        Columns are processed left to right with the pivot on the diagonal.
        For non-square matrices the diagonal of the leading square block is used.

        Returns:
            Matrix with the same determinant (for square input) and zeros
            below the diagonal, except below pivots that stayed zero
        """
        for col in range(min(matrix.get_row_count(), matrix.get_column_count())):
            if matrix.get_value_at(col, col).is_zero():
                matrix = self.make_usable(matrix, col, col)
            matrix = self.subtract_down(matrix, col, col)
        return matrix

    def determinant(self, matrix: RationalMatrix) -> BigFraction:
        """
        Elimination-based determinant.

        Raises:
            ShapeMismatch: If the matrix is not square
        """
        if not matrix.is_square():
            raise ShapeMismatch(f"Rows must equal columns to get determinant, got "
                                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        triangular = self.upper_triangular(matrix)
        result = ONE
        for i in range(triangular.get_row_count()):
            result = result.multiply(triangular.get_value_at(i, i))
            if result.is_zero():
                break
        return result
