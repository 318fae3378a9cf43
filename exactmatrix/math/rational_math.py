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
Conversions between BigFraction and the other exact number types in use.

Matrices are frequently built from numpy integer arrays or sympy objects and
handed back to them. These helpers keep the conversion rules in one place:
exact types convert exactly, floats are refused.
"""

from fractions import Fraction
from typing import Union

import numpy as np
from sympy import Rational

from .big_fraction import BigFraction

# Type alias for values that can be converted to BigFraction
Exact = Union[int, str, Fraction, Rational, BigFraction]


class RationalMath:
    """Utility class for rational number conversions."""

    ZERO = BigFraction.ZERO
    ONE = BigFraction.ONE
    MINUS_ONE = BigFraction.MINUS_ONE

    @staticmethod
    def to_big_fraction(value: Exact) -> BigFraction:
        """
        Convert an exact numeric value to a BigFraction.

        Args:
            value: An int, numpy integer, str, Fraction, sympy.Rational or BigFraction

        Returns:
            BigFraction representation of the value
        """
        return BigFraction.value_of(value)

    @staticmethod
    def to_fraction(value: Exact) -> Fraction:
        """Convert to a fractions.Fraction"""
        return BigFraction.value_of(value).to_fraction()

    @staticmethod
    def to_sympy_rational(value: Exact) -> Rational:
        """Convert to a sympy Rational"""
        return BigFraction.value_of(value).to_sympy()

    @staticmethod
    def is_zero(value: Exact) -> bool:
        return BigFraction.value_of(value).is_zero()

    @staticmethod
    def array_to_big_fractions(arr: np.ndarray) -> np.ndarray:
        """
        Convert a numpy array to an object array of BigFractions.

        Args:
            arr: Numpy array of integers or exact objects. Float arrays are
                rejected, their values are not exact.

        Returns:
            Object array of the same shape containing BigFraction objects

        Raises:
            TypeError: If arr has a floating point or complex dtype
        """
        arr = np.asarray(arr)
        if arr.dtype.kind in ('f', 'c'):
            raise TypeError(f"Cannot convert {arr.dtype} array to exact fractions")
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = BigFraction.value_of(val)
        return result

    @staticmethod
    def big_fractions_to_floats(arr: np.ndarray) -> np.ndarray:
        """
        Convert an object array of BigFractions to floats.

        Args:
            arr: Object array containing BigFractions

        Returns:
            Float array
        """
        result = np.empty(arr.shape, dtype=float)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = float(val)
        return result


# Module-level constants for compatibility
ZERO = RationalMath.ZERO
ONE = RationalMath.ONE
MINUS_ONE = RationalMath.MINUS_ONE
