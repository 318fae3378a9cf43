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
Exact rational numbers with canonical representation.

A BigFraction holds a numerator and a denominator as Python ints, which have
arbitrary precision. Every instance is reduced at construction:

- the denominator is strictly positive, the sign lives in the numerator
- gcd(|numerator|, denominator) == 1
- zero is stored as 0/1

Reduction is done here with math.gcd rather than delegated to
fractions.Fraction, so the canonical form does not depend on another
library's normalization rules. Instances are immutable and hashable.
"""

import math
from fractions import Fraction
from typing import Tuple, Union

from sympy import Rational

from ..errors import DivisionByZero


class BigFraction:
    """
    Immutable exact rational number.

    Args:
        numerator: Integer numerator
        denominator: Integer denominator (default 1), must not be zero

    Raises:
        DivisionByZero: If the denominator is zero
        TypeError: If numerator or denominator is not an int
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        if not _is_int(numerator) or not _is_int(denominator):
            raise TypeError(f"BigFraction requires int numerator and denominator, "
                            f"got {type(numerator).__name__} and {type(denominator).__name__}")
        num, den = _canonical(numerator, denominator)
        object.__setattr__(self, '_numerator', num)
        object.__setattr__(self, '_denominator', den)

    def __setattr__(self, name, value):
        raise AttributeError(f"BigFraction is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"BigFraction is immutable, cannot delete '{name}'")

    @classmethod
    def quotient(cls, dividend: 'BigFraction', divisor: 'BigFraction') -> 'BigFraction':
        """
        Build the fraction equal to dividend / divisor.

        The numerators and denominators are combined cross-wise,
        (a.num * b.den) / (a.den * b.num), and the result is reduced.

        Raises:
            DivisionByZero: If divisor is zero
        """
        dividend = BigFraction.value_of(dividend)
        divisor = BigFraction.value_of(divisor)
        return cls(dividend._numerator * divisor._denominator, dividend._denominator * divisor._numerator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    # Arithmetic
    def add(self, other: 'BigFraction') -> 'BigFraction':
        """Add two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._denominator + other._numerator * self._denominator,
                           self._denominator * other._denominator)

    def subtract(self, other: 'BigFraction') -> 'BigFraction':
        """Subtract two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._denominator - other._numerator * self._denominator,
                           self._denominator * other._denominator)

    def multiply(self, other: 'BigFraction') -> 'BigFraction':
        """Multiply two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: 'BigFraction') -> 'BigFraction':
        """Divide two BigFractions, raises DivisionByZero if other is zero"""
        return BigFraction.quotient(self, other)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._numerator, self._denominator)

    def abs(self) -> 'BigFraction':
        return BigFraction(abs(self._numerator), self._denominator)

    def reciprocal(self) -> 'BigFraction':
        """Return 1/this, raises DivisionByZero for zero"""
        return BigFraction(self._denominator, self._numerator)

    # Predicates
    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator < 0:
            return -1
        elif self._numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_equal_to(self, other: 'BigFraction') -> bool:
        """True iff both canonical numerator/denominator pairs match"""
        return self._numerator == other._numerator and self._denominator == other._denominator

    def compare_to(self, other: 'BigFraction') -> int:
        """Compare to another BigFraction: -1 if less, 0 if equal, 1 if greater"""
        other = BigFraction.value_of(other)
        # denominators are positive, so cross-multiplying keeps the order
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    # Conversion
    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def to_sympy(self) -> Rational:
        return Rational(self._numerator, self._denominator)

    def double_value(self) -> float:
        """Nearest float, for display only"""
        return self._numerator / self._denominator

    # Python protocol
    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self.is_equal_to(other)
        if _is_int(other):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other) -> bool:
        if not isinstance(other, BigFraction) and not _is_int(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, BigFraction) and not _is_int(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, BigFraction) and not _is_int(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, BigFraction) and not _is_int(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self.double_value()

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._numerator}, {self._denominator})"

    def __reduce__(self):
        return (BigFraction, (self._numerator, self._denominator))

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return BigFraction.value_of(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return BigFraction.value_of(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return BigFraction.value_of(other).multiply(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return BigFraction.value_of(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    @staticmethod
    def value_of(value: Union[int, str, Fraction, Rational, 'BigFraction']) -> 'BigFraction':
        """
        Factory method to create a BigFraction from an exact value.

        Accepts ints, strings of the form "n" or "n/d", fractions.Fraction,
        sympy.Rational and BigFraction (returned as is). Floats are rejected
        since their binary value is rarely the number that was meant.

        Raises:
            TypeError: For floats and other unsupported types
            ValueError: For malformed strings
            DivisionByZero: For strings with a zero denominator
        """
        if isinstance(value, BigFraction):
            return value
        if _is_int(value):
            return BigFraction(value)
        if isinstance(value, str):
            return _parse(value)
        if isinstance(value, Fraction):
            return BigFraction(value.numerator, value.denominator)
        if isinstance(value, Rational):
            return BigFraction(int(value.p), int(value.q))
        if hasattr(value, 'dtype') and getattr(value.dtype, 'kind', None) in ('i', 'u'):
            # numpy integer scalars
            return BigFraction(int(value))
        raise TypeError(f"Cannot convert {type(value).__name__} to BigFraction")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value) -> bool:
    return isinstance(value, (BigFraction, Fraction, Rational)) or _is_int(value)


def _canonical(numerator: int, denominator: int) -> Tuple[int, int]:
    if denominator == 0:
        if numerator == 0:
            raise DivisionByZero("Division undefined: 0/0")
        raise DivisionByZero(f"Division by zero: {numerator}/0")
    if numerator == 0:
        return 0, 1
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    gcd = math.gcd(numerator, denominator)
    return numerator // gcd, denominator // gcd


def _parse(text: str) -> BigFraction:
    parts = text.strip().split('/')
    if len(parts) > 2:
        raise ValueError(f"Invalid fraction format: {text!r}")
    try:
        numerator = int(parts[0])
        denominator = int(parts[1]) if len(parts) == 2 else 1
    except ValueError:
        raise ValueError(f"Invalid fraction format: {text!r}") from None
    return BigFraction(numerator, denominator)


# Constants
BigFraction.ZERO = BigFraction(0)
BigFraction.ONE = BigFraction(1)
BigFraction.MINUS_ONE = BigFraction(-1)
