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
"""Exceptions raised by exact fraction and matrix operations

All errors surface immediately to the caller. Each one also derives from the
matching built-in exception so that callers which only know about
ValueError, IndexError or ZeroDivisionError still catch them.
"""


class ExactMatrixError(Exception):
    """Base class of all exactmatrix errors"""


class ShapeMismatch(ExactMatrixError, ValueError):
    """Operand dimensions are incompatible or invalid"""


class IndexOutOfRange(ExactMatrixError, IndexError):
    """A row or column index lies outside the matrix"""


class DivisionByZero(ExactMatrixError, ZeroDivisionError):
    """A fraction was constructed or derived with a zero denominator"""


class SingularMatrix(DivisionByZero):
    """The matrix has determinant zero and cannot be inverted"""
