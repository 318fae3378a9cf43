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
Exact rational linear algebra

- Exact rational arithmetic with BigFraction
- Immutable matrices of BigFractions
- Elimination-based and cofactor-expansion determinants, adjugate inverse

All operations keep exact precision, no floating point is involved.
"""

from .big_fraction import BigFraction
from .rational_math import RationalMath
from .rational_matrix import RationalMatrix
from .gauss import Gauss
from .cofactor import CofactorExpansion

__all__ = [
    'BigFraction',
    'RationalMath',
    'RationalMatrix',
    'Gauss',
    'CofactorExpansion',
]
