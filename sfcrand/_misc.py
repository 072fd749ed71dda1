# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
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
# ==============================================================================

# -*- coding: utf-8 -*-

import math
import numbers
from typing import Optional

import numpy as np

from ._error import ArgumentConversionError, InvalidSeedError

__all__ = [
    'MASK64',
    'INT64_MIN',
    'INT64_MAX',
    'LARGEST_EXACT_INTEGER',
    'to_integer',
    'as_seed',
    'as_bound',
    'to_signed64',
    'leading_zeros64',
]

MASK64 = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
LARGEST_EXACT_INTEGER = 1 << 53


def to_integer(value) -> Optional[int]:
    """Convert ``value`` to a Python int if it is exactly an integer.

    Accepts ints, numpy integers and integral finite floats (``3.0``).
    Returns ``None`` for anything else, including bools, NaN, infinities,
    fractional floats and strings.

    Examples
    --------
    .. code-block:: python

        >>> from sfcrand._misc import to_integer
        >>> to_integer(3.0), to_integer(-4), to_integer(2.5)
        (3, -4, None)
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        if math.isfinite(value) and value.is_integer():
            return int(value)
    return None


def as_seed(value, position: int) -> int:
    """Validate one seed and reduce it modulo ``2**64``."""
    seed = to_integer(value)
    if seed is None:
        raise InvalidSeedError(position, f'could not convert seed {position} to integer: {value!r}')
    if seed < INT64_MIN or seed > MASK64:
        raise InvalidSeedError(
            position,
            f'seed {position} does not fit in a 64-bit signed or unsigned integer: {seed}',
        )
    return seed & MASK64


def as_bound(value, argument: str, limit: Optional[int] = None) -> int:
    """Validate one range bound.

    Parameters
    ----------
    value : object
        The bound to convert.
    argument : str
        Argument name reported in the error.
    limit : int, optional
        Largest magnitude allowed. When ``None`` the bound must lie in
        ``[-2**63, 2**64 - 1]``.
    """
    bound = to_integer(value)
    if bound is None:
        raise ArgumentConversionError(argument, f'{argument} must be an integer, got {value!r}')
    if limit is not None:
        if abs(bound) > limit:
            raise ArgumentConversionError(
                argument,
                f'{argument} cannot be represented as an exact integer: {bound}',
            )
    elif bound < INT64_MIN or bound > MASK64:
        raise ArgumentConversionError(
            argument,
            f'{argument} does not fit in a 64-bit integer: {bound}',
        )
    return bound


def to_signed64(value: int) -> int:
    """Reinterpret an unsigned 64-bit word as a two's complement signed integer."""
    return value - (1 << 64) if value > INT64_MAX else value


def leading_zeros64(value: int) -> int:
    """Count leading zero bits of a 64-bit unsigned word."""
    return 64 - value.bit_length()
