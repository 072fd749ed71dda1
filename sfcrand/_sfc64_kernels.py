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

"""
Numba-compiled SFC64 kernels.

SFC64 ("Small Fast Chaotic", Chris Doty-Humphrey) keeps three 64-bit
mixing words and a 64-bit counter. State is represented as
``np.array([a, b, c, counter], dtype=np.uint64)`` and mutated in-place.

Every kernel works purely in ``uint64``: constants are ``np.uint64``
scalars so numba never promotes a mixed signed/unsigned expression to
``float64``. Wrap-around modulo ``2**64`` is the intended arithmetic.

Argument validation lives in :mod:`sfcrand._generator`; the kernels assume
their inputs are already in range.
"""

import math

import numba
import numpy as np

__all__ = [
    'WARMUP_ROUNDS',
    'sfc64_next_key',
    'sfc64_seed',
    'sfc64_randint',
    'sfc64_rand',
    'sfc64_masked_draw',
    'sfc64_modulo_draw',
    'sfc64_polar_pair',
    'sfc64_fill_raw',
    'sfc64_fill_rand',
]

# Canonical mixing depth per Doty-Humphrey.
WARMUP_ROUNDS = 20

_ONE = np.uint64(1)
_SHIFT_A = np.uint64(11)
_SHIFT_B = np.uint64(3)
_ROTATE = np.uint64(24)
_ROTATE_BACK = np.uint64(40)
_MANTISSA_SHIFT = np.uint64(11)

_UNIT_53 = 2.0 ** -53
_UNIT_52 = 2.0 ** -52


# ──────────────────────────────────────────────────────────────────────
#  State transition
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def sfc64_next_key(state):
    """Advance the SFC64 state in-place by one step and return the output word.

    Parameters
    ----------
    state : np.ndarray
        A ``(4,)`` ``uint64`` array ``[a, b, c, counter]``.

    Returns
    -------
    result : np.uint64
        ``a + b + counter`` computed from the state before the step.
    """
    a = state[0]
    b = state[1]
    c = state[2]
    counter = state[3]

    result = a + b + counter
    state[0] = b ^ (b >> _SHIFT_A)
    state[1] = c + (c << _SHIFT_B)
    state[2] = result + ((c << _ROTATE) | (c >> _ROTATE_BACK))
    state[3] = counter + _ONE
    return result


@numba.njit
def sfc64_seed(s1, s2, s3):
    """Create a warmed-up SFC64 state array from three ``uint64`` seeds.

    Seeds are stored in reverse order (``a = s3``, ``b = s2``, ``c = s1``)
    with the counter at 1, then :data:`WARMUP_ROUNDS` outputs are discarded.

    Parameters
    ----------
    s1, s2, s3 : np.uint64
        Seed words, already reduced modulo ``2**64``.

    Returns
    -------
    state : np.ndarray
        A ``(4,)`` ``uint64`` array ``[a, b, c, counter]``.
    """
    state = np.empty(4, dtype=np.uint64)
    state[0] = s3
    state[1] = s2
    state[2] = s1
    state[3] = _ONE
    for _ in range(WARMUP_ROUNDS):
        sfc64_next_key(state)
    return state


# ──────────────────────────────────────────────────────────────────────
#  Scalar sampling
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def sfc64_randint(state):
    """Generate a raw ``uint64`` value and advance the SFC64 state."""
    return sfc64_next_key(state)


@numba.njit(inline='always')
def sfc64_rand(state):
    """Generate a uniform random float in [0, 1) from the top 53 bits of one output."""
    return np.float64(sfc64_next_key(state) >> _MANTISSA_SHIFT) * _UNIT_53


@numba.njit
def sfc64_masked_draw(state, bound, mask):
    """Draw an unbiased integer in ``[0, bound]`` by masked rejection.

    Parameters
    ----------
    state : np.ndarray
        SFC64 state array.
    bound : np.uint64
        Inclusive upper bound, at least 1.
    mask : np.uint64
        Smallest ``2**k - 1`` that is ``>= bound``.

    Returns
    -------
    val : np.uint64
    """
    candidate = sfc64_next_key(state) & mask
    while candidate > bound:
        candidate = sfc64_next_key(state) & mask
    return candidate


@numba.njit
def sfc64_modulo_draw(state, span, threshold):
    """Draw an unbiased integer in ``[0, span)`` by modulo rejection.

    A raw output is accepted when the block of ``span`` values it falls in
    lies completely below ``2**64``, i.e. ``candidate - candidate % span``
    does not exceed ``threshold = 2**64 - span``.

    Parameters
    ----------
    state : np.ndarray
        SFC64 state array.
    span : np.uint64
        Number of admissible values, in ``[2, 2**64 - 1]``.
    threshold : np.uint64
        ``2**64 - span``.

    Returns
    -------
    val : np.uint64
    """
    candidate = sfc64_next_key(state)
    adjusted = candidate % span
    while candidate - adjusted > threshold:
        candidate = sfc64_next_key(state)
        adjusted = candidate % span
    return adjusted


@numba.njit
def sfc64_polar_pair(state):
    """Generate two independent standard-normal values (Marsaglia polar method).

    ``u`` and ``v`` are drawn in that order, each uniform on ``[-1, 1)``
    using 53 bits of one output scaled by ``2**-52``. Pairs are redrawn
    until ``0 < u*u + v*v < 1``.

    Returns
    -------
    first, second : float64
        ``u * m`` and ``v * m`` with ``m = sqrt(-2 ln(s) / s)``.
    """
    u = 0.0
    v = 0.0
    s = 0.0
    while s >= 1.0 or s == 0.0:
        u = np.float64(sfc64_next_key(state) >> _MANTISSA_SHIFT) * _UNIT_52 - 1.0
        v = np.float64(sfc64_next_key(state) >> _MANTISSA_SHIFT) * _UNIT_52 - 1.0
        s = u * u + v * v
    m = math.sqrt(-2.0 * math.log(s) / s)
    return u * m, v * m


# ──────────────────────────────────────────────────────────────────────
#  Bulk sampling
# ──────────────────────────────────────────────────────────────────────

@numba.njit
def sfc64_fill_raw(state, out):
    """Fill a 1-D ``uint64`` array with consecutive raw outputs."""
    for i in range(out.shape[0]):
        out[i] = sfc64_next_key(state)


@numba.njit
def sfc64_fill_rand(state, out):
    """Fill a 1-D ``float64`` array with consecutive uniform [0, 1) values."""
    for i in range(out.shape[0]):
        out[i] = np.float64(sfc64_next_key(state) >> _MANTISSA_SHIFT) * _UNIT_53
