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

"""Process-wide default generator.

The default :class:`SFC64` is created on first use and seeded from the
operating system's entropy source. Every access goes through a single lock,
so the module-level helpers may be called from several threads. Code that
needs reproducible streams should own an :class:`SFC64` instead.
"""

import os
import threading
import time
import warnings
from typing import Optional, Tuple

import numpy as np

from ._generator import SFC64

__all__ = [
    'get_default_generator',
    'randomseed',
    'random',
    'next_f64',
    'next_u64',
    'next_normal',
]

_default_lock = threading.Lock()
_default_generator: Optional[SFC64] = None


def _entropy_seeds() -> Tuple[int, int, int]:
    """Read three 64-bit seeds from the OS, falling back to the clock."""
    try:
        data = os.urandom(24)
    except NotImplementedError as e:
        warnings.warn(
            f"sfcrand: No OS entropy source available ({e}). "
            f"Seeding the default generator from the clock.",
            RuntimeWarning,
            stacklevel=4,
        )
        return time.time_ns(), time.perf_counter_ns(), os.getpid()
    s1, s2, s3 = np.frombuffer(data, dtype='<u8').tolist()
    return s1, s2, s3


def _get_locked() -> SFC64:
    global _default_generator
    if _default_generator is None:
        _default_generator = SFC64(*_entropy_seeds())
    return _default_generator


def get_default_generator() -> SFC64:
    """Return the shared default generator, creating it on first use.

    The returned object is the shared instance itself. Use the module-level
    helpers (:func:`random`, :func:`next_f64`, ...) when several threads
    draw from it; direct method calls on the returned object are not
    guarded by the lock.

    Returns
    -------
    SFC64

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> sfcrand.get_default_generator() is sfcrand.get_default_generator()
        True
    """
    with _default_lock:
        return _get_locked()


def randomseed(*seeds):
    """Reseed the shared default generator (see :meth:`SFC64.seed`)."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = SFC64(*seeds)
        else:
            _default_generator.seed(*seeds)


def random(*args, convention: Optional[str] = None):
    """Call :meth:`SFC64.random` on the shared default generator."""
    with _default_lock:
        return _get_locked().random(*args, convention=convention)


def next_f64() -> float:
    """Draw a float in ``[0, 1)`` from the shared default generator."""
    with _default_lock:
        return _get_locked().next_f64()


def next_u64() -> int:
    """Draw a 64-bit unsigned integer from the shared default generator."""
    with _default_lock:
        return _get_locked().next_u64()


def next_normal() -> float:
    """Draw a standard-normal sample from the shared default generator."""
    with _default_lock:
        return _get_locked().next_normal()
