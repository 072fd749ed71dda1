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

"""Thread-local sampling configuration.

Two choices are configurable:

* the *calling convention* of :meth:`SFC64.random`, which decides what
  ``random(0)`` means and how large the arguments may be;
* the *range method* used by :meth:`SFC64.sample_range` to draw unbiased
  bounded integers.

Both can also be overridden per call.
"""

import threading
from contextlib import contextmanager
from typing import Optional

__all__ = [
    'RANDOM_CONVENTIONS',
    'RANGE_METHODS',
    'random_environ',
    'set_random_environ',
    'random_environ_context',
    'get_random_convention',
    'get_range_method',
]

RANDOM_CONVENTIONS = ('bits', 'exact')
RANGE_METHODS = ('mask', 'modulo')


class RandomEnvironment(threading.local):
    def __init__(self, *args, **kwargs):
        # default environment settings
        super().__init__(*args, **kwargs)
        self.convention: str = 'bits'
        self.range_method: str = 'mask'


random_environ = RandomEnvironment()


def check_convention(convention: str) -> str:
    if convention not in RANDOM_CONVENTIONS:
        raise ValueError(
            f'Unknown calling convention {convention!r}. '
            f'Expected one of {RANDOM_CONVENTIONS}.'
        )
    return convention


def check_range_method(method: str) -> str:
    if method not in RANGE_METHODS:
        raise ValueError(
            f'Unknown range method {method!r}. '
            f'Expected one of {RANGE_METHODS}.'
        )
    return method


def set_random_environ(
    convention: Optional[str] = None,
    range_method: Optional[str] = None,
):
    """Set the sampling configuration for the current thread.

    Parameters
    ----------
    convention : str, optional
        ``'bits'`` makes ``random(0)`` return a raw signed 64-bit integer and
        accepts any 64-bit bound. ``'exact'`` rejects ``random(0)`` as the
        empty interval ``[1, 0]`` and limits every argument to
        ``|x| <= 2**53``. Left unchanged when ``None``.
    range_method : str, optional
        ``'mask'`` (masked rejection) or ``'modulo'`` (modulo rejection).
        Left unchanged when ``None``.

    Raises
    ------
    ValueError
        If either name is unknown. Nothing is changed in that case.

    See Also
    --------
    random_environ_context : Temporarily change the configuration.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> sfcrand.set_random_environ(convention='exact')
        >>> sfcrand.get_random_convention()
        'exact'
        >>> sfcrand.set_random_environ(convention='bits')
    """
    if convention is not None:
        check_convention(convention)
    if range_method is not None:
        check_range_method(range_method)
    if convention is not None:
        random_environ.convention = convention
    if range_method is not None:
        random_environ.range_method = range_method


@contextmanager
def random_environ_context(
    convention: Optional[str] = None,
    range_method: Optional[str] = None,
):
    """
    Temporarily change the sampling configuration of the current thread.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> rng = sfcrand.new(1, 2, 3)
        >>> with sfcrand.random_environ_context(range_method='modulo'):
        ...     rng.sample_range(1, 6)
        4
    """
    old_convention = random_environ.convention
    old_range_method = random_environ.range_method

    try:
        set_random_environ(convention, range_method)
        yield
    finally:
        random_environ.convention = old_convention
        random_environ.range_method = old_range_method


def get_random_convention() -> str:
    """Return the calling convention used by :meth:`SFC64.random` in this thread."""
    return random_environ.convention


def get_range_method() -> str:
    """Return the range method used by :meth:`SFC64.sample_range` in this thread."""
    return random_environ.range_method
