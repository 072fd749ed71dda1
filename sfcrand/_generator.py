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

"""The :class:`SFC64` generator handle.

:class:`SFC64` owns a ``(4,)`` ``uint64`` state array and an optional cached
normal sample. All validation happens here, before any kernel from
:mod:`sfcrand._sfc64_kernels` touches the state, so a rejected call leaves
the generator exactly as it was.
"""

import math
from typing import Optional, Tuple, Union

import numpy as np

from ._codec import (
    SFC64State,
    decode_state,
    decode_state_text,
    encode_state,
    encode_state_text,
)
from ._config import (
    check_convention,
    check_range_method,
    get_random_convention,
    get_range_method,
)
from ._error import ArgumentConversionError, EmptyIntervalError, InvalidStateError
from ._misc import (
    INT64_MAX,
    INT64_MIN,
    LARGEST_EXACT_INTEGER,
    MASK64,
    as_bound,
    as_seed,
    leading_zeros64,
    to_integer,
    to_signed64,
)
from ._sfc64_kernels import (
    sfc64_fill_rand,
    sfc64_fill_raw,
    sfc64_masked_draw,
    sfc64_modulo_draw,
    sfc64_polar_pair,
    sfc64_rand,
    sfc64_randint,
    sfc64_seed,
)

__all__ = [
    'DEFAULT_SEEDS',
    'SFC64',
    'new',
    'from_bytes',
]

DEFAULT_SEEDS = (1, 11001100, 606084)

Size = Union[int, Tuple[int, ...]]


def _same_spare(x: Optional[float], y: Optional[float]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    return np.float64(x).tobytes() == np.float64(y).tobytes()


def _as_shape(size: Size) -> Tuple[int, ...]:
    shape = (size,) if to_integer(size) is not None else tuple(size)
    checked = []
    for dim in shape:
        value = to_integer(dim)
        if value is None or value < 0:
            raise ValueError(f'size must contain non-negative integers, got {size!r}')
        checked.append(value)
    return tuple(checked)


def _restore(payload: bytes) -> 'SFC64':
    return SFC64.from_bytes(payload)


class SFC64:
    """SFC64 pseudorandom number generator.

    A small, fast, chaotic generator by Chris Doty-Humphrey with a 256-bit
    state made of three mixing words and a counter. It passes the large
    empirical test batteries but is **not** cryptographically secure.

    Parameters
    ----------
    *seeds : int, optional
        Up to three seeds. Omitted (or ``None``) positions take the defaults
        ``1``, ``11001100`` and ``606084``. Each seed must be an integer (or
        an integral float) in ``[-2**63, 2**64 - 1]``.

    Raises
    ------
    InvalidSeedError
        If a seed cannot be represented as a 64-bit integer.
    TypeError
        If more than three seeds are given.

    Notes
    -----
    An instance is owned by one caller at a time; concurrent mutation from
    several threads needs external locking. Use
    :func:`sfcrand.get_default_generator` for a lock-guarded shared
    instance.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> rng = sfcrand.SFC64(1, 2, 3)
        >>> rng.next_u64()
        11970405647273624157
        >>> rng.sample_range(1, 6) in range(1, 7)
        True
    """

    def __init__(self, *seeds):
        self._spare: Optional[float] = None
        self.seed(*seeds)

    # ------------------------------------------------------------------
    #  Seeding and state
    # ------------------------------------------------------------------

    def seed(self, *seeds):
        """Reseed the generator in place.

        Seeds are validated first; on error the generator is unchanged.
        A cached normal sample is discarded.

        Parameters
        ----------
        *seeds : int, optional
            Up to three seeds, with the same defaults as the constructor.
        """
        if len(seeds) > 3:
            raise TypeError(f'seed() takes at most 3 seeds ({len(seeds)} given)')
        words = [
            as_seed(seeds[i], i + 1) if i < len(seeds) and seeds[i] is not None else DEFAULT_SEEDS[i]
            for i in range(3)
        ]
        self._words = sfc64_seed(np.uint64(words[0]), np.uint64(words[1]), np.uint64(words[2]))
        self._spare = None

    @property
    def state(self) -> SFC64State:
        """A snapshot of the generator as an :class:`SFC64State`.

        Assigning an :class:`SFC64State` restores that snapshot.
        """
        a, b, c, counter = (int(w) for w in self._words)
        return SFC64State(a, b, c, counter, self._spare)

    @state.setter
    def state(self, value: SFC64State):
        if not isinstance(value, SFC64State):
            raise InvalidStateError(f'expected an SFC64State, got {type(value).__name__}')
        words = []
        for name in ('a', 'b', 'c', 'counter'):
            word = to_integer(getattr(value, name))
            if word is None or word < 0 or word > MASK64:
                raise InvalidStateError(f'state word {name!r} is not a 64-bit unsigned integer')
            words.append(word)
        spare = value.cached_normal
        if spare is not None:
            if isinstance(spare, bool) or not isinstance(spare, (int, float, np.floating)) \
                    or not math.isfinite(spare):
                raise InvalidStateError(f'cached normal must be a finite float, got {spare!r}')
            spare = float(spare)
        self._words = np.array(words, dtype=np.uint64)
        self._spare = spare

    @classmethod
    def from_state(cls, state: SFC64State) -> 'SFC64':
        """Build an independent generator from a snapshot."""
        rng = cls.__new__(cls)
        rng.state = state
        return rng

    @classmethod
    def from_bytes(cls, payload: bytes) -> 'SFC64':
        """Build a generator from a payload produced by :meth:`to_bytes`.

        Raises
        ------
        InvalidStateError
            If the payload length disagrees with its version.
        UnsupportedVersionError
            If the version tag is unknown.
        """
        return cls.from_state(decode_state(payload))

    def to_bytes(self) -> bytes:
        """Serialize the full state, cached normal included, to 42 bytes."""
        return encode_state(self.state)

    @classmethod
    def from_text(cls, text: str) -> 'SFC64':
        """Build a generator from a string produced by :meth:`to_text`."""
        return cls.from_state(decode_state_text(text))

    def to_text(self) -> str:
        """Serialize the full state as ``"2,a,b,c,counter,spare"``."""
        return encode_state_text(self.state)

    def copy(self) -> 'SFC64':
        """Return an independent generator with the same future sequence."""
        return SFC64.from_state(self.state)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __reduce__(self):
        return _restore, (self.to_bytes(),)

    def equals(self, other: 'SFC64') -> bool:
        """Return whether ``other`` will produce exactly the same future outputs.

        All four words must match, and either both generators have no cached
        normal sample or both hold bit-identical ones.
        """
        if not isinstance(other, SFC64):
            return False
        return (
            bool(np.array_equal(self._words, other._words))
            and _same_spare(self._spare, other._spare)
        )

    def __eq__(self, other):
        if not isinstance(other, SFC64):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        a, b, c, counter, spare = self.state
        return f'SFC64(a={a}, b={b}, c={c}, counter={counter}, cached_normal={spare!r})'

    # ------------------------------------------------------------------
    #  Sampling
    # ------------------------------------------------------------------

    def advance(self) -> int:
        """Step the generator once and return the 64-bit output."""
        return int(sfc64_randint(self._words))

    def next_u64(self) -> int:
        """Return a uniformly distributed integer in ``[0, 2**64)``."""
        return int(sfc64_randint(self._words))

    def next_f64(self) -> float:
        """Return a uniformly distributed float in ``[0, 1)`` with 53 random bits."""
        return float(sfc64_rand(self._words))

    def next_normal(self) -> float:
        """Return a standard-normal sample.

        Samples are generated in pairs with the Marsaglia polar method. The
        second value of each pair is cached and returned by the next call
        without stepping the generator.
        """
        spare = self._spare
        if spare is not None:
            self._spare = None
            return spare
        first, second = sfc64_polar_pair(self._words)
        self._spare = float(second)
        return float(first)

    def sample_range(self, low, high, method: Optional[str] = None) -> int:
        """Return an unbiased integer in the closed interval ``[low, high]``.

        Parameters
        ----------
        low, high : int
            Inclusive bounds in ``[-2**63, 2**64 - 1]`` whose difference fits
            in an unsigned 64-bit word. Integral floats are accepted.
        method : str, optional
            ``'mask'`` (masked rejection) or ``'modulo'`` (modulo rejection).
            Defaults to the configured range method.

        Returns
        -------
        int

        Raises
        ------
        EmptyIntervalError
            If ``low > high``.
        ArgumentConversionError
            If a bound is not an integer or is out of range.

        Notes
        -----
        ``sample_range(k, k)`` returns ``k`` without stepping the generator,
        and the full signed range ``[-2**63, 2**63 - 1]`` costs exactly one
        step. Other ranges use rejection sampling with fewer than two expected
        steps and no iteration cap.

        Examples
        --------
        .. code-block:: python

            >>> import sfcrand
            >>> rng = sfcrand.new(1, 2, 3)
            >>> [rng.sample_range(1, 6) for _ in range(5)]
            [6, 5, 5, 5, 3]
        """
        method = get_range_method() if method is None else check_range_method(method)
        low = as_bound(low, 'low')
        high = as_bound(high, 'high')
        return self._sample_bounds(low, high, method, 'high')

    def _sample_bounds(self, low: int, high: int, method: str, high_name: str) -> int:
        if low > high:
            raise EmptyIntervalError(f'interval is empty: [{low}, {high}]')
        if low == high:
            return low
        if low == INT64_MIN and high == INT64_MAX:
            return to_signed64(self.next_u64())

        bound = high - low
        if bound > MASK64:
            raise ArgumentConversionError(
                high_name,
                f'the interval [{low}, {high}] is wider than 2**64 values',
            )
        if bound == MASK64:
            return low + self.next_u64()

        if method == 'mask':
            mask = MASK64 >> leading_zeros64(bound)
            offset = sfc64_masked_draw(self._words, np.uint64(bound), np.uint64(mask))
        else:
            span = bound + 1
            offset = sfc64_modulo_draw(self._words, np.uint64(span), np.uint64((1 << 64) - span))
        return low + int(offset)

    def random(self, *args, convention: Optional[str] = None):
        """A ``math.random``-style front end.

        * ``random()`` returns a float in ``[0, 1)``.
        * ``random(n)`` returns an integer in ``[1, n]``.
        * ``random(n, m)`` returns an integer in ``[n, m]``.

        Parameters
        ----------
        *args : int
            Zero, one or two bounds.
        convention : str, optional
            ``'bits'``: ``random(0)`` returns a raw signed 64-bit integer and
            bounds may use the whole 64-bit domain. ``'exact'``: ``random(0)``
            is the empty interval ``[1, 0]`` and bounds are limited to
            ``|x| <= 2**53``. Defaults to the configured convention.

        Raises
        ------
        EmptyIntervalError
            If the interval is empty.
        ArgumentConversionError
            If a bound is not an integer or exceeds the convention's limit.
        TypeError
            If more than two bounds are given.
        """
        convention = get_random_convention() if convention is None else check_convention(convention)
        if len(args) > 2:
            raise TypeError(f'random() takes at most 2 bounds ({len(args)} given)')
        if not args:
            return self.next_f64()

        limit = LARGEST_EXACT_INTEGER if convention == 'exact' else None
        if len(args) == 1:
            n = as_bound(args[0], 'n', limit)
            if n == 0 and convention == 'bits':
                return to_signed64(self.next_u64())
            return self._sample_bounds(1, n, get_range_method(), 'n')

        low = as_bound(args[0], 'n', limit)
        high = as_bound(args[1], 'm', limit)
        return self._sample_bounds(low, high, get_range_method(), 'm')

    # ------------------------------------------------------------------
    #  Bulk sampling
    # ------------------------------------------------------------------

    def random_raw(self, size: Size) -> np.ndarray:
        """Return a ``uint64`` array of raw outputs with shape ``size``.

        Equivalent to calling :meth:`next_u64` once per element, in C order.
        """
        shape = _as_shape(size)
        out = np.empty(math.prod(shape), dtype=np.uint64)
        sfc64_fill_raw(self._words, out)
        return out.reshape(shape)

    def random_floats(self, size: Size) -> np.ndarray:
        """Return a ``float64`` array of uniform [0, 1) values with shape ``size``.

        Equivalent to calling :meth:`next_f64` once per element, in C order.
        """
        shape = _as_shape(size)
        out = np.empty(math.prod(shape), dtype=np.float64)
        sfc64_fill_rand(self._words, out)
        return out.reshape(shape)


def new(*seeds) -> SFC64:
    """Create a seeded :class:`SFC64` generator.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> sfcrand.new(1, 2, 3).next_u64()
        11970405647273624157
    """
    return SFC64(*seeds)


def from_bytes(payload: bytes) -> SFC64:
    """Restore a generator from a payload produced by :meth:`SFC64.to_bytes`."""
    return SFC64.from_bytes(payload)
