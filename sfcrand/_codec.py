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

"""Versioned serialization of SFC64 generator states.

Binary layout (little-endian, no padding)::

    offset  size  field
    0       2     version            <u2
    2       32    a, b, c, counter   4 x <u8
    34      8     cached normal      <f8   (version 2 only)

Version 1 payloads are 34 bytes and carry no cached normal. Version 2
payloads are 42 bytes; a NaN in the cached-normal field means "no cached
sample" (a cached sample is always finite).

The text form is ``"version,a,b,c,counter[,spare]"`` with decimal words and
the spare written with :meth:`float.hex` (or ``nan``).
"""

import math
from typing import NamedTuple, Optional, Union

import numpy as np

from ._error import InvalidStateError, UnsupportedVersionError

__all__ = [
    'SFC64State',
    'STATE_VERSION',
    'SUPPORTED_VERSIONS',
    'encode_state',
    'decode_state',
    'encode_state_text',
    'decode_state_text',
]

STATE_VERSION = 2
SUPPORTED_VERSIONS = (1, 2)

_MAX_WORD = (1 << 64) - 1

_VERSION_DTYPE = np.dtype('<u2')
_LAYOUTS = {
    1: np.dtype([('version', '<u2'), ('words', '<u8', (4,))]),
    2: np.dtype([('version', '<u2'), ('words', '<u8', (4,)), ('spare', '<f8')]),
}
_TEXT_FIELDS = {1: 5, 2: 6}

_NO_SPARE = np.array([0x7FF8000000000000], dtype=np.uint64).view(np.float64)[0]


class SFC64State(NamedTuple):
    """A snapshot of an SFC64 generator.

    Parameters
    ----------
    a, b, c : int
        Mixing words, each in ``[0, 2**64)``.
    counter : int
        Step counter in ``[0, 2**64)``; incremented by every advance.
    cached_normal : float or None
        The unconsumed second value of the last normal pair, if any.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> state = sfcrand.new(1, 2, 3).state
        >>> state.counter
        21
        >>> state.cached_normal is None
        True
    """
    a: int
    b: int
    c: int
    counter: int
    cached_normal: Optional[float] = None


def _unsupported(version: int) -> UnsupportedVersionError:
    return UnsupportedVersionError(
        version,
        f'unsupported state version {version} (supported: {SUPPORTED_VERSIONS})',
    )


def _restore_spare(spare: float) -> Optional[float]:
    if math.isnan(spare):
        return None
    if math.isinf(spare):
        raise InvalidStateError(f'cached normal must be finite, got {spare}')
    return spare


def encode_state(state: SFC64State) -> bytes:
    """Encode a state snapshot as a version 2 binary payload.

    Parameters
    ----------
    state : SFC64State
        The snapshot to encode.

    Returns
    -------
    bytes
        A 42-byte payload.

    See Also
    --------
    decode_state : The inverse operation.
    """
    record = np.zeros((), dtype=_LAYOUTS[STATE_VERSION])
    record['version'] = STATE_VERSION
    record['words'] = np.array([state.a, state.b, state.c, state.counter], dtype=np.uint64)
    record['spare'] = _NO_SPARE if state.cached_normal is None else state.cached_normal
    return record.tobytes()


def decode_state(payload: Union[bytes, bytearray, memoryview]) -> SFC64State:
    """Decode a binary payload produced by :func:`encode_state`.

    Both version 1 (no cached normal) and version 2 payloads are accepted.

    Parameters
    ----------
    payload : bytes-like
        The encoded state.

    Returns
    -------
    SFC64State

    Raises
    ------
    InvalidStateError
        If the payload is not bytes-like, is too short to hold a version
        tag, or its length disagrees with its version.
    UnsupportedVersionError
        If the version tag is not one of :data:`SUPPORTED_VERSIONS`.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> payload = sfcrand.new(1, 2, 3).to_bytes()
        >>> sfcrand.decode_state(payload).counter
        21
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InvalidStateError(
            f'state payload must be bytes-like, got {type(payload).__name__}'
        )
    payload = bytes(payload)
    if len(payload) < _VERSION_DTYPE.itemsize:
        raise InvalidStateError(
            f'state payload is {len(payload)} bytes, too short to hold a version tag'
        )

    version = int(np.frombuffer(payload, dtype=_VERSION_DTYPE, count=1)[0])
    layout = _LAYOUTS.get(version)
    if layout is None:
        raise _unsupported(version)
    if len(payload) != layout.itemsize:
        raise InvalidStateError(
            f'version {version} state must be {layout.itemsize} bytes, got {len(payload)}'
        )

    record = np.frombuffer(payload, dtype=layout)[0]
    a, b, c, counter = (int(w) for w in record['words'])
    cached_normal = None
    if version >= 2:
        cached_normal = _restore_spare(float(record['spare']))
    return SFC64State(a, b, c, counter, cached_normal)


def encode_state_text(state: SFC64State) -> str:
    """Encode a state snapshot as a printable version 2 string.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> sfcrand.encode_state_text(sfcrand.SFC64State(1, 2, 3, 4))
        '2,1,2,3,4,nan'
    """
    spare = 'nan' if state.cached_normal is None else float(state.cached_normal).hex()
    return f'{STATE_VERSION},{state.a},{state.b},{state.c},{state.counter},{spare}'


def _parse_word(field: str, name: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise InvalidStateError(f'state field {name!r} is not a decimal integer: {field!r}')
    value = int(field)
    if value > _MAX_WORD:
        raise InvalidStateError(f'state field {name!r} does not fit in 64 bits: {field}')
    return value


def decode_state_text(text: str) -> SFC64State:
    """Decode a string produced by :func:`encode_state_text`.

    Raises
    ------
    InvalidStateError
        On a wrong field count, a word that is not a 64-bit unsigned decimal,
        or an unparsable cached normal.
    UnsupportedVersionError
        If the version field is not one of :data:`SUPPORTED_VERSIONS`.
    """
    if not isinstance(text, str):
        raise InvalidStateError(f'state text must be str, got {type(text).__name__}')
    fields = [field.strip() for field in text.strip().split(',')]
    version = _parse_word(fields[0], 'version')
    if version not in _TEXT_FIELDS:
        raise _unsupported(version)
    if len(fields) != _TEXT_FIELDS[version]:
        raise InvalidStateError(
            f'version {version} state text must have {_TEXT_FIELDS[version]} fields, '
            f'got {len(fields)}'
        )

    a, b, c, counter = (
        _parse_word(field, name)
        for field, name in zip(fields[1:5], ('a', 'b', 'c', 'counter'))
    )
    cached_normal = None
    if version >= 2:
        try:
            spare = float.fromhex(fields[5]) if fields[5] != 'nan' else math.nan
        except ValueError as e:
            raise InvalidStateError(f'unparsable cached normal: {fields[5]!r}') from e
        cached_normal = _restore_spare(spare)
    return SFC64State(a, b, c, counter, cached_normal)
