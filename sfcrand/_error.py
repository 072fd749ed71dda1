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


__all__ = [
    'SFCRandError',
    'InvalidSeedError',
    'EmptyIntervalError',
    'ArgumentConversionError',
    'InvalidStateError',
    'UnsupportedVersionError',
]


class SFCRandError(Exception):
    """Base exception for all errors raised by sfcrand.

    Every error is raised synchronously at the invalid call, before the
    generator state is touched, so a caller can fix the input and retry
    against the same generator.

    See Also
    --------
    InvalidSeedError : A seed cannot be represented as a 64-bit integer.
    EmptyIntervalError : A sampling interval has ``min > max``.
    ArgumentConversionError : A range argument cannot be converted.
    InvalidStateError : A serialized state is malformed.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> try:
        ...     sfcrand.new().sample_range(5, 3)
        ... except sfcrand.SFCRandError as e:
        ...     print(type(e).__name__)
        EmptyIntervalError
    """
    __module__ = 'sfcrand'


class InvalidSeedError(SFCRandError, ValueError):
    """Raised when a seed is not exactly representable as a 64-bit integer.

    Seeds may be any integer in ``[-2**63, 2**64 - 1]`` (negative values are
    stored modulo ``2**64``) or an integral, finite float in that range.

    Parameters
    ----------
    position : int
        One-based position of the offending seed (1, 2 or 3).
    message : str
        A human-readable description of the failure.

    Examples
    --------
    .. code-block:: python

        >>> import sfcrand
        >>> sfcrand.new(1, 2.5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        sfcrand.InvalidSeedError: could not convert seed 2 to integer: 2.5
    """
    __module__ = 'sfcrand'

    def __init__(self, position: int, message: str):
        super().__init__(message)
        self.position = position


class EmptyIntervalError(SFCRandError, ValueError):
    """Raised when an integer range is requested with ``min > max``."""
    __module__ = 'sfcrand'


class ArgumentConversionError(SFCRandError, ValueError):
    """Raised when a range argument cannot be used as a 64-bit integer bound.

    This covers non-integer values, values outside the magnitude allowed by
    the active calling convention, and bounds whose difference does not fit
    in an unsigned 64-bit word.

    Parameters
    ----------
    argument : str
        Name of the offending argument (``'min'``, ``'max'``, ``'n'`` or
        ``'m'``).
    message : str
        A human-readable description of the failure.
    """
    __module__ = 'sfcrand'

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class InvalidStateError(SFCRandError, ValueError):
    """Raised when a serialized generator state is malformed.

    No best-effort recovery is attempted: a payload of the wrong length for
    its declared version, or a text state with missing or unparsable fields,
    is rejected as a whole.

    See Also
    --------
    UnsupportedVersionError : Raised for a well-formed tag naming an unknown
        version.
    """
    __module__ = 'sfcrand'


class UnsupportedVersionError(InvalidStateError):
    """Raised when a serialized state declares a version this library cannot read.

    Parameters
    ----------
    version : int
        The version tag found in the payload.
    message : str
        A human-readable description listing the supported versions.
    """
    __module__ = 'sfcrand'

    def __init__(self, version: int, message: str):
        super().__init__(message)
        self.version = version
