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

__version__ = "0.1.0"

from ._codec import (
    SFC64State,
    STATE_VERSION,
    SUPPORTED_VERSIONS,
    decode_state,
    decode_state_text,
    encode_state,
    encode_state_text,
)
from ._config import (
    get_random_convention,
    get_range_method,
    random_environ_context,
    set_random_environ,
)
from ._default import (
    get_default_generator,
    next_f64,
    next_normal,
    next_u64,
    random,
    randomseed,
)
from ._error import (
    ArgumentConversionError,
    EmptyIntervalError,
    InvalidSeedError,
    InvalidStateError,
    SFCRandError,
    UnsupportedVersionError,
)
from ._generator import DEFAULT_SEEDS, SFC64, from_bytes, new

__all__ = [

    # --- generator --- #
    'SFC64',
    'new',
    'from_bytes',
    'DEFAULT_SEEDS',

    # --- state serialization --- #
    'SFC64State',
    'STATE_VERSION',
    'SUPPORTED_VERSIONS',
    'encode_state',
    'decode_state',
    'encode_state_text',
    'decode_state_text',

    # --- shared default generator --- #
    'get_default_generator',
    'randomseed',
    'random',
    'next_f64',
    'next_u64',
    'next_normal',

    # --- configuration --- #
    'set_random_environ',
    'random_environ_context',
    'get_random_convention',
    'get_range_method',

    # --- errors --- #
    'SFCRandError',
    'InvalidSeedError',
    'EmptyIntervalError',
    'ArgumentConversionError',
    'InvalidStateError',
    'UnsupportedVersionError',

]
