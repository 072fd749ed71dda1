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

import sys

sys.path.append('..')

import numpy as np

import sfcrand
from utils import best_time, visualize

n_bulk = 10_000_000
n_scalar = 200_000


def numpy_twin(rng):
    """Build a numpy SFC64 bit generator holding the same state as ``rng``."""
    bitgen = np.random.SFC64()
    a, b, c, counter, _ = rng.state
    bitgen.state = {
        'bit_generator': 'SFC64',
        'state': {'state': np.array([a, b, c, counter], dtype=np.uint64)},
        'has_uint32': 0,
        'uinteger': 0,
    }
    return bitgen


def check_same_stream():
    rng = sfcrand.new(2024)
    bitgen = numpy_twin(rng)
    assert np.array_equal(rng.random_raw(1000), bitgen.random_raw(1000))
    print('sfcrand and numpy SFC64 produce identical raw streams')
    print()


def compare():
    rng = sfcrand.new(2024)
    bitgen = numpy_twin(rng)
    gen = np.random.Generator(bitgen)

    cases = {
        f'random_raw[{n_bulk}]': (
            lambda: rng.random_raw(n_bulk),
            lambda: bitgen.random_raw(n_bulk),
            n_bulk,
        ),
        f'random_floats[{n_bulk}]': (
            lambda: rng.random_floats(n_bulk),
            lambda: gen.random(n_bulk),
            n_bulk,
        ),
        'next_u64': (
            lambda: [rng.next_u64() for _ in range(n_scalar)],
            lambda: [bitgen.random_raw() for _ in range(n_scalar)],
            n_scalar,
        ),
        'next_f64': (
            lambda: [rng.next_f64() for _ in range(n_scalar)],
            lambda: [gen.random() for _ in range(n_scalar)],
            n_scalar,
        ),
        'next_normal': (
            lambda: [rng.next_normal() for _ in range(n_scalar)],
            lambda: [gen.standard_normal() for _ in range(n_scalar)],
            n_scalar,
        ),
        'sample_range(1, 6)': (
            lambda: [rng.sample_range(1, 6) for _ in range(n_scalar)],
            lambda: [gen.integers(1, 7) for _ in range(n_scalar)],
            n_scalar,
        ),
    }

    results = dict()
    for name, (ours, theirs, n) in cases.items():
        t_ours = best_time(ours)
        t_theirs = best_time(theirs)
        ratio = t_theirs / t_ours
        results[name] = ratio
        print(
            f'{name:<28} sfcrand {n / t_ours / 1e6:>8.2f} M/s, '
            f'numpy {n / t_theirs / 1e6:>8.2f} M/s, '
            f'ratio {ratio:.2f}'
        )
    return results


if __name__ == '__main__':
    check_same_stream()
    visualize(compare(), filename='sfc64-throughput.png')
