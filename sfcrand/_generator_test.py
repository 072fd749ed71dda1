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

import copy
import pickle

import numpy as np
import pytest

import sfcrand
from sfcrand import (
    ArgumentConversionError,
    EmptyIntervalError,
    InvalidSeedError,
    InvalidStateError,
    SFC64,
    SFC64State,
)

MASK64 = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

GOLDEN_U64 = [
    11970405647273624157,
    11906085666466067372,
    4965358953841860836,
    3955339245265819463,
    16671355307904168542,
]

METHODS = ['mask', 'modulo']


def chi_square(counts):
    counts = np.asarray(counts, dtype=np.float64)
    expected = counts.sum() / counts.size
    return float(((counts - expected) ** 2 / expected).sum())


class TestSeeding:
    def test_golden_state(self):
        state = SFC64(1, 2, 3).state
        assert state == SFC64State(
            10755630513867340343,
            1214775133406283793,
            3237627418263407006,
            21,
            None,
        )

    def test_default_seeds(self):
        rng = SFC64()
        assert rng.state[:4] == (
            14986766406487059422,
            10846580422238386573,
            1034937144709968143,
            21,
        )
        assert rng.next_u64() == 7386602755015894400

    def test_missing_seeds_take_defaults(self):
        assert SFC64(1) == SFC64(1, 11001100, 606084)
        assert SFC64(None, None, None) == SFC64()
        assert SFC64(5, None, 7) == SFC64(5, 11001100, 7)

    def test_negative_seed_wraps(self):
        assert SFC64(-1) == SFC64(MASK64)
        assert SFC64(-1).next_u64() == 15098739499031115700

    def test_integral_float_and_numpy_seeds(self):
        assert SFC64(3.0) == SFC64(3)
        assert SFC64(np.int32(3), np.uint64(2)) == SFC64(3, 2)

    def test_zero_seeds(self):
        assert SFC64(0, 0, 0).next_u64() == 16772721532102950986

    @pytest.mark.parametrize('seeds, position', [
        ((1 << 64,), 1),
        ((1, INT64_MIN - 1), 2),
        ((1, 2, 2.5), 3),
        (('7',), 1),
        ((float('nan'),), 1),
        ((True,), 1),
    ])
    def test_invalid_seed(self, seeds, position):
        with pytest.raises(InvalidSeedError) as exc_info:
            SFC64(*seeds)
        assert exc_info.value.position == position

    def test_invalid_seed_is_value_error(self):
        with pytest.raises(ValueError):
            SFC64(1.5)

    def test_too_many_seeds(self):
        with pytest.raises(TypeError):
            SFC64(1, 2, 3, 4)

    def test_reseed_in_place(self):
        rng = SFC64(9)
        rng.next_u64()
        rng.seed(1, 2, 3)
        assert rng == SFC64(1, 2, 3)

    def test_reseed_clears_cached_normal(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        assert rng.state.cached_normal is not None
        rng.seed(1, 2, 3)
        assert rng.state.cached_normal is None

    def test_failed_reseed_leaves_state(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        before = rng.copy()
        with pytest.raises(InvalidSeedError):
            rng.seed(1, 1 << 64)
        assert rng == before

    def test_module_constructor(self):
        assert sfcrand.new(1, 2, 3) == SFC64(1, 2, 3)


class TestScalarSampling:
    def test_golden_u64(self):
        rng = SFC64(1, 2, 3)
        assert [rng.next_u64() for _ in range(5)] == GOLDEN_U64

    def test_advance_matches_next_u64(self):
        rng = SFC64(1, 2, 3)
        assert rng.advance() == GOLDEN_U64[0]
        assert rng.state.counter == 22

    def test_deterministic(self):
        r1 = SFC64(2024, 5)
        r2 = SFC64(2024, 5)
        assert [r1.next_u64() for _ in range(50)] == [r2.next_u64() for _ in range(50)]

    def test_golden_f64(self):
        rng = SFC64(1, 2, 3)
        assert [rng.next_f64() for _ in range(3)] == [
            0.64891699041534068,
            0.64543019726905171,
            0.26917264824628484,
        ]

    def test_f64_is_top_53_bits(self):
        rng = SFC64(1, 2, 3)
        assert rng.next_f64() == (GOLDEN_U64[0] >> 11) * 2.0 ** -53

    def test_f64_moments(self):
        rng = SFC64(42)
        samples = np.array([rng.next_f64() for _ in range(10000)])
        assert samples.min() >= 0.0
        assert samples.max() < 1.0
        assert abs(samples.mean() - 0.5) < 0.01
        assert abs(samples.std() - 0.2887) < 0.01

    def test_f64_buckets(self):
        rng = SFC64(42)
        counts = np.bincount(
            (rng.random_floats(50000) * 10).astype(np.int64), minlength=10
        )
        # 99.9% point of chi-square with 9 degrees of freedom
        assert chi_square(counts) < 27.88


class TestNormal:
    def test_golden_sequence(self):
        rng = SFC64(1, 2, 3)
        values = [rng.next_normal() for _ in range(4)]
        assert values == pytest.approx([
            1.3394856464048417,
            1.3081224731469721,
            -0.69851647329716138,
            -0.86420769853312307,
        ], rel=1e-12)

    def test_pairs_share_two_steps(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        assert rng.state.counter == 23
        assert rng.state.cached_normal == pytest.approx(1.3081224731469721, rel=1e-12)
        rng.next_normal()
        assert rng.state.counter == 23
        assert rng.state.cached_normal is None
        rng.next_normal()
        assert rng.state.counter == 25

    def test_moments(self):
        rng = SFC64(7)
        samples = np.array([rng.next_normal() for _ in range(20000)])
        assert abs(samples.mean()) < 0.03
        assert abs(samples.var() - 1.0) < 0.04

    def test_other_draws_keep_cached_normal(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        rng.next_u64()
        assert rng.next_normal() == pytest.approx(1.3081224731469721, rel=1e-12)


class TestSampleRange:
    def test_golden_mask(self):
        rng = SFC64(1, 2, 3)
        assert [rng.sample_range(1, 6, method='mask') for _ in range(5)] == [6, 5, 5, 5, 3]
        assert rng.state.counter == 30

    def test_golden_modulo(self):
        rng = SFC64(1, 2, 3)
        assert [rng.sample_range(1, 6, method='modulo') for _ in range(5)] == [4, 3, 3, 6, 3]
        assert rng.state.counter == 26

    def test_default_method_is_mask(self):
        rng = SFC64(1, 2, 3)
        assert [rng.sample_range(1, 6) for _ in range(5)] == [6, 5, 5, 5, 3]

    @pytest.mark.parametrize('method', METHODS)
    def test_degenerate_interval_consumes_nothing(self, method):
        rng = SFC64(1, 2, 3)
        assert rng.sample_range(5, 5, method=method) == 5
        assert rng.sample_range(INT64_MIN, INT64_MIN, method=method) == INT64_MIN
        assert rng.state.counter == 21

    @pytest.mark.parametrize('method', METHODS)
    def test_full_signed_range_single_step(self, method):
        rng = SFC64(1, 2, 3)
        assert rng.sample_range(INT64_MIN, INT64_MAX, method=method) == -6476338426435927459
        assert rng.state.counter == 22

    @pytest.mark.parametrize('method', METHODS)
    def test_full_unsigned_range_single_step(self, method):
        rng = SFC64(1, 2, 3)
        assert rng.sample_range(0, MASK64, method=method) == GOLDEN_U64[0]
        assert rng.state.counter == 22

    @pytest.mark.parametrize('method', METHODS)
    @pytest.mark.parametrize('low, high', [
        (1, 6),
        (-5, 4),
        (0, 1),
        (INT64_MIN, INT64_MIN + 2),
        (MASK64 - 3, MASK64),
        (-(1 << 62), 1 << 62),
    ])
    def test_within_bounds(self, method, low, high):
        rng = SFC64(11)
        for _ in range(300):
            assert low <= rng.sample_range(low, high, method=method) <= high

    @pytest.mark.parametrize('method', METHODS)
    @pytest.mark.parametrize('low, high, critical', [
        (1, 6, 20.52),
        (-5, 4, 27.88),
    ])
    def test_uniformity(self, method, low, high, critical):
        rng = SFC64(2024)
        draws = np.array([rng.sample_range(low, high, method=method) for _ in range(60000)])
        counts = np.bincount(draws - low, minlength=high - low + 1)
        assert counts.size == high - low + 1
        assert chi_square(counts) < critical

    @pytest.mark.parametrize('method', METHODS)
    def test_wide_range_uniformity(self, method):
        rng = SFC64(99)
        bound = (1 << 62) + (1 << 61)
        width = bound // 4 + 1
        counts = [0, 0, 0, 0]
        for _ in range(40000):
            counts[rng.sample_range(0, bound, method=method) // width] += 1
        assert chi_square(counts) < 16.27

    def test_integral_float_bounds(self):
        rng = SFC64(1, 2, 3)
        assert rng.sample_range(1.0, 6.0) == 6

    @pytest.mark.parametrize('method', METHODS)
    def test_empty_interval(self, method):
        rng = SFC64(1, 2, 3)
        with pytest.raises(EmptyIntervalError):
            rng.sample_range(6, 1, method=method)
        assert rng.state.counter == 21

    @pytest.mark.parametrize('low, high, argument', [
        (1.5, 6, 'low'),
        (1, '6', 'high'),
        (1, 1 << 64, 'high'),
        (INT64_MIN - 1, 0, 'low'),
        (INT64_MIN, MASK64, 'high'),
    ])
    def test_bad_bounds(self, low, high, argument):
        rng = SFC64(1, 2, 3)
        with pytest.raises(ArgumentConversionError) as exc_info:
            rng.sample_range(low, high)
        assert exc_info.value.argument == argument
        assert rng.state.counter == 21

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            SFC64().sample_range(1, 6, method='shift')


class TestRandom:
    def test_no_arguments_is_float(self):
        rng = SFC64(1, 2, 3)
        assert rng.random() == 0.64891699041534068

    def test_one_argument(self):
        rng = SFC64(1, 2, 3)
        assert [rng.random(6) for _ in range(5)] == [6, 5, 5, 5, 3]

    def test_two_arguments(self):
        rng = SFC64(3)
        for _ in range(200):
            assert -3 <= rng.random(-3, 3) <= 3

    def test_zero_is_raw_signed_under_bits(self):
        rng = SFC64(1, 2, 3)
        assert rng.random(0, convention='bits') == -6476338426435927459

    def test_zero_is_empty_under_exact(self):
        rng = SFC64(1, 2, 3)
        with pytest.raises(EmptyIntervalError):
            rng.random(0, convention='exact')
        assert rng.state.counter == 21

    def test_negative_single_argument_is_empty(self):
        with pytest.raises(EmptyIntervalError):
            SFC64().random(-3)

    def test_exact_limit(self):
        rng = SFC64(1, 2, 3)
        assert 1 <= rng.random(1 << 53, convention='exact') <= 1 << 53
        with pytest.raises(ArgumentConversionError) as exc_info:
            rng.random((1 << 53) + 1, convention='exact')
        assert exc_info.value.argument == 'n'
        with pytest.raises(ArgumentConversionError) as exc_info:
            rng.random(0, (1 << 53) + 1, convention='exact')
        assert exc_info.value.argument == 'm'

    def test_bits_accepts_64_bit_bounds(self):
        rng = SFC64(1, 2, 3)
        value = rng.random(1 << 60, 1 << 62, convention='bits')
        assert 1 << 60 <= value <= 1 << 62

    def test_configured_convention(self):
        rng = SFC64(1, 2, 3)
        with sfcrand.random_environ_context(convention='exact'):
            with pytest.raises(EmptyIntervalError):
                rng.random(0)
        assert rng.random(0) == -6476338426435927459

    def test_configured_range_method(self):
        rng = SFC64(1, 2, 3)
        with sfcrand.random_environ_context(range_method='modulo'):
            assert [rng.random(6) for _ in range(5)] == [4, 3, 3, 6, 3]

    def test_too_many_arguments(self):
        with pytest.raises(TypeError):
            SFC64().random(1, 2, 3)

    def test_non_integer_argument(self):
        with pytest.raises(ArgumentConversionError):
            SFC64().random(2.5)


class TestBulkSampling:
    def test_random_raw_matches_scalar(self):
        r1 = SFC64(1, 2, 3)
        assert r1.random_raw(5).tolist() == GOLDEN_U64
        assert r1.state.counter == 26

    def test_random_raw_shape(self):
        r1 = SFC64(8)
        r2 = SFC64(8)
        out = r1.random_raw((2, 3))
        assert out.shape == (2, 3)
        assert out.dtype == np.uint64
        assert out.ravel().tolist() == [r2.next_u64() for _ in range(6)]

    def test_random_floats_matches_scalar(self):
        r1 = SFC64(8)
        r2 = SFC64(8)
        out = r1.random_floats((4, 2))
        assert out.shape == (4, 2)
        assert out.dtype == np.float64
        assert out.ravel().tolist() == [r2.next_f64() for _ in range(8)]

    def test_empty_size(self):
        rng = SFC64(8)
        assert rng.random_raw(0).shape == (0,)
        assert rng.random_floats((3, 0)).shape == (3, 0)
        assert rng.state.counter == 21

    @pytest.mark.parametrize('size', [-1, (2, -1), (1.5,)])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            SFC64().random_raw(size)


class TestStateHandling:
    def test_copy_is_independent(self):
        rng = SFC64(1, 2, 3)
        twin = rng.copy()
        assert twin == rng
        assert twin is not rng
        assert [twin.next_u64() for _ in range(5)] == GOLDEN_U64
        assert rng.state.counter == 21

    def test_copy_module(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        assert copy.copy(rng) == rng
        assert copy.deepcopy(rng) == rng

    def test_pickle_keeps_cached_normal(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        restored = pickle.loads(pickle.dumps(rng))
        assert restored == rng
        assert restored.next_normal() == rng.next_normal()

    def test_state_round_trip(self):
        rng = SFC64(4)
        rng.next_normal()
        restored = SFC64.from_state(rng.state)
        assert restored == rng

    def test_state_assignment(self):
        rng = SFC64()
        rng.state = SFC64(1, 2, 3).state
        assert rng.next_u64() == GOLDEN_U64[0]

    @pytest.mark.parametrize('state', [
        (1, 2, 3, 4),
        SFC64State(-1, 2, 3, 4),
        SFC64State(1, 2, 1 << 64, 4),
        SFC64State(1, 2, 3, 4.5),
        SFC64State(1, 2, 3, 4, float('inf')),
        SFC64State(1, 2, 3, 4, float('nan')),
        SFC64State(1, 2, 3, 4, 'x'),
    ])
    def test_invalid_state(self, state):
        rng = SFC64(1, 2, 3)
        with pytest.raises(InvalidStateError):
            rng.state = state
        assert rng == SFC64(1, 2, 3)

    def test_equality_requires_same_cached_normal(self):
        r1 = SFC64(1, 2, 3)
        r2 = SFC64(1, 2, 3)
        r1.next_normal()
        r2.next_normal()
        assert r1 == r2
        r2.state = r2.state._replace(cached_normal=None)
        assert r1 != r2
        assert not r1.equals(r2)

    def test_equality_with_other_types(self):
        rng = SFC64()
        assert not rng.equals(5)
        assert rng != 5

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(SFC64())

    def test_repr(self):
        text = repr(SFC64(1, 2, 3))
        assert text.startswith('SFC64(a=10755630513867340343,')
        assert 'counter=21' in text
        assert 'cached_normal=None' in text

    def test_bytes_round_trip(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        payload = rng.to_bytes()
        assert len(payload) == 42
        assert sfcrand.from_bytes(payload) == rng

    def test_text_round_trip(self):
        rng = SFC64(1, 2, 3)
        rng.next_normal()
        assert SFC64.from_text(rng.to_text()) == rng


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
