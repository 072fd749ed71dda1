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

"""CLI entry point for sfcrand.

Usage:
    sfcrand sample [--seed S ...] [--kind {float|u64|normal|range|random}] [-n N]
    sfcrand state [--seed S ...] [--skip N] [--format {hex|text}]
    sfcrand benchmark [--n N] [--n-warmup W] [--n-runs R] [--output FILE]
"""

import argparse
import json
import sys
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

import numpy as np

from ._config import RANDOM_CONVENTIONS, RANGE_METHODS
from ._error import SFCRandError
from ._generator import SFC64

__all__ = ['main']

_KINDS = ('float', 'u64', 'normal', 'range', 'random')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sfcrand',
        description='sfcrand: SFC64 pseudorandom number generation.',
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    sample = subparsers.add_parser('sample', help='Print values drawn from a seeded generator.')
    sample.add_argument('--seed', type=int, nargs='*', default=[], help='Up to three integer seeds.')
    sample.add_argument('--kind', default='float', choices=_KINDS, help='What to draw.')
    sample.add_argument('-n', '--count', type=int, default=10, help='Number of values to print.')
    sample.add_argument('--min', type=int, default=None, help='Lower bound for range/random.')
    sample.add_argument('--max', type=int, default=None, help='Upper bound for range/random.')
    sample.add_argument(
        '--convention',
        default=None,
        choices=RANDOM_CONVENTIONS,
        help='Calling convention for --kind random.',
    )
    sample.add_argument(
        '--method',
        default=None,
        choices=RANGE_METHODS,
        help='Rejection method for --kind range.',
    )

    state = subparsers.add_parser('state', help='Print the encoded state of a seeded generator.')
    state.add_argument('--seed', type=int, nargs='*', default=[], help='Up to three integer seeds.')
    state.add_argument('--skip', type=int, default=0, help='Number of outputs to discard first.')
    state.add_argument('--format', default='hex', choices=['hex', 'text'], help='Encoding to print.')

    bench = subparsers.add_parser('benchmark', help='Benchmark scalar and bulk sampling throughput.')
    bench.add_argument('--n', type=int, default=100_000, help='Values drawn per run.')
    bench.add_argument('--n-warmup', type=int, default=2, help='Number of warmup runs.')
    bench.add_argument('--n-runs', type=int, default=5, help='Number of timed runs.')
    bench.add_argument('--output', type=str, default=None, help='Output file path for JSON results.')

    return parser


def _draw(rng: SFC64, args) -> Callable[[], object]:
    if args.kind == 'float':
        return rng.next_f64
    if args.kind == 'u64':
        return rng.next_u64
    if args.kind == 'normal':
        return rng.next_normal
    if args.kind == 'range':
        low = 1 if args.min is None else args.min
        high = 6 if args.max is None else args.max
        return lambda: rng.sample_range(low, high, method=args.method)
    bounds = [b for b in (args.min, args.max) if b is not None]
    return lambda: rng.random(*bounds, convention=args.convention)


def _run_sample(args) -> int:
    """Run the sample command."""
    try:
        rng = SFC64(*args.seed)
        draw = _draw(rng, args)
        values = [draw() for _ in range(args.count)]
    except (SFCRandError, TypeError) as e:
        print(f"sfcrand: {e}", file=sys.stderr)
        return 1
    for value in values:
        print(repr(value) if isinstance(value, float) else value)
    return 0


def _run_state(args) -> int:
    """Run the state command."""
    try:
        rng = SFC64(*args.seed)
    except (SFCRandError, TypeError) as e:
        print(f"sfcrand: {e}", file=sys.stderr)
        return 1
    if args.skip < 0:
        print("sfcrand: --skip must be non-negative", file=sys.stderr)
        return 1
    rng.random_raw(args.skip)
    print(rng.to_bytes().hex() if args.format == 'hex' else rng.to_text())
    return 0


def _time_runs(fn: Callable[[], object], n_warmup: int, n_runs: int) -> Dict[str, float]:
    for _ in range(n_warmup):
        fn()
    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        fn()
        times.append(time.perf_counter() - start)
    times = np.asarray(times)
    return {
        'mean_time': float(times.mean()),
        'std_time': float(times.std()),
        'min_time': float(times.min()),
    }


def _run_benchmark(args) -> int:
    """Run the benchmark command."""
    if args.n <= 0 or args.n_runs <= 0 or args.n_warmup < 0:
        print("sfcrand: --n and --n-runs must be positive, --n-warmup non-negative", file=sys.stderr)
        return 1

    rng = SFC64()
    n = args.n
    cases = {
        'next_u64': lambda: [rng.next_u64() for _ in range(n)],
        'next_f64': lambda: [rng.next_f64() for _ in range(n)],
        'next_normal': lambda: [rng.next_normal() for _ in range(n)],
        'sample_range': lambda: [rng.sample_range(1, 6) for _ in range(n)],
        'random_raw': lambda: rng.random_raw(n),
        'random_floats': lambda: rng.random_floats(n),
    }

    print(f"sfcrand benchmark: n={n}, n_warmup={args.n_warmup}, n_runs={args.n_runs}")
    print()
    header = f"{'Operation':<20} {'Mean (ms)':>12} {'Std (ms)':>12} {'Min (ms)':>12} {'Mvalues/s':>12}"
    print(header)
    print("-" * len(header))

    results = {}
    for name, fn in cases.items():
        result = _time_runs(fn, args.n_warmup, args.n_runs)
        result['throughput'] = n / result['min_time'] if result['min_time'] > 0 else float('inf')
        results[name] = result
        print(f"  {name:<18} {result['mean_time'] * 1000:>12.3f} {result['std_time'] * 1000:>12.3f} "
              f"{result['min_time'] * 1000:>12.3f} {result['throughput'] / 1e6:>12.2f}")
    print()

    if args.output:
        output_data = {
            'last_run': datetime.now(timezone.utc).isoformat(),
            'parameters': {
                'n': n,
                'n_warmup': args.n_warmup,
                'n_runs': args.n_runs,
            },
            'results': results,
        }
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2)
            f.write('\n')
        print(f"Results written to {args.output}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'sample':
        return _run_sample(args)
    if args.command == 'state':
        return _run_state(args)
    if args.command == 'benchmark':
        return _run_benchmark(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
