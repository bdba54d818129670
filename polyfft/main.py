#!/usr/bin/env python3
"""
Command line interface for the polynomial FFT.

Examples:
  %(prog)s fft 0 1 3 7                # Evaluate 7x^3 + 3x^2 + x at the 4th roots of unity
  %(prog)s fft 0 1 3 7 8 --double     # Zero-pad to 8 and transform in double precision
  %(prog)s eval 2 2 3 5 6             # Evaluate 2 + 3x + 5x^2 + 6x^3 at x = 2
  %(prog)s mul 0,3,5 4,7,8            # Naive product of two coefficient lists
  %(prog)s check --size 16 --num-tests 10 -v
  %(prog)s benchmark --size 1024 --num-runs 20
"""

import argparse
import sys

import numpy as np

from polyfft.fft import fft
from polyfft.misc import next_power_of_2
from polyfft.poly import Polynomial
from polyfft.verify import benchmark_fft, check_fft, check_poly_mult


def parse_coefficients(values, kind=float) -> list:
    """Parse coefficients given as separate arguments and/or comma-separated lists."""
    coeff = []
    for value in values:
        for item in str(value).split(','):
            item = item.strip()
            if not item:
                continue
            try:
                coeff.append(kind(item))
            except ValueError:
                raise ValueError(f"invalid coefficient {item!r}") from None
    return coeff


def _number_kind(values):
    """Use integers when every value is integral, floats otherwise."""
    try:
        parse_coefficients(values, int)
        return int
    except ValueError:
        return float


def run_fft(values, dtype=np.float32, verbose=False) -> int:
    p = Polynomial(parse_coefficients(values))
    n = next_power_of_2(len(p.coeff))
    print(f"FFT of {p.coeff} (n={n}, {np.dtype(dtype).name})")
    print("=" * 60)
    if verbose and n != len(p.coeff):
        print(f"Zero-padding from {len(p.coeff)} to {n} coefficients")
    for j, y in enumerate(fft(p, dtype=dtype)):
        print(f"  y[{j}] = {float(y.re):+.6f} {float(y.im):+.6f}i")
    return 0


def run_eval(values, verbose=False) -> int:
    if not values:
        raise ValueError("eval needs a point x followed by coefficients")
    kind = _number_kind(values)
    x = parse_coefficients(values[:1], kind)[0]
    p = Polynomial(parse_coefficients(values[1:], kind))
    if verbose:
        print(f"degree bound: {p.degree_bound()}, degree: {p.degree()}")
    print(f"p({x}) = {p.eval(x)}")
    return 0


def run_mul(values, verbose=False) -> int:
    if len(values) != 2:
        raise ValueError("mul needs exactly two comma-separated coefficient lists")
    kind = _number_kind(values)
    p = Polynomial(parse_coefficients(values[:1], kind))
    q = Polynomial(parse_coefficients(values[1:], kind))
    prod = p * q
    if verbose:
        print(f"p     = {p.coeff}")
        print(f"q     = {q.coeff}")
    print(f"p * q = {prod.coeff}")
    return 0


def run_benchmark(max_size, num_runs, dtype=np.float32, verbose=False) -> int:
    print(f"FFT BENCHMARK (sizes 2..{next_power_of_2(max_size)}, {np.dtype(dtype).name})")
    print("=" * 60)
    n = 2
    while n <= max_size:
        avg_time = benchmark_fft(n, num_runs=num_runs, dtype=dtype, verbose=verbose)
        print(f"n={n:>6}: {avg_time*1000:10.3f} ms")
        n *= 2
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='polyfft',
        description='Polynomial arithmetic and radix-2 FFT evaluation at roots of unity',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__[__doc__.index('Examples:'):])

    parser.add_argument('mode', choices=['fft', 'eval', 'mul', 'check', 'benchmark'],
                        help='fft: transform coefficients, eval: Horner evaluation, '
                             'mul: naive product, check: random self-checks, benchmark: timing')
    parser.add_argument('values', nargs='*',
                        help='Coefficients, lowest power first (for eval the first value is x)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output')
    parser.add_argument('--double', action='store_true',
                        help='Compute the transform in double precision (default: single)')
    parser.add_argument('--size', type=int, default=16,
                        help='Number of coefficients for check, largest size for benchmark (default: 16)')
    parser.add_argument('--num-tests', type=int, default=3,
                        help='Number of random cases in check mode (default: 3)')
    parser.add_argument('--num-runs', type=int, default=20,
                        help='Number of timing runs per size in benchmark mode (default: 20)')
    parser.add_argument('--tolerance', type=float, default=1e-4,
                        help='Accepted relative FFT error in check mode (default: 1e-4)')

    args = parser.parse_args(argv)
    dtype = np.float64 if args.double else np.float32

    if args.mode in ('fft', 'mul') and not args.values:
        parser.error(f"{args.mode} needs coefficients")
    if args.size < 1:
        parser.error("--size must be positive")

    try:
        if args.mode == 'fft':
            return run_fft(args.values, dtype=dtype, verbose=args.verbose)
        if args.mode == 'eval':
            return run_eval(args.values, verbose=args.verbose)
        if args.mode == 'mul':
            return run_mul(args.values, verbose=args.verbose)
        if args.mode == 'benchmark':
            return run_benchmark(args.size, args.num_runs, dtype=dtype, verbose=args.verbose)

        success = check_fft(args.size, num_tests=args.num_tests, tolerance=args.tolerance,
                            dtype=dtype, verbose=args.verbose)
        print()
        success = check_poly_mult(args.size, num_tests=args.num_tests,
                                  verbose=args.verbose) and success
        if success:
            print("✅ All checks passed!")
        else:
            print("❌ Some checks failed!")
        return 0 if success else 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
