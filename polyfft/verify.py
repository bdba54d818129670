"""
Independent reference computations and self-checks for the FFT and the
naive polynomial product.
"""

import random
import time

import numpy as np
import sympy

from polyfft.complex import Complex
from polyfft.fft import fft
from polyfft.misc import next_power_of_2
from polyfft.poly import Polynomial


def direct_evaluation(p: Polynomial, dtype=np.float32) -> list:
    """
    Evaluate `p` at each n-th root of unity with Horner's method.

    n = next_power_of_2(len(p.coeff)); the j-th value is p(w^j) with
    w = Complex.root_of_unity(n, dtype).
    """
    n = next_power_of_2(len(p.coeff))
    lifted = Polynomial(Complex.from_real_vec([dtype(c) for c in p.coeff]))
    root = Complex.root_of_unity(n, dtype)
    return [lifted.eval(root ** j) for j in range(n)]


def numpy_fft_reference(p: Polynomial) -> np.ndarray:
    """numpy.fft.fft of the zero-padded coefficients, in double precision."""
    n = next_power_of_2(len(p.coeff))
    a = np.zeros(n, dtype=np.float64)
    a[:len(p.coeff)] = np.asarray(p.coeff, dtype=np.float64)
    return np.fft.fft(a)


def max_error(result, expected) -> float:
    """Largest absolute component difference between two sequences of complex values."""
    if len(result) != len(expected):
        raise ValueError(f"length mismatch: {len(result)} != {len(expected)}")
    err = 0.0
    for r, e in zip(result, expected):
        r = r.to_builtin() if isinstance(r, Complex) else complex(r)
        e = e.to_builtin() if isinstance(e, Complex) else complex(e)
        err = max(err, abs(r.real - e.real), abs(r.imag - e.imag))
    return err


def exact_product(p: Polynomial, q: Polynomial) -> Polynomial:
    """Exact product of integer-coefficient polynomials through sympy."""
    if not p.coeff or not q.coeff:
        return Polynomial([])
    x = sympy.Symbol('x')
    # sympy lists coefficients from the highest power down
    prod = sympy.Poly([int(c) for c in reversed(p.coeff)], x) * \
        sympy.Poly([int(c) for c in reversed(q.coeff)], x)
    coeff = [int(c) for c in reversed(prod.all_coeffs())]
    n = len(p.coeff) + len(q.coeff) - 1
    return Polynomial(coeff + [0] * (n - len(coeff)))


def _random_coefficients(n, mode='real'):
    if mode == 'real':
        return [float(random.randint(-10, 10)) for _ in range(n)]
    return [random.randint(-20, 20) for _ in range(n)]


def check_fft(n: int, num_tests: int = 3, tolerance: float = 1e-4,
              dtype=np.float32, verbose: bool = False) -> bool:
    """
    Compare fft against direct evaluation and numpy.fft on random polynomials.

    Args:
        n: Number of coefficients of each random polynomial.
        num_tests: Number of random polynomials.
        tolerance: Maximum accepted error, relative to the largest evaluation.
        dtype: Precision of the transform.
        verbose: If True, prints the coefficients and errors of every case.

    Returns:
        True if every case is within tolerance.
    """
    print(f"Testing FFT with {num_tests} random polynomials ({n} coefficients)")
    print("=" * 60)

    all_passed = True
    worst = 0.0
    for i in range(num_tests):
        p = Polynomial(_random_coefficients(n))
        result = fft(p, dtype=dtype)
        reference = numpy_fft_reference(p)
        # Errors are relative to the largest evaluation
        scale = max(1.0, float(np.max(np.abs(reference))))
        err_direct = max_error(result, direct_evaluation(p, dtype)) / scale
        err_numpy = max_error(result, reference) / scale
        err = max(err_direct, err_numpy)
        worst = max(worst, err)

        if err < tolerance:
            status = "✓ PASS"
        else:
            status = "✗ FAIL"
            all_passed = False
        print(f"Test {i+1}: {status}")
        if verbose:
            print(f"  Coefficients: {p.coeff}")
            print(f"  Error vs direct evaluation: {err_direct:.2e}")
            print(f"  Error vs numpy.fft:         {err_numpy:.2e}")

    print(f"\nSummary: {num_tests} tests, max error: {worst:.2e}")
    return all_passed


def check_poly_mult(n: int, num_tests: int = 3, verbose: bool = False) -> bool:
    """Compare the naive product of random integer polynomials with sympy and numpy."""
    print(f"Testing polynomial multiplication with {num_tests} random pairs (up to {n} coefficients)")
    print("=" * 60)

    all_passed = True
    for i in range(num_tests):
        p = Polynomial(_random_coefficients(random.randint(1, n), mode='integer'))
        q = Polynomial(_random_coefficients(random.randint(1, n), mode='integer'))
        prod = p * q
        ok = prod == exact_product(p, q)
        ok = ok and prod.coeff == [int(c) for c in np.convolve(p.coeff, q.coeff)]

        if ok:
            status = "✓ PASS"
        else:
            status = "✗ FAIL"
            all_passed = False
        print(f"Test {i+1}: {status}")
        if verbose or not ok:
            print(f"  p       = {p.coeff}")
            print(f"  q       = {q.coeff}")
            print(f"  p * q   = {prod.coeff}")
            if not ok:
                print(f"  Expected: {exact_product(p, q).coeff}")

    print(f"\nSummary: {num_tests} tests completed")
    return all_passed


def benchmark_fft(n: int, num_runs: int = 20, dtype=np.float32, verbose: bool = False) -> float:
    """Average wall time in seconds of one fft call on n random coefficients."""
    p = Polynomial(_random_coefficients(n))

    # Warmup
    for _ in range(2):
        fft(p, dtype=dtype)

    start_time = time.time()
    for _ in range(num_runs):
        fft(p, dtype=dtype)
    end_time = time.time()

    avg_time = (end_time - start_time) / num_runs
    if verbose:
        print(f"Average time for n={n}: {avg_time*1000:.3f} ms")
    return avg_time
