"""
Fast Fourier Transform of a polynomial (recursive radix-2 Cooley-Tukey).

The coefficients are zero-padded to the next power of two n and the
polynomial is evaluated at every n-th root of unity: output index j is
p(w^j) with w = e^{-2*pi*i/n}. Zero-padding is not optimal but keeps the
transform a plain radix-2 recursion.
"""

import numpy as np

from polyfft.complex import Complex
from polyfft.misc import is_power_of_2, next_power_of_2
from polyfft.poly import Polynomial


def fft(p: Polynomial, dtype=np.float32, verbose: bool = False) -> list:
    """
    Evaluate `p` at all n-th roots of unity.

    Args:
        p: Polynomial with real coefficients. It is not modified.
        dtype: numpy floating type of the computation, float32 by default.
        verbose: If True, prints every evaluation.

    Returns:
        List of n Complex values, n = next_power_of_2(len(p.coeff)).
    """
    padded = Polynomial(dtype(c) for c in p.coeff)
    n2 = next_power_of_2(len(padded.coeff))
    if n2 != len(padded.coeff):
        padded.set_degree_bound(n2 - 1)
    if len(padded.coeff) < n2:
        # All-zero coefficients carry no degree bound to extend from
        padded.coeff.extend([dtype(0)] * (n2 - len(padded.coeff)))

    v = fft_recursive(Complex.from_real_vec(padded.coeff), dtype=dtype)
    if verbose:
        for j, cpx in enumerate(v):
            print(f"  y[{j}] = {cpx}")
    return v


def fft_recursive(v: list, dtype=np.float32) -> list:
    """Transform a Complex vector whose length is a power of two."""
    n = len(v)
    if not is_power_of_2(n):
        raise ValueError(f"vector length must be a power of 2, got {n}")
    return _fft(v, dtype)


def _fft(v, dtype):
    n = len(v)
    if n == 1:
        return list(v)

    y_even = _fft(v[0::2], dtype)
    y_odd = _fft(v[1::2], dtype)

    root_n = Complex.root_of_unity(n, dtype)
    omega = Complex(dtype(1.0), dtype(0.0))
    half = n // 2
    out = [None] * n
    for j in range(half):
        t = omega * y_odd[j]
        out[j] = y_even[j] + t
        out[j + half] = y_even[j] - t
        omega = omega * root_n
    return out
