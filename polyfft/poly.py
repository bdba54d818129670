"""
Polynomials in dense coefficient representation.

coeff[i] is the coefficient of x^i, so Polynomial([4, 3, 2, 9]) is
p(x) = 4 + 3 x + 2 x^2 + 9 x^3.
"""

from itertools import zip_longest
from typing import Optional

import numpy as np

from polyfft.num import zero_like

# Degree of the zero polynomial (empty or all-zero coefficients).
INFINITE_DEGREE = None

_MISSING = object()


class Polynomial:
    """Polynomial over a numeric type. Trailing zero coefficients are allowed."""

    def __init__(self, coeff=()):
        self.coeff = list(coeff)

    @classmethod
    def zero(cls) -> 'Polynomial':
        return cls([])

    def degree_bound(self) -> Optional[int]:
        """
        Upper bound on the degree: len(coeff) - 1.

        Returns INFINITE_DEGREE when the coefficients are empty or all zero.
        """
        if not self.coeff or all(c == zero_like(c) for c in self.coeff):
            return INFINITE_DEGREE
        return len(self.coeff) - 1

    def degree(self) -> Optional[int]:
        """Index of the last non-zero coefficient, or INFINITE_DEGREE."""
        for idx in range(len(self.coeff) - 1, -1, -1):
            c = self.coeff[idx]
            if c != zero_like(c):
                return idx
        return INFINITE_DEGREE

    def eval(self, x):
        """Evaluate the polynomial at `x` using Horner's method."""
        if not self.coeff:
            # Empty polynomials are identically zero
            return zero_like(x)
        acc = self.coeff[-1]
        for idx in range(len(self.coeff) - 2, -1, -1):
            acc = self.coeff[idx] + x * acc
        return acc

    def reduce(self) -> None:
        """Drop trailing zero coefficients in place. The zero polynomial becomes empty."""
        last = self.degree()
        if last is INFINITE_DEGREE:
            self.coeff = []
        else:
            del self.coeff[last + 1:]

    def set_degree_bound(self, n: int) -> None:
        """
        Pad with trailing zeros so that degree_bound() == n.

        Never truncates: nothing happens when n <= degree_bound(), nor when
        the degree bound is infinite (zero polynomial).
        """
        if n < 0:
            raise ValueError(f"degree bound must be non-negative, got {n}")
        bound = self.degree_bound()
        if bound is INFINITE_DEGREE or n <= bound:
            return
        self.coeff.extend([zero_like(self.coeff[0])] * (n - bound))

    def copy(self) -> 'Polynomial':
        return Polynomial(self.coeff)

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self.coeff, dtype=dtype)

    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        coeff = []
        for a, b in zip_longest(self.coeff, other.coeff, fillvalue=_MISSING):
            if b is _MISSING:
                coeff.append(a)
            elif a is _MISSING:
                coeff.append(b)
            else:
                coeff.append(a + b)
        return Polynomial(coeff)

    def __sub__(self, other: 'Polynomial') -> 'Polynomial':
        # Coefficients present in only one operand are copied unchanged
        coeff = []
        for a, b in zip_longest(self.coeff, other.coeff, fillvalue=_MISSING):
            if b is _MISSING:
                coeff.append(a)
            elif a is _MISSING:
                coeff.append(b)
            else:
                coeff.append(a - b)
        return Polynomial(coeff)

    def __mul__(self, other: 'Polynomial') -> 'Polynomial':
        """Naive O(n*m) convolution of the coefficient sequences."""
        n, m = len(self.coeff), len(other.coeff)
        if n == 0 or m == 0:
            # The zero polynomial annihilates any product
            return Polynomial([])

        z = zero_like(self.coeff[0] * other.coeff[0])
        coeff = [z] * (n + m - 1)
        for i in range(n):
            for j in range(m):
                coeff[i + j] = coeff[i + j] + self.coeff[i] * other.coeff[j]
        return Polynomial(coeff)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coeff == other.coeff
        return NotImplemented

    __hash__ = None

    def __len__(self):
        return len(self.coeff)

    def __iter__(self):
        return iter(self.coeff)

    def __getitem__(self, idx):
        return self.coeff[idx]

    def __repr__(self):
        return f"Polynomial({self.coeff!r})"
