"""
Complex numbers over any type of the numeric capability set.

Components keep their own type: Complex(np.float32(1), np.float32(2)) stays
single precision through every operation.
"""

import numbers

import numpy as np

from polyfft.num import one, one_like, zero, zero_like


def _is_scalar(x):
    return isinstance(x, (numbers.Number, np.number))


def _as_real(x, dtype=None):
    """Cast `x` to a numpy floating scalar, keeping its precision when it has one."""
    if dtype is not None:
        return dtype(x)
    if isinstance(x, np.floating):
        return x
    return np.float64(x)


class Complex:
    """Complex number re + im * i. Every operation returns a new instance."""

    __slots__ = ('re', 'im')

    def __init__(self, re, im):
        self.re = re
        self.im = im

    @classmethod
    def i(cls, t: type = int) -> 'Complex':
        """Imaginary unit with components of type `t`."""
        return cls(zero(t), one(t))

    @classmethod
    def zero(cls) -> 'Complex':
        return cls(0, 0)

    @classmethod
    def one(cls) -> 'Complex':
        return cls(1, 0)

    @classmethod
    def from_real(cls, re) -> 'Complex':
        return cls(re, zero_like(re))

    @classmethod
    def from_real_vec(cls, values) -> list:
        """Lift a sequence of real values into complex values with zero imaginary part."""
        return [cls.from_real(re) for re in values]

    @classmethod
    def from_builtin(cls, z: complex, dtype=np.float64) -> 'Complex':
        return cls(dtype(z.real), dtype(z.imag))

    @classmethod
    def from_polar(cls, r, theta, dtype=None) -> 'Complex':
        """
        Complex number with modulus `r` and angle `theta` (radians).

        Args:
            r: Radius.
            theta: Angle in radians.
            dtype: numpy floating type of the components. Defaults to the
                precision of `r`, or float64 for Python numbers.
        """
        if dtype is None and isinstance(r, np.floating):
            dtype = type(r)
        r = _as_real(r, dtype)
        theta = _as_real(theta, dtype)
        return cls(r * np.cos(theta), r * np.sin(theta))

    @classmethod
    def root_of_unity(cls, n: int, dtype=np.float32) -> 'Complex':
        """
        Primitive n-th root of unity e^{-2*pi*i/n}.

        The same negative angle is used for every precision, matching the
        numpy.fft convention.
        """
        theta = dtype(-2.0) * dtype(np.pi) / dtype(n)
        return cls(np.cos(theta), np.sin(theta))

    def norm(self):
        """Squared modulus re^2 + im^2."""
        return self.re * self.re + self.im * self.im

    def conj(self) -> 'Complex':
        return Complex(self.re, -self.im)

    def exp(self) -> 'Complex':
        """e^z = e^re * (cos(im) + i sin(im))."""
        re = _as_real(self.re)
        return Complex.from_polar(np.exp(re), self.im, dtype=type(re))

    def to_builtin(self) -> complex:
        return complex(float(self.re), float(self.im))

    def __abs__(self):
        return np.sqrt(_as_real(self.norm()))

    def __add__(self, other):
        if isinstance(other, Complex):
            return Complex(self.re + other.re, self.im + other.im)
        if not _is_scalar(other):
            return NotImplemented
        return Complex(self.re + other, self.im)

    def __radd__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return Complex(other + self.re, self.im)

    def __sub__(self, other):
        if isinstance(other, Complex):
            return Complex(self.re - other.re, self.im - other.im)
        if not _is_scalar(other):
            return NotImplemented
        return Complex(self.re - other, self.im)

    def __rsub__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return Complex(other - self.re, zero_like(self.im) - self.im)

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __mul__(self, other):
        if isinstance(other, Complex):
            return Complex(self.re * other.re - self.im * other.im,
                           self.re * other.im + self.im * other.re)
        if not _is_scalar(other):
            return NotImplemented
        return Complex(self.re * other, self.im * other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return Complex(other * self.re, other * self.im)

    def __pow__(self, exp: int):
        if not isinstance(exp, (int, np.integer)) or exp < 0:
            raise ValueError(f"exponent must be a non-negative integer, got {exp!r}")
        result = Complex(one_like(self.re), zero_like(self.im))
        base = self
        while exp > 0:
            if exp & 1:
                result = result * base
            exp >>= 1
            if exp:
                base = base * base
        return result

    def __eq__(self, other):
        if isinstance(other, Complex):
            return bool(self.re == other.re and self.im == other.im)
        return NotImplemented

    def __hash__(self):
        return hash((self.re, self.im))

    def __repr__(self):
        return f"Complex({self.re}, {self.im})"
