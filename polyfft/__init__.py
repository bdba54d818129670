"""Polynomials, complex numbers and a radix-2 FFT over numpy scalar types."""

from polyfft.complex import Complex
from polyfft.fft import fft, fft_recursive
from polyfft.misc import is_power_of_2, next_power_of_2
from polyfft.num import Num, is_num, one, register, zero
from polyfft.poly import INFINITE_DEGREE, Polynomial

__version__ = "0.1.0"
