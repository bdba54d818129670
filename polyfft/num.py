"""
Numeric capability set shared by complex components and polynomial coefficients.

A type participates when it supports ==, +, - and * and has an additive
identity (zero) and a multiplicative identity (one) such that
x + 0 == x == 0 + x and x * 1 == x == 1 * x.
"""

import numbers
from typing import Any, Iterable, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Num(Protocol):
    """Structural arithmetic contract for coefficient and component types."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __eq__(self, other) -> bool: ...


_IDENTITIES = {}

# Scalar classes whose identities are t(0) and t(1) without registration
_SCALAR_BASES = (numbers.Number, np.number)


def register(t: type, zero_value, one_value) -> None:
    """Register `t` as a numeric type with the given identity elements."""
    _IDENTITIES[t] = (t(zero_value), t(one_value))


for _t in (int, float):
    register(_t, 0, 1)

for _t in (np.int8, np.int16, np.int32, np.int64,
           np.uint8, np.uint16, np.uint32, np.uint64):
    register(_t, 0, 1)

for _t in (np.float32, np.float64):
    register(_t, 0.0, 1.0)


def is_num(t: type) -> bool:
    """Whether values of type `t` can be used as coefficients or components."""
    if t in _IDENTITIES:
        return True
    if isinstance(t, type) and issubclass(t, _SCALAR_BASES):
        return True
    return callable(getattr(t, "zero", None)) and callable(getattr(t, "one", None))


def _identities(t: type):
    if t in _IDENTITIES:
        return _IDENTITIES[t]
    if isinstance(t, type) and issubclass(t, _SCALAR_BASES):
        return t(0), t(1)
    if callable(getattr(t, "zero", None)) and callable(getattr(t, "one", None)):
        return t.zero(), t.one()
    raise TypeError(f"{t.__name__} is not a registered numeric type")


def zero(t: type):
    """Additive identity of type `t`."""
    return _identities(t)[0]


def one(t: type):
    """Multiplicative identity of type `t`."""
    return _identities(t)[1]


def zero_like(x):
    return zero(type(x))


def one_like(x):
    return one(type(x))


def add_zero(x):
    return x + zero_like(x)


def multiply_one(x):
    return x * one_like(x)


def check_identities(samples: Iterable[Any], verbose: bool = False) -> bool:
    """
    Check the identity laws on sample values.

    Args:
        samples: Values of registered numeric types.
        verbose: If True, prints every sample that violates a law.

    Returns:
        True if x + 0, 0 + x, x * 1 and 1 * x all equal x for every sample.
    """
    all_passed = True
    for x in samples:
        z, u = zero_like(x), one_like(x)
        ok = (x + z == x) and (z + x == x) and (x * u == x) and (u * x == x)
        if not ok:
            all_passed = False
            if verbose:
                print(f"Identity law violated for {x!r} ({type(x).__name__})")
    return all_passed
