"""Tests for polynomial operations."""

import random

import numpy as np
import pytest

from polyfft.complex import Complex
from polyfft.poly import INFINITE_DEGREE, Polynomial


def random_poly(max_len=8, lo=-9, hi=9):
    return Polynomial([random.randint(lo, hi) for _ in range(random.randint(0, max_len))])


def test_new():
    p = Polynomial([0, 1, 5, 6])
    assert p.coeff == [0, 1, 5, 6]
    assert Polynomial().coeff == []


def test_new_keeps_trailing_zeros():
    assert Polynomial([1, 0, 0]).coeff == [1, 0, 0]


def test_new_from_numpy():
    p = Polynomial(np.array([1.0, 2.0], dtype=np.float32))
    assert type(p.coeff[0]) is np.float32


def test_degree_zero_polynomials():
    p = Polynomial([])
    assert p.degree_bound() is INFINITE_DEGREE
    assert p.degree() is INFINITE_DEGREE

    p = Polynomial([0.0, 0.0, 0.0, 0.0])
    assert p.degree_bound() is INFINITE_DEGREE
    assert p.degree() is INFINITE_DEGREE


def test_degree():
    assert Polynomial([5, 2, 0, 1]).degree_bound() == 3

    # Degree bound >= degree
    p = Polynomial([0, 3, 4, 0])
    assert p.degree_bound() == 3
    assert p.degree() == 2

    q = Polynomial([0.1, 0.0, 0.0, 0.0])
    assert q.degree_bound() == 3
    assert q.degree() == 0

    # Degree bound == degree
    p = Polynomial([1, 5, 0, 6, 7])
    assert p.degree_bound() == 4
    assert p.degree() == 4


def test_degree_at_most_degree_bound():
    random.seed(1)
    for _ in range(200):
        p = random_poly()
        d, b = p.degree(), p.degree_bound()
        if d is not None and b is not None:
            assert d <= b
        else:
            assert d is None and b is None


def test_eval():
    assert Polynomial([]).eval(3.0) == 0.0
    assert Polynomial([]).eval(3) == 0

    q = Polynomial([2, 3, 5, 6])
    assert q.eval(0) == 2
    assert q.eval(1) == 16
    assert q.eval(-1) == -2
    assert q.eval(2) == 76
    assert q.eval(4) == 478


def test_eval_empty_keeps_point_type():
    result = Polynomial([]).eval(np.float32(2.0))
    assert result == 0
    assert type(result) is np.float32


def test_eval_numpy_coefficients():
    q = Polynomial(np.array([2, 3, 5, 6], dtype=np.int32))
    assert q.eval(np.int32(4)) == 478


def test_eval_at_complex_point():
    # 1 + x^2 vanishes at i
    p = Polynomial([1, 0, 1])
    assert p.eval(Complex.i()) == Complex(0, 0)
    cp = Polynomial(Complex.from_real_vec([1, 0, 1]))
    assert cp.eval(Complex.i()) == Complex(0, 0)


def test_reduce():
    p = Polynomial([1, 0, 0])
    p.reduce()
    assert p == Polynomial([1])

    p = Polynomial([1.0, 0.0, 4.5, 0.0])
    p.reduce()
    assert p == Polynomial([1.0, 0.0, 4.5])

    p = Polynomial([0.0, 0.0, 0.0, 0.0])
    p.reduce()
    assert p == Polynomial([])

    p = Polynomial([1, 0, 2, 4, 0, 0])
    p.reduce()
    assert p == Polynomial([1, 0, 2, 4])


def test_reduce_idempotent():
    random.seed(2)
    for _ in range(100):
        p = random_poly(lo=-1, hi=1)
        p.reduce()
        once = p.copy()
        p.reduce()
        assert p == once


def test_reduce_keeps_value():
    p = Polynomial([3, 0, 2, 0, 0])
    before = [p.eval(x) for x in range(-3, 4)]
    p.reduce()
    assert [p.eval(x) for x in range(-3, 4)] == before


def test_set_degree_bound():
    p = Polynomial([5, 2, 0, 1])
    assert p.degree_bound() == 3
    p.set_degree_bound(6)
    assert p == Polynomial([5, 2, 0, 1, 0, 0, 0])
    assert p.degree_bound() == 6


def test_set_degree_bound_never_truncates():
    p = Polynomial([5, 2, 0, 1])
    p.set_degree_bound(1)
    assert p == Polynomial([5, 2, 0, 1])
    p.set_degree_bound(3)
    assert p == Polynomial([5, 2, 0, 1])


def test_set_degree_bound_zero_polynomial():
    p = Polynomial([])
    p.set_degree_bound(5)
    assert p == Polynomial([])

    p = Polynomial([0, 0])
    p.set_degree_bound(5)
    assert p == Polynomial([0, 0])


def test_set_degree_bound_keeps_type():
    p = Polynomial([np.float32(1.0)])
    p.set_degree_bound(3)
    assert len(p) == 4
    assert all(type(c) is np.float32 for c in p)


def test_set_degree_bound_negative():
    with pytest.raises(ValueError):
        Polynomial([1]).set_degree_bound(-1)


def test_add():
    # Sum of zero polynomials is zero
    assert Polynomial([]) + Polynomial([]) == Polynomial([])

    p = Polynomial([1, 2, 4])
    q = Polynomial([5, -2, 17])
    assert p + q == Polynomial([6, 0, 21])
    assert q + p == Polynomial([6, 0, 21])


def test_add_different_lengths():
    assert Polynomial([1, 2]) + Polynomial([3, 4, 5, 6]) == Polynomial([4, 6, 5, 6])
    assert Polynomial([3, 4, 5, 6]) + Polynomial([1, 2]) == Polynomial([4, 6, 5, 6])


def test_add_commutative():
    random.seed(3)
    for _ in range(100):
        p, q = random_poly(), random_poly()
        assert p + q == q + p


def test_sub():
    assert Polynomial([5, 7, 9]) - Polynomial([1, 2, 3]) == Polynomial([4, 5, 6])
    assert Polynomial([5, 7, 9]) - Polynomial([1]) == Polynomial([4, 7, 9])


def test_sub_copies_missing_coefficients():
    assert Polynomial([1, 2]) - Polynomial([1, 2, 3]) == Polynomial([0, 0, 3])


def test_mul():
    # Zero polynomials
    assert Polynomial([]) * Polynomial([]) == Polynomial([])
    assert Polynomial([3.4, 9.0, 1.1]) * Polynomial([]) == Polynomial([])
    assert Polynomial([]) * Polynomial([3.4, 9.0, 1.1]) == Polynomial([])

    # Same length
    p = Polynomial([0, 3, 5])
    q = Polynomial([4, 7, 8])
    assert p * q == Polynomial([0, 12, 41, 59, 40])
    assert q * p == Polynomial([0, 12, 41, 59, 40])

    # Different length
    p = Polynomial([5, 0, 10, 6])
    q = Polynomial([1, 2, 4])
    assert p * q == Polynomial([5, 10, 30, 26, 52, 24])
    assert q * p == Polynomial([5, 10, 30, 26, 52, 24])


def test_mul_commutative_and_evaluates():
    random.seed(4)
    for _ in range(100):
        p, q = random_poly(), random_poly()
        assert p * q == q * p
        prod = p * q
        for x in (-2, 0, 3):
            assert prod.eval(x) == p.eval(x) * q.eval(x)


def test_mul_matches_numpy_convolve():
    random.seed(5)
    for _ in range(50):
        p, q = random_poly(), random_poly()
        if not p.coeff or not q.coeff:
            continue
        assert (p * q).coeff == list(np.convolve(p.coeff, q.coeff))


def test_mul_complex_coefficients():
    p = Polynomial([Complex(0, 1), Complex(1, 0)])
    q = Polynomial([Complex(0, -1), Complex(1, 0)])
    # (x + i)(x - i) = x^2 + 1
    assert p * q == Polynomial([Complex(1, 0), Complex(0, 0), Complex(1, 0)])


def test_operators_do_not_mutate():
    p, q = Polynomial([1, 2]), Polynomial([3, 4, 5])
    p + q
    p - q
    p * q
    assert p == Polynomial([1, 2])
    assert q == Polynomial([3, 4, 5])


def test_equality_is_structural():
    assert Polynomial([1, 0]) != Polynomial([1])
    assert Polynomial([1, 2]) != [1, 2]


def test_container_protocol():
    p = Polynomial([4, 3, 2, 9])
    assert len(p) == 4
    assert list(p) == [4, 3, 2, 9]
    assert p[3] == 9


def test_copy_is_independent():
    p = Polynomial([1, 0, 0])
    q = p.copy()
    q.reduce()
    assert p == Polynomial([1, 0, 0])
    assert q == Polynomial([1])


def test_to_numpy():
    a = Polynomial([1, 2, 3]).to_numpy(np.float32)
    assert a.dtype == np.float32
    assert a.tolist() == [1.0, 2.0, 3.0]


def test_zero():
    assert Polynomial.zero() == Polynomial([])
    assert Polynomial.zero() * Polynomial([1, 2]) == Polynomial.zero()


def test_repr():
    assert repr(Polynomial([1, 2])) == "Polynomial([1, 2])"
