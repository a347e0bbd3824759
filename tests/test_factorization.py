# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
from itertools import islice
from pytest import raises
from sympy import factorint, isprime

from primefrac.factorization import (ExponentUnderflowError,
                                     Factorization,
                                     NegativeFactorizationError,
                                     prime_candidates, product)

NUMBERS = [0, 1, 2, 3, 4, 7, 9, 12, 49, 97, 360, 1024, 3 ** 7,
           5040, 720720, 999983, 1000000, 2 ** 31 - 1,
           999983 * 1000003, 600851475143]

def test_prime_candidates():
    cands = list(islice(prime_candidates(), 12))
    assert cands == [2, 3, 5, 7, 11, 13, 17, 19, 23, 25, 29, 31]

    # Every call starts over.
    assert next(prime_candidates()) == 2

def test_from_int():
    examples = [
        (0, {}),
        (1, {}),
        (2, {2 : 1}),
        (12, {2 : 2, 3 : 1}),
        (49, {7 : 2}),
        (97, {97 : 1}),
        (360, {2 : 3, 3 : 2, 5 : 1}),
        (1024, {2 : 10})
    ]
    for n, expected in examples:
        f = Factorization.from_int(n)
        assert f.value == n
        assert f.factors == expected

def test_from_int_matches_sympy():
    for n in NUMBERS:
        f = Factorization.from_int(n)
        assert f.value == n
        assert all(isprime(p) for p in f.factors)
        assert all(e > 0 for e in f.factors.values())
        if n > 1:
            assert f.factors == factorint(n)
            assert product(f.factors) == n

def test_factor_order():
    f = Factorization.from_int(2 * 3 * 5 * 7 * 11 * 13)
    assert list(f.factors) == [2, 3, 5, 7, 11, 13]

def test_from_factors():
    f = Factorization.from_factors({2 : 3, 5 : 1})
    assert f.value == 40
    assert Factorization.from_factors({}).value == 1
    assert Factorization.from_factors({}, 0).value == 0

    # The map is copied.
    factors = {3 : 2}
    f = Factorization.from_factors(factors)
    f.remove(3, 2)
    assert factors == {3 : 2}

def test_remove():
    f = Factorization.from_int(360)
    f.remove(2, 1)
    assert f.value == 180
    assert f.factors == {2 : 2, 3 : 2, 5 : 1}
    f.remove(3, 2)
    assert f.value == 20
    assert f.factors == {2 : 2, 5 : 1}
    f.remove(7, 4)
    assert f.value == 20
    assert f.factors == {2 : 2, 5 : 1}

def test_remove_keeps_product():
    for n in NUMBERS[2:]:
        for p, e in Factorization.from_int(n).factors.items():
            for k in range(1, e + 1):
                f = Factorization.from_int(n)
                f.remove(p, k)
                assert f.value * p ** k == n
                assert f.value == product(f.factors)

def test_remove_too_much():
    f = Factorization.from_int(12)
    f.remove(2, 3)
    assert f.factors == {3 : 1}
    assert f.value == 1

    f = Factorization.from_int(12)
    with raises(ExponentUnderflowError) as e:
        f.remove(2, 3, strict = True)
    assert e.value.exponent == 2
    assert f.value == 12
    assert f.factors == {2 : 2, 3 : 1}

def test_copy():
    f = Factorization.from_int(360)
    g = f.copy()
    assert f == g
    g.remove(5, 1)
    assert f.value == 360
    assert 5 in f.factors

def test_multiply():
    a = Factorization.from_int(12)
    b = Factorization.from_int(90)
    c = a.multiply(b)
    assert c.value == 1080
    assert c.factors == {2 : 3, 3 : 3, 5 : 1}
    assert a.factors == {2 : 2, 3 : 1}
    assert b.factors == {2 : 1, 3 : 2, 5 : 1}
    assert c == b * a
    assert c == Factorization.from_int(1080)

def test_multiply_associative():
    fs = [Factorization.from_int(n) for n in (18, 35, 1, 77, 1024)]
    for a in fs:
        for b in fs:
            for c in fs:
                x = a.multiply(b).multiply(c)
                y = a.multiply(b.multiply(c))
                assert x.value == y.value == a.value * b.value * c.value
                assert x.factors == y.factors

def test_negative():
    f = Factorization.from_int(-12)
    assert f.value == -12
    assert f.factors == {}
    with raises(NegativeFactorizationError) as e:
        Factorization.from_int(-12, strict = True)
    assert e.value.value == -12

def test_strict_default(monkeypatch):
    import primefrac.factorization
    monkeypatch.setattr(primefrac.factorization, 'STRICT', True)
    with raises(NegativeFactorizationError):
        Factorization.from_int(-1)
    assert Factorization.from_int(-1, strict = False).value == -1

def test_to_string():
    examples = [
        (360, '360: 2^3*3^2*5'),
        (1, '1: '),
        (0, '0: '),
        (97, '97: 97'),
        (1024, '1024: 2^10')
    ]
    for n, expected in examples:
        assert str(Factorization.from_int(n)) == expected
    assert int(Factorization.from_int(77)) == 77
    assert Factorization.from_int(20).prime_powers() == [(2, 2), (5, 1)]

def test_lenient_warnings(caplog):
    Factorization.from_int(-12)
    f = Factorization.from_int(12)
    f.remove(2, 3)
    messages = [r.getMessage() for r in caplog.records
                if r.levelname == 'WARNING']
    assert messages == [
        'Factorizing negative integer -12, keeping it unfactored.',
        'Cannot remove 2^3 from 12: 2^2*3, the exponent is only 2.'
    ]

def test_equality():
    f = Factorization.from_factors({2 : 2, 3 : 1})
    assert Factorization.from_int(12) == f
    assert Factorization.from_int(12) != Factorization.from_int(13)
    assert Factorization.from_int(12) != 12
    assert Factorization.from_int(12).__eq__(12) is NotImplemented
