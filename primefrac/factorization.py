# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Integers stored as maps from prime factors to exponents. Multiplying
# two factorizations is a merge of their maps and dividing out a
# common factor is an exponent subtraction, which is what the Fraction
# class builds on.
from logging import getLogger
from math import prod
from os import environ

log = getLogger(__name__)

# Process wide default for strict mode. Strict mode raises on the edge
# cases that lenient mode lets through silently.
STRICT = environ.get('PRIMEFRAC_STRICT', '0') not in ('', '0')

def resolve_strict(strict):
    return STRICT if strict is None else bool(strict)

class NegativeFactorizationError(ValueError):
    def __init__(self, message, value):
        super().__init__(message)
        self.value = value

class ExponentUnderflowError(ArithmeticError):
    def __init__(self, message, prime, power, exponent):
        super().__init__(message)
        self.prime = prime
        self.power = power
        self.exponent = exponent

def prime_candidates():
    '''Yields 2, 3 and then every number not divisible by 2 or 3. The
    composites in the sequence are harmless for trial division since
    their prime factors have already been divided out when they come
    up.'''
    yield 2
    yield 3
    p = 5
    while True:
        yield p
        yield p + 2
        p += 6

def power_of(p, n):
    '''Returns (e, n / p^e) for the largest e such that p^e divides n.'''
    e = 0
    while n % p == 0:
        n //= p
        e += 1
    return e, n

def push_factor(factors, p, e):
    if p < 2 or e < 1:
        return
    factors[p] = e

def trial_divide(n):
    factors = {}
    rem = n
    for p in prime_candidates():
        if p * p > rem:
            break
        e, rem = power_of(p, rem)
        push_factor(factors, p, e)
    push_factor(factors, rem, 1)
    return factors

def product(factors):
    if not factors:
        return 1
    return prod(p ** e for p, e in factors.items())

class Factorization:
    def __init__(self, factors, value):
        self.factors = factors
        self.value = value

    @classmethod
    def from_int(cls, n, strict = None):
        if n < 0:
            if resolve_strict(strict):
                raise NegativeFactorizationError(
                    'Cannot factorize negative integer %d.' % n, n)
            log.warning('Factorizing negative integer %d, '
                        'keeping it unfactored.', n)
        factors = trial_divide(n)
        log.debug('Factorized %d into %s.', n, factors)
        return cls(factors, n)

    @classmethod
    def from_factors(cls, factors, value = None):
        '''Builds a factorization from a prime to exponent map that is
        assumed to be reduced. The map is copied.'''
        factors = dict(factors)
        if value is None:
            value = product(factors)
        return cls(factors, value)

    def remove(self, prime, power, strict = None):
        exponent = self.factors.get(prime)
        if exponent is None:
            return
        if power > exponent:
            fmt = 'Cannot remove %d^%d from %s, the exponent is only %d.'
            message = fmt % (prime, power, self, exponent)
            if resolve_strict(strict):
                raise ExponentUnderflowError(message, prime,
                                             power, exponent)
            log.warning(message)
        self.value //= prime ** power
        if power < exponent:
            self.factors[prime] = exponent - power
        else:
            del self.factors[prime]

    def copy(self):
        return Factorization(dict(self.factors), self.value)

    def multiply(self, other):
        res = self.copy()
        res.value *= other.value
        for p, e in other.factors.items():
            res.factors[p] = res.factors.get(p, 0) + e
        return res

    def prime_powers(self):
        return list(self.factors.items())

    def __mul__(self, other):
        return self.multiply(other)

    def __int__(self):
        return self.value

    def __eq__(self, o):
        if not isinstance(o, Factorization):
            return NotImplemented
        return self.value == o.value and self.factors == o.factors

    def __hash__(self):
        return hash((self.value, frozenset(self.factors.items())))

    def __str__(self):
        def fmt(p, e):
            return str(p) if e == 1 else '%d^%d' % (p, e)
        factors = '*'.join(fmt(p, e) for p, e in self.factors.items())
        return '%d: %s' % (self.value, factors)

    def __repr__(self):
        return 'Factorization(%r, %r)' % (self.factors, self.value)
