# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Rationals as pairs of factorizations kept in lowest terms. Common
# factors are cancelled prime by prime by subtracting exponents so no
# gcd is ever computed.
from fractions import Fraction as Rational
from logging import getLogger
from re import fullmatch

from primefrac.factorization import Factorization, resolve_strict

log = getLogger(__name__)

STRICT_SYNTAX = r'\d+(/\d+|\.\d+)?'

class ParseError(ValueError):
    def __init__(self, message, text):
        super().__init__(message)
        self.text = text

class DivisionByZeroError(ZeroDivisionError):
    pass

def simplify(num, denom):
    '''Cancels all common prime powers of num and denom. Returns new
    factorizations, the arguments are left alone.'''
    num2 = num.copy()
    denom2 = denom.copy()
    for p, denom_e in denom.factors.items():
        num_e = num.factors.get(p)
        if num_e is None:
            continue
        e = min(num_e, denom_e)
        num2.remove(p, e)
        denom2.remove(p, e)
    return num2, denom2

def parse_int(s, text):
    try:
        return int(s)
    except ValueError:
        raise ParseError('`%s` is not a number.' % text, text) from None

class Fraction:
    def __init__(self, num, denom, strict = None, reduced = False):
        '''Takes ownership of copies of num and denom. Zero is always
        stored as 0/1. Pass reduced = True to skip cancellation when
        num and denom are known to be coprime.'''
        self.strict = resolve_strict(strict)
        if num.value == 0:
            self.numerator = num.copy()
            self.denominator = Factorization.from_int(1)
            return
        if denom.value == 0:
            message = 'Denominator of %d/0 is zero.' % num.value
            if self.strict:
                raise DivisionByZeroError(message)
            log.warning(message)
        if reduced:
            self.numerator = num.copy()
            self.denominator = denom.copy()
        else:
            self.numerator, self.denominator = simplify(num, denom)

    @classmethod
    def from_ints(cls, num, denom, strict = None):
        strict = resolve_strict(strict)
        return cls(Factorization.from_int(num, strict),
                   Factorization.from_int(denom, strict),
                   strict)

    @classmethod
    def from_factors(cls, num, denom, strict = None):
        return cls(num, denom, strict)

    @classmethod
    def from_string(cls, text, strict = None):
        '''Parses `n/d`, `i.ddd` or `n`.'''
        strict = resolve_strict(strict)
        if strict and not fullmatch(STRICT_SYNTAX, text):
            raise ParseError('`%s` is not a fraction.' % text, text)
        if '/' in text:
            num, denom = text.split('/', 1)
            return cls.from_ints(parse_int(num, text),
                                 parse_int(denom, text), strict)
        if '.' in text:
            whole, decimals = text.split('.', 1)
            denom = 10 ** len(decimals)
            num = parse_int(whole, text) * denom + \
                parse_int(decimals, text)
            return cls.from_ints(num, denom, strict)
        return cls.from_ints(parse_int(text, text), 1, strict)

    @classmethod
    def from_rational(cls, q, strict = None):
        q = Rational(q)
        return cls.from_ints(q.numerator, q.denominator, strict)

    def combined_strict(self, other):
        return self.strict or other.strict

    def add(self, other):
        num = self.numerator.value * other.denominator.value + \
            other.numerator.value * self.denominator.value
        return self.over_denominators(num, other)

    def minus(self, other):
        num = self.numerator.value * other.denominator.value - \
            other.numerator.value * self.denominator.value
        return self.over_denominators(num, other)

    def over_denominators(self, num, other):
        strict = self.combined_strict(other)
        denom = self.denominator.multiply(other.denominator)
        return Fraction(Factorization.from_int(num, strict), denom, strict)

    def multiply(self, other):
        num = self.numerator.multiply(other.numerator)
        denom = self.denominator.multiply(other.denominator)
        return Fraction(num, denom, self.combined_strict(other))

    def divide(self, other):
        return self.multiply(other.inverse())

    def inverse(self):
        # A reduced fraction stays reduced when flipped.
        return Fraction(self.denominator, self.numerator, self.strict,
                        reduced = True)

    def prime_powers(self):
        return self.numerator.prime_powers() + \
            [(p, -e) for p, e in self.denominator.prime_powers()]

    def to_rational(self):
        return Rational(self.numerator.value, self.denominator.value)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.minus(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __eq__(self, o):
        if not isinstance(o, Fraction):
            return NotImplemented
        return self.numerator.value * o.denominator.value == \
            o.numerator.value * self.denominator.value

    def __hash__(self):
        # All x/0 compare equal to each other.
        if self.denominator.value == 0:
            return 0
        return hash(self.to_rational())

    def __str__(self):
        return '%d/%d' % (self.numerator.value, self.denominator.value)

    def __repr__(self):
        return 'Fraction(%s)' % self
