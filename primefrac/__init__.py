# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
#
# Exact rational arithmetic on top of prime factorizations. Numbers
# are stored as maps from primes to exponents so that fractions can be
# reduced by subtracting exponents instead of computing gcds:
#
#     >>> from primefrac import Fraction
#     >>> a = Fraction.from_string('1/20') * Fraction.from_string('10/3')
#     >>> print(a + Fraction.from_string('1/6'))
#     1/3
#
# Run `python -m primefrac.demo --help` for a small calculator.
#
# FAQ
# ===
#
# What about negative numbers?
# ----------------------------
# They can't be factored by trial division so they are kept as an
# unfactored value and won't be reduced. Set PRIMEFRAC_STRICT=1 or
# pass strict = True to get an error instead.
from primefrac.factorization import (ExponentUnderflowError,
                                     Factorization,
                                     NegativeFactorizationError,
                                     prime_candidates)
from primefrac.fraction import (DivisionByZeroError, Fraction,
                                ParseError, simplify)

__all__ = [
    'DivisionByZeroError',
    'ExponentUnderflowError',
    'Factorization',
    'Fraction',
    'NegativeFactorizationError',
    'ParseError',
    'prime_candidates',
    'simplify'
]
