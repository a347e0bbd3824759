# Copyright (C) 2022 Björn A. Lindqvist <bjourne@gmail.com>
"""Prime-factored fraction calculator

Evaluates tokens like `1/20 * 10/3 + 1/6` from left to right. Without
tokens the example above is evaluated.

Usage:
    demo.py [options] [--] [<token>...]

Options:
    -h --help               show this screen
    --factors               print the factorizations of the result
    --strict                raise errors instead of silently
                            computing garbage
    --log-level=<lvl>       DEBUG, INFO, WARNING, ERROR or CRITICAL
                            [default: WARNING]
"""
from docopt import docopt
from logging import basicConfig, getLogger
import sys

from primefrac.factorization import (ExponentUnderflowError,
                                     NegativeFactorizationError)
from primefrac.fraction import Fraction, ParseError

log = getLogger(__name__)

EXAMPLE = ['1/20', '*', '10/3', '+', '1/6']

OPERATORS = {
    '+' : Fraction.add,
    '-' : Fraction.minus,
    '*' : Fraction.multiply,
    '/' : Fraction.divide
}

class ExpressionError(Exception):
    def __init__(self, message, at):
        super().__init__(message)
        self.at = at

def evaluate(tokens, strict = False):
    if not tokens:
        raise ExpressionError('Empty expression.', 0)
    if len(tokens) % 2 == 0:
        fmt = 'Expected an operand after `%s`.'
        raise ExpressionError(fmt % tokens[-1], len(tokens))
    acc = Fraction.from_string(tokens[0], strict)
    for i in range(1, len(tokens), 2):
        op = tokens[i]
        if op not in OPERATORS:
            fmt = 'Unknown operator `%s` at token %d.'
            raise ExpressionError(fmt % (op, i + 1), i)
        arg = Fraction.from_string(tokens[i + 1], strict)
        log.info('%s %s %s', acc, op, arg)
        acc = OPERATORS[op](acc, arg)
    return acc

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

def fail(message):
    print('error: %s' % message, file = sys.stderr)
    sys.exit(1)

def main():
    args = docopt(__doc__, version = 'primefrac 1.0')
    level = args['--log-level'].upper()
    if level not in LEVELS:
        fail('Unknown log level `%s`.' % args['--log-level'])
    basicConfig(
        format = '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        level = level)
    tokens = args['<token>'] or EXAMPLE
    try:
        frac = evaluate(tokens, args['--strict'])
    except (ExpressionError, ParseError, NegativeFactorizationError,
            ExponentUnderflowError, ZeroDivisionError) as e:
        fail(e)
    print(frac)
    if args['--factors']:
        print(frac.numerator)
        print(frac.denominator)

if __name__ == '__main__':
    main()
