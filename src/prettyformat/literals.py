"""
Canonical literal forms for scalar and text values.

Numbers follow Go's `%v` verb: floats are written with the shortest decimal
that parses back to the same value (at the float's own precision), switching
to exponent notation for large and small magnitudes. Strings follow Go's `%q`
verb.
"""

# std
import math
from decimal import Decimal

# third-party
import numpy as np


# ---------------------------------------------------------------------------- #
# Go's `%v` uses exponent notation if the decimal exponent is less than
# `MIN_EXPONENT` or at least `MAX_EXPONENT`
MIN_EXPONENT = -4
MAX_EXPONENT = 6

FLOAT_TYPES = {32: np.float32,
               64: np.float64}

ESCAPES = {'\a': R'\a',
           '\b': R'\b',
           '\f': R'\f',
           '\n': R'\n',
           '\r': R'\r',
           '\t': R'\t',
           '\v': R'\v',
           '\\': R'\\',
           '"':  R'\"'}

# ---------------------------------------------------------------------------- #


def boolean(value):
    return 'true' if value else 'false'


def integer(value):
    return str(int(value))


def floating(value, bits=64):
    """
    Shortest round-trip representation of `value` as a float of width `bits`.

    Examples
    --------
    >>> floating(1234.5677, 32)
    '1234.5677'
    >>> floating(1e6)
    '1e+06'
    """
    # narrow first: values beyond the range of the width overflow to infinity
    with np.errstate(over='ignore'):
        value = FLOAT_TYPES[bits](float(value))

    if math.isnan(value):
        return 'NaN'

    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'

    digits = np.format_float_positional(value, unique=True, trim='-')
    return _layout(*Decimal(digits).as_tuple())


def _layout(sign, digits, exponent):
    # strip trailing zeros
    digits = ''.join(map(str, digits))
    stripped = digits.rstrip('0')
    if not stripped:
        return '-0' if sign else '0'

    exponent += len(digits) - len(stripped)
    digits = stripped
    sign = '-' if sign else ''

    # position of the decimal point relative to the first digit
    point = len(digits) + exponent
    exp = point - 1
    if exp < MIN_EXPONENT or exp >= MAX_EXPONENT:
        mantissa = f'{digits[0]}.{digits[1:]}' if len(digits) > 1 else digits
        return f'{sign}{mantissa}e{"-" if exp < 0 else "+"}{abs(exp):02d}'

    if point <= 0:
        return f'{sign}0.{"0" * -point}{digits}'

    if point >= len(digits):
        return f'{sign}{digits}{"0" * (point - len(digits))}'

    return f'{sign}{digits[:point]}.{digits[point:]}'


def complex_(value, bits=128):
    """
    Complex number as `(<real><imag>i)`, where the imaginary part always
    carries an explicit sign.

    Examples
    --------
    >>> complex_(complex(-4321.12345, 1234.56789))
    '(-4321.12345+1234.56789i)'
    """
    value = complex(value)
    half = bits // 2
    imag = floating(value.imag, half)
    if not imag.startswith(('-', '+')):
        imag = f'+{imag}'
    return f'({floating(value.real, half)}{imag}i)'


def quote(text):
    """
    Double-quoted string literal, with control characters, non-printable
    characters, quotes and backslashes escaped.

    Examples
    --------
    >>> print(quote('tab\\there "quoted"'))
    "tab\\there \\"quoted\\""
    """
    return f'"{"".join(map(_escape, text))}"'


def _escape(char):
    if char in ESCAPES:
        return ESCAPES[char]

    if char.isprintable():
        return char

    code = ord(char)
    if code < 0x20 or code == 0x7f:
        return f'\\x{code:02x}'

    if 0xd800 <= code <= 0xdfff:
        # lone surrogates are not valid code points
        code = 0xfffd

    if code < 0x10000:
        return f'\\u{code:04x}'

    return f'\\U{code:08x}'
