# third-party
import pytest
import numpy as np

# local
from prettyformat.literals import boolean, complex_, floating, integer, quote


# ---------------------------------------------------------------------------- #
def test_boolean():
    assert boolean(True) == 'true'
    assert boolean(np.bool_(False)) == 'false'


def test_integer():
    assert integer(-15) == '-15'
    assert integer(np.uint64(2 ** 64 - 1)) == '18446744073709551615'
    assert integer(10 ** 30) == '1' + '0' * 30


# ---------------------------------------------------------------------------- #
@pytest.mark.parametrize(
    'value, expected',
    {1234.56789:        '1234.56789',
     -4321.12345:       '-4321.12345',
     3.0:               '3',
     1.5:               '1.5',
     100000.0:          '100000',
     1e6:               '1e+06',
     123456789.0:       '1.23456789e+08',
     1e300:             '1e+300',
     0.0001:            '0.0001',
     1e-05:             '1e-05',
     -2.5e-10:          '-2.5e-10',
     0.1 + 0.2:         '0.30000000000000004',
     float('inf'):      '+Inf',
     float('-inf'):     '-Inf',
     }.items()
)
def test_floating(value, expected):
    assert floating(value) == expected


def test_floating_zero():
    assert floating(0.0) == '0'
    assert floating(-0.0) == '-0'


def test_floating_nan():
    assert floating(float('nan')) == 'NaN'


@pytest.mark.parametrize(
    'value, expected',
    {0.1:           '0.1',
     1234.5677:     '1234.5677',
     -4321.1235:    '-4321.1235',
     16777216.0:    '1.6777216e+07',
     }.items()
)
def test_floating_32(value, expected):
    # shortest representation at single precision
    assert floating(value, 32) == expected


def test_floating_32_overflow():
    # values beyond single precision range overflow to infinity
    assert floating(1e300, 32) == '+Inf'
    assert floating(-1e300, 32) == '-Inf'
    assert floating(1e300) == '1e+300'


def test_floating_bad_size():
    with pytest.raises(KeyError):
        floating(1.0, 16)


# ---------------------------------------------------------------------------- #
@pytest.mark.parametrize(
    'value, bits, expected',
    [(1j,                                   128,    '(0+1i)'),
     (complex(1, -0.0),                     128,    '(1-0i)'),
     (complex(1234.5677, -4321.1235),       64,     '(1234.5677-4321.1235i)'),
     (complex(-4321.12345, 1234.56789),     128,    '(-4321.12345+1234.56789i)'),
     (complex(0, float('inf')),             128,    '(0+Infi)'),
     (2,                                    128,    '(2+0i)'),
     (complex(1e300, 1),                    64,     '(+Inf+1i)'),
     (complex(1, -1e300),                   64,     '(1-Infi)')]
)
def test_complex(value, bits, expected):
    assert complex_(value, bits) == expected


# ---------------------------------------------------------------------------- #
@pytest.mark.parametrize(
    'text, expected',
    {'':                    '""',
     'hello':               '"hello"',
     'asdfasda\nasd':       R'"asdfasda\nasd"',
     'tab\there':           R'"tab\there"',
     'say "hi"':            R'"say \"hi\""',
     'back\\slash':         R'"back\\slash"',
     '\a\b\f\r\v':          R'"\a\b\f\r\v"',
     '\x00\x1b':            R'"\x00\x1b"',
     '\x7f':                R'"\x7f"',
     'café ñ 日本':          '"café ñ 日本"',
     '\x85':                R'"\u0085"',
     'zero\u200bwidth':     R'"zero\u200bwidth"',
     '\U000e0001':          R'"\U000e0001"',
     '\ud800':              R'"\ufffd"',
     }.items()
)
def test_quote(text, expected):
    assert quote(text) == expected
