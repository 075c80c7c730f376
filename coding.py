"""Encoding integers as short base-64 identifiers.

The alphabet below is the wire format for every identifier we hand out:
digits, then uppercase, then lowercase, then "-" and "_". Changing the order
changes every id, so don't.
"""

import logging
import string

import decorator

import errors
import settings


log = logging.getLogger(__name__)

CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase + "-_"
RADIX = len(CHARS)


def max_value():
    """Largest int that fits in `settings.word_bits` unsigned bits."""
    return (1 << settings.word_bits) - 1


def _is_int(x):
    return isinstance(x, int) and not isinstance(x, bool)


@decorator.decorator
def checked_value(f, value, *args, **kwargs):
    if not _is_int(value) or value < 0 or value > max_value():
        raise errors.InvalidValue("bad int for encoding %r" % (value,))
    return f(value, *args, **kwargs)


@decorator.decorator
def checked_length(f, n, *args, **kwargs):
    if not _is_int(n) or n < 0:
        raise errors.InvalidLength("bad digit count %r" % (n,))
    return f(n, *args, **kwargs)


@checked_value
def encoded_length(value):
    """Number of characters ``encode(value)`` will produce."""
    return max(1, (value.bit_length() + 5) // 6)


@checked_value
def encode(value):
    """Encode a non-negative int, most significant digit first.

    >>> encode(145)
    '2H'
    """
    if value < RADIX:
        return CHARS[value]

    result = [None] * encoded_length(value)
    i = len(result)
    while value:
        i -= 1
        result[i] = CHARS[value & 63]
        value >>= 6
    return "".join(result)


@checked_length
def max_value_for_length(n):
    """Largest value an `n` character id can hold, i.e. 64**n - 1.

    Returns None if 64**n doesn't fit in `settings.word_bits` bits.
    """
    # 64**n == 2**(6n), which fits iff 6n < word_bits.
    if 6 * n >= settings.word_bits:
        log.debug("%d digits overflow %d bits", n, settings.word_bits)
        return None
    return (1 << (6 * n)) - 1
