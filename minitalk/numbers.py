"""Conversions between decimal text and fixed-width integers."""

import re

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

INT_BITS = 32
LONG_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement integer of the given width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = int(digits) if digits else 0
    return _wrap(-magnitude if sign == "-" else magnitude, bits)


def atoi(text: str) -> int:
    """Parse the leading decimal number of text as a 32-bit signed integer.

    Leading ASCII whitespace is skipped, then one optional sign, then
    ASCII digits up to the first other character. Text with no digits
    gives 0. Values beyond the 32-bit range wrap around.
    """
    return _parse(text, INT_BITS)


def atol(text: str) -> int:
    """Parse like atoi, but as a 64-bit signed integer."""
    return _parse(text, LONG_BITS)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)