"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer
character code. Only the ASCII ranges are recognised; other characters
are never letters, digits or printable, and case conversion leaves them
unchanged.
"""

from typing import Union

CharLike = Union[str, int]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as a string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_digit_code(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower_code(code) or _is_upper_code(code)


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _is_digit_code(_code(c))


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit.

    An integer code is taken as an unsigned byte, so only its low eight
    bits are looked at.
    """
    code = _code(c)
    if not isinstance(c, str):
        code &= 0xFF
    return _is_lower_code(code) or _is_upper_code(code) or _is_digit_code(code)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged.

    The result has the same kind (string or integer) as the argument.
    """
    code = _code(c)
    if _is_upper_code(code):
        code += _CASE_OFFSET
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged.

    The result has the same kind (string or integer) as the argument.
    """
    code = _code(c)
    if _is_lower_code(code):
        code -= _CASE_OFFSET
    return _convert(c, code)