"""A small printf supporting the conversions %c %s %d %i %u %x %X %p and %%.

Integer arguments are reduced to the width the conversion expects:
32 bits for %c-free integer conversions and 64 bits for pointers.
A conversion letter that is not recognised produces no output and
consumes no argument.
"""

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << _POINTER_BITS) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_MISSING = object()


def _integer(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _signed32(value: Any) -> int:
    value = _integer(value) & _UINT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_signed(value: Any) -> str:
    return str(_signed32(value))


def _format_unsigned(value: Any) -> str:
    return str(_integer(value) & _UINT_MASK)


def _format_hex_lower(value: Any) -> str:
    return format(_integer(value) & _UINT_MASK, "x")


def _format_hex_upper(value: Any) -> str:
    return format(_integer(value) & _UINT_MASK, "X")


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return NULL_POINTER
    return "0x" + format(_integer(value) & _POINTER_MASK, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
    "p": _format_pointer,
}


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        return ""
    value = next(arguments, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return conversion(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by its formatted argument."""
    arguments = iter(args)
    characters = iter(fmt)
    pieces = []
    for ch in characters:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(characters, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)