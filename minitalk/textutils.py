"""String and byte-buffer helpers: searching, comparing, slicing and splitting.

Searches return an index into the argument, or ``None`` when nothing is
found. Comparisons return the difference of the first pair of differing
character codes, so only the sign and zero-ness carry meaning.
"""

from itertools import islice, zip_longest
from typing import Callable, Iterator, Optional, Union

CharLike = Union[str, int]
Text = Union[str, bytes]


def _char(c: CharLike) -> str:
    """Return a one-character string; integer codes are taken as a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _codes(s: Text) -> Iterator[int]:
    if isinstance(s, bytes):
        return iter(s)
    return map(ord, s)


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character finds the end of the string, so its
    index is ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s; NUL finds ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def compare_prefix(s1: Text, s2: Text, n: int) -> int:
    """Compare at most n leading characters of s1 and s2.

    The end of the shorter string counts as code 0. The result is the
    difference of the first differing codes, or 0 if none differ.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for a, b in islice(zip_longest(_codes(s1), _codes(s2), fillvalue=0), n):
        if a != b:
            return a - b
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle lying wholly within haystack's first length characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: Optional[str]) -> str:
    """s without the leading and trailing characters that appear in charset.

    With no charset the string comes back unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of s between occurrences of sep."""
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def mem_find(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value among the first n bytes of data.

    value is taken as an unsigned byte, so only its low eight bits count.
    """
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def mem_compare(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b.

    The result is the difference of the first differing bytes, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0