"""Building, splitting and converting strings."""

from __future__ import annotations

from typing import Callable, MutableSequence

from minprintf.chars import is_digit

_SPACES = frozenset(" \t\n\v\f\r")
_LONG_MAX = 2**63 - 1


def _to_int32(n: int) -> int:
    return ((n + 2**31) & 0xFFFFFFFF) - 2**31


def atoi(s: str) -> int:
    """Parse a leading decimal integer, after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits give 0.  A magnitude
    beyond the 64-bit signed range gives -1 for positive input and 0 for
    negative input.  The result wraps to a 32-bit signed integer.
    """
    rest = s.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] == "-":
        sign = -1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + int(ch)
        if value > _LONG_MAX:
            return 0 if sign < 0 else -1
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be str")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be str")
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> MutableSequence[str]:
    """Replace each character in place with ``func(index, char)`` and return the sequence."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)
    return chars