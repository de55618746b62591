"""Classification and case conversion of single ASCII characters.

Every function takes either a one-character string or an integer code.
"""

from __future__ import annotations

CharLike = "int | str"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - 32)
    return c


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + 32)
    return c