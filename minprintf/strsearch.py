"""Searching, comparing and bounded copying of strings."""

from __future__ import annotations

from itertools import zip_longest

_END = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator (``"\\0"`` or 0) finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == _END:
        return len(s)
    return None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator finds the end of the string.
    """
    ch = _char(c)
    index = s.rfind(ch)
    if index >= 0:
        return index
    if ch == _END:
        return len(s)
    return None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when it is absent.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference of the first mismatch, else 0."""
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_END):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``; truncation
    happened when that length is ``size`` or more.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots, one kept for the terminator.

    Returns the resulting text and the length the full result would have had.
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)