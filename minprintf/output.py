"""Writing characters, strings and numbers to a text stream.

Each writer returns how many characters it wrote; a failed write raises
the stream's own exception.
"""

from __future__ import annotations

import sys
from typing import TextIO

NULL_TEXT = "(null)"


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def _write(text: str, file: TextIO | None) -> int:
    _stream(file).write(text)
    return len(text)


def put_char(c: str | int, file: TextIO | None = None) -> int:
    """Write one character, given as a one-character string or a code."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(c, file)


def put_str(s: str | None, file: TextIO | None = None) -> int:
    """Write a string; None is written as ``(null)``."""
    return _write(NULL_TEXT if s is None else s, file)


def put_endl(s: str | None, file: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is not None:
        _write(s + "\n", file)


def put_nbr(n: int, file: TextIO | None = None) -> int:
    """Write an integer in decimal."""
    return _write(str(n), file)