"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

from typing import Any, TextIO

from minprintf.output import NULL_TEXT, put_str

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_CONSUMING = frozenset("csdiuxXp")


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _require_int(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an int, got {type(arg).__name__}")
    return arg


def _to_int32(n: int) -> int:
    return ((n + 2**31) & _U32) - 2**31


def format_unsigned(n: int) -> str:
    """Return ``n`` as an unsigned 32-bit decimal number."""
    return str(_require_int(n, "u") & _U32)


def format_hex(n: int, spec: str = "x") -> str:
    """Return ``n`` as an unsigned 64-bit hexadecimal number; upper case only for ``spec == "X"``."""
    text = format(_require_int(n, spec) & _U64, "x")
    return text.upper() if spec == "X" else text


def format_pointer(ptr: int) -> str:
    """Return an address as ``0x`` followed by lower-case hexadecimal digits."""
    return "0x" + format_hex(ptr, "x")


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_require_int(arg, "c") & 0xFF)


def format_conversion(spec: str, arg: Any = None) -> str:
    """Return the text for one conversion; unknown specifiers produce nothing."""
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        if arg is None:
            return NULL_TEXT
        if not isinstance(arg, str):
            raise TypeError(f"%s expects a str, got {type(arg).__name__}")
        return arg
    if spec in ("d", "i"):
        return str(_to_int32(_require_int(arg, spec)))
    if spec == "u":
        return format_unsigned(arg)
    if spec in ("x", "X"):
        return format_hex(_require_int(arg, spec) & _U32, spec)
    if spec == "p":
        return format_pointer(arg)
    if spec == "%":
        return "%"
    return ""


def render(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        if spec in _CONSUMING:
            try:
                arg = next(values)
            except StopIteration:
                raise FormatError(f"missing argument for %{spec}") from None
            pieces.append(format_conversion(spec, arg))
        else:
            pieces.append(format_conversion(spec))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (standard output by default) and return its length."""
    return put_str(render(fmt, *args), file)