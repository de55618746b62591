"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were
    copied to a temporary area first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dst, src) + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError("requested size overflows")
    return bytearray(total)