import pytest

from minprintf.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"def"


def test_memset_value_wraps_modulo_256():
    buf = bytearray(4)
    memset(buf, 256 + 7, 4)
    assert all(b == 7 for b in buf)


def test_memset_too_long_rejected():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"llo"


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst[:4] == b"abcd"
    assert dst[4:] == b".."


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("o"), 5) == 4


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) == -memcmp(a, b, 3)


def test_memcmp_treats_bytes_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)