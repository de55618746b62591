import pytest

from minprintf.strtools import (
    atoi,
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n\v\f\r+7", 7),
        ("+-5", 0),
        ("--5", 0),
        ("abc", 0),
        ("", 0),
        ("   ", 0),
        ("0012", 12),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_positive_overflow_gives_minus_one():
    assert atoi("9223372036854775808") == -1


def test_atoi_negative_overflow_gives_zero():
    assert atoi("-9223372036854775809") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 123, -456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator_gives_whole_string():
    assert split("abc", ",") == ["abc"]


def test_split_only_separators_is_empty():
    assert split(",,,", ",") == []


def test_split_joined_pieces_hold_no_separator():
    words = split("a,,b,c,,", ",")
    assert "".join(words) == "abc"
    assert all("," not in w and w for w in words)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clamps_length():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end_and_zero_length():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 1, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_strmapi_keeps_length():
    text = "mapping"
    assert len(strmapi(text, lambda i, c: "z")) == len(text)


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, c: str(i))
    assert chars == ["0", "1", "2", "3"]
    assert result is chars


def test_striteri_empty_sequence():
    assert striteri([], lambda i, c: c) == []