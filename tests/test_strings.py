import pytest

from ftkit.strings import (
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strndup,
    strtrim,
    substr,
)


def test_strdup_copies_whole_string():
    assert strdup("hello world") == "hello world"


def test_strdup_stops_at_nul():
    assert strdup("abc\0def") == "abc"


def test_strdup_empty():
    assert strdup("") == ""


@pytest.mark.parametrize("n", [0, 1, 3, 5, 10])
def test_strndup_takes_at_most_n(n):
    text = "hello"
    result = strndup(text, n)
    assert result == text[:n]
    assert len(result) == min(n, len(text))


def test_strndup_negative_raises():
    with pytest.raises(ValueError):
        strndup("abc", -1)


@pytest.mark.parametrize("start,length", [(0, 5), (1, 3), (2, 100), (4, 1), (5, 2)])
def test_substr_matches_slice(start, length):
    text = "hello"
    assert substr(text, start, length) == text[start:start + length]


def test_substr_start_past_end_is_empty():
    assert substr("hello", 42, 3) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foo" + "bar"


def test_strjoin_with_empty_sides():
    assert strjoin("", "bar") == "bar"
    assert strjoin("foo", "") == "foo"


def test_strtrim_removes_both_ends():
    assert strtrim("xxhelloxy", "xy") == "hello"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


@pytest.mark.parametrize("size", [1, 2, 3, 6, 20])
def test_strlcpy_truncates_and_reports_length(size):
    src = "hello"
    copied, total = strlcpy(src, size)
    assert copied == src[:size - 1]
    assert total == len(src)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends_when_room():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_size():
    result, total = strlcat("foo", "barbaz", 6)
    assert len(result) == 5
    assert result == ("foo" + "barbaz")[:5]
    assert total == len("foo") + len("barbaz")


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("foobar", "xy", 3)
    assert result == "foobar"
    assert total == len("xy") + 3


def test_strmapi_passes_index_and_char():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")

    def upper_even(index, seq):
        if index % 2 == 0:
            seq[index] = seq[index].upper()

    result = striteri(chars, upper_even)
    assert result is chars
    assert "".join(chars) == "AbCd"


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    visited = []
    striteri(chars, lambda index, seq: visited.append(index))
    assert visited == [0, 1]


def test_striteri_bytearray():
    data = bytearray(b"abc")

    def bump(index, seq):
        seq[index] -= 32

    striteri(data, bump)
    assert data == bytearray(b"ABC")