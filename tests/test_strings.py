import string

import pytest

from structkit.strings import rand_string, replace, search

S1 = "this is a simple example"


@pytest.mark.parametrize(
    "sub, start, expected",
    [
        ("this", 0, 0),
        ("is", 0, 2),
        ("is", 3, 5),
        ("mp", 0, 12),
        ("mp", 13, 20),
    ],
)
def test_search_ascii(sub, start, expected):
    assert search(S1, sub, start) == expected


def test_search_missing_returns_length():
    assert search(S1, "not exist", 0) == len(S1)


@pytest.mark.parametrize(
    "sub, start, expected",
    [
        ("这是", 0, 0),
        ("中文", 0, 6),
        ("是", 0, 3),
        ("是", 6, 12),
    ],
)
def test_search_utf8_bytes(sub, start, expected):
    s2 = "这是中文是的".encode("utf-8")
    assert search(s2, sub.encode("utf-8"), start) == expected


def test_search_on_str_uses_character_positions():
    assert search("这是中文是的", "中文", 0) == 2


def test_search_start_past_end_returns_length():
    assert search("abc", "a", 10) == 3


def test_search_sub_longer_than_text():
    assert search("ab", "abc", 0) == 2


def test_search_default_start_is_zero():
    assert search(S1, "simple") == 10


def test_rand_strings_are_distinct():
    seen = [rand_string(16) for _ in range(100)]
    assert len(set(seen)) == 100


def test_rand_string_length_and_alphabet():
    s = rand_string(50)
    assert len(s) == 50
    assert set(s) <= set(string.ascii_letters + string.digits)


def test_rand_string_zero_length():
    assert rand_string(0) == ""


def test_rand_string_negative_length_raises():
    with pytest.raises(ValueError):
        rand_string(-1)


def test_replace():
    assert replace("abcdbcefghbcio", "bc", "xyz") == "axyzdxyzefghxyzio"


def test_replace_bytes():
    assert replace(b"abcdbcefghbcio", b"bc", b"xyz") == b"axyzdxyzefghxyzio"


def test_replace_without_match_returns_source():
    assert replace("abcdef", "zz", "x") == "abcdef"


def test_replace_empty_sub_raises():
    with pytest.raises(ValueError):
        replace("abc", "", "x")