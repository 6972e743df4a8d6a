import pytest

from solong.textutil import (
    differs_from,
    line_length,
    mapi,
    split,
    strncmp,
    strnstr,
    strrchr,
    substr,
)


def test_line_length_plain_text():
    assert line_length("david") == len("david")


def test_line_length_stops_at_newline():
    assert line_length("1111\n") == len("1111")


def test_line_length_empty():
    assert line_length("") == 0


def test_differs_from_all_walls():
    assert differs_from("11111\n", "1") is False


def test_differs_from_with_other_char():
    assert differs_from("11011\n", "1") is True


def test_differs_from_ignores_after_newline():
    assert differs_from("111\n0", "1") is False


def test_differs_from_empty_text():
    assert differs_from("", "1") is False


def test_differs_from_rejects_long_char():
    with pytest.raises(ValueError):
        differs_from("abc", "ab")


def test_split_worked_example():
    text = "     ,salut,les, ,meilleurs, david"
    assert split(text, ",") == ["     ", "salut", "les", " ", "meilleurs", " david"]


def test_split_drops_empty_words():
    assert split(",,a,,b,,", ",") == ["a", "b"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_empty():
    assert split("", ",") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_substr_middle():
    assert substr("Bonjour", 3, 2) == "Bonjour"[3:5]


def test_substr_clamped_to_end():
    assert substr("Bonjour", 3, 100) == "Bonjour"[3:]


def test_substr_zero_length():
    assert substr("Bonjour", 0, 0) == ""


def test_substr_start_past_end():
    assert substr("", 1, 1) == ""


def test_substr_stops_at_newline():
    assert substr("ab\ncd", 0, 5) == "ab"


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strncmp_equal_prefix():
    assert strncmp("daviD", "david", 3) == 0


def test_strncmp_difference():
    assert strncmp("daviD", "david", 5) == ord("D") - ord("d")


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("dav", "davia", 5) == -ord("i")


def test_strncmp_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strnstr_found_within_length():
    haystack = "j ai un sac remplie de bonbon"
    index = strnstr(haystack, "sa", 19)
    assert index == haystack.index("sa")


def test_strnstr_not_within_length():
    haystack = "j ai un sac remplie de bonbon"
    assert strnstr(haystack, "bonbon", 19) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_match_must_fit():
    assert strnstr("abcdef", "cde", 4) is None
    assert strnstr("abcdef", "cde", 5) == 2


def test_strrchr_last_occurrence():
    assert strrchr("Hello world", "o") == "Hello world".rindex("o")


def test_strrchr_nul_gives_length():
    assert strrchr("Hello world", "\0") == len("Hello world")


def test_strrchr_missing():
    assert strrchr("Hello", "z") is None


def test_strrchr_ignores_after_newline():
    assert strrchr("ab\nab", "b") == 1


def test_mapi_shift_by_index():
    result = mapi("abc", lambda i, c: chr(ord(c) + i))
    assert result == "ace"


def test_mapi_identity_round_trip():
    assert mapi("so_long", lambda i, c: c) == "so_long"


def test_mapi_stops_at_newline():
    assert mapi("ab\ncd", lambda i, c: c.upper()) == "AB"