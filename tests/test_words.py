from __future__ import annotations

import pytest

from search_cursor.cursor import (
    WORD_SEPARATORS,
    CharClass,
    classify,
    is_separator,
    is_whitespace,
    is_word_boundary,
    next_word_position,
    prev_word_position,
)

FIXTURE = "   aaa   ((()))bbb   ((()))   "


@pytest.mark.parametrize(
    ("start", "expected"),
    [(0, 3), (1, 3), (3, 9), (9, 15), (15, 21), (21, 30)],
)
def test_next_word_position_fixture(start: int, expected: int) -> None:
    assert next_word_position(FIXTURE, start) == expected


@pytest.mark.parametrize(
    ("start", "expected"),
    [(30, 21), (21, 15), (15, 9), (9, 3), (3, 0)],
)
def test_prev_word_position_fixture(start: int, expected: int) -> None:
    assert prev_word_position(FIXTURE, start) == expected


def test_empty_text_positions() -> None:
    assert next_word_position("", 0) == 0
    assert prev_word_position("", 0) == 0


def test_single_character_text() -> None:
    assert next_word_position("a", 0) == 1
    assert prev_word_position("a", 1) == 0


def test_next_word_without_boundary_goes_to_end() -> None:
    assert next_word_position("abcdef", 2) == 6
    assert next_word_position("((()))", 0) == 6


def test_next_word_from_end_stays_at_end() -> None:
    assert next_word_position("abc def", 7) == 7


def test_next_word_skips_trailing_whitespace_to_end() -> None:
    assert next_word_position("abc   ", 0) == 6


def test_prev_word_only_whitespace_before_cursor() -> None:
    assert prev_word_position("    abc", 4) == 0


def test_prev_word_steps_over_single_character_word() -> None:
    assert prev_word_position("ab c", 4) == 2
    assert prev_word_position("x(y", 2) == 0


def test_prev_word_from_middle_of_word() -> None:
    assert prev_word_position("hello world", 8) == 6


def test_separator_runs_are_their_own_words() -> None:
    text = "foo.bar/baz"

    assert next_word_position(text, 0) == 3
    assert next_word_position(text, 3) == 4
    assert next_word_position(text, 4) == 7
    assert prev_word_position(text, 11) == 8
    assert prev_word_position(text, 8) == 4
    assert prev_word_position("foo.bar", 4) == 0


def test_multibyte_text_uses_character_indices() -> None:
    text = "öö ää"

    assert next_word_position(text, 0) == 3
    assert prev_word_position(text, 5) == 3


def test_boundary_rule_whitespace_transitions() -> None:
    assert is_word_boundary(" ", "a")
    assert is_word_boundary("a", " ")
    assert not is_word_boundary(" ", "\t")
    assert not is_word_boundary("a", "b")


def test_boundary_rule_separator_transitions() -> None:
    assert is_word_boundary("(", "a")
    assert is_word_boundary("a", ")")
    assert not is_word_boundary("(", ")")
    assert not is_word_boundary("-", ".")


def test_boundary_rule_separator_next_to_whitespace() -> None:
    # Both conditions fire; either one is enough.
    assert is_word_boundary(" ", "(")
    assert is_word_boundary(")", " ")


def test_unicode_whitespace_is_whitespace() -> None:
    assert is_whitespace(" ")
    assert is_whitespace("　")
    assert is_whitespace("\n")
    assert not is_whitespace("\x1f")
    assert not is_whitespace("a")


def test_separator_set_is_closed() -> None:
    for char in "./\\()\"'-:,;<>~!@#$%^&*|+=[]{}`?":
        assert is_separator(char)
    assert not is_separator("_")
    assert not is_separator("a")
    assert not is_separator(" ")
    assert not any(is_whitespace(char) for char in WORD_SEPARATORS)


def test_classify() -> None:
    assert classify(" ") is CharClass.WHITESPACE
    assert classify("{") is CharClass.SEPARATOR
    assert classify("ö") is CharClass.WORD
    assert classify("_") is CharClass.WORD
