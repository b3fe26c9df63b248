from __future__ import annotations

import pytest

from search_cursor.cursor import Cursor, is_char_boundary

# "ö" is two bytes in UTF-8.
MIXED = "öaöböcödöeöfö"


def make_cursor(text: str = MIXED, *, at_end: bool = False) -> Cursor:
    cursor = Cursor(text)
    if at_end:
        cursor.move_to_end()
    return cursor


def test_new_cursor_starts_at_zero() -> None:
    cursor = make_cursor()

    assert cursor.position == 0
    assert cursor.byte_length == 20
    assert len(cursor) == 20


def test_move_right_visits_only_char_starts() -> None:
    cursor = make_cursor()
    expected = [0, 2, 3, 5, 6, 8, 9, 11, 12, 14, 15, 17, 18, 20, 20, 20, 20]

    seen = []
    for _ in expected:
        seen.append(cursor.position)
        cursor.move_right()

    assert seen == expected


def test_move_left_visits_only_char_starts() -> None:
    cursor = make_cursor(at_end=True)
    expected = [20, 18, 17, 15, 14, 12, 11, 9, 8, 6, 5, 3, 2, 0, 0, 0, 0]

    seen = []
    for _ in expected:
        seen.append(cursor.position)
        cursor.move_left()

    assert seen == expected


def test_move_reports_whether_it_moved() -> None:
    cursor = make_cursor("ö")

    assert cursor.move_left() is False
    assert cursor.move_right() is True
    assert cursor.move_right() is False
    assert cursor.move_left() is True


def test_right_then_left_round_trips() -> None:
    cursor = make_cursor()
    while cursor.position < cursor.byte_length:
        start = cursor.position
        cursor.move_right()
        cursor.move_left()
        assert cursor.position == start
        cursor.move_right()


def test_start_and_end() -> None:
    cursor = make_cursor("hello wörld")

    cursor.move_to_end()
    assert cursor.position == len("hello wörld".encode("utf-8"))

    cursor.move_to_start()
    assert cursor.position == 0


def test_start_and_end_on_empty_buffer() -> None:
    cursor = Cursor()

    cursor.move_to_end()
    assert cursor.position == 0
    cursor.move_to_start()
    assert cursor.position == 0
    assert not cursor


def test_text_before_cursor_and_current_char() -> None:
    cursor = make_cursor()
    for _ in range(4):
        cursor.move_right()

    assert cursor.text_before_cursor() == "öaöb"
    assert cursor.current_char() == "ö"
    assert cursor.full_text() == MIXED


def test_current_char_at_end_is_none() -> None:
    cursor = make_cursor(at_end=True)

    assert cursor.current_char() is None
    assert cursor.text_before_cursor() == MIXED


def test_four_byte_characters_are_stepped_atomically() -> None:
    cursor = make_cursor("a🙂b")

    cursor.move_right()
    cursor.move_right()
    assert cursor.position == 5
    assert cursor.current_char() == "b"

    cursor.move_left()
    assert cursor.position == 1
    assert cursor.current_char() == "🙂"


def test_word_jumps_follow_fixture() -> None:
    cursor = make_cursor("   aaa   ((()))bbb   ((()))   ")

    forward = []
    for _ in range(5):
        cursor.move_to_next_word()
        forward.append(cursor.position)
    assert forward == [3, 9, 15, 21, 30]

    backward = []
    for _ in range(5):
        cursor.move_to_prev_word()
        backward.append(cursor.position)
    assert backward == [21, 15, 9, 3, 0]


def test_word_jumps_return_byte_offsets_for_multibyte_text() -> None:
    text = "héllo wörld"
    cursor = make_cursor(text)

    cursor.move_to_next_word()
    assert cursor.position == len("héllo ".encode("utf-8"))
    assert cursor.current_char() == "w"

    cursor.move_to_end()
    cursor.move_to_prev_word()
    assert cursor.text_before_cursor() == "héllo "


@pytest.mark.parametrize("text", ["", "abc", MIXED, "   ", "ö ö(ö)"])
def test_position_always_on_char_boundary(text: str) -> None:
    cursor = make_cursor(text)
    data = text.encode("utf-8")
    moves = [
        cursor.move_right,
        cursor.move_to_next_word,
        cursor.move_right,
        cursor.move_to_prev_word,
        cursor.move_to_end,
        cursor.move_left,
        cursor.move_to_prev_word,
    ]

    for move in moves:
        move()
        assert 0 <= cursor.position <= len(data)
        assert is_char_boundary(data, cursor.position)
