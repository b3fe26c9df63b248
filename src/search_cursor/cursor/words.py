"""Word classification and word-step scans.

Characters fall into three classes: whitespace, separators (a closed set of
punctuation/symbols) and word characters (everything else). Two adjacent
characters form a word boundary when their whitespace-ness differs or when
their separator-ness differs; the two tests are evaluated independently.

The scans below work on character indices of a ``str``. ``Cursor`` converts
to and from byte offsets around them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

WORD_SEPARATORS = frozenset("./\\()\"'-:,.;<>~!@#$%^&*|+=[]{}`~?")

# str.isspace() also accepts the ASCII information separators, which are not
# Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


class CharClass(Enum):
    WHITESPACE = "whitespace"
    SEPARATOR = "separator"
    WORD = "word"


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def is_separator(char: str) -> bool:
    return char in WORD_SEPARATORS


def classify(char: str) -> CharClass:
    if is_whitespace(char):
        return CharClass.WHITESPACE
    if is_separator(char):
        return CharClass.SEPARATOR
    return CharClass.WORD


def is_word_boundary(char: str, next_char: str) -> bool:
    """True when ``char`` followed by ``next_char`` crosses a word boundary."""

    return (is_whitespace(char) != is_whitespace(next_char)) or (
        is_separator(char) != is_separator(next_char)
    )


def _first_boundary_after(text: str, index: int) -> Optional[int]:
    for i in range(index, len(text) - 1):
        if is_word_boundary(text[i], text[i + 1]):
            return i
    return None


def _last_non_whitespace_before(text: str, index: int) -> Optional[int]:
    for i in range(index - 1, 0, -1):
        if not is_whitespace(text[i]):
            return i
    return None


def next_word_position(text: str, index: int) -> int:
    """Index of the start of the next word after ``index``.

    Finds the first boundary at or after ``index`` and then skips any
    whitespace following it. Falls back to ``len(text)``.
    """

    length = len(text)
    boundary = _first_boundary_after(text, index)
    if boundary is None:
        return length
    for i in range(boundary + 1, length):
        if not is_whitespace(text[i]):
            return i
    return length


def prev_word_position(text: str, index: int) -> int:
    """Index of the start of the word before ``index``.

    Skips whitespace immediately before ``index``, then walks back from the
    character before that one to the nearest boundary and returns the index
    just after it. The pair ending at the first non-whitespace character is
    not tested. Falls back to 0.
    """

    anchor = _last_non_whitespace_before(text, index)
    if anchor is None:
        return 0
    for i in range(anchor - 1, 0, -1):
        if is_word_boundary(text[i - 1], text[i]):
            return i
    return 0


__all__ = [
    "CharClass",
    "WORD_SEPARATORS",
    "classify",
    "is_separator",
    "is_whitespace",
    "is_word_boundary",
    "next_word_position",
    "prev_word_position",
]
