"""Cursor over a UTF-8 text buffer plus its word and boundary helpers."""

from .boundaries import is_char_boundary, next_char_boundary, prev_char_boundary
from .cursor import Cursor, EditTransaction
from .validation import CursorValidationError, ensure_position
from .view import CursorView
from .words import (
    WORD_SEPARATORS,
    CharClass,
    classify,
    is_separator,
    is_whitespace,
    is_word_boundary,
    next_word_position,
    prev_word_position,
)

__all__ = [
    "Cursor",
    "CursorView",
    "CursorValidationError",
    "EditTransaction",
    "CharClass",
    "WORD_SEPARATORS",
    "classify",
    "ensure_position",
    "is_char_boundary",
    "is_separator",
    "is_whitespace",
    "is_word_boundary",
    "next_char_boundary",
    "next_word_position",
    "prev_char_boundary",
    "prev_word_position",
]
