"""Text cursor over a mutable UTF-8 buffer."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from search_cursor.runtime import telemetry
from search_cursor.runtime.telemetry import SpanHandle

from .boundaries import (
    ENCODING,
    char_at,
    char_index_for_offset,
    next_char_boundary,
    offset_for_char_index,
    prev_char_boundary,
)
from .validation import CursorValidationError, ensure_position
from .view import CursorView
from .words import next_word_position, prev_word_position


def _encode(text: str) -> bytes:
    try:
        return text.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise CursorValidationError(f"Text is not encodable as {ENCODING}") from exc


class Cursor:
    """Editable single-line buffer with a byte-offset cursor.

    The buffer is stored UTF-8 encoded and ``position`` is a byte offset into
    it. Every public method leaves ``position`` inside ``[0, len(self)]`` and
    on a character boundary.
    """

    def __init__(self, text: str = "") -> None:
        self._source = bytearray(_encode(text))
        self._index = 0

    @classmethod
    def from_text(cls, text: str, *, position: int = 0) -> "Cursor":
        cursor = cls(text)
        cursor._index = ensure_position(cursor._source, position)
        return cursor

    def __len__(self) -> int:
        return len(self._source)

    def __bool__(self) -> bool:
        return bool(self._source)

    def __str__(self) -> str:
        return self.full_text()

    def __repr__(self) -> str:
        return f"Cursor({self.full_text()!r}, position={self._index})"

    @property
    def position(self) -> int:
        return self._index

    @property
    def byte_length(self) -> int:
        return len(self._source)

    # -- queries -----------------------------------------------------------

    def full_text(self) -> str:
        return self._source.decode(ENCODING)

    def text_before_cursor(self) -> str:
        """Text typed so far, i.e. everything left of the cursor."""

        return self._source[: self._index].decode(ENCODING)

    def current_char(self) -> Optional[str]:
        return char_at(self._source, self._index)

    def view(self) -> CursorView:
        return CursorView(
            text=self.full_text(),
            before_cursor=self.text_before_cursor(),
            position=self._index,
            current_char=self.current_char(),
        )

    # -- movement ----------------------------------------------------------

    def move_right(self) -> bool:
        if self._index >= len(self._source):
            return False
        self._index = next_char_boundary(self._source, self._index)
        return True

    def move_left(self) -> bool:
        if self._index <= 0:
            return False
        self._index = prev_char_boundary(self._source, self._index)
        return True

    def move_to_start(self) -> None:
        self._index = 0

    def move_to_end(self) -> None:
        self._index = len(self._source)

    def move_to_next_word(self) -> None:
        self._index = self._next_word_offset()

    def move_to_prev_word(self) -> None:
        self._index = self._prev_word_offset()

    def _next_word_offset(self) -> int:
        text = self.full_text()
        start = char_index_for_offset(self._source, self._index)
        return offset_for_char_index(text, next_word_position(text, start))

    def _prev_word_offset(self) -> int:
        text = self.full_text()
        start = char_index_for_offset(self._source, self._index)
        return offset_for_char_index(text, prev_word_position(text, start))

    # -- mutation ----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        if len(char) != 1:
            raise CursorValidationError(
                f"insert_char expects a single character, got {char!r}",
                position=self._index,
            )
        self._insert(_encode(char), label="insert_char")

    def insert_text(self, text: str) -> None:
        """Insert ``text`` at the cursor and move past it (paste)."""

        if text:
            self._insert(_encode(text), label="insert_text")

    def remove_char_after(self) -> Optional[str]:
        """Delete and return the character under the cursor, if any."""

        if self._index >= len(self._source):
            return None
        end = next_char_boundary(self._source, self._index)
        return self._remove(self._index, end, label="remove_char_after")

    def move_left_and_remove(self) -> Optional[str]:
        """Backspace: step left and delete the character stepped over."""

        if not self.move_left():
            return None
        return self.remove_char_after()

    def delete_to_next_word(self) -> Optional[str]:
        end = self._next_word_offset()
        if end <= self._index:
            return None
        return self._remove(self._index, end, label="delete_to_next_word")

    def delete_to_prev_word(self) -> Optional[str]:
        start = self._prev_word_offset()
        if start >= self._index:
            return None
        return self._remove(
            start, self._index, label="delete_to_prev_word", new_position=start
        )

    def clear(self) -> str:
        """Empty the buffer and return what it held."""

        previous = self.full_text()
        with EditTransaction(self, "clear") as tx:
            tx.note("removed_bytes", len(self._source))
            self._source.clear()
            self._index = 0
        return previous

    def into_text(self) -> str:
        """Hand the text to the caller and leave this cursor empty."""

        text = self.full_text()
        self._source = bytearray()
        self._index = 0
        return text

    def _insert(self, data: bytes, *, label: str) -> None:
        with EditTransaction(self, label) as tx:
            tx.note("inserted_bytes", len(data))
            self._source[self._index : self._index] = data
            self._index += len(data)

    def _remove(
        self, start: int, end: int, *, label: str, new_position: int | None = None
    ) -> str:
        with EditTransaction(self, label) as tx:
            removed = self._source[start:end].decode(ENCODING)
            del self._source[start:end]
            if new_position is not None:
                self._index = new_position
            tx.note("removed_bytes", end - start)
        return removed


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Wraps a single buffer mutation in a ``cursor::<label>`` telemetry span."""

    def __init__(self, cursor: Cursor, label: str) -> None:
        self.cursor = cursor
        self.label = label
        self._span_cm: Optional[ContextManager[SpanHandle]] = None
        self._handle: Optional[SpanHandle] = None

    def __enter__(self) -> "EditTransaction":
        self._span_cm = telemetry.span(
            name=f"cursor::{self.label}",
            component="cursor",
            metadata={"position": self.cursor.position},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def note(self, key: str, value: object) -> None:
        if self._handle is not None:
            self._handle.add_metadata(key, value)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._handle is not None:
            self._handle.add_metadata("position_after", self.cursor.position)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Cursor", "EditTransaction"]
