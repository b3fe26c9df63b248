"""Read-only snapshot handed to rendering and live-search collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class CursorView:
    """Host-friendly snapshot of a cursor's text and position."""

    text: str
    before_cursor: str
    position: int
    current_char: Optional[str]

    @property
    def after_cursor(self) -> str:
        return self.text[len(self.before_cursor) :]

    @property
    def column(self) -> int:
        """Cursor position counted in characters rather than bytes."""

        return len(self.before_cursor)


__all__ = ["CursorView"]
