"""Validation helpers for offsets supplied from outside the cursor."""

from __future__ import annotations

from .boundaries import ByteData, is_char_boundary


class CursorValidationError(ValueError):
    """Raised when a caller hands the cursor an offset or input it cannot hold."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(data: ByteData, position: int) -> int:
    if position < 0 or position > len(data):
        raise CursorValidationError("Position out of range", position=position)
    if not is_char_boundary(data, position):
        raise CursorValidationError(
            "Position is inside a multi-byte character", position=position
        )
    return position


__all__ = ["CursorValidationError", "ensure_position"]
