"""Text-editing cursor for interactive single-line search input."""

from .cursor import Cursor, CursorValidationError, CursorView

__all__ = [
    "Cursor",
    "CursorValidationError",
    "CursorView",
    "commands",
    "cursor",
    "runtime",
]

__version__ = "0.1.0"
