"""UTF-8 character-boundary primitives over a byte buffer.

Offsets handed to these helpers are byte offsets into UTF-8 encoded data.
Every helper that returns an offset returns a character boundary.
"""

from __future__ import annotations

from typing import Optional, Union

ByteData = Union[bytes, bytearray, memoryview]

ENCODING = "utf-8"

# Continuation bytes look like 0b10xxxxxx.
_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def is_continuation_byte(value: int) -> bool:
    return (value & _CONTINUATION_MASK) == _CONTINUATION_TAG


def is_char_boundary(data: ByteData, index: int) -> bool:
    """True when ``index`` falls at the start of a character or at the end."""

    if index == 0 or index == len(data):
        return True
    if index < 0 or index > len(data):
        return False
    return not is_continuation_byte(data[index])


def next_char_boundary(data: ByteData, index: int) -> int:
    """Offset of the character after the one starting at ``index``.

    Returns ``index`` unchanged when it already sits at the end.
    """

    length = len(data)
    if index >= length:
        return length
    index += 1
    while index < length and is_continuation_byte(data[index]):
        index += 1
    return index


def prev_char_boundary(data: ByteData, index: int) -> int:
    """Offset of the character before ``index``; ``0`` stays ``0``."""

    if index <= 0:
        return 0
    index -= 1
    while index > 0 and is_continuation_byte(data[index]):
        index -= 1
    return index


def char_at(data: ByteData, index: int) -> Optional[str]:
    """Decode the character starting at ``index`` or ``None`` at the end."""

    if index >= len(data):
        return None
    end = next_char_boundary(data, index)
    return bytes(data[index:end]).decode(ENCODING)


def encoded_width(char: str) -> int:
    return len(char.encode(ENCODING))


def char_index_for_offset(data: ByteData, offset: int) -> int:
    """Number of characters in ``data[:offset]``."""

    return sum(1 for value in bytes(data[:offset]) if not is_continuation_byte(value))


def offset_for_char_index(text: str, index: int) -> int:
    """Byte offset of character ``index`` once ``text`` is UTF-8 encoded."""

    return encoded_width(text[:index])


__all__ = [
    "ENCODING",
    "char_at",
    "char_index_for_offset",
    "encoded_width",
    "is_char_boundary",
    "is_continuation_byte",
    "next_char_boundary",
    "offset_for_char_index",
    "prev_char_boundary",
]
