"""Built-in commands covering every cursor editing operation."""

from __future__ import annotations

from typing import Iterable, Sequence

from search_cursor.cursor import Cursor

from .models import EditCommand
from .table import CommandTable

DEFAULT_COMMANDS: tuple[EditCommand, ...] = (
    EditCommand(
        id="cursor.left",
        handler=Cursor.move_left,
        description="Move one character left",
    ),
    EditCommand(
        id="cursor.right",
        handler=Cursor.move_right,
        description="Move one character right",
    ),
    EditCommand(
        id="cursor.word_left",
        handler=Cursor.move_to_prev_word,
        description="Jump to the start of the previous word",
    ),
    EditCommand(
        id="cursor.word_right",
        handler=Cursor.move_to_next_word,
        description="Jump to the start of the next word",
    ),
    EditCommand(
        id="cursor.start",
        handler=Cursor.move_to_start,
        description="Jump to the start of the input",
    ),
    EditCommand(
        id="cursor.end",
        handler=Cursor.move_to_end,
        description="Jump to the end of the input",
    ),
    EditCommand(
        id="edit.insert_char",
        handler=Cursor.insert_char,
        description="Insert a typed character",
        accepts_text=True,
    ),
    EditCommand(
        id="edit.insert_text",
        handler=Cursor.insert_text,
        description="Insert pasted text",
        accepts_text=True,
    ),
    EditCommand(
        id="edit.backspace",
        handler=Cursor.move_left_and_remove,
        description="Delete the character before the cursor",
    ),
    EditCommand(
        id="edit.delete",
        handler=Cursor.remove_char_after,
        description="Delete the character under the cursor",
    ),
    EditCommand(
        id="edit.delete_word_back",
        handler=Cursor.delete_to_prev_word,
        description="Delete back to the start of the previous word",
    ),
    EditCommand(
        id="edit.delete_word_forward",
        handler=Cursor.delete_to_next_word,
        description="Delete forward to the start of the next word",
    ),
    EditCommand(
        id="edit.clear",
        handler=Cursor.clear,
        description="Clear the whole input",
    ),
)


def load_default_commands(
    table: CommandTable,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_commands: Iterable[EditCommand] | None = None,
) -> CommandTable:
    """Register the built-in commands, optionally filtered by id."""

    include_set = set(include) if include else None
    exclude_set = set(exclude or ())

    for command in DEFAULT_COMMANDS:
        if include_set is not None and command.id not in include_set:
            continue
        if command.id in exclude_set:
            continue
        table.register(command, replace=replace)

    for command in extra_commands or ():
        table.register(command, replace=replace)

    return table


__all__ = ["DEFAULT_COMMANDS", "load_default_commands"]
