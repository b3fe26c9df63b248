"""Command table mapping command ids onto cursor operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from search_cursor.cursor import Cursor
from search_cursor.runtime import telemetry

from .models import CommandResult, EditCommand


@dataclass(slots=True)
class TableStats:
    command_count: int
    text_commands: tuple[str, ...]


class UnknownCommandError(KeyError):
    """Raised when a command id has not been registered."""

    def __init__(self, command_id: str) -> None:
        super().__init__(f"Command '{command_id}' is not registered")
        self.command_id = command_id


class CommandTable:
    """Owns registered commands and runs them against a cursor."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, EditCommand] = {}
        self._logger_name = logger_name

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, command: EditCommand, *, replace: bool = False) -> EditCommand:
        if not replace and command.id in self._commands:
            raise ValueError(f"Command '{command.id}' already registered")
        self._commands[command.id] = command
        return command

    def unregister(self, command_id: str) -> Optional[EditCommand]:
        return self._commands.pop(command_id, None)

    def get(self, command_id: str) -> EditCommand:
        try:
            return self._commands[command_id]
        except KeyError:
            raise UnknownCommandError(command_id) from None

    def iter_commands(self) -> Iterator[EditCommand]:
        yield from self._commands.values()

    def stats(self) -> TableStats:
        return TableStats(
            command_count=len(self._commands),
            text_commands=tuple(
                sorted(cmd.id for cmd in self._commands.values() if cmd.accepts_text)
            ),
        )

    def execute(
        self, cursor: Cursor, command_id: str, *, text: str | None = None
    ) -> CommandResult:
        try:
            command = self.get(command_id)
        except UnknownCommandError:
            telemetry.record_event(
                "command.unknown",
                level="warning",
                data={"command": command_id},
                logger_name=self._logger_name,
            )
            raise
        if command.accepts_text and text is None:
            raise ValueError(f"Command '{command_id}' requires text")
        if not command.accepts_text and text is not None:
            raise ValueError(f"Command '{command_id}' does not take text")

        with telemetry.span(
            "commands::execute",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command": command.telemetry_name},
        ) as handle:
            position_before = cursor.position
            length_before = cursor.byte_length
            outcome = command(cursor, text) if command.accepts_text else command(cursor)

            removed = outcome if isinstance(outcome, str) and outcome else None
            changed = cursor.byte_length != length_before or removed is not None
            moved = cursor.position != position_before
            status = "ok" if (moved or changed) else "noop"
            handle.add_metadata("status", status)
            if status == "noop":
                telemetry.record_event(
                    "command.noop",
                    level="debug",
                    data={"command": command.id, "position": cursor.position},
                    logger_name=self._logger_name,
                )
            return CommandResult(
                command=command.id,
                moved=moved,
                changed=changed,
                removed=removed,
                status=status,
            )


__all__ = ["CommandTable", "TableStats", "UnknownCommandError"]
