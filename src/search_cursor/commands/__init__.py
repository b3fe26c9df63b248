"""Named editing commands consumed by input-handling collaborators."""

from .models import CommandResult, EditCommand
from .table import CommandTable, TableStats, UnknownCommandError
from .defaults import DEFAULT_COMMANDS, load_default_commands

__all__ = [
    "CommandResult",
    "EditCommand",
    "CommandTable",
    "TableStats",
    "UnknownCommandError",
    "DEFAULT_COMMANDS",
    "load_default_commands",
]
