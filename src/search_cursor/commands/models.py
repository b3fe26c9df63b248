"""Dataclasses describing editing commands and their outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional


@dataclass(frozen=True, slots=True)
class EditCommand:
    """Named editing command bound to a callable taking the cursor first.

    Commands with ``accepts_text`` receive the typed/pasted text as a second
    positional argument.
    """

    id: str
    handler: Callable[..., object]
    description: str = ""
    telemetry_name: str | None = None
    accepts_text: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("EditCommand id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of running one command against a cursor."""

    command: str
    moved: bool
    changed: bool
    removed: Optional[str] = None
    status: Literal["ok", "noop"] = "ok"


__all__ = ["EditCommand", "CommandResult"]
