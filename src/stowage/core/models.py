from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class StowageError(Exception):
    """Base class for errors reported to the user as a single message."""

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigurationError(StowageError):
    pass


class ArgumentError(StowageError):
    pass


class StorageServiceError(StowageError):
    """Failure surfaced by the storage service or its transport."""


Renderer = Callable[[Any, dict[str, Any]], list[str]]


@dataclass
class CommandResult:
    """
    Outcome of one handler invocation.

    A result either carries ``data`` (relayed verbatim in JSON mode and fed
    to ``renderer`` in text mode) or an ``error`` message. ``context`` holds
    values only the text template needs, such as expiry or prefix.
    """

    data: Any = None
    renderer: Renderer | None = None
    context: dict[str, Any] = field(default_factory=dict)
    message: str | None = None
    summary: str | None = None
    error: str | None = None
    hint: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str, hint: str | None = None) -> "CommandResult":
        return cls(error=message, hint=hint)

    @classmethod
    def from_error(cls, error: StowageError) -> "CommandResult":
        return cls.failure(error.message, error.hint)


Handler = Callable[[Any, Any], CommandResult]


@dataclass(frozen=True)
class CommandGroup:
    """Binds a group's action enum to exactly one handler per action."""

    name: str
    actions: type[StrEnum]
    handlers: Mapping[StrEnum, Handler]

    def __post_init__(self):
        missing = [action for action in self.actions if action not in self.handlers]
        if missing:
            names = ", ".join(action.value for action in missing)
            raise ValueError(f"No handler registered for {self.name}: {names}")

    @property
    def choices(self) -> list[str]:
        return [action.value for action in self.actions]

    def parse_action(self, token: str | None) -> StrEnum:
        if not token:
            raise ArgumentError(
                f"Action required. Expected one of: {', '.join(self.choices)}"
            )
        try:
            return self.actions(token)
        except ValueError:
            raise ArgumentError(
                f"Unknown action: {token}. Expected one of: {', '.join(self.choices)}"
            ) from None

    def handler_for(self, action: StrEnum) -> Handler:
        return self.handlers[action]
