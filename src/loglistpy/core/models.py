"""Core domain models for captured log events."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from types import ModuleType
from typing import Any

# A logger source: a plain name, a class or a module.
Source = str | type | ModuleType


class Level(IntEnum):
    """Severity of a log event, ordered so that levels compare with ``<``."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @classmethod
    def parse(cls, value: "str | Level") -> "Level":
        """Resolve a level from its name.

        Names are case-insensitive and the stdlib spelling ``WARNING`` is
        accepted for ``WARN``.

        Raises:
            ValueError: If the name is not a known level.
        """
        if isinstance(value, Level):
            return value
        key = value.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown log level: {value!r}") from None


@dataclass(frozen=True)
class LazyMessage:
    """A message produced on demand by a zero-argument callable."""

    producer: Callable[[], Any]

    def realize(self) -> Any:
        return self.producer()


def realize_message(message: Any) -> Any:
    """Return the value of a message, evaluating it if it is lazy."""
    if isinstance(message, LazyMessage):
        return message.realize()
    return message


def display(value: Any) -> str:
    """Render a message value for display, with ``None`` shown as ``null``."""
    return "null" if value is None else str(value)


def source_name(source: Source) -> str:
    """Resolve a logger source to the name its events carry.

    Classes resolve to ``module.QualifiedName`` and modules to their
    ``__name__``; strings are used as they are.

    Raises:
        TypeError: If ``source`` is none of the supported types.
    """
    if isinstance(source, str):
        return source
    if isinstance(source, ModuleType):
        return source.__name__
    if isinstance(source, type):
        return f"{source.__module__}.{source.__qualname__}"
    raise TypeError(
        f"source must be a str, class or module, not {type(source).__name__}"
    )


def now_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class LogEvent:
    """A single captured log occurrence.

    Attributes:
        timestamp: Emission time in milliseconds since the epoch.
        name: Name of the emitting logger.
        level: Severity of the event.
        message: The message value, already realized.
        cause: Exception attached to the call, if any.
    """

    timestamp: int
    name: str
    level: Level
    message: Any
    cause: BaseException | None = None

    @classmethod
    def create(
        cls,
        name: str,
        level: Level,
        message: Any,
        cause: BaseException | None = None,
        timestamp: int | None = None,
    ) -> "LogEvent":
        """Build an event, evaluating a lazy message exactly once.

        Args:
            name: Name of the emitting logger.
            level: Severity of the event.
            message: A plain value or a ``LazyMessage``.
            cause: Optional exception.
            timestamp: Milliseconds since the epoch. Defaults to now.

        Returns:
            LogEvent holding the realized message.
        """
        return cls(
            timestamp=now_millis() if timestamp is None else timestamp,
            name=name,
            level=level,
            message=realize_message(message),
            cause=cause,
        )

    @property
    def message_string(self) -> str:
        """The message rendered as text."""
        return display(self.message)

    def __str__(self) -> str:
        when = datetime.fromtimestamp(self.timestamp / 1000, timezone.utc)
        text = (
            f"{when.isoformat(timespec='milliseconds')} "
            f"{self.level.name} {self.name}: {self.message_string}"
        )
        if self.cause is not None:
            text += f" [{type(self.cause).__name__}: {self.cause}]"
        return text
