"""Level classifier: does a log event have a given level and message?

Each check combines a severity with one of four predicate forms. The
per-level functions (``is_trace``, ``is_info_containing``, ...) are built
from a single factory so every level behaves identically.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from loglistpy.core.models import Level, LogEvent, display


class Predicate(Protocol):
    """A condition on a log event's message."""

    def holds(self, event: LogEvent) -> bool: ...

    def describe(self, level: Level) -> str: ...


@dataclass(frozen=True)
class Satisfies:
    """Holds when ``test(event)`` is true."""

    test: Callable[[LogEvent], bool]

    def holds(self, event: LogEvent) -> bool:
        return bool(self.test(event))

    def describe(self, level: Level) -> str:
        return f"matching {level.name}"


@dataclass(frozen=True)
class Equals:
    """Holds when the message equals ``value``."""

    value: Any

    def holds(self, event: LogEvent) -> bool:
        return event.message == self.value

    def describe(self, level: Level) -> str:
        return f"{level.name} {display(self.value)}"


@dataclass(frozen=True)
class Containing:
    """Holds when the message text contains ``text`` (case-sensitive)."""

    text: str

    def holds(self, event: LogEvent) -> bool:
        return self.text in event.message_string

    def describe(self, level: Level) -> str:
        return f"{level.name} containing {self.text}"


@dataclass(frozen=True)
class Matching:
    """Holds when ``pattern`` is found anywhere in the message text."""

    pattern: str | re.Pattern[str]

    def holds(self, event: LogEvent) -> bool:
        return re.search(self.pattern, event.message_string) is not None

    def describe(self, level: Level) -> str:
        pattern = self.pattern
        if isinstance(pattern, re.Pattern):
            pattern = pattern.pattern
        return f"{level.name} {pattern}"


def as_predicate(expected: Any) -> Predicate:
    """Treat a callable as a test and anything else as an exact value."""
    if callable(expected):
        return Satisfies(expected)
    return Equals(expected)


def matches(event: LogEvent, level: Level, predicate: Predicate) -> bool:
    """Return True if ``event`` has ``level`` and ``predicate`` holds.

    The predicate is only evaluated for events of the requested level.
    """
    return event.level == level and predicate.holds(event)


def named(func: Callable[..., Any], name: str, doc: str) -> Callable[..., Any]:
    func.__name__ = func.__qualname__ = name
    func.__doc__ = doc
    return func


def _classifiers(
    level: Level, label: str
) -> tuple[Callable[..., bool], Callable[..., bool], Callable[..., bool]]:
    def is_level(event: LogEvent, expected: Any) -> bool:
        return matches(event, level, as_predicate(expected))

    def is_level_containing(event: LogEvent, text: str) -> bool:
        return matches(event, level, Containing(text))

    def is_level_matching(event: LogEvent, pattern: str | re.Pattern[str]) -> bool:
        return matches(event, level, Matching(pattern))

    return (
        named(
            is_level,
            f"is_{label}",
            f"Test whether an event has level {level.name} and the given "
            "message, or satisfies the given test when passed a callable.",
        ),
        named(
            is_level_containing,
            f"is_{label}_containing",
            f"Test whether an event has level {level.name} and its message "
            "contains the given text.",
        ),
        named(
            is_level_matching,
            f"is_{label}_matching",
            f"Test whether an event has level {level.name} and its message "
            "matches the given pattern.",
        ),
    )


is_trace, is_trace_containing, is_trace_matching = _classifiers(Level.TRACE, "trace")
is_debug, is_debug_containing, is_debug_matching = _classifiers(Level.DEBUG, "debug")
is_info, is_info_containing, is_info_matching = _classifiers(Level.INFO, "info")
is_warning, is_warning_containing, is_warning_matching = _classifiers(
    Level.WARN, "warning"
)
is_error, is_error_containing, is_error_matching = _classifiers(Level.ERROR, "error")
