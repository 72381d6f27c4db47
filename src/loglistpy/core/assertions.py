"""Queries and assertions over collections of log events."""

import re
from collections.abc import Callable, Iterable
from typing import Any

from loglistpy.core.matching import (
    Containing,
    Matching,
    Predicate,
    as_predicate,
    matches,
    named,
)
from loglistpy.core.models import Level, LogEvent, Source, source_name


class LogAssertionError(AssertionError):
    """Raised when no captured event has the required level and message.

    The message names what was missing and lists every captured event.
    """

    def __init__(self, description: str, events: Iterable[LogEvent]) -> None:
        self.events = tuple(events)
        super().__init__(f"LogList does not contain {description}\n{lines(self.events)}")


def lines(events: Iterable[LogEvent]) -> str:
    """Render events for display, one per line under a ``log lines:`` header."""
    return "log lines:\n" + "\n".join(str(event) for event in events)


def sub_list(events: Iterable[LogEvent], source: Source) -> list[LogEvent]:
    """Return the events emitted by ``source``, in their original order."""
    name = source_name(source)
    return [event for event in events if event.name == name]


def exists(events: Iterable[LogEvent], level: Level, predicate: Predicate) -> bool:
    """Return True if any event has ``level`` and satisfies ``predicate``."""
    return any(matches(event, level, predicate) for event in events)


def assert_has(events: Iterable[LogEvent], level: Level, predicate: Predicate) -> None:
    """Fail unless some event has ``level`` and satisfies ``predicate``.

    Raises:
        LogAssertionError: If no event qualifies.
    """
    captured = tuple(events)
    if not exists(captured, level, predicate):
        raise LogAssertionError(predicate.describe(level), captured)


def _assertions(
    level: Level, label: str
) -> tuple[Callable[..., None], Callable[..., None], Callable[..., None]]:
    def should_have(events: Iterable[LogEvent], expected: Any) -> None:
        assert_has(events, level, as_predicate(expected))

    def should_have_containing(events: Iterable[LogEvent], text: str) -> None:
        assert_has(events, level, Containing(text))

    def should_have_matching(
        events: Iterable[LogEvent], pattern: str | re.Pattern[str]
    ) -> None:
        assert_has(events, level, Matching(pattern))

    return (
        named(
            should_have,
            f"should_have_{label}",
            f"Assert that the events include a {level.name} entry with the "
            "given message, or one satisfying the given test.",
        ),
        named(
            should_have_containing,
            f"should_have_{label}_containing",
            f"Assert that the events include a {level.name} entry containing "
            "the given text.",
        ),
        named(
            should_have_matching,
            f"should_have_{label}_matching",
            f"Assert that the events include a {level.name} entry matching "
            "the given pattern.",
        ),
    )


should_have_trace, should_have_trace_containing, should_have_trace_matching = (
    _assertions(Level.TRACE, "trace")
)
should_have_debug, should_have_debug_containing, should_have_debug_matching = (
    _assertions(Level.DEBUG, "debug")
)
should_have_info, should_have_info_containing, should_have_info_matching = (
    _assertions(Level.INFO, "info")
)
should_have_warning, should_have_warning_containing, should_have_warning_matching = (
    _assertions(Level.WARN, "warning")
)
should_have_error, should_have_error_containing, should_have_error_matching = (
    _assertions(Level.ERROR, "error")
)
