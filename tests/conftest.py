"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from loglistpy.adapters.in_memory import InMemoryLogFacility
from loglistpy.core.models import Level, LogEvent

FIXED_TIME = 1702300000000


@pytest.fixture
def facility() -> InMemoryLogFacility:
    """In-memory facility with TRACE enabled and a fixed clock."""
    return InMemoryLogFacility(default_level=Level.TRACE, clock=lambda: FIXED_TIME)


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    """Factory fixture for building LogEvents with sensible defaults.

    Usage:
        def test_something(make_event):
            event = make_event(Level.WARN, "disk full", name="app.disk")
    """

    def _make(
        level: Level = Level.INFO,
        message: Any = "Hello",
        name: str = "xyz",
        cause: BaseException | None = None,
    ) -> LogEvent:
        return LogEvent(
            timestamp=FIXED_TIME, name=name, level=level, message=message, cause=cause
        )

    return _make
