"""LogList: collects log events for inspection by tests."""

import logging
import threading
from collections.abc import Iterator, Sequence
from types import TracebackType
from typing import overload

from loglistpy.adapters.logging import StdlibLoggingFacility
from loglistpy.core.models import LogEvent, Source, source_name
from loglistpy.core.ports import LogFacilityPort

logger = logging.getLogger(__name__)


class LogList(Sequence[LogEvent]):
    """A listener that stores every log event it receives, in order.

    The list subscribes to its facility on construction and unsubscribes on
    ``close()``. Use it as a context manager so the subscription ends on
    every exit path. Captured events remain readable after closing.

    Example:
        ```python
        with LogList() as captured:
            run_code_under_test()
        should_have_info_containing(captured, "started")
        ```
    """

    def __init__(
        self,
        source: Source | None = None,
        *,
        facility: LogFacilityPort | None = None,
    ) -> None:
        """Create the list and subscribe to ``facility``.

        Args:
            source: If given, only events from this logger name, class or
                module are kept.
            facility: Event source to subscribe to. Defaults to a new
                StdlibLoggingFacility on the root logger.
        """
        self._name = None if source is None else source_name(source)
        self._facility = facility if facility is not None else StdlibLoggingFacility()
        self._events: list[LogEvent] = []
        self._lock = threading.Lock()
        self._closed = False
        self._listener = self.on_event
        self._facility.add_listener(self._listener)
        logger.debug("LogList opened (name=%r)", self._name)

    @property
    def name(self) -> str | None:
        """The source name events are filtered by, or None."""
        return self._name

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def events(self) -> tuple[LogEvent, ...]:
        """Snapshot of the captured events in insertion order."""
        return tuple(self._events)

    def on_event(self, event: LogEvent) -> None:
        """Store ``event`` if it passes the name filter and the list is open."""
        if self._name is not None and event.name != self._name:
            return
        with self._lock:
            if not self._closed:
                self._events.append(event)

    def close(self) -> None:
        """Unsubscribe from the facility. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._facility.remove_listener(self._listener)
        logger.debug("LogList closed (name=%r, events=%d)", self._name, len(self._events))

    def __enter__(self) -> "LogList":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @overload
    def __getitem__(self, index: int) -> LogEvent: ...

    @overload
    def __getitem__(self, index: slice) -> list[LogEvent]: ...

    def __getitem__(self, index: int | slice) -> LogEvent | list[LogEvent]:
        return self._events[index]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[LogEvent]:
        return iter(self.events)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"LogList(name={self._name!r}, events={len(self._events)}, {state})"
