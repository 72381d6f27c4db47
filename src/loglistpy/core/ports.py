"""Port interface for logging facilities.

A facility is the process-wide source of log events. ``LogList`` depends
only on this protocol, so any backend (stdlib logging, the in-memory
facility, a test fake) can feed it.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from loglistpy.core.models import Level, LogEvent, Source

LogListener = Callable[[LogEvent], None]


@runtime_checkable
class LogFacilityPort(Protocol):
    """Port for subscribing to emitted log events.

    Implementations must deliver every event to each registered listener
    synchronously and in emission order.
    """

    def add_listener(self, listener: LogListener) -> None:
        """Register a listener for every subsequently emitted event."""
        ...

    def remove_listener(self, listener: LogListener) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        ...

    def get_logger(self, source: Source, level: Level | None = None) -> Any:
        """Return the named logger for ``source``.

        Args:
            source: Logger name, class or module.
            level: If given, the minimum level the logger emits.
        """
        ...
