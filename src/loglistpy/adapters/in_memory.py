"""In-memory logging facility.

A self-contained facility with named loggers and synchronous delivery.
Suitable for testing code against ``LogFacilityPort`` without touching the
process-wide stdlib logging configuration.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from loglistpy.core.models import Level, LazyMessage, LogEvent, Source, source_name
from loglistpy.core.ports import LogListener

logger = logging.getLogger(__name__)


class InMemoryLogger:
    """Named logger that emits LogEvents through an InMemoryLogFacility.

    A callable message is treated as lazy and only evaluated when the
    level is enabled.
    """

    def __init__(self, name: str, level: Level, facility: "InMemoryLogFacility") -> None:
        self.name = name
        self.level = level
        self._facility = facility

    def is_enabled(self, level: Level) -> bool:
        return level >= self.level

    def log(self, level: Level, message: Any, cause: BaseException | None = None) -> None:
        """Emit an event if ``level`` is enabled.

        Args:
            level: Severity of the event.
            message: The message, or a callable producing it.
            cause: Optional exception to attach.
        """
        if not self.is_enabled(level):
            return
        if callable(message) and not isinstance(message, LazyMessage):
            message = LazyMessage(message)
        self._facility.emit(
            LogEvent.create(
                name=self.name,
                level=level,
                message=message,
                cause=cause,
                timestamp=self._facility.now(),
            )
        )

    def trace(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Level.TRACE, message, cause)

    def debug(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Level.DEBUG, message, cause)

    def info(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Level.INFO, message, cause)

    def warning(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Level.WARN, message, cause)

    def error(self, message: Any, cause: BaseException | None = None) -> None:
        self.log(Level.ERROR, message, cause)

    def __repr__(self) -> str:
        return f"InMemoryLogger(name={self.name!r}, level={self.level.name})"


class InMemoryLogFacility:
    """In-memory implementation of LogFacilityPort.

    Loggers are cached by name. Events are delivered to listeners in
    emission order while holding a lock, so concurrent emitters are
    serialized.

    Args:
        default_level: Minimum level for loggers created without one.
        clock: Returns the current time in epoch milliseconds.
    """

    def __init__(
        self,
        default_level: Level = Level.INFO,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.default_level = default_level
        self._clock = clock
        self._loggers: dict[str, InMemoryLogger] = {}
        self._listeners: list[LogListener] = []
        self._lock = threading.RLock()

    def add_listener(self, listener: LogListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: LogListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def get_logger(self, source: Source, level: Level | None = None) -> InMemoryLogger:
        """Return the logger for ``source``, creating it on first use.

        Args:
            source: Logger name, class or module.
            level: If given, sets the logger's minimum level.
        """
        name = source_name(source)
        with self._lock:
            named_logger = self._loggers.get(name)
            if named_logger is None:
                named_logger = InMemoryLogger(
                    name, level if level is not None else self.default_level, self
                )
                self._loggers[name] = named_logger
                logger.debug("Created in-memory logger %r", name)
            elif level is not None:
                named_logger.level = level
        return named_logger

    def now(self) -> int | None:
        return self._clock() if self._clock is not None else None

    def emit(self, event: LogEvent) -> None:
        """Deliver ``event`` to every registered listener."""
        with self._lock:
            for listener in tuple(self._listeners):
                listener(event)
