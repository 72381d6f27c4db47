"""Python logging adapter for loglistpy.

Bridges the standard library ``logging`` module to ``LogFacilityPort`` so a
``LogList`` can capture records emitted through ordinary stdlib loggers.
"""

import logging
import threading
from dataclasses import dataclass, field

from loglistpy.core.models import Level, LogEvent, Source, source_name
from loglistpy.core.ports import LogListener

logger = logging.getLogger(__name__)

# Numeric stdlib level for TRACE, below DEBUG
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LOGGING_LEVELS = {
    Level.TRACE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}

# Records from these loggers are never delivered to listeners
_OWN_NAMESPACE = "loglistpy"


@dataclass
class _CaptureLevels:
    """Capture levels requested on one logger by the facilities open on it."""

    original: int
    requested: list[int] = field(default_factory=list)


# Keyed by logger name; shared by every facility in the process
_capture_levels: dict[str, _CaptureLevels] = {}
_capture_lock = threading.Lock()


def _request_level(target: logging.Logger, levelno: int) -> None:
    """Lower ``target`` to the most verbose level any open facility requested."""
    with _capture_lock:
        state = _capture_levels.get(target.name)
        if state is None:
            state = _CaptureLevels(original=target.level)
            _capture_levels[target.name] = state
        state.requested.append(levelno)
        target.setLevel(min(state.requested))


def _release_level(target: logging.Logger, levelno: int) -> None:
    """Drop one request; restore the original level once none remain."""
    with _capture_lock:
        state = _capture_levels.get(target.name)
        if state is None or levelno not in state.requested:
            return
        state.requested.remove(levelno)
        if state.requested:
            target.setLevel(min(state.requested))
        else:
            target.setLevel(state.original)
            del _capture_levels[target.name]


def to_logging_level(level: Level) -> int:
    """Return the stdlib numeric level for ``level``."""
    return _LOGGING_LEVELS[level]


def from_logging_level(levelno: int) -> Level:
    """Map a stdlib numeric level down to the nearest ``Level``.

    CRITICAL and above map to ERROR; anything below DEBUG maps to TRACE.
    """
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


def event_from_record(record: logging.LogRecord) -> LogEvent:
    """Convert a LogRecord into a LogEvent.

    Without ``%`` arguments the original message object is kept, so exact
    value checks work for non-string messages too.
    """
    message = record.getMessage() if record.args else record.msg
    cause = None
    if record.exc_info:
        cause = record.exc_info[1]
    return LogEvent.create(
        name=record.name,
        level=from_logging_level(record.levelno),
        message=message,
        cause=cause,
        timestamp=int(record.created * 1000),
    )


class _OwnRecordsFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        return not (name == _OWN_NAMESPACE or name.startswith(_OWN_NAMESPACE + "."))


class LogListHandler(logging.Handler):
    """Logging handler that forwards each record to a facility's listeners."""

    def __init__(self, facility: "StdlibLoggingFacility") -> None:
        super().__init__()
        self._facility = facility
        self.addFilter(_OwnRecordsFilter())

    def emit(self, record: logging.LogRecord) -> None:
        """Deliver the record to every listener as a LogEvent.

        Args:
            record: The log record to emit.
        """
        self._facility.dispatch(event_from_record(record))


class StdlibLoggingFacility:
    """LogFacilityPort backed by the standard library ``logging`` module.

    A handler is attached to the target logger while at least one listener
    is registered. Records reach it through normal propagation, so only
    records the emitting logger has enabled are captured.

    Example:
        ```python
        facility = StdlibLoggingFacility(capture_level=Level.DEBUG)
        with LogList(facility=facility) as captured:
            logging.getLogger("app").debug("started")
        should_have_debug(captured, "started")
        ```
    """

    def __init__(
        self,
        logger_name: str = "",
        capture_level: Level | None = None,
    ) -> None:
        """Initialize the facility.

        Args:
            logger_name: Logger to attach to. Defaults to the root logger.
            capture_level: If set, the target logger's level is lowered to
                this level while listeners are registered. The original level
                comes back once every facility on that logger has closed, in
                whatever order they close.
        """
        self._logger = logging.getLogger(logger_name or None)
        self._capture_level = capture_level
        self._listeners: list[LogListener] = []
        self._lock = threading.Lock()
        self._handler: LogListHandler | None = None

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: LogListener) -> None:
        with self._lock:
            if not self._listeners:
                self._install()
            self._listeners.append(listener)

    def remove_listener(self, listener: LogListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                return
            self._listeners.remove(listener)
            if not self._listeners:
                self._uninstall()

    def dispatch(self, event: LogEvent) -> None:
        """Deliver ``event`` to the listeners registered right now."""
        for listener in tuple(self._listeners):
            listener(event)

    def get_logger(self, source: Source, level: Level | None = None) -> logging.Logger:
        """Return the stdlib logger for ``source``, optionally setting its level."""
        target = logging.getLogger(source_name(source))
        if level is not None:
            target.setLevel(to_logging_level(level))
        return target

    def _install(self) -> None:
        self._handler = LogListHandler(self)
        self._logger.addHandler(self._handler)
        if self._capture_level is not None:
            _request_level(self._logger, to_logging_level(self._capture_level))
        logger.debug("Installed capture handler on logger %r", self._logger.name)

    def _uninstall(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler = None
        if self._capture_level is not None:
            _release_level(self._logger, to_logging_level(self._capture_level))
        logger.debug("Removed capture handler from logger %r", self._logger.name)
