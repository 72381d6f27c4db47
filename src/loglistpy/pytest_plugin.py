"""pytest plugin providing LogList fixtures.

Fixtures:
    log_list: An open LogList on the stdlib logging facility, closed at
        teardown. Filter it with ``@pytest.mark.loglist("name")``.
    log_list_factory: Creates extra LogLists sharing one facility; all of
        them are closed at teardown.

Configuration (ini options):
    loglist_level: Level the target logger is lowered to while capturing.
    loglist_logger: Logger the fixtures attach to (default: root).
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

import pytest

from loglistpy.adapters.logging import StdlibLoggingFacility
from loglistpy.core.models import Level, Source
from loglistpy.log_list import LogList


@dataclass(frozen=True)
class CaptureConfig:
    """Capture options read from the pytest configuration."""

    level: Level = Level.TRACE
    logger_name: str = ""

    @classmethod
    def from_pytest_config(cls, config: pytest.Config) -> "CaptureConfig":
        return cls(
            level=Level.parse(config.getini("loglist_level")),
            logger_name=config.getini("loglist_logger"),
        )

    def facility(self) -> StdlibLoggingFacility:
        return StdlibLoggingFacility(
            logger_name=self.logger_name, capture_level=self.level
        )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        "loglist_level",
        help="Level the log_list fixtures capture from (TRACE, DEBUG, INFO, WARN, ERROR)",
        default="TRACE",
    )
    parser.addini(
        "loglist_logger",
        help="Logger the log_list fixtures attach to (default: root)",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "loglist(source): keep only events from this logger in the log_list fixture",
    )


@pytest.fixture
def log_list(request: pytest.FixtureRequest) -> Iterator[LogList]:
    """Provide a LogList capturing stdlib logging for the current test."""
    config = CaptureConfig.from_pytest_config(request.config)
    marker = request.node.get_closest_marker("loglist")
    source = marker.args[0] if marker is not None and marker.args else None
    with LogList(source, facility=config.facility()) as captured:
        yield captured


@pytest.fixture
def log_list_factory(
    request: pytest.FixtureRequest,
) -> Iterator[Callable[..., LogList]]:
    """Factory fixture for creating LogLists, optionally filtered by source.

    Usage:
        def test_something(log_list_factory):
            orders = log_list_factory("app.orders")
            ...
            should_have_info(orders, "placed")
    """
    facility = CaptureConfig.from_pytest_config(request.config).facility()
    created: list[LogList] = []

    def _create(source: Source | None = None) -> LogList:
        captured = LogList(source, facility=facility)
        created.append(captured)
        return captured

    yield _create
    for captured in reversed(created):
        captured.close()
