"""Capture log events in tests and assert on them."""

from loglistpy.adapters.in_memory import InMemoryLogFacility, InMemoryLogger
from loglistpy.adapters.logging import TRACE, StdlibLoggingFacility
from loglistpy.core.assertions import (
    LogAssertionError,
    assert_has,
    exists,
    lines,
    should_have_debug,
    should_have_debug_containing,
    should_have_debug_matching,
    should_have_error,
    should_have_error_containing,
    should_have_error_matching,
    should_have_info,
    should_have_info_containing,
    should_have_info_matching,
    should_have_trace,
    should_have_trace_containing,
    should_have_trace_matching,
    should_have_warning,
    should_have_warning_containing,
    should_have_warning_matching,
    sub_list,
)
from loglistpy.core.matching import (
    Containing,
    Equals,
    Matching,
    Satisfies,
    is_debug,
    is_debug_containing,
    is_debug_matching,
    is_error,
    is_error_containing,
    is_error_matching,
    is_info,
    is_info_containing,
    is_info_matching,
    is_trace,
    is_trace_containing,
    is_trace_matching,
    is_warning,
    is_warning_containing,
    is_warning_matching,
    matches,
)
from loglistpy.core.models import LazyMessage, Level, LogEvent, source_name
from loglistpy.core.ports import LogFacilityPort, LogListener
from loglistpy.log_list import LogList

__all__ = [
    "TRACE",
    "Containing",
    "Equals",
    "InMemoryLogFacility",
    "InMemoryLogger",
    "LazyMessage",
    "Level",
    "LogAssertionError",
    "LogEvent",
    "LogFacilityPort",
    "LogList",
    "LogListener",
    "Matching",
    "Satisfies",
    "StdlibLoggingFacility",
    "assert_has",
    "exists",
    "is_debug",
    "is_debug_containing",
    "is_debug_matching",
    "is_error",
    "is_error_containing",
    "is_error_matching",
    "is_info",
    "is_info_containing",
    "is_info_matching",
    "is_trace",
    "is_trace_containing",
    "is_trace_matching",
    "is_warning",
    "is_warning_containing",
    "is_warning_matching",
    "lines",
    "matches",
    "should_have_debug",
    "should_have_debug_containing",
    "should_have_debug_matching",
    "should_have_error",
    "should_have_error_containing",
    "should_have_error_matching",
    "should_have_info",
    "should_have_info_containing",
    "should_have_info_matching",
    "should_have_trace",
    "should_have_trace_containing",
    "should_have_trace_matching",
    "should_have_warning",
    "should_have_warning_containing",
    "should_have_warning_matching",
    "source_name",
    "sub_list",
]
