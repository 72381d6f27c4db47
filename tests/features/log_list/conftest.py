"""BDD step definitions for LogList features."""

from collections.abc import Iterator
from dataclasses import dataclass

import pytest
from pytest_bdd import given, parsers, then, when

from loglistpy.adapters.in_memory import InMemoryLogFacility
from loglistpy.core.assertions import LogAssertionError, assert_has, exists, lines, sub_list
from loglistpy.core.matching import Containing, Equals
from loglistpy.core.models import Level
from loglistpy.log_list import LogList


@dataclass
class LogListScenarioContext:
    """Shared state between steps in a LogList scenario."""

    facility: InMemoryLogFacility | None = None
    unfiltered: LogList | None = None
    filtered: LogList | None = None


@pytest.fixture
def ctx() -> Iterator[LogListScenarioContext]:
    """Fresh scenario context for each test; lists are closed at teardown."""
    context = LogListScenarioContext()
    yield context
    for captured in (context.unfiltered, context.filtered):
        if captured is not None:
            captured.close()


# === Background Steps ===
@given("an in-memory logging facility with TRACE enabled")
def step_facility(ctx: LogListScenarioContext) -> None:
    ctx.facility = InMemoryLogFacility(default_level=Level.TRACE)


@given("an unfiltered LogList")
def step_unfiltered(ctx: LogListScenarioContext) -> None:
    ctx.unfiltered = LogList(facility=ctx.facility)


@given(parsers.parse('a LogList filtered to "{name}"'))
def step_filtered(ctx: LogListScenarioContext, name: str) -> None:
    ctx.filtered = LogList(name, facility=ctx.facility)


# === Emission Steps ===
@when(parsers.parse('logger "{name}" emits {level} "{message}"'))
def step_emit(ctx: LogListScenarioContext, name: str, level: str, message: str) -> None:
    ctx.facility.get_logger(name).log(Level.parse(level), message)


@when(parsers.parse('logger "{name}" emits {level} with no message'))
def step_emit_null(ctx: LogListScenarioContext, name: str, level: str) -> None:
    ctx.facility.get_logger(name).log(Level.parse(level), None)


@when("the LogList is closed")
def step_close(ctx: LogListScenarioContext) -> None:
    ctx.unfiltered.close()


# === Assertion Steps ===
@then(parsers.parse('the LogList has {level} "{message}"'))
def step_has(ctx: LogListScenarioContext, level: str, message: str) -> None:
    assert_has(ctx.unfiltered, Level.parse(level), Equals(message))


@then(parsers.parse('the LogList does not have {level} "{message}"'))
def step_has_not(ctx: LogListScenarioContext, level: str, message: str) -> None:
    assert not exists(ctx.unfiltered, Level.parse(level), Equals(message))


@then(parsers.parse('the LogList has {level} with no message'))
def step_has_null(ctx: LogListScenarioContext, level: str) -> None:
    assert_has(ctx.unfiltered, Level.parse(level), Equals(None))


@then(parsers.parse('asserting {level} containing "{text}" fails with "{expected}"'))
def step_assert_fails(
    ctx: LogListScenarioContext, level: str, text: str, expected: str
) -> None:
    with pytest.raises(LogAssertionError) as excinfo:
        assert_has(ctx.unfiltered, Level.parse(level), Containing(text))
    assert expected in str(excinfo.value)
    assert "log lines:" in str(excinfo.value)


@then(parsers.parse('the filtered LogList has {count:d} event with message "{message}"'))
def step_filtered_count(ctx: LogListScenarioContext, count: int, message: str) -> None:
    assert len(ctx.filtered) == count
    assert [event.message for event in ctx.filtered] == [message]


@then(parsers.parse('the sub-list of the unfiltered LogList for "{name}" is "{message}"'))
def step_sub_list(ctx: LogListScenarioContext, name: str, message: str) -> None:
    assert [event.message for event in sub_list(ctx.unfiltered, name)] == [message]


@then(parsers.parse('the sub-list of the unfiltered LogList for "{name}" is empty'))
def step_sub_list_empty(ctx: LogListScenarioContext, name: str) -> None:
    assert sub_list(ctx.unfiltered, name) == []


@then(parsers.parse('the log lines contain "{text}"'))
def step_lines_contain(ctx: LogListScenarioContext, text: str) -> None:
    assert text in lines(ctx.unfiltered)


@then(parsers.parse("the unfiltered LogList holds {count:d} event"))
def step_unfiltered_count(ctx: LogListScenarioContext, count: int) -> None:
    assert len(ctx.unfiltered) == count
