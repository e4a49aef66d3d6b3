"""
Pytest configuration, shared fixtures and shared steps for mock tests.
"""
import logging

import pytest
import structlog
from pytest_bdd import given, parsers, then, when

from fakes import MessageBoardMock
from poorman_mocks import ArgumentMismatchError, ConstructionError, MockConfig


def pytest_configure(config):
    """Keep dispatch debug events out of test output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    )


@pytest.fixture(autouse=True)
def clean_mock_env(monkeypatch):
    """Mocks read POORMAN_MOCKS_* settings; never inherit them from the shell."""
    for name in ("CHECK_ARGUMENTS", "STRICT_NONE", "MAX_ARITY"):
        monkeypatch.delenv(f"POORMAN_MOCKS_{name}", raising=False)


@pytest.fixture
def test_context():
    """Shared context for passing data between steps."""
    return {
        "mock": None,
        "entry": None,
        "calls": 0,
        "order": [],
        "result": None,
        "results": [],
        "error": None,
        "configured_error": None,
    }


@pytest.fixture
def board():
    return MessageBoardMock()


# =============================================================================
# Given Steps
# =============================================================================


@given("a message board mock")
def message_board_mock(test_context):
    """Create a fresh mock with default settings."""
    test_context["mock"] = MessageBoardMock(MockConfig())


@given("a message board mock that lets None through")
def lenient_message_board_mock(test_context):
    test_context["mock"] = MessageBoardMock(MockConfig(strict_none=False))


@given(parsers.parse("a message board mock allowing at most {count:d} parameter(s)"))
def capped_message_board_mock(test_context, count: int):
    test_context["mock"] = MessageBoardMock(MockConfig(max_arity=count))


@given("the behavior is set to run once")
def run_once(test_context):
    test_context["entry"].with_options(run_once=True)


# =============================================================================
# When Steps
# =============================================================================


@when(parsers.parse("I get the message with id {id:d}"))
def get_message_by_id(test_context, id: int):
    test_context["result"] = test_context["mock"].get_message_by_id(id)
    test_context["results"].append(test_context["result"])


@when(parsers.parse("I get the message with id {id:d} expecting an error"))
def get_message_by_id_failing(test_context, id: int):
    with pytest.raises(Exception) as excinfo:
        test_context["mock"].get_message_by_id(id)
    test_context["error"] = excinfo.value


@when("I read the default message")
def read_default_message(test_context):
    test_context["result"] = test_context["mock"].default_message


@when(parsers.parse("I show the message with id {id:d} {times:d} times"))
def show_message_by_id_times(test_context, id: int, times: int):
    for _ in range(times):
        test_context["mock"].show_message_by_id(id)


@when(parsers.parse("I show the message with id {id:d} once"))
def show_message_by_id_once(test_context, id: int):
    test_context["mock"].show_message_by_id(id)


# =============================================================================
# Then Steps
# =============================================================================


@then(parsers.parse('the result should be "{expected}"'))
def result_is(test_context, expected: str):
    actual = test_context["result"]
    assert actual == expected, f"Expected '{expected}', got '{actual}'"


@then("the result should be None")
def result_is_none(test_context):
    assert test_context["result"] is None


@then(parsers.parse("the counting behavior should have run {count:d} time"))
@then(parsers.parse("the counting behavior should have run {count:d} times"))
def behavior_ran(test_context, count: int):
    assert test_context["calls"] == count, (
        f"Expected {count} call(s), got {test_context['calls']}"
    )


@then(parsers.parse('the recorded order should be "{order}"'))
def recorded_order(test_context, order: str):
    assert test_context["order"] == order.split(",")


@then("no behavior should have been recorded")
def nothing_recorded(test_context):
    assert test_context["order"] == []


@then(parsers.parse('the board should have shown "{messages}"'))
def board_shown(test_context, messages: str):
    assert test_context["mock"].shown == messages.split(",")


@then(parsers.parse("the board should have shown {count:d} messages"))
def board_shown_count(test_context, count: int):
    assert len(test_context["mock"].shown) == count


@then(parsers.parse('the error should be an argument mismatch mentioning "{text}"'))
def argument_mismatch(test_context, text: str):
    error = test_context["error"]
    assert isinstance(error, ArgumentMismatchError), f"Got {error!r}"
    assert "could not execute" in str(error)
    assert "wrong number or type" in str(error)
    assert text in str(error)


@then(parsers.parse('the error should mention "{text}"'))
def error_mentions(test_context, text: str):
    assert text in str(test_context["error"])


@then("a construction error should be raised")
def construction_error(test_context):
    assert isinstance(test_context["error"], ConstructionError), (
        f"Got {test_context['error']!r}"
    )


@then("the raised error should be the configured error")
def configured_error_raised(test_context):
    assert test_context["error"] is test_context["configured_error"]


