"""Smoke tests for structured logging output of gates and error reporters."""

import json
import logging
import sys

import pytest

from conftest import FakeAppender, make_event
from sinkgate.appenders.inmemory import ListAppender
from sinkgate.core.gate import DispatchGate
from sinkgate.core.level import Level
from sinkgate.core.logging import (
    GATE_LOGGER_NAME,
    STATUS_LOGGER_NAME,
    JSONFormatter,
    configure_gate_logger,
    get_logger,
)


class LogCapture(logging.Handler):
    """Custom handler to capture log records for testing."""

    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _capture(name: str):
    logger = logging.getLogger(name)
    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    original_handlers = logger.handlers.copy()
    original_level = logger.level

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield handler

    logger.removeHandler(handler)
    logger.handlers = original_handlers
    logger.level = original_level


class FailingListAppender(ListAppender):
    def __init__(self, error: Exception, **kwargs):
        super().__init__(**kwargs)
        self.error = error

    def append(self, event):
        raise self.error


@pytest.fixture
def gate_log():
    yield from _capture(GATE_LOGGER_NAME)


@pytest.fixture
def status_log():
    yield from _capture(STATUS_LOGGER_NAME)


def test_level_suppression_logged_at_debug(gate_log):
    appender = FakeAppender(name="console")
    gate = DispatchGate(appender, level=Level.WARN)
    event = make_event(Level.DEBUG)

    gate.deliver(event)

    (record,) = [r for r in gate_log.records if "Suppressed" in r.getMessage()]
    assert record.levelno == logging.DEBUG
    assert record.event_id == event.id
    assert record.appender == "console"
    assert record.reason == "level"


def test_suppression_silent_above_debug(gate_log):
    logging.getLogger(GATE_LOGGER_NAME).setLevel(logging.INFO)
    gate = DispatchGate(FakeAppender(), level=Level.WARN)

    gate.deliver(make_event(Level.DEBUG))

    assert gate_log.records == []


def test_delivered_event_not_logged(gate_log):
    gate = DispatchGate(FakeAppender())

    gate.deliver(make_event(Level.ERROR))

    assert gate_log.records == []


def test_gate_construction_keeps_configured_level(gate_log):
    DispatchGate(FakeAppender())

    assert logging.getLogger(GATE_LOGGER_NAME).level == logging.DEBUG


def test_default_reporter_writes_status_log(status_log):
    appender = ListAppender(name="cold")
    gate = DispatchGate(appender)

    gate.deliver(make_event())

    (record,) = status_log.records
    assert record.getMessage() == "Attempted to append to non-started appender cold"
    assert record.levelno == logging.WARNING
    assert record.appender == "cold"


def test_append_failure_logged_at_error_with_cause(status_log):
    cause = OSError("disk full")
    appender = FailingListAppender(cause, name="disk")
    appender.start()
    gate = DispatchGate(appender)

    gate.deliver(make_event())

    (record,) = status_log.records
    assert record.levelno == logging.ERROR
    assert record.error == "disk full"
    assert record.exc_info[1] is cause


def test_json_formatter_output(gate_log):
    gate = DispatchGate(FakeAppender(name="console"), level=Level.ERROR)
    event = make_event(Level.INFO)
    gate.deliver(event)

    log_data = json.loads(JSONFormatter().format(gate_log.records[0]))

    assert log_data["event_id"] == event.id
    assert log_data["appender"] == "console"
    assert log_data["reason"] == "level"
    assert log_data["logger"] == GATE_LOGGER_NAME
    assert log_data["level"] == "DEBUG"
    assert "timestamp" in log_data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("x").makeRecord(
            "x", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )

    log_data = json.loads(JSONFormatter().format(record))

    assert "ValueError: boom" in log_data["exc_info"]


def test_configure_helpers_install_single_handler():
    logger = get_logger("sinkgate.test.helpers", level=logging.WARNING)
    again = get_logger("sinkgate.test.helpers")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert not logger.propagate
    assert configure_gate_logger() is logging.getLogger(GATE_LOGGER_NAME)
