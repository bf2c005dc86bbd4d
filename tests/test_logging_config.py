"""
Tests for src.logging_config: formatters, request context and helpers.
"""

import json
import logging

import pytest

from src.logging_config import (
    ConsoleFormatter,
    LogContext,
    PerformanceTracker,
    StructuredFormatter,
    configure_logging,
    log_event,
)


@pytest.fixture
def record() -> logging.LogRecord:
    return logging.makeLogRecord(
        {
            "name": "src.repository.agents",
            "msg": "Agent %s",
            "args": ("added",),
            "levelname": "INFO",
            "levelno": logging.INFO,
            "agent_id": "ledgerly",
        }
    )


@pytest.fixture(autouse=True)
def clean_context():
    LogContext.clear()
    yield
    LogContext.clear()


class TestStructuredFormatter:
    def test_fixed_keys_and_extra_fields(self, record):
        entry = json.loads(StructuredFormatter(environment="test").format(record))
        assert entry["message"] == "Agent added"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "src.repository.agents"
        assert entry["service"] == "fintech-insights"
        assert entry["environment"] == "test"
        assert entry["agent_id"] == "ledgerly"
        assert "args" not in entry

    def test_request_context_is_included(self, record):
        LogContext.bind(request_id="rid-1", endpoint="/v1/agents")
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["request_id"] == "rid-1"
        assert entry["endpoint"] == "/v1/agents"
        assert "client_ip" not in entry

    def test_exception_is_rendered(self, record):
        try:
            raise ValueError("bad")
        except ValueError as exc:
            record.exc_info = (type(exc), exc, exc.__traceback__)
        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: bad" in entry["exception"]

    def test_non_json_values_are_stringified(self, record):
        record.seeded = {"agents"}
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["seeded"] == "{'agents'}"


def test_console_formatter(record):
    LogContext.bind(request_id="rid-2")
    line = ConsoleFormatter().format(record)
    assert "[rid-2]" in line
    assert "src.repository.agents: Agent added" in line
    assert "agent_id=ledgerly" in line


def test_log_context_rejects_unknown_field():
    with pytest.raises(ValueError):
        LogContext.bind(user="x")


def test_configure_logging_replaces_only_its_own_handler():
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(log_format="console")
        handler = configure_logging(log_format="json")
        ours = [h for h in root.handlers if getattr(h, "_fintech_insights", False)]
        assert ours == [handler]
        assert isinstance(handler.formatter, StructuredFormatter)
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_log_event_level(caplog):
    with caplog.at_level(logging.DEBUG, logger="event"):
        log_event("featured_updated", level="warning", count=2)
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "featured_updated"
    assert record.count == 2


class TestPerformanceTracker:
    def test_success(self, caplog):
        with caplog.at_level(logging.INFO, logger="performance"):
            with PerformanceTracker("seed_store", backend="memory") as tracker:
                pass
        record = caplog.records[-1]
        assert record.getMessage() == "seed_store_completed"
        assert record.backend == "memory"
        assert tracker.duration_ms is not None and tracker.duration_ms >= 0

    def test_failure_is_logged_and_reraised(self, caplog):
        with caplog.at_level(logging.INFO, logger="performance"):
            with pytest.raises(RuntimeError):
                with PerformanceTracker("seed_store"):
                    raise RuntimeError("store down")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "seed_store_failed"
        assert record.error == "store down"
