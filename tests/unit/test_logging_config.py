"""Unit tests for logging configuration helpers."""

import logging

import pytest

from joke_gateway.core.logging_config import (
    ChannelAliasFilter,
    TraceIdFilter,
    _resolve_log_level,
    configure_logging,
    trace_id_ctx,
)


def _record(name: str = "joke_gateway.core.services.name_service") -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.unit
def test_trace_id_filter_uses_context_value():
    token = trace_id_ctx.set("trace-123")
    try:
        record = _record()
        assert TraceIdFilter().filter(record) is True
        assert record.trace_id == "trace-123"
    finally:
        trace_id_ctx.reset(token)


@pytest.mark.unit
def test_trace_id_filter_defaults_to_dash():
    record = _record()
    TraceIdFilter().filter(record)
    assert record.trace_id == "-"


@pytest.mark.unit
def test_channel_alias_filter_shortens_known_names():
    record = _record()
    ChannelAliasFilter().filter(record)
    assert record.channel == "name_service"

    other = _record("some.other.logger")
    ChannelAliasFilter().filter(other)
    assert other.channel == "some.other.logger"


@pytest.mark.unit
def test_resolve_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert _resolve_log_level("error") == "ERROR"
    assert _resolve_log_level(None) == "WARNING"

    monkeypatch.setenv("LOG_LEVEL", "nonsense")
    assert _resolve_log_level("verbose") == "INFO"


@pytest.mark.unit
def test_configure_logging_routes_everything_through_one_handler():
    try:
        assert configure_logging("WARNING") == "WARNING"

        root_handlers = logging.getLogger().handlers
        assert len(root_handlers) == 1
        console = root_handlers[0]
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            uvicorn_logger = logging.getLogger(name)
            assert uvicorn_logger.handlers == [console]
            assert uvicorn_logger.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.DEBUG
    finally:
        configure_logging("DEBUG")
