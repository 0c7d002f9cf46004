"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(message: str = "session_connected", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.sessions.manager",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_configure_logging_quiets_access_log(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "wa_group_control"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("app.sessions")
        assert logger is logging.getLogger("app.sessions")


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_and_service(self) -> None:
        log_filter = CorrelationIdFilter("svc", lambda: "corr-123")
        record = _record()

        assert log_filter.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "svc"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        log_filter = CorrelationIdFilter("svc", lambda: "from-context")
        record = _record(correlation_id="explicit")

        log_filter.filter(record)

        assert record.correlation_id == "explicit"

    def test_filter_uses_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    def test_required_fields(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert "service" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record_with_extra(self) -> None:
        formatter = create_json_formatter()
        record = _record(correlation_id="c-1", service="svc", state="CONNECTED")

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "session_connected"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.sessions.manager"
        assert payload["correlation_id"] == "c-1"
        assert payload["service"] == "svc"
        assert payload["state"] == "CONNECTED"
