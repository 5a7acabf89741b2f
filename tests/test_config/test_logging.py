"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, EmailMaskingFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    EmailMaskingFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    mask_email,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_and_masking_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, EmailMaskingFilter) for f in filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "mesa-contato"


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")
        assert get_logger("same.module").name == "same.module"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        """Fallback é logado em WARNING com template lazy."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "mailer")
        logger.warning.assert_called_once()
        call_args = logger.warning.call_args
        assert call_args[0][0] == "Fallback applied for %s"
        assert call_args[0][1] == "mailer"
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "mailer"
        assert "reason" not in extra
        assert "elapsed_ms" not in extra

    def test_log_fallback_with_all_params(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "mailer", reason="local_delivery_failed", elapsed_ms=12.5)
        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "local_delivery_failed"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("my_service", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name").filter(record)
        assert record.correlation_id == ""


class TestEmailMasking:
    """Testes para mask_email e EmailMaskingFilter."""

    def test_mask_email_keeps_first_char_and_domain(self) -> None:
        assert mask_email("from maria@example.com") == "from m***@example.com"

    def test_mask_email_without_email_is_identity(self) -> None:
        assert mask_email("nothing here") == "nothing here"

    def test_filter_masks_formatted_message(self) -> None:
        record = _record("reply to %s", ("joao@site.com.br",))
        assert EmailMaskingFilter().filter(record) is True
        assert record.getMessage() == "reply to j***@site.com.br"
        assert record.args is None

    def test_filter_leaves_plain_message_untouched(self) -> None:
        record = _record("contact_submitted")
        EmailMaskingFilter().filter(record)
        assert record.msg == "contact_submitted"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_output_has_renamed_fields_and_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record("contact_submitted")
        record.correlation_id = "abc-123"
        record.service = "mesa-contato"
        record.outcome = "sent"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "contact_submitted"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["outcome"] == "sent"

    def test_json_output_keeps_non_ascii(self) -> None:
        formatter = create_json_formatter()
        record = _record("Mesa Hermética")
        record.correlation_id = ""
        record.service = "svc"
        assert "Hermética" in formatter.format(record)
