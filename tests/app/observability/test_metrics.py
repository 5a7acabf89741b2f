"""Testes das métricas registradas como logs."""

import logging

from app.observability import (
    record_delivery,
    record_latency,
    record_rate_limited,
    reset_correlation_id,
    set_correlation_id,
)


def _record(caplog, message: str) -> logging.LogRecord:
    return next(r for r in caplog.records if r.getMessage() == message)


def test_latency_uses_context_correlation_id(caplog) -> None:
    token = set_correlation_id("req-1")
    try:
        with caplog.at_level(logging.INFO):
            record_latency("contact", "submit", 12.3456)
    finally:
        reset_correlation_id(token)

    record = _record(caplog, "metric_latency")
    assert record.latency_ms == 12.35
    assert record.correlation_id == "req-1"
    assert record.component == "contact"


def test_delivery_without_latency(caplog) -> None:
    with caplog.at_level(logging.INFO):
        record_delivery("logged", "file_log")

    record = _record(caplog, "metric_delivery")
    assert record.outcome == "logged"
    assert record.transport == "file_log"
    assert not hasattr(record, "latency_ms")


def test_rate_limited_truncates_key(caplog) -> None:
    with caplog.at_level(logging.INFO):
        record_rate_limited("a" * 64, "admission")

    record = _record(caplog, "metric_rate_limited")
    assert record.client_key == "a" * 12
    assert record.stage == "admission"
