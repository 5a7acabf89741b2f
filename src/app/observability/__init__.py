"""Observabilidade: correlation id e métricas como logs estruturados.

Uso:
    from app.observability import get_correlation_id, record_delivery
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_delivery, record_latency, record_rate_limited

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_delivery",
    "record_latency",
    "record_rate_limited",
    "reset_correlation_id",
    "resolve_correlation_id",
    "set_correlation_id",
]
