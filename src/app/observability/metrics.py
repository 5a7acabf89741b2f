"""Métricas do formulário de contato registradas como logs estruturados.

Agregáveis depois por qualquer coletor de logs JSON.

Métricas:
- Latência: tempo de processamento por componente/operação
- Entrega: resultado do Mailer (sent/logged/failed) e transporte usado
- Rate limit: submissões rejeitadas por excesso de tentativas

Uso:
    start = time.perf_counter()
    ...
    record_latency("contact", "submit", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "contact", "mailer")
        operation: Nome da operação (ex: "submit", "deliver")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (padrão: o do contexto)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_delivery(
    outcome: str,
    transport: str,
    latency_ms: float | None = None,
) -> None:
    """Registra o resultado de uma entrega de e-mail.

    Args:
        outcome: Valor de DeliveryOutcome (sent, logged, failed)
        transport: Transporte que decidiu o resultado (smtp, local, file_log)
        latency_ms: Duração total da entrega
    """
    extra: dict[str, str | float] = {
        "metric_type": "delivery",
        "component": "mailer",
        "outcome": outcome,
        "transport": transport,
    }
    if latency_ms is not None:
        extra["latency_ms"] = round(latency_ms, 2)
    logger.info("metric_delivery", extra=extra)


def record_rate_limited(client_key: str, stage: str) -> None:
    """Registra uma submissão rejeitada pelo rate limit.

    Args:
        client_key: Hash do endereço do cliente (nunca o IP em claro)
        stage: "admission" (checagem inicial) ou "acquire" (corrida perdida)
    """
    logger.info(
        "metric_rate_limited",
        extra={
            "metric_type": "rate_limited",
            "component": "rate_limiter",
            "client_key": client_key[:12],
            "stage": stage,
        },
    )
