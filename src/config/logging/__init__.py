"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="mesa-contato")
    logger = get_logger(__name__)
    logger.info("contact_submitted", extra={"latency_ms": 42})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Logs nunca carregam PII bruta (e-mails são mascarados).
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, EmailMaskingFilter, mask_email
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "EmailMaskingFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_email",
]
