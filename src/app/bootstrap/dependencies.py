"""Factories: criação das implementações concretas a partir das settings.

Centraliza o wiring de stores, transportes de e-mail e do caso de uso.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.contact import validate_submission
from app.bootstrap.clients import create_redis_client
from app.infra.mail import EmailFileLog, LocalMailTransport, SmtpClient
from app.infra.stores import FileRateLimitStore, MemoryRateLimitStore, RedisRateLimitStore
from app.services import EmailRenderer, Mailer, RateLimiter
from app.use_cases.contact import SubmitContactUseCase

if TYPE_CHECKING:
    from app.protocols.rate_limit_store import RateLimitStoreProtocol
    from config.settings import BaseSettings, ContactSettings, EmailSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Rate Limit Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_rate_limit_store(
    contact: ContactSettings,
    base: BaseSettings,
) -> RateLimitStoreProtocol:
    """Cria store de rate limit conforme RATE_LIMIT_BACKEND.

    - "file": FileRateLimitStore em RATE_LIMIT_DIR (padrão)
    - "memory": MemoryRateLimitStore (dev only)
    - "redis": RedisRateLimitStore (multi-instância)
    """
    backend = contact.rate_limit_backend

    if backend == "redis":
        store: RateLimitStoreProtocol = RedisRateLimitStore(create_redis_client())
    elif backend == "memory":
        if not base.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": base.environment},
            )
        store = MemoryRateLimitStore()
    elif backend == "file":
        store = FileRateLimitStore(contact.rate_limit_dir)
    else:
        msg = f"RATE_LIMIT_BACKEND inválido: {backend}"
        raise ValueError(msg)

    logger.info("rate_limit_store_created", extra={"backend": backend})
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Mailer Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_mailer(email: EmailSettings, contact: ContactSettings) -> Mailer:
    """Cria Mailer com os três transportes (SMTP, local, arquivo)."""
    mailer = Mailer(
        settings=email,
        smtp_transport=SmtpClient(email),
        local_transport=LocalMailTransport(
            email.smtp_host, email.smtp_port, email.timeout_seconds
        ),
        file_log=EmailFileLog(contact.email_log_dir),
    )
    logger.info(
        "mailer_created",
        extra={"transport": "smtp" if mailer.uses_smtp else "local"},
    )
    return mailer


# ──────────────────────────────────────────────────────────────────────────────
# Use Case Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_submit_contact_use_case(
    store: RateLimitStoreProtocol,
    mailer: Mailer,
    contact: ContactSettings,
    email: EmailSettings,
) -> SubmitContactUseCase:
    """Monta o caso de uso de envio com validador, limiter e renderer."""
    return SubmitContactUseCase(
        validator=validate_submission,
        rate_limiter=RateLimiter(
            store,
            limit=contact.rate_limit,
            window_seconds=contact.rate_limit_window_seconds,
        ),
        renderer=EmailRenderer(email),
        mailer=mailer,
    )
