"""Use case de envio do formulário de contato.

Pipeline: honeypot → admissão do rate limit → validação → registro da
tentativa → renderização → entrega.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from api.validators.contact.limits import HONEYPOT_FIELD
from app.observability import record_latency, record_rate_limited
from app.services.rate_limiter import client_key
from app.use_cases.contact.models import ContactResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.validator import SubmissionValidatorProtocol
    from app.services.email_renderer import EmailRenderer
    from app.services.mailer import Mailer
    from app.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def is_honeypot_filled(form: Mapping[str, str | None]) -> bool:
    """True quando o campo oculto veio preenchido (bot)."""
    return bool(form.get(HONEYPOT_FIELD))


class SubmitContactUseCase:
    """Orquestra anti-abuso, validação e entrega de um envio."""

    def __init__(
        self,
        validator: SubmissionValidatorProtocol,
        rate_limiter: RateLimiter,
        renderer: EmailRenderer,
        mailer: Mailer,
    ) -> None:
        self._validate = validator
        self._rate_limiter = rate_limiter
        self._renderer = renderer
        self._mailer = mailer

    def execute(self, form: Mapping[str, str | None], client_address: str) -> ContactResult:
        """Processa um envio (bloqueante: lock de arquivo e SMTP).

        Args:
            form: Campos do formulário, já decodificados
            client_address: Endereço de rede do cliente

        Returns:
            ContactResult com status HTTP e corpo JSON
        """
        start = time.perf_counter()
        try:
            return self._execute(form, client_address)
        finally:
            record_latency("contact", "submit", (time.perf_counter() - start) * 1000)

    def _execute(self, form: Mapping[str, str | None], client_address: str) -> ContactResult:
        if is_honeypot_filled(form):
            logger.info("honeypot_triggered")
            return ContactResult.success()

        key = client_key(client_address)
        if self._rate_limiter.is_blocked(key):
            record_rate_limited(key, "admission")
            logger.warning("rate_limit_exceeded", extra={"client_key": key[:12]})
            return ContactResult.rate_limited()

        result = self._validate(form)
        if result.submission is None:
            logger.info("contact_validation_failed", extra={"fields": sorted(result.errors)})
            return ContactResult.invalid(result.errors)

        # Registra antes da entrega: conta tentativas, não sucessos
        if not self._rate_limiter.acquire(key):
            record_rate_limited(key, "acquire")
            logger.warning("rate_limit_exceeded", extra={"client_key": key[:12]})
            return ContactResult.rate_limited()

        message = self._renderer.build_message(result.submission)
        outcome = self._mailer.deliver(message)
        if not outcome.is_success:
            return ContactResult.delivery_failed()

        logger.info(
            "contact_submitted",
            extra={"subject": result.submission.subject.value, "outcome": outcome.value},
        )
        return ContactResult.success()
