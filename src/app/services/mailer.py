"""Mailer: política de seleção de transporte e fallback.

- Credenciais SMTP completas + host remoto → cliente SMTP autenticado.
- Caso contrário → entrega local (smtplib); se falhar, log em arquivo,
  reportado como sucesso (DeliveryOutcome.LOGGED).

`deliver` nunca propaga exceções.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.email_message import DeliveryOutcome
from app.observability import record_delivery
from config.logging import log_fallback, mask_email

if TYPE_CHECKING:
    from app.domain.email_message import EmailMessage
    from app.infra.mail import EmailFileLog
    from app.protocols.mail_transport import MailTransportProtocol
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)


class Mailer:
    """Entrega mensagens do formulário pelo melhor transporte disponível.

    Args:
        settings: EmailSettings (decide o caminho SMTP vs. local)
        smtp_transport: Cliente SMTP autenticado
        local_transport: Entrega local não autenticada
        file_log: Último recurso em disco
    """

    def __init__(
        self,
        settings: EmailSettings,
        smtp_transport: MailTransportProtocol,
        local_transport: MailTransportProtocol,
        file_log: EmailFileLog,
    ) -> None:
        self._settings = settings
        self._smtp = smtp_transport
        self._local = local_transport
        self._file_log = file_log

    @property
    def uses_smtp(self) -> bool:
        return self._settings.uses_authenticated_smtp

    def deliver(self, message: EmailMessage) -> DeliveryOutcome:
        start = time.perf_counter()
        outcome, transport = self._deliver(message)
        elapsed_ms = (time.perf_counter() - start) * 1000

        record_delivery(outcome.value, transport, elapsed_ms)
        log = logger.info if outcome.is_success else logger.error
        log(
            "email_delivery_finished",
            extra={
                "outcome": outcome.value,
                "transport": transport,
                "recipient": mask_email(message.recipient.email),
            },
        )
        return outcome

    def _deliver(self, message: EmailMessage) -> tuple[DeliveryOutcome, str]:
        if self.uses_smtp:
            return (
                DeliveryOutcome.SENT if self._attempt(self._smtp, message, "smtp")
                else DeliveryOutcome.FAILED,
                "smtp",
            )

        if self._attempt(self._local, message, "local"):
            return DeliveryOutcome.SENT, "local"

        log_fallback(logger, "mailer", reason="local_delivery_failed")
        if self._attempt(self._file_log, message, "file_log"):
            return DeliveryOutcome.LOGGED, "file_log"
        return DeliveryOutcome.FAILED, "file_log"

    @staticmethod
    def _attempt(transport: MailTransportProtocol, message: EmailMessage, name: str) -> bool:
        try:
            return transport.deliver(message)
        except Exception:
            logger.exception("mail_transport_error", extra={"transport": name})
            return False
