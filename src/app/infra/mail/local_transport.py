"""Entrega local via smtplib (sem autenticação).

Usada quando não há credenciais SMTP ou o host é local, tipicamente o
catcher de desenvolvimento em localhost:1025.
"""

from __future__ import annotations

import logging
import smtplib
from typing import TYPE_CHECKING

from app.infra.mail.mime import build_mime_message

if TYPE_CHECKING:
    from app.domain.email_message import EmailMessage

logger = logging.getLogger(__name__)


class LocalMailTransport:
    """Transporte SMTP local não autenticado."""

    def __init__(self, host: str, port: int, timeout: float = 10.0) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout

    def deliver(self, message: EmailMessage) -> bool:
        mime = build_mime_message(message)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                server.send_message(
                    mime,
                    from_addr=message.sender.email,
                    to_addrs=[message.recipient.email],
                )
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning(
                "local_mail_delivery_failed",
                extra={
                    "host": self._host,
                    "port": self._port,
                    "error_type": type(exc).__name__,
                },
            )
            return False
        return True
