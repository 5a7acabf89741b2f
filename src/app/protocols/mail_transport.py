"""Protocolos de transporte de e-mail."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.email_message import EmailMessage


class MailTransportProtocol(Protocol):
    """Contrato mínimo para entregar uma mensagem.

    Implementações nunca propagam falhas de rede: retornam False.
    """

    def deliver(self, message: EmailMessage) -> bool: ...
