"""EmailMessage - mensagem montada a partir de um Submission aceito."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DeliveryOutcome(StrEnum):
    """Resultado da entrega pelo Mailer.

    SENT e LOGGED contam como sucesso para a resposta HTTP; LOGGED indica
    que a mensagem ficou apenas no log em arquivo (modo desenvolvimento).
    """

    SENT = "sent"
    LOGGED = "logged"
    FAILED = "failed"

    @property
    def is_success(self) -> bool:
        return self is not DeliveryOutcome.FAILED


@dataclass(frozen=True, slots=True)
class Address:
    """Endereço de e-mail com nome de exibição opcional."""

    email: str
    name: str = ""

    def formatted(self) -> str:
        """Forma legível "Nome <email>" (sem codificação MIME)."""
        return f"{self.name} <{self.email}>" if self.name else self.email


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """Mensagem HTML pronta para entrega.

    Attributes:
        sender: Remetente (identidade do site)
        recipient: Destinatário fixo
        reply_to: Autor do envio, para resposta direta
        subject: Linha de assunto em texto puro
        html_body: Corpo HTML já com conteúdo do usuário escapado
    """

    sender: Address
    recipient: Address
    reply_to: Address
    subject: str
    html_body: str
