"""Exceções de domínio para falhas de infraestrutura e entrega de e-mail."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm.states import SmtpState


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class RateLimitStoreError(InfrastructureError):
    """Falha de IO no store de rate limit (lock, escrita)."""


class MailDeliveryError(InfrastructureError):
    """Falha ao entregar ou registrar uma mensagem."""


class SmtpError(MailDeliveryError):
    """Base para falhas do cliente SMTP."""


class SmtpConnectionError(SmtpError):
    """Conexão SMTP recusada, encerrada ou expirada."""


class SmtpReplyError(SmtpError):
    """Resposta SMTP com código fora do conjunto aceito pelo estado."""

    def __init__(self, state: SmtpState, code: int, text: str) -> None:
        self.state = state
        self.code = code
        self.text = text
        super().__init__(f"{state.name}: resposta inesperada {code} {text}".strip())
