"""Correlation id por requisição (ContextVar, seguro para threads/async).

O valor vem do cabeçalho X-Correlation-Id quando válido; caso contrário
um UUID novo é gerado. O CorrelationIdFilter do logging lê daqui.

Uso:
    token = set_correlation_id(resolve_correlation_id(header))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-Id"

# Formato aceito no cabeçalho recebido
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (gera UUID se None) e retorna o token de reset."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def resolve_correlation_id(header_value: str | None) -> str:
    """Aceita o valor recebido se bem formado; senão gera um novo.

    Args:
        header_value: Valor bruto do cabeçalho X-Correlation-Id

    Returns:
        Correlation id seguro para logs e para o cabeçalho de resposta
    """
    candidate = (header_value or "").strip()
    if candidate and _VALID_CORRELATION_ID.match(candidate):
        return candidate
    return generate_correlation_id()
