"""Filters de logging para injeção de contexto e proteção de PII.

- CorrelationIdFilter: adiciona correlation_id e service a cada record
- EmailMaskingFilter: mascara endereços de e-mail na mensagem formatada
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_EMAIL_PATTERN = re.compile(r"([A-Za-z0-9._%+\-])[A-Za-z0-9._%+\-]*@([A-Za-z0-9.\-]+)")


def mask_email(text: str) -> str:
    """Mascara e-mails mantendo primeira letra e domínio (j***@site.com)."""
    return _EMAIL_PATTERN.sub(r"\1***@\2", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado explicitamente via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class EmailMaskingFilter(logging.Filter):
    """Mascara e-mails presentes na mensagem do record.

    A mensagem é formatada uma única vez e os args são descartados,
    de modo que handlers posteriores vejam apenas o texto mascarado.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_email(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
