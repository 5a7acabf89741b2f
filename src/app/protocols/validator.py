"""Protocolo do validador de envios do formulário."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.validators.contact import ValidationResult


class SubmissionValidatorProtocol(Protocol):
    """Valida campos brutos e devolve Submission ou erros por campo."""

    def __call__(self, raw: Mapping[str, str | None]) -> ValidationResult: ...
