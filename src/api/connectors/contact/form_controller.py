"""Controller do formulário de contato (cliente HTTP).

Espelha as regras de validação do servidor para UX (mesma
implementação de `api.validators.contact`), aplica a máscara de
telefone, mantém o contador de caracteres e envia o formulário de forma
assíncrona, distribuindo os erros do servidor nos slots de cada campo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import httpx

from api.connectors.contact.phone_mask import format_phone_mask
from api.validators.contact import HONEYPOT_FIELD, REQUIRED_FIELDS, validate_field

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "email", "phone", "subject", "message")
DEFAULT_TIMEOUT_SECONDS = 15.0


class SubmitStatus(StrEnum):
    """Estado visível do envio."""

    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"
    INVALID = "invalid"
    SKIPPED = "skipped"


@dataclass
class FieldState:
    """Valor, slot de erro e marcação de inválido de um campo."""

    value: str = ""
    error: str = ""
    is_invalid: bool = False

    def set_error(self, message: str | None) -> None:
        self.error = message or ""
        self.is_invalid = bool(message)


class ContactFormController:
    """Estado e comportamento do formulário no cliente.

    Args:
        endpoint: URL do endpoint /api/contact
        client: httpx.AsyncClient opcional (injetável nos testes)
        timeout_seconds: Timeout quando o controller cria o próprio cliente
    """

    def __init__(
        self,
        endpoint: str,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._endpoint = endpoint
        self._client = client
        self._timeout = timeout_seconds
        self.fields: dict[str, FieldState] = {name: FieldState() for name in FORM_FIELDS}
        self.honeypot = ""
        self.char_count = 0
        self.status = SubmitStatus.IDLE
        self.is_submitting = False

    def input(self, field: str, value: str) -> None:
        """Atualiza o campo como o evento `input` do navegador."""
        if field == HONEYPOT_FIELD:
            self.honeypot = value
            return

        state = self.fields[field]
        state.value = format_phone_mask(value) if field == "phone" else value
        if field == "message":
            self.char_count = len(value)
        if state.is_invalid:
            self.blur(field)

    def blur(self, field: str) -> bool:
        """Valida um campo (evento `blur`); retorna True se válido."""
        state = self.fields[field]
        state.set_error(validate_field(field, state.value))
        return not state.is_invalid

    def validate_all(self) -> bool:
        results = [self.blur(field) for field in REQUIRED_FIELDS]
        return all(results)

    def first_invalid_field(self) -> str | None:
        return next((name for name, state in self.fields.items() if state.is_invalid), None)

    def form_data(self) -> dict[str, str]:
        data = {name: state.value for name, state in self.fields.items()}
        data[HONEYPOT_FIELD] = self.honeypot
        return data

    def reset(self) -> None:
        """Limpa campos, erros e contador (após envio bem-sucedido)."""
        for state in self.fields.values():
            state.value = ""
            state.set_error(None)
        self.honeypot = ""
        self.char_count = 0

    async def submit(self) -> SubmitStatus:
        """Envia o formulário.

        Returns:
            SKIPPED (honeypot preenchido, nada enviado), INVALID (erros
            locais, nada enviado), SUCCESS ou ERROR.
        """
        if self.honeypot:
            return SubmitStatus.SKIPPED

        if not self.validate_all():
            self.status = SubmitStatus.INVALID
            return self.status

        self.is_submitting = True
        self.status = SubmitStatus.IDLE
        try:
            data = await self._post(self.form_data())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("contact_submit_failed", extra={"error_type": type(exc).__name__})
            self.status = SubmitStatus.ERROR
            return self.status
        finally:
            self.is_submitting = False

        if data.get("success"):
            self.reset()
            self.status = SubmitStatus.SUCCESS
        else:
            self._apply_server_errors(data.get("errors"))
            self.status = SubmitStatus.ERROR
        return self.status

    async def _post(self, data: dict[str, str]) -> dict[str, Any]:
        if self._client is not None:
            response = await self._client.post(self._endpoint, data=data)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._endpoint, data=data)
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("Resposta inesperada do servidor")
        return payload

    def _apply_server_errors(self, errors: Any) -> None:
        if not isinstance(errors, dict):
            return
        for name, message in errors.items():
            state = self.fields.get(name)
            if state is not None and message:
                state.set_error(str(message))
