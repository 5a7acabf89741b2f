"""Modelos de resposta do endpoint de contato."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

MSG_SUCCESS = "Mensagem enviada com sucesso!"
MSG_RATE_LIMITED = "Muitas tentativas. Tente novamente em uma hora."
MSG_DELIVERY_FAILED = "Erro ao enviar a mensagem. Tente novamente."
MSG_METHOD_NOT_ALLOWED = "Método não permitido."


class ContactResponse(BaseModel):
    """Corpo JSON das respostas: `message` ou `errors`, conforme o caso."""

    success: bool
    message: str | None = None
    errors: dict[str, str] | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True, slots=True)
class ContactResult:
    """Resultado do caso de uso: status HTTP + corpo."""

    status_code: int
    response: ContactResponse

    @property
    def body(self) -> dict[str, Any]:
        return self.response.to_body()

    @classmethod
    def success(cls) -> ContactResult:
        return cls(200, ContactResponse(success=True, message=MSG_SUCCESS))

    @classmethod
    def invalid(cls, errors: dict[str, str]) -> ContactResult:
        return cls(422, ContactResponse(success=False, errors=errors))

    @classmethod
    def rate_limited(cls) -> ContactResult:
        return cls(429, ContactResponse(success=False, message=MSG_RATE_LIMITED))

    @classmethod
    def delivery_failed(cls) -> ContactResult:
        return cls(500, ContactResponse(success=False, message=MSG_DELIVERY_FAILED))

    @classmethod
    def method_not_allowed(cls) -> ContactResult:
        return cls(405, ContactResponse(success=False, message=MSG_METHOD_NOT_ALLOWED))
