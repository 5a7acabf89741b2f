"""Validação dos campos do formulário de contato.

Cada campo é validado de forma independente; todos os erros são
coletados antes da resposta. As funções por campo são compartilhadas com
o controlador do formulário (api/connectors/contact) para que cliente e
servidor apliquem exatamente as mesmas regras.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from api.validators.contact import messages
from api.validators.contact.limits import (
    MESSAGE_MAX_LENGTH,
    MESSAGE_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PHONE_MAX_LENGTH,
)
from api.validators.contact.sanitize import sanitize_email, sanitize_line, sanitize_text
from app.domain.submission import Submission, SubjectKind

FieldValidator = Callable[[str], str | None]


def validate_name(value: str) -> str | None:
    """Retorna a mensagem de erro do nome, ou None se válido."""
    if not value:
        return messages.NAME_REQUIRED
    if len(value) < NAME_MIN_LENGTH:
        return messages.NAME_TOO_SHORT
    if len(value) > NAME_MAX_LENGTH:
        return messages.NAME_TOO_LONG
    return None


def validate_email_address(value: str) -> str | None:
    """Checagem sintática do e-mail (sem consulta DNS)."""
    if not value:
        return messages.EMAIL_REQUIRED
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return messages.EMAIL_INVALID
    return None


def validate_subject(value: str) -> str | None:
    """Aceita apenas os assuntos enumerados; o resto é rejeitado."""
    if not value:
        return messages.SUBJECT_REQUIRED
    if value not in {kind.value for kind in SubjectKind}:
        return messages.SUBJECT_INVALID
    return None


def validate_message(value: str) -> str | None:
    if not value:
        return messages.MESSAGE_REQUIRED
    if len(value) < MESSAGE_MIN_LENGTH:
        return messages.MESSAGE_TOO_SHORT
    if len(value) > MESSAGE_MAX_LENGTH:
        return messages.MESSAGE_TOO_LONG
    return None


FIELD_VALIDATORS: dict[str, FieldValidator] = {
    "name": validate_name,
    "email": validate_email_address,
    "subject": validate_subject,
    "message": validate_message,
}

FIELD_SANITIZERS: dict[str, Callable[[str | None], str]] = {
    "name": sanitize_line,
    "email": sanitize_email,
    "phone": sanitize_line,
    "subject": sanitize_line,
    "message": sanitize_text,
}


def clean_field(name: str, value: str | None) -> str:
    """Aplica a sanitização do campo (sem sanitizer: apenas strip)."""
    sanitizer = FIELD_SANITIZERS.get(name)
    if sanitizer is None:
        return (value or "").strip()
    return sanitizer(value)


def validate_field(name: str, value: str | None) -> str | None:
    """Sanitiza e valida um único campo.

    Args:
        name: Nome do campo (name, email, subject, message)
        value: Valor bruto

    Returns:
        Mensagem de erro localizada, ou None se válido (ou sem regra).
    """
    validator = FIELD_VALIDATORS.get(name)
    if validator is None:
        return None
    return validator(clean_field(name, value))


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Resultado da validação: Submission OU erros por campo, nunca ambos."""

    submission: Submission | None = None
    errors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (self.submission is None) == (not self.errors):
            raise ValueError("ValidationResult exige submission ou errors, exclusivamente")

    @property
    def is_valid(self) -> bool:
        return self.submission is not None


def validate_submission(raw: Mapping[str, str | None]) -> ValidationResult:
    """Valida os campos brutos de um envio.

    Args:
        raw: Campos do formulário (name, email, phone, subject, message)

    Returns:
        ValidationResult com Submission normalizado ou erros por campo.
    """
    cleaned = {name: clean_field(name, raw.get(name)) for name in FIELD_SANITIZERS}

    errors: dict[str, str] = {}
    for name, validator in FIELD_VALIDATORS.items():
        error = validator(cleaned[name])
        if error:
            errors[name] = error

    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        submission=Submission(
            name=cleaned["name"],
            email=cleaned["email"],
            phone=cleaned["phone"][:PHONE_MAX_LENGTH],
            subject=SubjectKind(cleaned["subject"]),
            message=cleaned["message"],
        )
    )
