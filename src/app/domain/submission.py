"""Submission - dados normalizados de um envio do formulário de contato.

Transiente: existe apenas durante a requisição. Os valores são texto puro
já aparado; o escape HTML acontece na renderização do e-mail.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SubjectKind(StrEnum):
    """Assuntos aceitos pelo formulário."""

    DUVIDA = "duvida"
    AGENDAMENTO = "agendamento"
    FEEDBACK = "feedback"
    OUTRO = "outro"

    @property
    def label(self) -> str:
        """Rótulo exibido no assunto e no corpo do e-mail."""
        return SUBJECT_LABELS[self]


SUBJECT_LABELS: dict[SubjectKind, str] = {
    SubjectKind.DUVIDA: "Dúvida sobre a Mesa Radiônica",
    SubjectKind.AGENDAMENTO: "Agendamento de sessão",
    SubjectKind.FEEDBACK: "Feedback / Depoimento",
    SubjectKind.OUTRO: "Outro assunto",
}


@dataclass(frozen=True, slots=True)
class Submission:
    """Envio válido do formulário de contato."""

    name: str
    email: str
    phone: str
    subject: SubjectKind
    message: str

    @property
    def subject_label(self) -> str:
        return self.subject.label
