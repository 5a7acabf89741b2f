"""Use cases do formulário de contato."""

from .models import ContactResponse, ContactResult
from .submit_contact import SubmitContactUseCase, is_honeypot_filled

__all__ = [
    "ContactResponse",
    "ContactResult",
    "SubmitContactUseCase",
    "is_honeypot_filled",
]
