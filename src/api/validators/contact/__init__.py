"""Validators do formulário de contato."""

from api.validators.contact.fields import (
    FIELD_VALIDATORS,
    ValidationResult,
    clean_field,
    validate_field,
    validate_submission,
)
from api.validators.contact.limits import HONEYPOT_FIELD, REQUIRED_FIELDS

__all__ = [
    "FIELD_VALIDATORS",
    "HONEYPOT_FIELD",
    "REQUIRED_FIELDS",
    "ValidationResult",
    "clean_field",
    "validate_field",
    "validate_submission",
]
