"""Cliente do formulário de contato."""

from api.connectors.contact.form_controller import (
    FORM_FIELDS,
    ContactFormController,
    FieldState,
    SubmitStatus,
)
from api.connectors.contact.phone_mask import format_phone_mask

__all__ = [
    "FORM_FIELDS",
    "ContactFormController",
    "FieldState",
    "SubmitStatus",
    "format_phone_mask",
]
