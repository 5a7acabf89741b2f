"""Máscara de telefone (formato BR, apenas cosmética)."""

from __future__ import annotations

import re

PHONE_MAX_DIGITS = 11

_NON_DIGIT = re.compile(r"\D")


def format_phone_mask(value: str) -> str:
    """Formata dígitos como (DD) DDDDD-DDDD conforme são digitados.

    Sem nenhum dígito o valor é devolvido inalterado.

    Examples:
        >>> format_phone_mask("11987654321")
        '(11) 98765-4321'
        >>> format_phone_mask("119")
        '(11) 9'
    """
    digits = _NON_DIGIT.sub("", value)[:PHONE_MAX_DIGITS]
    if len(digits) > 6:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) > 2:
        return f"({digits[:2]}) {digits[2:]}"
    if digits:
        return f"({digits}"
    # sem dígitos: valor digitado fica como está
    return value
