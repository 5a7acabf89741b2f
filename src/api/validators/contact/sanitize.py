"""Sanitização de campos antes da validação.

O escape HTML não é feito aqui: o texto fica puro no Submission e o
template do e-mail escapa tudo na renderização.
"""

from __future__ import annotations

import re

# Tudo que não for permitido em endereço de e-mail é removido
_ILLEGAL_EMAIL_CHARS = re.compile(r"[^A-Za-z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")

# Controles (inclui CR/LF) viram espaço em campos de uma linha
_LINE_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]+")

# Em texto multilinha preserva \n e \t
_TEXT_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def sanitize_line(value: str | None) -> str:
    """Apara e remove quebras/controles de um campo de uma linha."""
    if not value:
        return ""
    return _LINE_CONTROL_CHARS.sub(" ", value).strip()


def sanitize_text(value: str | None) -> str:
    """Apara texto multilinha normalizando quebras para \\n."""
    if not value:
        return ""
    normalized = value.replace("\r\n", "\n").replace("\r", "\n")
    return _TEXT_CONTROL_CHARS.sub("", normalized).strip()


def sanitize_email(value: str | None) -> str:
    """Apara e descarta caracteres ilegais em endereços de e-mail."""
    if not value:
        return ""
    return _ILLEGAL_EMAIL_CHARS.sub("", value.strip())
