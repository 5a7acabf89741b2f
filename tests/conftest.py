"""Configuração do pytest para o projeto Mesa Contato."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.domain.email_message import Address, EmailMessage  # noqa: E402
from app.domain.submission import SubjectKind, Submission  # noqa: E402
from config.settings import EmailSettings, reset_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings relidas do ambiente a cada teste (monkeypatch-friendly)."""
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def submission() -> Submission:
    return Submission(
        name="Maria Souza",
        email="maria@example.com",
        phone="(11) 98765-4321",
        subject=SubjectKind.DUVIDA,
        message="Gostaria de saber mais sobre a mesa.",
    )


@pytest.fixture
def email_message() -> EmailMessage:
    return EmailMessage(
        sender=Address("noreply@mesahermetica.com.br", "Mesa Hermética"),
        recipient=Address("contato@mesahermetica.com.br"),
        reply_to=Address("maria@example.com", "Maria Souza"),
        subject="[Mesa Hermética] Dúvida sobre a Mesa Radiônica — Maria Souza",
        html_body="<p>Olá</p>\n.linha com ponto\n",
    )


@pytest.fixture
def smtp_settings() -> EmailSettings:
    return EmailSettings(
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_username="user@example.com",
        smtp_password="s3cret",
        smtp_security="tls",
    )
