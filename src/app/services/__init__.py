"""Serviços de aplicação do formulário de contato.

Orquestração sem IO direto; implementações de IO ficam em app/infra/.
"""

from app.services.email_renderer import EmailRenderer, build_subject
from app.services.mailer import Mailer
from app.services.rate_limiter import RateLimiter, client_key

__all__ = [
    "EmailRenderer",
    "Mailer",
    "RateLimiter",
    "build_subject",
    "client_key",
]
