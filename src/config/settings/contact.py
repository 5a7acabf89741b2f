"""Settings do formulário de contato.

Origens CORS permitidas, limites anti-abuso e diretórios de estado local.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from config.settings.base.core import parse_bool

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RateLimitBackend = Literal["file", "memory", "redis"]

DEFAULT_ALLOWED_ORIGINS = ("http://localhost",)
DEFAULT_EMAIL_LOG_DIR = "storage/emails"


def _split_list(value: str | None) -> tuple[str, ...]:
    """Divide lista separada por vírgulas, descartando itens vazios."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class ContactSettings:
    """Configurações do endpoint de contato.

    Attributes:
        allowed_origins: Origens com Access-Control-Allow-Origin ecoado
        rate_limit: Máximo de tentativas de envio por janela
        rate_limit_window_seconds: Tamanho da janela deslizante
        rate_limit_backend: Backend do rate limit (file|memory|redis)
        rate_limit_dir: Diretório dos arquivos de rate limit (backend file)
        trust_forwarded_for: Usa X-Forwarded-For como endereço do cliente
        email_log_dir: Diretório do log de e-mails não entregues
    """

    allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    rate_limit: int = 5
    rate_limit_window_seconds: int = 3600
    rate_limit_backend: RateLimitBackend = "file"
    rate_limit_dir: str = field(default_factory=tempfile.gettempdir)
    trust_forwarded_for: bool = False
    email_log_dir: str = DEFAULT_EMAIL_LOG_DIR

    def is_origin_allowed(self, origin: str | None) -> bool:
        """Verifica correspondência exata da origem com a allow-list."""
        return bool(origin) and origin in self.allowed_origins

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de contato.

        Args:
            base: BaseSettings para verificar ambiente e Redis.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.rate_limit <= 0:
            errors.append("RATE_LIMIT deve ser > 0")

        if self.rate_limit_window_seconds <= 0:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser > 0")

        if self.rate_limit_backend not in {"file", "memory", "redis"}:
            errors.append(f"RATE_LIMIT_BACKEND inválido: {self.rate_limit_backend}")

        if self.rate_limit_backend == "memory" and not base.is_development:
            errors.append(
                "RATE_LIMIT_BACKEND=memory proibido em staging/production. "
                "Use file ou redis."
            )

        if self.rate_limit_backend == "redis" and not base.redis_url:
            errors.append("RATE_LIMIT_BACKEND=redis requer REDIS_URL configurado")

        if not self.allowed_origins:
            errors.append("ALLOWED_ORIGINS vazio: nenhuma origem receberá CORS")

        return errors


def _load_contact_from_env() -> ContactSettings:
    """Carrega ContactSettings de variáveis de ambiente."""
    backend_str = os.getenv("RATE_LIMIT_BACKEND", "file").lower()
    backend: RateLimitBackend = (
        backend_str if backend_str in ("file", "memory", "redis") else "file"
    )
    return ContactSettings(
        allowed_origins=_split_list(os.getenv("ALLOWED_ORIGINS", "http://localhost")),
        rate_limit=int(os.getenv("RATE_LIMIT", "5")),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "3600")),
        rate_limit_backend=backend,
        rate_limit_dir=os.getenv("RATE_LIMIT_DIR") or tempfile.gettempdir(),
        trust_forwarded_for=parse_bool(os.getenv("TRUST_FORWARDED_FOR")),
        email_log_dir=os.getenv("EMAIL_LOG_DIR", DEFAULT_EMAIL_LOG_DIR),
    )


@lru_cache(maxsize=1)
def get_contact_settings() -> ContactSettings:
    """Retorna instância cacheada de ContactSettings."""
    return _load_contact_from_env()
