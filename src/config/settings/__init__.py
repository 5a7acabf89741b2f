"""Agregador de settings do Mesa Contato.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
    parse_bool,
)
from config.settings.contact import (
    ContactSettings,
    RateLimitBackend,
    get_contact_settings,
)
from config.settings.email import (
    LOCAL_HOSTS,
    EmailSettings,
    SmtpSecurity,
    get_email_settings,
)


def reset_settings_cache() -> None:
    """Descarta settings cacheadas (recarrega do ambiente no próximo get)."""
    get_base_settings.cache_clear()
    get_contact_settings.cache_clear()
    get_email_settings.cache_clear()


__all__ = [
    "LOCAL_HOSTS",
    # Base
    "BaseSettings",
    # Contact
    "ContactSettings",
    # Email
    "EmailSettings",
    "Environment",
    "RateLimitBackend",
    "SmtpSecurity",
    "get_base_settings",
    "get_contact_settings",
    "get_email_settings",
    "parse_bool",
    "reset_settings_cache",
]
