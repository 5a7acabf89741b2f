"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_submit_contact_use_case

    initialize_app()
    use_case = get_submit_contact_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_contact_settings, get_email_settings

if TYPE_CHECKING:
    from app.protocols.rate_limit_store import RateLimitStoreProtocol
    from app.services import Mailer
    from app.use_cases.contact import SubmitContactUseCase

# Nome do serviço para logs e métricas
SERVICE_NAME = "mesa-contato"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (chamar uma vez no startup).

    Configura logging estruturado JSON com correlation_id.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"contact: {error}" for error in get_contact_settings().validate(base))
    errors.extend(f"email: {error}" for error in get_email_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_rate_limit_store() -> RateLimitStoreProtocol:
    """Obtém store de rate limit (singleton)."""
    from app.bootstrap.dependencies import create_rate_limit_store
    return create_rate_limit_store(get_contact_settings(), get_base_settings())


@lru_cache(maxsize=1)
def get_mailer() -> Mailer:
    """Obtém Mailer (singleton)."""
    from app.bootstrap.dependencies import create_mailer
    return create_mailer(get_email_settings(), get_contact_settings())


@lru_cache(maxsize=1)
def get_submit_contact_use_case() -> SubmitContactUseCase:
    """Obtém o caso de uso de envio do formulário (singleton)."""
    from app.bootstrap.dependencies import create_submit_contact_use_case
    return create_submit_contact_use_case(
        get_rate_limit_store(),
        get_mailer(),
        get_contact_settings(),
        get_email_settings(),
    )


def reset_dependencies() -> None:
    """Limpa caches de settings e singletons (usado em testes)."""
    from config.settings import reset_settings_cache

    reset_settings_cache()
    get_rate_limit_store.cache_clear()
    get_mailer.cache_clear()
    get_submit_contact_use_case.cache_clear()
