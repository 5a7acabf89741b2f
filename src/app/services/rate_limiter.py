"""Rate limiter por endereço do cliente (janela deslizante).

O endereço nunca é persistido nem logado em claro: a chave é o SHA-256
hex do endereço. Falhas do store (lock, IO, Redis) liberam a requisição
(fail-open) com log de warning, para não derrubar o formulário.
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING

from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.rate_limit_store import RateLimitStoreProtocol

logger = logging.getLogger(__name__)


def client_key(address: str) -> str:
    """Chave opaca do cliente: SHA-256 hex do endereço."""
    return hashlib.sha256(address.encode("utf-8")).hexdigest()


class RateLimiter:
    """Admissão de envios por cliente.

    Args:
        store: Backend de tentativas (file, memory ou redis)
        limit: Máximo de tentativas por janela
        window_seconds: Tamanho da janela
        clock: Fonte de tempo unix (injetável nos testes)
    """

    def __init__(
        self,
        store: RateLimitStoreProtocol,
        limit: int = 5,
        window_seconds: float = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._limit = limit
        self._window = window_seconds
        self._clock = clock

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def window_seconds(self) -> float:
        return self._window

    def is_blocked(self, key: str) -> bool:
        """True se o cliente já atingiu o limite na janela atual."""
        try:
            attempts = self._store.count(key, self._window, self._clock())
        except InfrastructureError as exc:
            self._log_unavailable("count", exc)
            return False
        return attempts >= self._limit

    def acquire(self, key: str) -> bool:
        """Registra a tentativa de envio; False se o limite foi atingido."""
        try:
            return self._store.try_acquire(key, self._limit, self._window, self._clock())
        except InfrastructureError as exc:
            self._log_unavailable("try_acquire", exc)
            return True

    def purge(self) -> int:
        return self._store.purge(self._window, self._clock())

    @staticmethod
    def _log_unavailable(operation: str, exc: InfrastructureError) -> None:
        logger.warning(
            "rate_limit_store_unavailable",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
