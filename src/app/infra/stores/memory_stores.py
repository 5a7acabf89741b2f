"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios
nem compartilhamento entre processos.
"""

from __future__ import annotations

import threading

from app.domain.rate_record import RateRecord
from app.protocols.rate_limit_store import RateLimitStoreProtocol


class MemoryRateLimitStore(RateLimitStoreProtocol):
    """Rate limit em memória com janela deslizante (apenas dev/test)."""

    def __init__(self) -> None:
        self._store: dict[str, RateRecord] = {}  # key -> tentativas
        self._lock = threading.Lock()

    def _pruned(self, key: str, window_seconds: float, now: float) -> RateRecord:
        """Carrega e poda o registro; remove a chave se ficou vazia."""
        record = self._store.get(key)
        if record is None:
            return RateRecord()
        pruned = record.pruned(window_seconds, now)
        if pruned.count:
            self._store[key] = pruned
        else:
            del self._store[key]
        return pruned

    def count(self, key: str, window_seconds: float, now: float) -> int:
        with self._lock:
            return self._pruned(key, window_seconds, now).count

    def try_acquire(
        self,
        key: str,
        limit: int,
        window_seconds: float,
        now: float,
    ) -> bool:
        """Check-and-append sob o mesmo lock."""
        with self._lock:
            record = self._pruned(key, window_seconds, now)
            if record.count >= limit:
                return False
            self._store[key] = record.with_attempt(now)
            return True

    def purge(self, window_seconds: float, now: float) -> int:
        """Remove chaves sem tentativas na janela (TTL eviction)."""
        with self._lock:
            before = len(self._store)
            for key in list(self._store):
                self._pruned(key, window_seconds, now)
            return before - len(self._store)

    def snapshot(self) -> dict[str, list[float]]:
        """Retorna cópia do estado (apenas para testes)."""
        with self._lock:
            return {key: list(record.attempts) for key, record in self._store.items()}
