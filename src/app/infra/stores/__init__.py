"""Stores: implementações concretas de persistência do rate limit.

Módulos disponíveis:
    - file_rate_limit_store: um arquivo JSON por cliente (padrão)
    - redis_rate_limit_store: sorted sets + script Lua (multi-instância)
    - memory_stores: store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.file_rate_limit_store import FileRateLimitStore
from app.infra.stores.memory_stores import MemoryRateLimitStore
from app.infra.stores.redis_rate_limit_store import RedisRateLimitStore

__all__ = [
    "FileRateLimitStore",
    "MemoryRateLimitStore",
    "RedisRateLimitStore",
]
