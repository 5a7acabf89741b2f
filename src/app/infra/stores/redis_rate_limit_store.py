"""Redis Rate Limit Store: janela deslizante com sorted sets.

Cada chave é um ZSET cujos scores são os timestamps das tentativas.
O check-and-append roda em um script Lua (atômico no servidor), o que
elimina a corrida de read-modify-write entre instâncias.

Contrato de Keys:
    Keys devem ser hashes/IDs opacos. NUNCA passar IP ou e-mail em claro.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from app.protocols.rate_limit_store import RateLimitStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

RATE_LIMIT_PREFIX = "ratelimit:contact:"

# KEYS[1]=zset  ARGV: now, window, limit, member
ACQUIRE_SCRIPT = """
local key = KEYS[1]
local now = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])
redis.call('ZREMRANGEBYSCORE', key, '-inf', now - window)
if redis.call('ZCARD', key) >= limit then
    return 0
end
redis.call('ZADD', key, now, ARGV[4])
redis.call('EXPIRE', key, math.ceil(window))
return 1
"""


class RedisRateLimitStore(RateLimitStoreProtocol):
    """Store de rate limit usando Redis (Upstash compatível).

    Args:
        redis_client: Cliente Redis síncrono
    """

    def __init__(self, redis_client: Redis[bytes]) -> None:
        self._redis = redis_client
        self._acquire = redis_client.register_script(ACQUIRE_SCRIPT)

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{RATE_LIMIT_PREFIX}{key}"

    def count(self, key: str, window_seconds: float, now: float) -> int:
        """Poda tentativas com score <= now - window e conta o restante."""
        redis_key = self._key(key)
        try:
            pipeline = self._redis.pipeline()
            pipeline.zremrangebyscore(redis_key, "-inf", now - window_seconds)
            pipeline.zcard(redis_key)
            _, total = pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar rate limit no Redis") from exc
        return int(total)

    def try_acquire(
        self,
        key: str,
        limit: int,
        window_seconds: float,
        now: float,
    ) -> bool:
        member = f"{now:.6f}:{uuid.uuid4().hex}"
        try:
            acquired = self._acquire(
                keys=[self._key(key)],
                args=[now, window_seconds, limit, member],
            )
        except Exception as exc:
            raise RedisConnectionError("Falha ao registrar rate limit no Redis") from exc
        if not acquired:
            key_masked = key[:8] + "..." if len(key) > 8 else key
            logger.debug("rate_limit_acquire_denied", extra={"key": key_masked})
        return bool(acquired)

    def purge(self, window_seconds: float, now: float) -> int:
        """Expiração fica a cargo do EXPIRE aplicado a cada tentativa."""
        return 0
