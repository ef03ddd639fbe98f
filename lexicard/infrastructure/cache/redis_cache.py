"""Durable Redis cache for valid-answer sets."""

import json

import redis.asyncio as redis
import structlog
from redis.exceptions import RedisError

logger = structlog.get_logger(__name__)


class RedisCache:
    """
    Redis-backed cache storing JSON-encoded lists with a TTL.

    Redis errors are logged and reported as a cache miss, so an unreachable
    server only costs cache efficiency.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        """Create a cache from a ``redis://`` URL."""
        return cls(redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> list[str] | None:
        try:
            raw = await self._client.get(key)
        except (RedisError, UnicodeDecodeError) as e:
            logger.warning("redis_get_failed", key=key, error=str(e))
            return None

        if raw is None:
            return None

        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("redis_value_corrupt", key=key, error=str(e))
            return None

        if not isinstance(value, list):
            return None
        return [str(item) for item in value]

    async def set(self, key: str, value: list[str], ttl_seconds: int | None = None) -> None:
        try:
            await self._client.set(key, json.dumps(value, ensure_ascii=False), ex=ttl_seconds)
        except RedisError as e:
            logger.warning("redis_set_failed", key=key, error=str(e))

    async def clear(self) -> None:
        """No-op: shared durable entries expire by TTL rather than being flushed."""

    async def close(self) -> None:
        await self._client.aclose()
