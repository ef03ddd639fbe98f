"""Read-through/write-through composition of a durable and a local cache."""

import structlog

from lexicard.application.learning.protocols import CacheProtocol

logger = structlog.get_logger(__name__)


class TieredCache:
    """
    Two-tier cache.

    Reads check the durable tier first, then the local tier. Writes always go
    to the local tier and, when configured, to the durable tier with the TTL.
    Without a durable tier the behaviour is that of the local cache alone.
    Durable tier failures are logged and served by the local tier.
    """

    def __init__(self, local: CacheProtocol, durable: CacheProtocol | None = None) -> None:
        self.local = local
        self.durable = durable

    async def get(self, key: str) -> list[str] | None:
        if self.durable is not None:
            try:
                value = await self.durable.get(key)
            except Exception as e:
                logger.warning("durable_cache_get_failed", key=key, error=str(e))
                value = None
            if value:
                logger.debug("durable_cache_hit", key=key)
                return value

        return await self.local.get(key)

    async def set(self, key: str, value: list[str], ttl_seconds: int | None = None) -> None:
        await self.local.set(key, value, ttl_seconds)
        if self.durable is not None:
            try:
                await self.durable.set(key, value, ttl_seconds)
            except Exception as e:
                logger.warning("durable_cache_set_failed", key=key, error=str(e))

    async def clear(self) -> None:
        await self.local.clear()
