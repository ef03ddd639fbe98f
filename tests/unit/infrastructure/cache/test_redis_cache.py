"""Tests for RedisCache."""

import json
from typing import Any

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from lexicard.infrastructure.cache import RedisCache


class FakeRedis:
    """Minimal stand-in for ``redis.asyncio.Redis`` with decoded responses."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.expiry: dict[str, int | None] = {}
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self.store[key] = value
        self.expiry[key] = ex
        return True

    async def aclose(self) -> None:
        self.closed = True


class UndecodableRedis:
    async def get(self, key: str) -> Any:
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


class BrokenRedis:
    async def get(self, key: str) -> Any:
        raise RedisConnectionError("Connection refused")

    async def set(self, key: str, value: str, ex: int | None = None) -> Any:
        raise RedisConnectionError("Connection refused")


@pytest.fixture
def client() -> FakeRedis:
    return FakeRedis()


class TestRedisCache:
    @pytest.mark.asyncio
    async def test_set_stores_json_with_ttl(self, client: FakeRedis) -> None:
        cache = RedisCache(client)  # type: ignore[arg-type]

        await cache.set("synonyms:happy_en_ru", ["счастливый", "радостный"], 86400)

        assert json.loads(client.store["synonyms:happy_en_ru"]) == ["счастливый", "радостный"]
        assert "счастливый" in client.store["synonyms:happy_en_ru"]
        assert client.expiry["synonyms:happy_en_ru"] == 86400

    @pytest.mark.asyncio
    async def test_get_decodes_list(self, client: FakeRedis) -> None:
        cache = RedisCache(client)  # type: ignore[arg-type]
        await cache.set("key", ["a", "b"], 60)

        assert await cache.get("key") == ["a", "b"]

    @pytest.mark.asyncio
    async def test_get_missing(self, client: FakeRedis) -> None:
        cache = RedisCache(client)  # type: ignore[arg-type]

        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_corrupt_value_is_a_miss(self, client: FakeRedis) -> None:
        client.store["key"] = "{not json"
        cache = RedisCache(client)  # type: ignore[arg-type]

        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_non_list_value_is_a_miss(self, client: FakeRedis) -> None:
        client.store["key"] = json.dumps({"word": "happy"})
        cache = RedisCache(client)  # type: ignore[arg-type]

        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_redis_errors_are_swallowed(self) -> None:
        cache = RedisCache(BrokenRedis())  # type: ignore[arg-type]

        await cache.set("key", ["a"], 60)
        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_undecodable_value_is_a_miss(self) -> None:
        cache = RedisCache(UndecodableRedis())  # type: ignore[arg-type]

        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_close(self, client: FakeRedis) -> None:
        cache = RedisCache(client)  # type: ignore[arg-type]

        await cache.close()

        assert client.closed is True
