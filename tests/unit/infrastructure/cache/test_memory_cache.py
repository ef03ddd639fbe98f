"""Tests for MemoryCache."""

import pytest

from lexicard.infrastructure.cache import MemoryCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestMemoryCache:
    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self) -> None:
        assert await MemoryCache().get("synonyms:happy_en_ru") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self) -> None:
        cache = MemoryCache()
        await cache.set("synonyms:happy_en_ru", ["счастливый", "радостный"])

        assert await cache.get("synonyms:happy_en_ru") == ["счастливый", "радостный"]
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self) -> None:
        cache = MemoryCache()
        await cache.set("key", ["a"])

        value = await cache.get("key")
        assert value is not None
        value.append("b")

        assert await cache.get("key") == ["a"]

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        await cache.set("key", ["a"], ttl_seconds=60)

        clock.now += 59
        assert await cache.get("key") == ["a"]

        clock.now += 1
        assert await cache.get("key") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_entry_without_ttl_never_expires(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        await cache.set("key", ["a"])

        clock.now += 10**9
        assert await cache.get("key") == ["a"]

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        cache = MemoryCache()
        await cache.set("one", ["a"])
        await cache.set("two", ["b"])

        await cache.clear()

        assert len(cache) == 0
        assert await cache.get("one") is None

    @pytest.mark.asyncio
    async def test_expired_entries_swept_on_write(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        for i in range(1000):
            await cache.set(f"synonyms:word{i}_en_ru", ["x"], ttl_seconds=10)

        clock.now += 100
        await cache.set("synonyms:fresh_en_ru", ["y"], ttl_seconds=10)

        assert len(cache) == 1
        assert await cache.get("synonyms:fresh_en_ru") == ["y"]

    @pytest.mark.asyncio
    async def test_sweep_keeps_live_entries(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        await cache.set("short", ["a"], ttl_seconds=10)
        await cache.set("long", ["b"], ttl_seconds=1000)
        await cache.set("forever", ["c"])

        clock.now += 100
        await cache.set("fresh", ["d"], ttl_seconds=10)

        assert len(cache) == 3
        assert await cache.get("long") == ["b"]
        assert await cache.get("forever") == ["c"]
