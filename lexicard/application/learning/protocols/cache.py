from typing import Protocol


class CacheProtocol(Protocol):
    async def get(self, key: str) -> list[str] | None: ...

    async def set(self, key: str, value: list[str], ttl_seconds: int | None = None) -> None: ...

    async def clear(self) -> None: ...
