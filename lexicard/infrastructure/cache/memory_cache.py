"""In-process cache for valid-answer sets."""

import time
from collections.abc import Callable


class MemoryCache:
    """
    Dictionary-backed cache with optional per-entry expiry.

    Lives for the lifetime of the process and is shared by all requests.
    Expired entries are dropped on read and swept on every write.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[list[str], float | None]] = {}

    async def get(self, key: str) -> list[str] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return list(value)

    async def set(self, key: str, value: list[str], ttl_seconds: int | None = None) -> None:
        now = self._clock()
        self._evict_expired(now)
        expires_at = now + ttl_seconds if ttl_seconds else None
        self._entries[key] = (list(value), expires_at)

    async def clear(self) -> None:
        self._entries.clear()

    def _evict_expired(self, now: float) -> None:
        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
