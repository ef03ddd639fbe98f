from .memory_cache import MemoryCache
from .redis_cache import RedisCache
from .tiered_cache import TieredCache

__all__ = ["MemoryCache", "RedisCache", "TieredCache"]
