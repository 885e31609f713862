from ._cache_store import CacheStore
from ._memory_store import InMemoryCacheStore
from ._redis_store import RedisCacheStore

__all__ = ["CacheStore", "InMemoryCacheStore", "RedisCacheStore"]
