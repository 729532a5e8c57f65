"""Cache feature: backend adapters, guarded cache service and invalidation index."""

from .adapters import MemoryAdapter, NoOpAdapter, RedisAdapter, create_cache_adapter
from .entities import CacheAdapter
from .services import CacheMetrics, CacheService, InvalidationIndex

__all__ = [
    "CacheAdapter",
    "CacheMetrics",
    "CacheService",
    "InvalidationIndex",
    "MemoryAdapter",
    "NoOpAdapter",
    "RedisAdapter",
    "create_cache_adapter",
]
