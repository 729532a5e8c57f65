"""Cache services."""

from .cache_service import CacheService
from .invalidation_index import InvalidationIndex
from .metrics import CacheMetrics, key_family

__all__ = ["CacheService", "InvalidationIndex", "CacheMetrics", "key_family"]
