"""Cache backend adapters."""

from typing import Optional

from .memory_adapter import MemoryAdapter
from .noop_adapter import NoOpAdapter
from .redis_adapter import RedisAdapter
from ..entities.protocols import CacheAdapter
from ....config.settings import CacheBackend, CacheSettings


def create_cache_adapter(settings: Optional[CacheSettings] = None) -> CacheAdapter:
    """Build the adapter selected by cache settings."""
    settings = settings or CacheSettings()
    if not settings.enabled or settings.backend == CacheBackend.NONE:
        return NoOpAdapter()
    if settings.backend == CacheBackend.REDIS:
        return RedisAdapter(url=settings.redis_url, socket_timeout=settings.redis_socket_timeout)
    return MemoryAdapter()


__all__ = [
    "MemoryAdapter",
    "NoOpAdapter",
    "RedisAdapter",
    "create_cache_adapter",
]
