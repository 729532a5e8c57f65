"""Cache service wrapping a backend adapter with JSON payloads."""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from ..entities.protocols import CacheAdapter
from .metrics import CacheMetrics
from ....config.settings import CacheSettings
from ....core.exceptions import CacheSerializationError

logger = logging.getLogger(__name__)
T = TypeVar("T")


class CacheService:
    """Guarded cache operations.

    Backend failures never propagate: reads degrade to misses, writes and
    deletes report False, and every failure is logged as a warning.
    """

    def __init__(self,
                 adapter: CacheAdapter,
                 settings: Optional[CacheSettings] = None,
                 metrics: Optional[CacheMetrics] = None):
        self.adapter = adapter
        self.settings = settings or CacheSettings()
        self.metrics = metrics or CacheMetrics()
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the cache service, tolerating an unreachable backend."""
        if self._initialized:
            return

        try:
            await self.adapter.connect()
            self._initialized = True
            logger.info("Cache service initialized successfully")
        except Exception as e:
            logger.warning(f"Cache backend unavailable, continuing without cache: {e}")

    async def shutdown(self) -> None:
        """Shutdown the cache service."""
        if not self._initialized:
            return

        try:
            await self.adapter.disconnect()
            self._initialized = False
            logger.info("Cache service shutdown completed")
        except Exception as e:
            logger.error(f"Error during cache service shutdown: {e}")

    async def get(self, key: str, decoder: Optional[Callable[[Any], T]] = None) -> Optional[T]:
        """Get a value, decoded through ``decoder`` when given.

        A payload that fails to decode is evicted and reported as a miss.
        """
        try:
            raw = await self.adapter.get(key)
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Cache get failed for key {key}: {e}")
            return None

        if raw is None:
            self.metrics.record_miss(key)
            logger.debug(f"Cache miss: {key}")
            return None

        try:
            value = json.loads(raw)
            if decoder is not None:
                value = decoder(value)
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Discarding undecodable cache entry {key}: {e}")
            await self.delete(key)
            return None

        self.metrics.record_hit(key)
        logger.debug(f"Cache hit: {key}")
        return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store a JSON-serializable value; ttl falls back to the default TTL."""
        try:
            payload = self._serialize(key, value)
            await self.adapter.set(key, payload, self._ttl(ttl))
            return True
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Cache set failed for key {key}: {e}")
            return False

    async def set_tracked(self, key: str, value: Any, ttl: Optional[int], set_key: str) -> bool:
        """Store a value and register its key in ``set_key`` atomically."""
        try:
            payload = self._serialize(key, value)
            await self.adapter.set_tracked(key, payload, self._ttl(ttl), set_key)
            return True
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Cache tracked set failed for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        try:
            return await self.adapter.delete(key)
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Cache delete failed for key {key}: {e}")
            return False

    async def discard(self, key: str) -> bool:
        """Make sure ``key`` is gone.

        Returns:
            True when the entry was deleted or already absent, False when the
            backend failed and the entry may still be cached
        """
        try:
            await self.adapter.delete(key)
            return True
        except Exception as e:
            self.metrics.record_error(key)
            logger.warning(f"Cache discard failed for key {key}: {e}")
            return False

    async def delete_many(self, keys: Iterable[str]) -> int:
        keys = list(keys)
        try:
            return await self.adapter.delete_many(keys)
        except Exception as e:
            logger.warning(f"Cache bulk delete failed for {len(keys)} keys: {e}")
            return 0

    async def set_add(self, set_key: str, member: str) -> bool:
        try:
            await self.adapter.set_add(set_key, member)
            return True
        except Exception as e:
            logger.warning(f"Cache set add failed for {set_key}: {e}")
            return False

    async def set_members(self, set_key: str) -> List[str]:
        try:
            return list(await self.adapter.set_members(set_key))
        except Exception as e:
            logger.warning(f"Cache set members failed for {set_key}: {e}")
            return []

    async def set_remove(self, set_key: str, members: Iterable[str]) -> int:
        members = list(members)
        try:
            return await self.adapter.set_remove(set_key, members)
        except Exception as e:
            logger.warning(f"Cache set remove failed for {set_key}: {e}")
            return 0

    async def set_clear(self, set_key: str) -> bool:
        try:
            await self.adapter.set_clear(set_key)
            return True
        except Exception as e:
            logger.warning(f"Cache set clear failed for {set_key}: {e}")
            return False

    async def health_check(self) -> Dict[str, Any]:
        """Get cache health status."""
        try:
            healthy = await self.adapter.ping()
            return {"healthy": bool(healthy), "backend": type(self.adapter).__name__}
        except Exception as e:
            logger.error(f"Cache health check failed: {e}")
            return {"healthy": False, "backend": type(self.adapter).__name__, "error": str(e)}

    def get_metrics(self) -> Dict[str, Any]:
        return self.metrics.get_stats()

    def reset_metrics(self) -> None:
        self.metrics.reset()

    def _ttl(self, ttl: Optional[int]) -> int:
        effective = ttl if ttl is not None else self.settings.default_ttl_seconds
        if effective <= 0:
            raise ValueError(f"TTL must be positive, got {effective}")
        return effective

    @staticmethod
    def _serialize(key: str, value: Any) -> str:
        try:
            return json.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(f"Value for key {key} is not JSON serializable: {e}")
