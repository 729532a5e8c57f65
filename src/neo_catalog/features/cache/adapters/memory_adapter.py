"""In-process cache backend adapter."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass
class MemoryCacheEntry:
    """Memory cache entry with expiry metadata."""
    value: str
    expires_at: float
    created_at: float = field(default_factory=time.monotonic)

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class MemoryAdapter:
    """Memory cache adapter.

    Single-key operations are serialized through one asyncio lock, standing
    in for the per-command atomicity a Redis server provides. Expired entries
    are dropped lazily on access so no entry is ever visible past its TTL.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None, max_size: int = 10000):
        self._clock = clock or time.monotonic
        self._max_size = max_size
        self._entries: Dict[str, MemoryCacheEntry] = {}
        self._sets: Dict[str, Set[str]] = {}
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        """Nothing to connect for the in-process backend."""

    async def disconnect(self) -> None:
        async with self._lock:
            self._entries.clear()
            self._sets.clear()

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None
            return entry.value

    async def set(self, key: str, value: str, ttl: int) -> None:
        async with self._lock:
            self._store(key, value, ttl)

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def delete_many(self, keys: Iterable[str]) -> int:
        async with self._lock:
            return sum(1 for key in keys if self._entries.pop(key, None) is not None)

    async def set_add(self, set_key: str, member: str) -> None:
        async with self._lock:
            self._sets.setdefault(set_key, set()).add(member)

    async def set_members(self, set_key: str) -> List[str]:
        async with self._lock:
            return sorted(self._sets.get(set_key, ()))

    async def set_remove(self, set_key: str, members: Iterable[str]) -> int:
        async with self._lock:
            current = self._sets.get(set_key)
            if not current:
                return 0
            removed = 0
            for member in members:
                if member in current:
                    current.discard(member)
                    removed += 1
            if not current:
                del self._sets[set_key]
            return removed

    async def set_clear(self, set_key: str) -> None:
        async with self._lock:
            self._sets.pop(set_key, None)

    async def set_tracked(self, key: str, value: str, ttl: int, set_key: str) -> None:
        async with self._lock:
            self._store(key, value, ttl)
            self._sets.setdefault(set_key, set()).add(key)

    async def ping(self) -> bool:
        return True

    def _store(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            raise ValueError(f"TTL must be positive, got {ttl}")
        now = self._clock()
        if len(self._entries) >= self._max_size and key not in self._entries:
            self._evict(now)
        self._entries[key] = MemoryCacheEntry(value=value, expires_at=now + ttl, created_at=now)

    def _evict(self, now: float) -> None:
        """Drop expired entries, then the oldest entry if still full."""
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if len(self._entries) >= self._max_size:
            oldest = min(self._entries, key=lambda k: self._entries[k].created_at)
            del self._entries[oldest]
            logger.debug(f"Evicted cache entry {oldest} at capacity {self._max_size}")
