"""Cache protocols for neo-catalog.

Adapters store already-serialized string payloads. Every entry is written
with a TTL; named sets (used by the invalidation index) carry none.
"""

from abc import abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheAdapter(Protocol):
    """Protocol for cache backend implementations."""

    @abstractmethod
    async def connect(self) -> None:
        """Open connections to the backend."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release backend connections."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the payload stored under key, None when absent or expired."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a payload that expires after ttl seconds."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key. Deleting an absent key returns False, never raises."""
        ...

    @abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> int:
        """Delete several keys, returning how many existed."""
        ...

    @abstractmethod
    async def set_add(self, set_key: str, member: str) -> None:
        """Add member to a named set. Adding an existing member is a no-op."""
        ...

    @abstractmethod
    async def set_members(self, set_key: str) -> List[str]:
        """Return the members of a named set, empty for a missing set."""
        ...

    @abstractmethod
    async def set_remove(self, set_key: str, members: Iterable[str]) -> int:
        """Remove members from a named set."""
        ...

    @abstractmethod
    async def set_clear(self, set_key: str) -> None:
        """Drop a named set entirely."""
        ...

    @abstractmethod
    async def set_tracked(self, key: str, value: str, ttl: int, set_key: str) -> None:
        """Store a payload and add its key to a named set in one transaction."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Check backend reachability."""
        ...


@runtime_checkable
class CacheMetricsRecorder(Protocol):
    """Protocol for cache performance metrics."""

    @abstractmethod
    def record_hit(self, key: str) -> None:
        ...

    @abstractmethod
    def record_miss(self, key: str) -> None:
        ...

    @abstractmethod
    def record_error(self, key: str) -> None:
        ...

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        ...
