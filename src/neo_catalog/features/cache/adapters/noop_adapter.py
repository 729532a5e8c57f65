"""Cache adapter used when caching is disabled."""

from typing import Iterable, List, Optional


class NoOpAdapter:
    """Adapter that stores nothing; every read is a miss."""

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def get(self, key: str) -> Optional[str]:
        return None

    async def set(self, key: str, value: str, ttl: int) -> None:
        pass

    async def delete(self, key: str) -> bool:
        return False

    async def delete_many(self, keys: Iterable[str]) -> int:
        return 0

    async def set_add(self, set_key: str, member: str) -> None:
        pass

    async def set_members(self, set_key: str) -> List[str]:
        return []

    async def set_remove(self, set_key: str, members: Iterable[str]) -> int:
        return 0

    async def set_clear(self, set_key: str) -> None:
        pass

    async def set_tracked(self, key: str, value: str, ttl: int, set_key: str) -> None:
        pass

    async def ping(self) -> bool:
        return True
