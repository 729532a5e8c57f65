"""Cache-backed index of keys that must be invalidated together."""

import logging
from typing import Iterable, List

from .cache_service import CacheService

logger = logging.getLogger(__name__)


class InvalidationIndex:
    """A named set of live cache keys stored in the cache itself.

    Writers register each key they cache; a mutation sweeps every registered
    key instead of relying on pattern deletes. The set may hold keys whose
    entries already expired; deleting those is a no-op.
    """

    def __init__(self, cache: CacheService):
        self.cache = cache

    async def add(self, set_key: str, member_key: str) -> None:
        await self.cache.set_add(set_key, member_key)

    async def members(self, set_key: str) -> List[str]:
        return await self.cache.set_members(set_key)

    async def remove_all(self, set_key: str, member_keys: Iterable[str]) -> int:
        """Delete each named entry, then drop the swept members from the set.

        A member whose delete failed stays registered so the next sweep
        retries it.

        Returns:
            Number of members swept out of the index
        """
        member_keys = list(member_keys)
        if not member_keys:
            return 0

        swept = [key for key in member_keys if await self.cache.discard(key)]
        if len(swept) < len(member_keys):
            logger.warning(
                f"Kept {len(member_keys) - len(swept)} undeleted keys in {set_key} for the next sweep"
            )

        # Only the swept members go; keys registered after the read survive
        if swept:
            await self.cache.set_remove(set_key, swept)
        return len(swept)

    async def sweep(self, set_key: str) -> int:
        members = await self.members(set_key)
        swept = await self.remove_all(set_key, members)
        if swept:
            logger.debug(f"Invalidated {swept} keys tracked by {set_key}")
        return swept
