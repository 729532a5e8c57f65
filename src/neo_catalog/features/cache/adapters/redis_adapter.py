"""Redis cache backend adapter."""

import logging
from typing import Iterable, List, Optional

import redis.asyncio as redis
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ....core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class RedisAdapter:
    """Redis cache adapter over ``redis.asyncio``.

    Entries are written with ``SET ... EX`` so Redis enforces the TTL. The
    invalidation index uses a plain Redis set without expiry.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        socket_timeout: float = 3.0,
        client: Optional[Redis] = None,
    ):
        self.url = url
        self.socket_timeout = socket_timeout
        self.redis_client: Optional[Redis] = client
        self._connected = client is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self._connected:
            return

        try:
            self.redis_client = redis.from_url(
                self.url,
                decode_responses=True,
                socket_timeout=self.socket_timeout,
                socket_connect_timeout=self.socket_timeout,
            )
            await self.redis_client.ping()
            self._connected = True
            logger.info("Connected to Redis cache")
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Failed to connect to Redis: {e}")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis_client:
            try:
                await self.redis_client.aclose()
            except RedisError as e:
                logger.error(f"Error closing Redis connection: {e}")
            finally:
                self.redis_client = None
                self._connected = False

    async def get(self, key: str) -> Optional[str]:
        client = await self._client()
        try:
            return await client.get(key)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis get error for key {key}: {e}")

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            raise ValueError(f"TTL must be positive, got {ttl}")
        client = await self._client()
        try:
            await client.set(key, value, ex=ttl)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis set error for key {key}: {e}")

    async def delete(self, key: str) -> bool:
        client = await self._client()
        try:
            return bool(await client.delete(key))
        except RedisError as e:
            raise CacheUnavailableError(f"Redis delete error for key {key}: {e}")

    async def delete_many(self, keys: Iterable[str]) -> int:
        keys = list(keys)
        if not keys:
            return 0
        client = await self._client()
        try:
            return int(await client.delete(*keys))
        except RedisError as e:
            raise CacheUnavailableError(f"Redis bulk delete error for {len(keys)} keys: {e}")

    async def set_add(self, set_key: str, member: str) -> None:
        client = await self._client()
        try:
            await client.sadd(set_key, member)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis sadd error for set {set_key}: {e}")

    async def set_members(self, set_key: str) -> List[str]:
        client = await self._client()
        try:
            members = await client.smembers(set_key)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis smembers error for set {set_key}: {e}")
        return sorted(members or ())

    async def set_remove(self, set_key: str, members: Iterable[str]) -> int:
        members = list(members)
        if not members:
            return 0
        client = await self._client()
        try:
            return int(await client.srem(set_key, *members))
        except RedisError as e:
            raise CacheUnavailableError(f"Redis srem error for set {set_key}: {e}")

    async def set_clear(self, set_key: str) -> None:
        client = await self._client()
        try:
            await client.delete(set_key)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis delete error for set {set_key}: {e}")

    async def set_tracked(self, key: str, value: str, ttl: int, set_key: str) -> None:
        """Write the entry and its index membership in one MULTI/EXEC block."""
        if ttl <= 0:
            raise ValueError(f"TTL must be positive, got {ttl}")
        client = await self._client()
        try:
            async with client.pipeline(transaction=True) as pipe:
                pipe.set(key, value, ex=ttl)
                pipe.sadd(set_key, key)
                await pipe.execute()
        except RedisError as e:
            raise CacheUnavailableError(f"Redis transaction error for key {key}: {e}")

    async def ping(self) -> bool:
        client = await self._client()
        try:
            return bool(await client.ping())
        except RedisError as e:
            raise CacheUnavailableError(f"Redis ping failed: {e}")

    async def _client(self) -> Redis:
        if not self._connected or self.redis_client is None:
            await self.connect()
        return self.redis_client
