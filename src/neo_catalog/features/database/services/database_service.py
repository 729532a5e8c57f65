"""asyncpg-backed database service."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import asyncpg

from ....config.settings import CatalogSettings
from ....core.exceptions import ConfigurationError, PersistenceError

logger = logging.getLogger(__name__)


class TransactionConnection:
    """Connection bound to an open transaction, exposing the repository surface."""

    def __init__(self, connection: asyncpg.Connection):
        self._connection = connection

    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        rows = await self._connection.fetch(query, *args)
        return [dict(row) for row in rows]

    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        row = await self._connection.fetchrow(query, *args)
        return dict(row) if row is not None else None

    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        return await self._connection.fetchval(query, *args)

    async def execute_command(self, command: str, *args: Any) -> str:
        return await self._connection.execute(command, *args)

    async def execute_many(self, command: str, args: List[tuple]) -> None:
        await self._connection.executemany(command, args)


class DatabaseService:
    """Pool-owning database service.

    Driver errors are re-raised as ``PersistenceError`` so callers above the
    repository layer never see asyncpg types.
    """

    def __init__(self, pool: Optional[asyncpg.Pool] = None, settings: Optional[CatalogSettings] = None):
        self._pool = pool
        self.settings = settings or CatalogSettings()

    async def connect(self) -> None:
        if self._pool is not None:
            return
        if not self.settings.database_url:
            raise ConfigurationError("NEO_CATALOG_DATABASE_URL is not configured")
        try:
            self._pool = await asyncpg.create_pool(
                dsn=self.settings.database_url,
                min_size=self.settings.db_pool_min_size,
                max_size=self.settings.db_pool_max_size,
            )
            logger.info("Database pool created")
        except (asyncpg.PostgresError, OSError) as e:
            raise PersistenceError(f"Failed to connect to database: {e}", operation="connect")

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise ConfigurationError("Database service is not connected")
        return self._pool

    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        try:
            async with self.pool.acquire() as conn:
                return await TransactionConnection(conn).execute_query(query, *args)
        except asyncpg.PostgresError as e:
            raise PersistenceError(f"Query failed: {e}", operation="query")

    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        try:
            async with self.pool.acquire() as conn:
                return await TransactionConnection(conn).execute_fetchrow(query, *args)
        except asyncpg.PostgresError as e:
            raise PersistenceError(f"Query failed: {e}", operation="fetchrow")

    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchval(query, *args)
        except asyncpg.PostgresError as e:
            raise PersistenceError(f"Query failed: {e}", operation="fetchval")

    async def execute_command(self, command: str, *args: Any) -> str:
        try:
            async with self.pool.acquire() as conn:
                return await conn.execute(command, *args)
        except asyncpg.PostgresError as e:
            raise PersistenceError(f"Command failed: {e}", operation="execute")

    @asynccontextmanager
    async def transaction(self):
        """Start a database transaction."""
        try:
            async with self.pool.acquire() as conn:
                async with conn.transaction():
                    yield TransactionConnection(conn)
        except asyncpg.PostgresError as e:
            raise PersistenceError(f"Transaction failed: {e}", operation="transaction")
