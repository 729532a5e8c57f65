"""Database feature: asyncpg pool and repository query surface."""

from .entities import DatabaseRepository
from .services import DatabaseService

__all__ = ["DatabaseRepository", "DatabaseService"]
