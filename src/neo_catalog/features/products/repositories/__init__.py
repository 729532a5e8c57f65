"""Product repositories."""

from .memory_repository import InMemoryProductRepository
from .postgres_repository import PostgresProductRepository

__all__ = ["InMemoryProductRepository", "PostgresProductRepository"]
