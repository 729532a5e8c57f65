"""Database services."""

from .database_service import DatabaseService, TransactionConnection

__all__ = ["DatabaseService", "TransactionConnection"]
