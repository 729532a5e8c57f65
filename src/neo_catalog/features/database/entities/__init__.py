"""Database entities and protocols."""

from .protocols import DatabaseRepository

__all__ = ["DatabaseRepository"]
