"""Shared building blocks."""

from .result import ErrorKind, Result

__all__ = ["ErrorKind", "Result"]
