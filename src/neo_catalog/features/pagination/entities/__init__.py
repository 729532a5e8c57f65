"""Pagination entities."""

from .requests import PageRequest, SortOrder
from .responses import PagedResult

__all__ = ["PageRequest", "PagedResult", "SortOrder"]
