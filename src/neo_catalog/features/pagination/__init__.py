"""Pagination feature: page windows and paged results."""

from .entities import PageRequest, PagedResult, SortOrder

__all__ = ["PageRequest", "PagedResult", "SortOrder"]
