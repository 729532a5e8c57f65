"""Pagination request entities."""

from dataclasses import dataclass
from enum import Enum


class SortOrder(str, Enum):
    """Sort direction."""
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_descending(cls, descending: bool) -> "SortOrder":
        return cls.DESC if descending else cls.ASC


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page window with the page size already clamped."""

    page: int = 1
    page_size: int = 20

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("Page must be >= 1")
        if self.page_size < 1:
            raise ValueError("Page size must be >= 1")

    @classmethod
    def clamped(cls, page: int, page_size: int, max_page_size: int) -> "PageRequest":
        """Build a window whose size never exceeds ``max_page_size``."""
        return cls(page=page, page_size=max(1, min(page_size, max_page_size)))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size
