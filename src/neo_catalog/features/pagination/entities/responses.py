"""Pagination response entities."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results plus the total across all pages.

    ``total_pages`` and the navigation flags are derived from the stored
    fields and cannot be set independently.
    """

    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 20

    @property
    def total_pages(self) -> int:
        """Ceiling of total_count / page_size."""
        if self.page_size <= 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @property
    def count(self) -> int:
        """Number of items on the current page."""
        return len(self.items)

    def map(self, func: Callable[[T], Any]) -> "PagedResult[Any]":
        """Return the same page with every item transformed."""
        return PagedResult(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
        )

    def to_dict(self, item_encoder: Optional[Callable[[T], Any]] = None) -> Dict[str, Any]:
        """Serialize to a JSON-safe dict, derived fields included."""
        encode = item_encoder or (lambda item: item)
        return {
            "items": [encode(item) for item in self.items],
            "total_count": self.total_count,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "has_next_page": self.has_next_page,
            "has_previous_page": self.has_previous_page,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        item_decoder: Optional[Callable[[Any], T]] = None,
    ) -> "PagedResult[T]":
        """Rebuild from ``to_dict`` output; derived fields are recomputed."""
        decode = item_decoder or (lambda item: item)
        return cls(
            items=[decode(item) for item in data["items"]],
            total_count=int(data["total_count"]),
            page=int(data["page"]),
            page_size=int(data["page_size"]),
        )
