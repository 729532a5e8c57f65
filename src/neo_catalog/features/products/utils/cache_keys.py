"""Cache key construction for product entries."""

import hashlib
import json

from .query_pipeline import normalize_filter
from ..models.requests import ProductFilter


class ProductCacheKeys:
    """Builds cache keys for the two product key families.

    ``by-id`` keys embed the identifier; ``paged`` keys embed a SHA-256 of
    the canonical filter so they have a fixed length whatever the search
    text. The index set lives under its own ``index`` segment.
    """

    BY_ID = "product:by-id"
    PAGED = "product:paged"
    PAGED_INDEX = "product:index:paged"

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def by_id(self, product_id: int) -> str:
        return f"{self.prefix}{self.BY_ID}:{int(product_id)}"

    def paged(self, product_filter: ProductFilter, max_page_size: int = 100) -> str:
        canonical = normalize_filter(product_filter, max_page_size)
        signature = json.dumps(canonical, sort_keys=True, separators=(",", ":"))
        digest = hashlib.sha256(signature.encode("utf-8")).hexdigest()
        return f"{self.prefix}{self.PAGED}:{digest}"

    @property
    def paged_index(self) -> str:
        return f"{self.prefix}{self.PAGED_INDEX}"
