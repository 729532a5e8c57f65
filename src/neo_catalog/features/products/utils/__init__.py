"""Product utilities: query pipeline, cache keys, validation and mapping."""

from .cache_keys import ProductCacheKeys
from .mappers import to_product_response, to_product_summary
from .query_pipeline import (
    EqualsIgnoreCasePredicate,
    PriceRangePredicate,
    ProductQueryPipeline,
    SearchPredicate,
    SortField,
    SortSpec,
    normalize_filter,
)
from .validation import MAX_PAGE_SIZE, validate_product_filter, validate_product_id

__all__ = [
    "EqualsIgnoreCasePredicate",
    "MAX_PAGE_SIZE",
    "PriceRangePredicate",
    "ProductCacheKeys",
    "ProductQueryPipeline",
    "SearchPredicate",
    "SortField",
    "SortSpec",
    "normalize_filter",
    "to_product_response",
    "to_product_summary",
    "validate_product_filter",
    "validate_product_id",
]
