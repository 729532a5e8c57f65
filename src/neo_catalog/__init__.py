"""Neo-Catalog - product catalog service with cache-aside reads.

Provides a composable product query pipeline, a product service returning
tagged results, and a caching decorator that invalidates paged listings
through a cache-backed key index.
"""

from .__version__ import __version__

from .config import CacheSettings, CatalogSettings, setup_logging

from .core.exceptions import (
    CatalogError,
    CacheError,
    DuplicateSkuError,
    EntityNotFoundError,
    InvalidFilterError,
    PersistenceError,
    create_error_response,
    get_http_status_code,
)
from .core.shared import ErrorKind, Result

from .features.cache import CacheService, InvalidationIndex, MemoryAdapter, RedisAdapter
from .features.pagination import PagedResult
from .features.products import (
    CachedProductService,
    CreateProductRequest,
    InMemoryProductRepository,
    PostgresProductRepository,
    ProductFilter,
    ProductResponse,
    ProductService,
    ProductSummary,
    SeedProductsRequest,
    UpdateProductRequest,
    build_product_service,
)

__all__ = [
    "__version__",
    "CacheSettings",
    "CatalogSettings",
    "setup_logging",
    "CatalogError",
    "CacheError",
    "DuplicateSkuError",
    "EntityNotFoundError",
    "InvalidFilterError",
    "PersistenceError",
    "create_error_response",
    "get_http_status_code",
    "ErrorKind",
    "Result",
    "CacheService",
    "InvalidationIndex",
    "MemoryAdapter",
    "RedisAdapter",
    "PagedResult",
    "CachedProductService",
    "CreateProductRequest",
    "InMemoryProductRepository",
    "PostgresProductRepository",
    "ProductFilter",
    "ProductResponse",
    "ProductService",
    "ProductSummary",
    "SeedProductsRequest",
    "UpdateProductRequest",
    "build_product_service",
]
