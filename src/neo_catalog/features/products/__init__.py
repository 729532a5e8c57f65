"""Products feature: entities, query pipeline, repositories and services."""

from .entities import Color, Product, ProductRepository, ProductServiceProtocol, Size
from .models import (
    CreateProductRequest,
    ProductFilter,
    ProductResponse,
    ProductSummary,
    SeedProductsRequest,
    UpdateProductRequest,
)
from .repositories import InMemoryProductRepository, PostgresProductRepository
from .services import (
    CachedProductService,
    ProductService,
    build_product_repository,
    build_product_service,
)
from .utils import ProductCacheKeys, ProductQueryPipeline, SortField, SortSpec

__all__ = [
    "CachedProductService",
    "Color",
    "CreateProductRequest",
    "InMemoryProductRepository",
    "PostgresProductRepository",
    "Product",
    "ProductCacheKeys",
    "ProductFilter",
    "ProductQueryPipeline",
    "ProductRepository",
    "ProductResponse",
    "ProductService",
    "ProductServiceProtocol",
    "ProductSummary",
    "SeedProductsRequest",
    "Size",
    "SortField",
    "SortSpec",
    "UpdateProductRequest",
    "build_product_repository",
    "build_product_service",
]
