"""Product request and response models."""

from .requests import (
    MAX_SEED_PRODUCTS,
    CreateProductRequest,
    ProductFilter,
    ProductRequestBase,
    SeedProductsRequest,
    UpdateProductRequest,
)
from .responses import ColorResponse, ProductResponse, ProductSummary, SizeResponse

__all__ = [
    "MAX_SEED_PRODUCTS",
    "ColorResponse",
    "CreateProductRequest",
    "ProductFilter",
    "ProductRequestBase",
    "ProductResponse",
    "ProductSummary",
    "SeedProductsRequest",
    "SizeResponse",
    "UpdateProductRequest",
]
