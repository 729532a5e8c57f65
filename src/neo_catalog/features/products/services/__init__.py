"""Product services."""

from .cached_product_service import CachedProductService
from .factory import build_product_repository, build_product_service
from .product_service import ProductService

__all__ = ["CachedProductService", "ProductService", "build_product_repository", "build_product_service"]
