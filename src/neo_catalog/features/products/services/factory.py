"""Wiring for the product service stack."""

import logging
from typing import Optional

from .cached_product_service import CachedProductService
from .product_service import ProductService
from ..entities.protocols import ProductRepository, ProductServiceProtocol
from ..repositories.memory_repository import InMemoryProductRepository
from ..repositories.postgres_repository import PostgresProductRepository
from ....config.settings import CacheSettings, CatalogSettings
from ...cache.adapters import create_cache_adapter
from ...cache.services.cache_service import CacheService
from ...database.entities.protocols import DatabaseRepository

logger = logging.getLogger(__name__)


def build_product_repository(
    database: Optional[DatabaseRepository] = None,
    settings: Optional[CatalogSettings] = None,
) -> ProductRepository:
    """Choose the product store: PostgreSQL when a database is given, else in-memory."""
    if database is None:
        return InMemoryProductRepository()

    settings = settings or CatalogSettings()
    return PostgresProductRepository(database, schema=settings.database_schema)


def build_product_service(
    repository: ProductRepository,
    settings: Optional[CatalogSettings] = None,
    cache_settings: Optional[CacheSettings] = None,
    cache: Optional[CacheService] = None,
) -> ProductServiceProtocol:
    """Compose the product service, decorated with caching when enabled."""
    settings = settings or CatalogSettings()
    cache_settings = cache_settings or CacheSettings()

    service = ProductService(repository, max_page_size=settings.max_page_size)
    if not cache_settings.enabled:
        logger.info("Product caching disabled")
        return service

    cache = cache or CacheService(create_cache_adapter(cache_settings), cache_settings)
    return CachedProductService(service, cache, cache_settings, max_page_size=settings.max_page_size)
