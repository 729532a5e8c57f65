"""Cache-aside decorator for the product service."""

import logging
from typing import Any, Dict, Optional

from ..entities.protocols import ProductServiceProtocol
from ..models.requests import (
    CreateProductRequest,
    ProductFilter,
    SeedProductsRequest,
    UpdateProductRequest,
)
from ..models.responses import ProductResponse, ProductSummary
from ..utils.cache_keys import ProductCacheKeys
from ..utils.validation import MAX_PAGE_SIZE, validate_product_filter
from ....config.settings import CacheSettings
from ....core.shared.result import Result
from ...cache.services.cache_service import CacheService
from ...cache.services.invalidation_index import InvalidationIndex
from ...pagination.entities import PagedResult

logger = logging.getLogger(__name__)


def _encode_page(page: PagedResult[ProductSummary]) -> Dict[str, Any]:
    return page.to_dict(lambda item: item.model_dump(mode="json"))


def _decode_page(data: Dict[str, Any]) -> PagedResult[ProductSummary]:
    return PagedResult.from_dict(data, ProductSummary.model_validate)


class CachedProductService:
    """Wraps a product service with read-through caching.

    Reads are served from cache when an entry exists and populated on a
    successful miss. Paged keys are registered in an invalidation index so a
    mutation can drop every cached listing without pattern deletes. Cache
    failures degrade to uncached behavior and never change a result.
    """

    def __init__(
        self,
        inner: ProductServiceProtocol,
        cache: CacheService,
        settings: Optional[CacheSettings] = None,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self._inner = inner
        self._cache = cache
        self._settings = settings or cache.settings
        self._index = InvalidationIndex(cache)
        self._keys = ProductCacheKeys(self._settings.key_prefix)
        self.max_page_size = min(max_page_size, MAX_PAGE_SIZE)

    @property
    def keys(self) -> ProductCacheKeys:
        return self._keys

    async def get_product(self, product_id: int) -> Result[ProductResponse]:
        if product_id is None or product_id <= 0:
            return await self._inner.get_product(product_id)

        key = self._keys.by_id(product_id)
        cached = await self._cache.get(key, ProductResponse.model_validate)
        if cached is not None:
            return Result.success(cached)

        result = await self._inner.get_product(product_id)
        if result.is_success and result.data is not None:
            await self._cache.set(key, result.data.model_dump(mode="json"), self._settings.by_id_ttl_seconds)
        return result

    async def get_products(self, product_filter: ProductFilter) -> Result[PagedResult[ProductSummary]]:
        # Invalid filters are rejected by the inner service and never cached
        if validate_product_filter(product_filter, self.max_page_size):
            return await self._inner.get_products(product_filter)

        key = self._keys.paged(product_filter, self.max_page_size)
        cached = await self._cache.get(key, _decode_page)
        if cached is not None:
            return Result.success(cached)

        result = await self._inner.get_products(product_filter)
        if result.is_success and result.data is not None:
            await self._store_page(key, result.data)
        return result

    async def create_product(self, request: CreateProductRequest) -> Result[ProductResponse]:
        result = await self._inner.create_product(request)
        if result.is_success:
            await self._invalidate_paged()
        return result

    async def update_product(self, product_id: int, request: UpdateProductRequest) -> Result[ProductResponse]:
        result = await self._inner.update_product(product_id, request)
        if result.is_success:
            await self._invalidate_product(product_id)
            await self._invalidate_paged()
        return result

    async def delete_product(self, product_id: int) -> Result[bool]:
        result = await self._inner.delete_product(product_id)
        if result.is_success:
            await self._invalidate_product(product_id)
            await self._invalidate_paged()
        return result

    async def seed_products(self, request: SeedProductsRequest) -> Result[int]:
        result = await self._inner.seed_products(request)
        if result.is_success:
            await self._invalidate_paged()
        return result

    async def _store_page(self, key: str, page: PagedResult[ProductSummary]) -> None:
        payload = _encode_page(page)
        ttl = self._settings.paged_ttl_seconds
        if self._settings.atomic_index_registration:
            await self._cache.set_tracked(key, payload, ttl, self._keys.paged_index)
            return

        # Entry first, then registration; a write landing in between is
        # covered by the entry's TTL
        if await self._cache.set(key, payload, ttl):
            await self._index.add(self._keys.paged_index, key)

    async def _invalidate_product(self, product_id: int) -> None:
        try:
            await self._cache.delete(self._keys.by_id(product_id))
        except Exception as e:
            logger.warning(f"Failed to invalidate cached product {product_id}: {e}")

    async def _invalidate_paged(self) -> None:
        try:
            swept = await self._index.sweep(self._keys.paged_index)
            logger.debug(f"Invalidated {swept} cached product pages")
        except Exception as e:
            logger.warning(f"Failed to invalidate cached product pages: {e}")
