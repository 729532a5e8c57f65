"""Tests for the cache-aside product service decorator."""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from neo_catalog.config.settings import CacheSettings
from neo_catalog.core.shared.result import ErrorKind, Result
from neo_catalog.features.cache.adapters.memory_adapter import MemoryAdapter
from neo_catalog.features.cache.services.cache_service import CacheService
from neo_catalog.features.pagination.entities import PagedResult
from neo_catalog.features.products.models.requests import (
    ProductFilter,
    SeedProductsRequest,
    UpdateProductRequest,
)
from neo_catalog.features.products.models.responses import ProductResponse, ProductSummary
from neo_catalog.features.products.services.cached_product_service import CachedProductService


def sample_response(product_id: int = 1, name: str = "Boot") -> ProductResponse:
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    return ProductResponse(
        id=product_id, name=name, model="B-1", brand="Acme", sku=f"SKU-{product_id}",
        price=Decimal("49.90"), category="Footwear", created_at=now, updated_at=now,
    )


def sample_page() -> PagedResult[ProductSummary]:
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    item = ProductSummary(id=1, name="Boot", brand="Acme", model="B-1", sku="SKU-1",
                          price=Decimal("49.90"), category=None, created_at=now)
    return PagedResult(items=[item], total_count=1, page=1, page_size=20)


class FailingAdapter(MemoryAdapter):
    """Memory adapter whose every operation raises."""

    async def get(self, key):
        raise ConnectionError("cache down")

    async def set(self, key, value, ttl):
        raise ConnectionError("cache down")

    async def set_tracked(self, key, value, ttl, set_key):
        raise ConnectionError("cache down")

    async def delete(self, key):
        raise ConnectionError("cache down")

    async def set_members(self, set_key):
        raise ConnectionError("cache down")


class TestSingleItemReads:
    """Read-through caching of single products."""

    @pytest.mark.asyncio
    async def test_miss_populates_then_hit_skips_inner(self, mock_inner_service, cache_service, cache_settings):
        mock_inner_service.get_product.return_value = Result.success(sample_response())
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)

        first = await service.get_product(1)
        second = await service.get_product(1)

        assert first.data == second.data == sample_response()
        mock_inner_service.get_product.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self, mock_inner_service, cache_service, cache_settings):
        mock_inner_service.get_product.return_value = Result.failure("Product not found", ErrorKind.NOT_FOUND)
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)

        await service.get_product(5)
        result = await service.get_product(5)

        assert result.error_kind == ErrorKind.NOT_FOUND
        assert mock_inner_service.get_product.await_count == 2

    @pytest.mark.asyncio
    async def test_caching_twice_reads_back_identical_payload(self, cache_service):
        payload = sample_response().model_dump(mode="json")
        await cache_service.set("product:by-id:1", payload, 600)
        first = await cache_service.get("product:by-id:1", ProductResponse.model_validate)
        await cache_service.set("product:by-id:1", payload, 600)
        second = await cache_service.get("product:by-id:1", ProductResponse.model_validate)
        assert first == second == sample_response()

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(self, mock_inner_service, cache_service, cache_settings, clock):
        mock_inner_service.get_product.return_value = Result.success(sample_response())
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)

        await service.get_product(1)
        clock.advance(cache_settings.by_id_ttl_seconds - 1)
        await service.get_product(1)
        assert mock_inner_service.get_product.await_count == 1

        clock.advance(1)
        await service.get_product(1)
        assert mock_inner_service.get_product.await_count == 2

    @pytest.mark.asyncio
    async def test_cache_outage_falls_through(self, mock_inner_service, cache_settings):
        mock_inner_service.get_product.return_value = Result.success(sample_response())
        service = CachedProductService(mock_inner_service, CacheService(FailingAdapter(), cache_settings))

        result = await service.get_product(1)

        assert result.is_success
        assert result.data == sample_response()


class TestPagedReads:
    @pytest.mark.asyncio
    async def test_paged_result_cached_and_registered(self, mock_inner_service, cache_service, cache_settings):
        mock_inner_service.get_products.return_value = Result.success(sample_page())
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)

        first = await service.get_products(ProductFilter(brand="Acme"))
        second = await service.get_products(ProductFilter(brand="acme"))

        assert first.data == second.data
        assert second.data.total_pages == 1
        mock_inner_service.get_products.assert_awaited_once()
        members = await cache_service.set_members(service.keys.paged_index)
        assert members == [service.keys.paged(ProductFilter(brand="Acme"))]

    @pytest.mark.asyncio
    async def test_non_atomic_registration(self, mock_inner_service, memory_adapter):
        settings = CacheSettings(atomic_index_registration=False)
        cache = CacheService(memory_adapter, settings)
        mock_inner_service.get_products.return_value = Result.success(sample_page())
        service = CachedProductService(mock_inner_service, cache, settings)

        await service.get_products(ProductFilter())

        assert await cache.set_members(service.keys.paged_index) == [service.keys.paged(ProductFilter())]

    @pytest.mark.asyncio
    async def test_invalid_filter_bypasses_cache(self, mock_inner_service, cache_service, cache_settings):
        mock_inner_service.get_products.return_value = Result.failure(
            "Invalid product filter", ErrorKind.INVALID_FILTER
        )
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)

        result = await service.get_products(ProductFilter(min_price=Decimal("50"), max_price=Decimal("10")))

        assert result.error_kind == ErrorKind.INVALID_FILTER
        assert await cache_service.set_members(service.keys.paged_index) == []


class TestInvalidation:
    """Write-path invalidation against a real product service."""

    @pytest.mark.asyncio
    async def test_update_invalidates_single_item(self, cached_service, request_factory):
        await cached_service.create_product(request_factory(1))
        before = await cached_service.get_product(1)
        assert before.data.name == "Product 001"

        data = request_factory(1).model_dump()
        data["name"] = "Renamed"
        assert (await cached_service.update_product(1, UpdateProductRequest(**data))).is_success

        after = await cached_service.get_product(1)
        assert after.data.name == "Renamed"

    @pytest.mark.asyncio
    async def test_delete_invalidates_single_item(self, cached_service, request_factory):
        await cached_service.create_product(request_factory(1))
        await cached_service.get_product(1)

        await cached_service.delete_product(1)

        assert (await cached_service.get_product(1)).error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_sweeps_every_cached_page(self, cached_service, cache_service, request_factory):
        await cached_service.create_product(request_factory(1))
        filter_a = ProductFilter(brand="Acme")
        filter_b = ProductFilter(sort_by="price", page_size=5)
        key_a = cached_service.keys.paged(filter_a)
        key_b = cached_service.keys.paged(filter_b)

        await cached_service.get_products(filter_a)
        await cached_service.get_products(filter_b)
        assert await cache_service.get(key_a) is not None
        assert await cache_service.get(key_b) is not None

        await cached_service.create_product(request_factory(2))

        assert await cache_service.get(key_a) is None
        assert await cache_service.get(key_b) is None
        assert await cache_service.set_members(cached_service.keys.paged_index) == []
        assert (await cached_service.get_products(filter_a)).data.total_count == 2

    @pytest.mark.asyncio
    async def test_seed_sweeps_pages(self, cached_service, request_factory):
        first = await cached_service.get_products(ProductFilter())
        assert first.data.total_count == 0

        await cached_service.seed_products(SeedProductsRequest(products=[request_factory(1), request_factory(2)]))

        assert (await cached_service.get_products(ProductFilter())).data.total_count == 2

    @pytest.mark.asyncio
    async def test_failed_mutation_does_not_invalidate(self, mock_inner_service, cache_service, cache_settings):
        mock_inner_service.get_product.return_value = Result.success(sample_response())
        mock_inner_service.update_product.return_value = Result.failure("Product not found", ErrorKind.NOT_FOUND)
        service = CachedProductService(mock_inner_service, cache_service, cache_settings)
        await service.get_product(1)

        await service.update_product(1, AsyncMock())

        assert await cache_service.get(service.keys.by_id(1)) is not None

    @pytest.mark.asyncio
    async def test_cache_outage_never_fails_a_write(self, mock_inner_service, cache_settings):
        mock_inner_service.delete_product.return_value = Result.success(True)
        service = CachedProductService(mock_inner_service, CacheService(FailingAdapter(), cache_settings))

        result = await service.delete_product(3)

        assert result.is_success
        assert result.data is True
