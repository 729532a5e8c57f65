"""Tests for the product service."""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from neo_catalog.core.exceptions import PersistenceError
from neo_catalog.core.shared.result import ErrorKind
from neo_catalog.features.products.models.requests import (
    ProductFilter,
    SeedProductsRequest,
    UpdateProductRequest,
)
from neo_catalog.features.products.services.product_service import ProductService


def update_request_from(request, **overrides):
    data = request.model_dump()
    data.update(overrides)
    return UpdateProductRequest(**data)


class TestCreateProduct:
    """Product creation and SKU uniqueness."""

    @pytest.mark.asyncio
    async def test_create_returns_mapped_product(self, product_service, request_factory):
        result = await product_service.create_product(
            request_factory(1, color_ids=[1, 3, 99], size_ids=[2])
        )

        assert result.is_success
        product = result.data
        assert product.id == 1
        assert product.sku == "SKU-1"
        assert product.price == Decimal("11.00")
        assert [c.name for c in product.colors] == ["Red", "Blue"]
        assert [s.code for s in product.sizes] == ["M"]
        assert product.created_at == product.updated_at

    @pytest.mark.asyncio
    async def test_duplicate_sku_is_a_conflict(self, product_service, request_factory):
        first = await product_service.create_product(request_factory(1, sku="SKU-1"))
        second = await product_service.create_product(request_factory(2, sku="SKU-1"))

        assert first.is_success
        assert second.is_failure
        assert second.error_kind == ErrorKind.CONFLICT
        assert second.error_message == "A product with this SKU already exists"

    @pytest.mark.asyncio
    async def test_storage_failure_becomes_generic_failure(self, request_factory):
        repository = AsyncMock()
        repository.exists_by_sku.return_value = False
        repository.get_colors.return_value = []
        repository.get_sizes.return_value = []
        repository.add.side_effect = PersistenceError("connection reset", operation="insert")

        result = await ProductService(repository).create_product(request_factory(1))

        assert result.is_failure
        assert result.error_kind == ErrorKind.PERSISTENCE_FAILURE
        assert result.error_message == "An error occurred while creating the product"
        assert "connection reset" not in result.error_message

    @pytest.mark.asyncio
    async def test_unexpected_error_never_escapes(self, request_factory):
        repository = AsyncMock()
        repository.exists_by_sku.side_effect = RuntimeError("boom")

        result = await ProductService(repository).create_product(request_factory(1))

        assert result.is_failure
        assert result.error_kind == ErrorKind.PERSISTENCE_FAILURE


class TestGetProduct:
    @pytest.mark.asyncio
    async def test_get_existing(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))
        result = await product_service.get_product(1)
        assert result.is_success
        assert result.data.name == "Product 001"

    @pytest.mark.asyncio
    async def test_missing_is_not_found(self, product_service):
        result = await product_service.get_product(404)
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.error_message == "Product not found"

    @pytest.mark.asyncio
    async def test_non_positive_id_is_rejected(self, product_service):
        result = await product_service.get_product(0)
        assert result.error_kind == ErrorKind.INVALID_FILTER
        assert result.error_message == "Invalid product ID"


class TestUpdateProduct:
    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_stamps_time(self, product_service, request_factory):
        created = (await product_service.create_product(request_factory(1, color_ids=[1]))).data

        request = update_request_from(request_factory(1), name="Renamed", color_ids=[2], size_ids=[1, 3])
        result = await product_service.update_product(created.id, request)

        assert result.is_success
        assert result.data.name == "Renamed"
        assert [c.id for c in result.data.colors] == [2]
        assert [s.id for s in result.data.sizes] == [1, 3]
        assert result.data.created_at == created.created_at
        assert result.data.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_keeping_own_sku_is_allowed(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))
        result = await product_service.update_product(1, update_request_from(request_factory(1), name="Same SKU"))
        assert result.is_success

    @pytest.mark.asyncio
    async def test_taking_another_products_sku_is_a_conflict(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))
        await product_service.create_product(request_factory(2))

        result = await product_service.update_product(2, update_request_from(request_factory(2), sku="SKU-1"))

        assert result.error_kind == ErrorKind.CONFLICT

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, product_service, request_factory):
        result = await product_service.update_product(7, update_request_from(request_factory(7)))
        assert result.error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_missing_product_reported_before_sku_conflict(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))

        result = await product_service.update_product(7, update_request_from(request_factory(7), sku="SKU-1"))

        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.error_message == "Product not found"


class TestDeleteProduct:
    @pytest.mark.asyncio
    async def test_delete_then_get(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))

        result = await product_service.delete_product(1)

        assert result.is_success
        assert result.data is True
        assert (await product_service.get_product(1)).error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_found(self, product_service):
        result = await product_service.delete_product(1)
        assert result.error_kind == ErrorKind.NOT_FOUND


class TestGetProducts:
    """Paged listing through the query pipeline."""

    @pytest.mark.asyncio
    async def test_first_and_last_page(self, populated_repository):
        service = ProductService(populated_repository)

        first = (await service.get_products(ProductFilter(page=1, page_size=10))).data
        last = (await service.get_products(ProductFilter(page=3, page_size=10))).data

        assert len(first.items) == 10
        assert first.total_count == 25
        assert first.total_pages == 3
        assert first.has_previous_page is False
        assert first.has_next_page is True
        assert len(last.items) == 5
        assert last.has_next_page is False
        assert last.has_previous_page is True

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty_but_counted(self, populated_repository):
        page = (await ProductService(populated_repository).get_products(ProductFilter(page=9, page_size=10))).data
        assert page.items == []
        assert page.total_count == 25

    @pytest.mark.asyncio
    async def test_invalid_price_range_rejected_before_query(self):
        repository = AsyncMock()
        service = ProductService(repository)

        result = await service.get_products(ProductFilter(min_price=Decimal("50"), max_price=Decimal("10")))

        assert result.error_kind == ErrorKind.INVALID_FILTER
        assert "Minimum price must be less than or equal to maximum price" in result.errors
        repository.count.assert_not_called()
        repository.query.assert_not_called()

    @pytest.mark.asyncio
    async def test_filtered_listing_returns_summaries(self, populated_repository):
        service = ProductService(populated_repository)
        result = await service.get_products(
            ProductFilter(max_price=Decimal("15.00"), sort_by="price", descending=False)
        )

        assert result.is_success
        assert [item.sku for item in result.data.items] == ["SKU-1", "SKU-2", "SKU-3", "SKU-4", "SKU-5"]
        assert not hasattr(result.data.items[0], "colors")

    @pytest.mark.asyncio
    async def test_configured_max_page_size_clamps(self, populated_repository):
        service = ProductService(populated_repository, max_page_size=5)
        page = (await service.get_products(ProductFilter(page_size=50))).data
        assert page.page_size == 5
        assert page.total_pages == 5


class TestSeedProducts:
    @pytest.mark.asyncio
    async def test_seed_inserts_batch(self, product_service, request_factory):
        result = await product_service.seed_products(
            SeedProductsRequest(products=[request_factory(i) for i in range(1, 4)])
        )
        assert result.data == 3
        page = (await product_service.get_products(ProductFilter())).data
        assert page.total_count == 3

    @pytest.mark.asyncio
    async def test_seed_rejects_duplicate_skus(self, product_service, request_factory):
        await product_service.create_product(request_factory(1))

        result = await product_service.seed_products(
            SeedProductsRequest(products=[request_factory(1), request_factory(2), request_factory(2)])
        )

        assert result.error_kind == ErrorKind.CONFLICT
        assert "SKU-1" in result.error_message
        assert "SKU-2" in result.error_message
        assert (await product_service.get_products(ProductFilter())).data.total_count == 1
