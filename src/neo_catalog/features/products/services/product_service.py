"""Product service orchestrating validation rules, persistence and mapping."""

import logging
from typing import List

from ..entities.product import Product, utc_now
from ..entities.protocols import ProductRepository
from ..models.requests import (
    CreateProductRequest,
    ProductFilter,
    ProductRequestBase,
    SeedProductsRequest,
    UpdateProductRequest,
)
from ..models.responses import ProductResponse, ProductSummary
from ..utils.error_handling import product_result_handler
from ..utils.mappers import to_product_response, to_product_summary
from ..utils.query_pipeline import ProductQueryPipeline
from ..utils.validation import MAX_PAGE_SIZE, validate_product_filter, validate_product_id
from ....core.exceptions import (
    DuplicateSkuError,
    EntityNotFoundError,
    InvalidFilterError,
)
from ....core.shared.result import Result
from ...pagination.entities import PagedResult

logger = logging.getLogger(__name__)


class ProductService:
    """Source-of-truth product operations.

    Every public method returns a ``Result``. SKU uniqueness is checked
    explicitly before writes so duplicates come back as a conflict rather
    than as a storage error.
    """

    def __init__(self, repository: ProductRepository, max_page_size: int = MAX_PAGE_SIZE):
        self._repository = repository
        self.max_page_size = min(max_page_size, MAX_PAGE_SIZE)

    @product_result_handler("An error occurred while creating the product")
    async def create_product(self, request: CreateProductRequest) -> Result[ProductResponse]:
        if await self._repository.exists_by_sku(request.sku):
            raise DuplicateSkuError(request.sku)

        product = await self._build_product(request)
        saved = await self._repository.add(product)
        logger.info(f"Created product {saved.id} with SKU '{saved.sku}'")

        # Re-read so the response reflects what the store actually holds
        stored = await self._repository.get_by_id(saved.id)
        return Result.success(to_product_response(stored or saved))

    @product_result_handler("An error occurred while retrieving the product")
    async def get_product(self, product_id: int) -> Result[ProductResponse]:
        errors = validate_product_id(product_id)
        if errors:
            raise InvalidFilterError(errors[0], errors)

        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return Result.success(to_product_response(product))

    @product_result_handler("An error occurred while updating the product")
    async def update_product(self, product_id: int, request: UpdateProductRequest) -> Result[ProductResponse]:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        if await self._repository.exists_by_sku(request.sku, exclude_id=product_id):
            raise DuplicateSkuError(request.sku)

        product.name = request.name
        product.description = request.description
        product.model = request.model
        product.brand = request.brand
        product.sku = request.sku
        product.price = request.price
        product.category = request.category
        product.colors = await self._repository.get_colors(request.color_ids)
        product.sizes = await self._repository.get_sizes(request.size_ids)
        product.touch()

        updated = await self._repository.update(product)
        logger.info(f"Updated product {product_id}")
        return Result.success(to_product_response(updated))

    @product_result_handler("An error occurred while deleting the product")
    async def delete_product(self, product_id: int) -> Result[bool]:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        if not await self._repository.delete(product_id):
            # Removed concurrently between the lookup and the delete
            raise EntityNotFoundError("Product", product_id)
        logger.info(f"Deleted product {product_id}")
        return Result.success(True)

    @product_result_handler("An error occurred while retrieving products")
    async def get_products(self, product_filter: ProductFilter) -> Result[PagedResult[ProductSummary]]:
        errors = validate_product_filter(product_filter, self.max_page_size)
        if errors:
            raise InvalidFilterError("Invalid product filter", errors)

        pipeline = ProductQueryPipeline.from_filter(product_filter, self.max_page_size)
        total = await self._repository.count(pipeline)
        products = await self._repository.query(pipeline)

        return Result.success(
            PagedResult(
                items=[to_product_summary(p) for p in products],
                total_count=total,
                page=pipeline.window.page,
                page_size=pipeline.window.page_size,
            )
        )

    @product_result_handler("An error occurred while seeding products")
    async def seed_products(self, request: SeedProductsRequest) -> Result[int]:
        """Insert the supplied products in one unit of work.

        The whole batch is rejected when any SKU repeats within it or
        already exists in the store.
        """
        seen = set()
        conflicts: List[str] = []
        for item in request.products:
            if item.sku in seen or await self._repository.exists_by_sku(item.sku):
                conflicts.append(item.sku)
            seen.add(item.sku)
        if conflicts:
            raise DuplicateSkuError(
                conflicts[0],
                message=f"Duplicate SKUs in seed batch: {', '.join(sorted(set(conflicts)))}",
            )

        products = [await self._build_product(item) for item in request.products]
        inserted = await self._repository.add_many(products)
        logger.info(f"Seeded {inserted} products")
        return Result.success(inserted)

    async def _build_product(self, request: ProductRequestBase) -> Product:
        now = utc_now()
        return Product(
            name=request.name,
            description=request.description,
            model=request.model,
            brand=request.brand,
            sku=request.sku,
            price=request.price,
            category=request.category,
            colors=await self._repository.get_colors(request.color_ids),
            sizes=await self._repository.get_sizes(request.size_ids),
            created_at=now,
            updated_at=now,
        )
