"""PostgreSQL product repository."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..entities.product import Color, Product, Size
from ..utils.query_pipeline import ProductQueryPipeline
from ..utils.queries import (
    COLORS_BY_IDS,
    PRODUCT_COLORS_BY_PRODUCT,
    PRODUCT_COLORS_DELETE,
    PRODUCT_COLORS_INSERT,
    PRODUCT_DELETE,
    PRODUCT_EXISTS_BY_SKU,
    PRODUCT_GET_BY_ID,
    PRODUCT_INSERT,
    PRODUCT_SIZES_BY_PRODUCT,
    PRODUCT_SIZES_DELETE,
    PRODUCT_SIZES_INSERT,
    PRODUCT_TABLE,
    PRODUCT_UPDATE,
    SIZES_BY_IDS,
)
from ....core.exceptions import EntityNotFoundError
from ...database.entities.protocols import DatabaseRepository

logger = logging.getLogger(__name__)


class PostgresProductRepository:
    """Product repository over any ``DatabaseRepository``.

    Listing queries are rendered by the query pipeline; writes touching the
    join tables run in one transaction. Driver failures arrive here already
    wrapped as ``PersistenceError`` by the database service.
    """

    def __init__(self, database: DatabaseRepository, schema: str = "public"):
        self._db = database
        self._schema = schema
        self._table = PRODUCT_TABLE.format(schema=schema)

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        row = await self._db.execute_fetchrow(PRODUCT_GET_BY_ID.format(schema=self._schema), product_id)
        if row is None:
            return None

        color_rows = await self._db.execute_query(
            PRODUCT_COLORS_BY_PRODUCT.format(schema=self._schema), product_id
        )
        size_rows = await self._db.execute_query(
            PRODUCT_SIZES_BY_PRODUCT.format(schema=self._schema), product_id
        )
        product = self._map_row_to_product(row)
        product.colors = [self._map_row_to_color(r) for r in color_rows]
        product.sizes = [self._map_row_to_size(r) for r in size_rows]
        return product

    async def query(self, pipeline: ProductQueryPipeline) -> List[Product]:
        query, params = pipeline.to_sql(self._table)
        rows = await self._db.execute_query(query, *params)
        return [self._map_row_to_product(row) for row in rows]

    async def count(self, pipeline: ProductQueryPipeline) -> int:
        query, params = pipeline.count_sql(self._table)
        return int(await self._db.execute_fetchval(query, *params) or 0)

    async def exists_by_sku(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        return bool(
            await self._db.execute_fetchval(
                PRODUCT_EXISTS_BY_SKU.format(schema=self._schema), sku, exclude_id
            )
        )

    async def add(self, product: Product) -> Product:
        async with self._db.transaction() as conn:
            await self._insert(conn, product)
        logger.info(f"Created product {product.id} with SKU '{product.sku}'")
        return product

    async def add_many(self, products: Sequence[Product]) -> int:
        async with self._db.transaction() as conn:
            for product in products:
                await self._insert(conn, product)
        logger.info(f"Inserted {len(products)} products")
        return len(products)

    async def update(self, product: Product) -> Product:
        async with self._db.transaction() as conn:
            status = await conn.execute_command(
                PRODUCT_UPDATE.format(schema=self._schema),
                product.id, product.name, product.description, product.model, product.brand,
                product.sku, product.price, product.category, product.updated_at,
            )
            if status.endswith(" 0"):
                raise EntityNotFoundError("Product", product.id)
            await conn.execute_command(PRODUCT_COLORS_DELETE.format(schema=self._schema), product.id)
            await conn.execute_command(PRODUCT_SIZES_DELETE.format(schema=self._schema), product.id)
            await self._insert_associations(conn, product)
        return product

    async def delete(self, product_id: int) -> bool:
        # product_colors and product_sizes cascade on delete
        status = await self._db.execute_command(PRODUCT_DELETE.format(schema=self._schema), product_id)
        return not status.endswith(" 0")

    async def get_colors(self, color_ids: Sequence[int]) -> List[Color]:
        if not color_ids:
            return []
        rows = await self._db.execute_query(COLORS_BY_IDS.format(schema=self._schema), list(color_ids))
        return [self._map_row_to_color(row) for row in rows]

    async def get_sizes(self, size_ids: Sequence[int]) -> List[Size]:
        if not size_ids:
            return []
        rows = await self._db.execute_query(SIZES_BY_IDS.format(schema=self._schema), list(size_ids))
        return [self._map_row_to_size(row) for row in rows]

    async def _insert(self, conn: Any, product: Product) -> None:
        product.id = await conn.execute_fetchval(
            PRODUCT_INSERT.format(schema=self._schema),
            product.name, product.description, product.model, product.brand, product.sku,
            product.price, product.category, product.created_at, product.updated_at,
        )
        await self._insert_associations(conn, product)

    async def _insert_associations(self, conn: Any, product: Product) -> None:
        for color_id in product.color_ids:
            await conn.execute_command(PRODUCT_COLORS_INSERT.format(schema=self._schema), product.id, color_id)
        for size_id in product.size_ids:
            await conn.execute_command(PRODUCT_SIZES_INSERT.format(schema=self._schema), product.id, size_id)

    @staticmethod
    def _map_row_to_product(row: Dict[str, Any]) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            description=row.get("description"),
            model=row["model"],
            brand=row["brand"],
            sku=row["sku"],
            price=row["price"],
            category=row.get("category"),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    @staticmethod
    def _map_row_to_color(row: Dict[str, Any]) -> Color:
        return Color(id=row["id"], name=row["name"], hex_code=row.get("hex_code"))

    @staticmethod
    def _map_row_to_size(row: Dict[str, Any]) -> Size:
        return Size(id=row["id"], name=row["name"], code=row["code"], sort_order=row.get("sort_order") or 0)
