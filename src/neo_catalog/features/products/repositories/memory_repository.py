"""In-memory product repository."""

import copy
import itertools
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..entities.product import Color, Product, Size
from ..utils.query_pipeline import ProductQueryPipeline
from ....core.exceptions import EntityNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class InMemoryProductRepository:
    """Product store held in process memory.

    Useful for tests and local runs. Entities are copied on the way in and
    out so callers cannot mutate stored state behind the repository's back.
    The store enforces SKU uniqueness like a unique index would.
    """

    def __init__(self, colors: Iterable[Color] = (), sizes: Iterable[Size] = ()):
        self._products: Dict[int, Product] = {}
        self._colors: Dict[int, Color] = {color.id: color for color in colors}
        self._sizes: Dict[int, Size] = {size.id: size for size in sizes}
        self._ids = itertools.count(1)

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        product = self._products.get(product_id)
        return copy.deepcopy(product) if product else None

    async def query(self, pipeline: ProductQueryPipeline) -> List[Product]:
        page = pipeline.apply(list(self._products.values()))
        return [copy.deepcopy(product) for product in page.items]

    async def count(self, pipeline: ProductQueryPipeline) -> int:
        return len(pipeline.filter(list(self._products.values())))

    async def exists_by_sku(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            product.sku == sku and product.id != exclude_id
            for product in self._products.values()
        )

    async def add(self, product: Product) -> Product:
        self._check_unique_sku(product.sku, None)
        stored = copy.deepcopy(product)
        stored.id = next(self._ids)
        self._products[stored.id] = stored
        logger.debug(f"Stored product {stored.id} ({stored.sku})")
        return copy.deepcopy(stored)

    async def add_many(self, products: Sequence[Product]) -> int:
        skus = [product.sku for product in products]
        if len(set(skus)) != len(skus):
            raise PersistenceError("Duplicate SKU within batch", operation="add_many")
        for sku in skus:
            self._check_unique_sku(sku, None)
        for product in products:
            await self.add(product)
        return len(products)

    async def update(self, product: Product) -> Product:
        if product.id not in self._products:
            raise EntityNotFoundError("Product", product.id)
        self._check_unique_sku(product.sku, product.id)
        self._products[product.id] = copy.deepcopy(product)
        return copy.deepcopy(product)

    async def delete(self, product_id: int) -> bool:
        return self._products.pop(product_id, None) is not None

    async def get_colors(self, color_ids: Sequence[int]) -> List[Color]:
        return [self._colors[i] for i in color_ids if i in self._colors]

    async def get_sizes(self, size_ids: Sequence[int]) -> List[Size]:
        return [self._sizes[i] for i in size_ids if i in self._sizes]

    def _check_unique_sku(self, sku: str, exclude_id: Optional[int]) -> None:
        for existing in self._products.values():
            if existing.sku == sku and existing.id != exclude_id:
                raise PersistenceError(f"Unique constraint violated for sku {sku}", operation="write")
