"""Product feature protocols.

The service protocol is implemented both by ``ProductService`` and by the
caching decorator wrapped around it.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence, runtime_checkable

from .product import Color, Product, Size
from ....core.shared.result import Result
from ...pagination.entities import PagedResult

if TYPE_CHECKING:
    from ..models.requests import (
        CreateProductRequest,
        ProductFilter,
        SeedProductsRequest,
        UpdateProductRequest,
    )
    from ..models.responses import ProductResponse, ProductSummary
    from ..utils.query_pipeline import ProductQueryPipeline


@runtime_checkable
class ProductRepository(Protocol):
    """Persistence collaborator for products."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Load a product with its colors and sizes."""
        ...

    @abstractmethod
    async def query(self, pipeline: "ProductQueryPipeline") -> List[Product]:
        """Return the page of products selected by the pipeline."""
        ...

    @abstractmethod
    async def count(self, pipeline: "ProductQueryPipeline") -> int:
        """Count products matching the pipeline's filters, ignoring the page window."""
        ...

    @abstractmethod
    async def exists_by_sku(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another product already uses ``sku``."""
        ...

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Insert a product, returning it with its assigned id."""
        ...

    @abstractmethod
    async def add_many(self, products: Sequence[Product]) -> int:
        """Insert several products in one unit of work."""
        ...

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Persist changes, replacing color and size associations."""
        ...

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """Remove a product and its associations."""
        ...

    @abstractmethod
    async def get_colors(self, color_ids: Sequence[int]) -> List[Color]:
        """Return the colors that exist among ``color_ids``."""
        ...

    @abstractmethod
    async def get_sizes(self, size_ids: Sequence[int]) -> List[Size]:
        """Return the sizes that exist among ``size_ids``."""
        ...


@runtime_checkable
class ProductServiceProtocol(Protocol):
    """Product operations exposed to the transport layer."""

    @abstractmethod
    async def create_product(self, request: "CreateProductRequest") -> Result["ProductResponse"]:
        ...

    @abstractmethod
    async def get_product(self, product_id: int) -> Result["ProductResponse"]:
        ...

    @abstractmethod
    async def update_product(self, product_id: int, request: "UpdateProductRequest") -> Result["ProductResponse"]:
        ...

    @abstractmethod
    async def delete_product(self, product_id: int) -> Result[bool]:
        ...

    @abstractmethod
    async def get_products(self, product_filter: "ProductFilter") -> Result[PagedResult["ProductSummary"]]:
        ...

    @abstractmethod
    async def seed_products(self, request: "SeedProductsRequest") -> Result[int]:
        ...
