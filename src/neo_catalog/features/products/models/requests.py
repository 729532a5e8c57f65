"""Product request models."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..entities.product import MAX_PRICE
from ....config.settings import get_settings

MAX_SEED_PRODUCTS = 10000


class ProductFilter(BaseModel):
    """Search, filter, sort and page parameters for a product listing.

    Values are taken as given; range and consistency checks happen in
    ``validate_product_filter`` so they surface as a failure result.
    """

    model_config = ConfigDict(frozen=True)

    search_term: Optional[str] = Field(None, description="Case-insensitive substring over text fields")
    category: Optional[str] = Field(None, description="Exact category, case-insensitive")
    brand: Optional[str] = Field(None, description="Exact brand, case-insensitive")
    min_price: Optional[Decimal] = Field(None, description="Inclusive lower price bound")
    max_price: Optional[Decimal] = Field(None, description="Inclusive upper price bound")
    sort_by: Optional[str] = Field(None, description="name, price, brand, model, category or created_at")
    descending: Optional[bool] = Field(None, description="Sort direction; field default when omitted")
    page: int = Field(1, description="1-based page number")
    page_size: int = Field(
        default_factory=lambda: get_settings().default_page_size,
        description="Items per page; NEO_CATALOG_DEFAULT_PAGE_SIZE when omitted",
    )


class ProductRequestBase(BaseModel):
    """Fields shared by create and update requests."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, max_length=2000, description="Product description")
    model: str = Field(..., min_length=1, max_length=100, description="Product model")
    brand: str = Field(..., min_length=1, max_length=100, description="Product brand")
    sku: str = Field(..., min_length=1, max_length=100, description="Stock keeping unit, unique")
    price: Decimal = Field(..., gt=0, le=MAX_PRICE, decimal_places=2, description="Unit price")
    category: Optional[str] = Field(None, max_length=100, description="Product category")
    color_ids: List[int] = Field(default_factory=list, description="Associated color IDs")
    size_ids: List[int] = Field(default_factory=list, description="Associated size IDs")

    @field_validator("name", "model", "brand", "sku", mode="before")
    @classmethod
    def strip_required_text(cls, v):
        """Reject whitespace-only values for required text fields."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Value cannot be blank")
        return v

    @field_validator("description", "category", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("color_ids", "size_ids")
    @classmethod
    def dedupe_ids(cls, v):
        return list(dict.fromkeys(v))


class CreateProductRequest(ProductRequestBase):
    """Request model for creating a product."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Trail Runner 2",
                "description": "Lightweight trail running shoe",
                "model": "TR-2",
                "brand": "Acme",
                "sku": "ACME-TR2-001",
                "price": "129.99",
                "category": "Footwear",
                "color_ids": [1, 3],
                "size_ids": [2, 4],
            }
        }
    )


class UpdateProductRequest(ProductRequestBase):
    """Request model for replacing a product's fields."""


class SeedProductsRequest(BaseModel):
    """Bulk insert of supplied products."""

    products: List[CreateProductRequest] = Field(
        ..., min_length=1, max_length=MAX_SEED_PRODUCTS, description="Products to insert"
    )
