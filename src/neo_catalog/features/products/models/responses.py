"""Product response models."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class ColorResponse(BaseModel):
    id: int
    name: str
    hex_code: Optional[str] = None


class SizeResponse(BaseModel):
    id: int
    name: str
    code: str
    sort_order: int = 0


class ProductSummary(BaseModel):
    """Listing row for paged product queries."""

    id: int
    name: str
    brand: str
    model: str
    sku: str
    price: Decimal
    category: Optional[str] = None
    created_at: datetime


class ProductResponse(BaseModel):
    """Full product detail."""

    id: int
    name: str
    description: Optional[str] = None
    model: str
    brand: str
    sku: str
    price: Decimal
    category: Optional[str] = None
    colors: List[ColorResponse] = Field(default_factory=list)
    sizes: List[SizeResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
