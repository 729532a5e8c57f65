"""Product domain entities.

A product references colors and sizes through join records; the entity
holds the resolved collections.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Color:
    """A color a product is offered in."""

    id: int
    name: str
    hex_code: Optional[str] = None


@dataclass(frozen=True)
class Size:
    """A size a product is offered in, ordered by ``sort_order``."""

    id: int
    name: str
    code: str
    sort_order: int = 0


@dataclass
class Product:
    """Product domain entity.

    ``id`` is None until the store assigns one and never changes afterwards.
    SKU uniqueness is checked by the service before every write.
    """

    name: str
    model: str
    brand: str
    sku: str
    price: Decimal
    id: Optional[int] = None
    description: Optional[str] = None
    category: Optional[str] = None
    colors: List[Color] = field(default_factory=list)
    sizes: List[Size] = field(default_factory=list)

    # Audit fields
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if not (MIN_PRICE <= self.price <= MAX_PRICE):
            raise ValueError(f"Price must be between {MIN_PRICE} and {MAX_PRICE}")

    @property
    def color_ids(self) -> List[int]:
        return [color.id for color in self.colors]

    @property
    def size_ids(self) -> List[int]:
        return [size.id for size in self.sizes]

    def touch(self) -> None:
        """Stamp the modification time."""
        self.updated_at = utc_now()
