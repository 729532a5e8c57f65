"""Product entities."""

from .product import MAX_PRICE, MIN_PRICE, Color, Product, Size
from .protocols import ProductRepository, ProductServiceProtocol

__all__ = [
    "Color",
    "MAX_PRICE",
    "MIN_PRICE",
    "Product",
    "ProductRepository",
    "ProductServiceProtocol",
    "Size",
]
