"""Validation rules applied before a product query runs."""

from typing import List

from ..models.requests import ProductFilter

MAX_PAGE_SIZE = 100


def validate_product_filter(product_filter: ProductFilter, max_page_size: int = MAX_PAGE_SIZE) -> List[str]:
    """Check a filter's ranges and consistency.

    Page sizes above the configured maximum but within the hard bound are
    clamped later rather than rejected.

    Returns:
        Error messages, empty when the filter is valid
    """
    errors: List[str] = []

    if product_filter.page < 1:
        errors.append("Page must be greater than 0")

    if product_filter.page_size < 1 or product_filter.page_size > MAX_PAGE_SIZE:
        errors.append(f"Page size must be between 1 and {MAX_PAGE_SIZE}")

    if product_filter.min_price is not None and product_filter.min_price < 0:
        errors.append("Minimum price must be greater than or equal to 0")

    if product_filter.max_price is not None and product_filter.max_price < 0:
        errors.append("Maximum price must be greater than or equal to 0")

    if (
        product_filter.min_price is not None
        and product_filter.max_price is not None
        and product_filter.min_price > product_filter.max_price
    ):
        errors.append("Minimum price must be less than or equal to maximum price")

    return errors


def validate_product_id(product_id: int) -> List[str]:
    if product_id is None or product_id <= 0:
        return ["Invalid product ID"]
    return []
