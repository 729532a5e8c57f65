"""Domain exceptions raised by the product catalog."""

from typing import Any, Dict, List, Optional

from .base import CatalogError


class EntityNotFoundError(CatalogError):
    """Raised when an identifier does not resolve to an entity."""

    http_status = 404

    def __init__(self, entity_type: str, identifier: Any, **kwargs):
        super().__init__(
            f"{entity_type} not found",
            details={"entity_type": entity_type, "identifier": str(identifier)},
            **kwargs,
        )
        self.entity_type = entity_type
        self.identifier = identifier


class DuplicateSkuError(CatalogError):
    """Raised when a SKU is already taken by another product."""

    http_status = 409

    def __init__(self, sku: str, message: str = "A product with this SKU already exists", **kwargs):
        super().__init__(message, details={"sku": sku}, **kwargs)
        self.sku = sku


class InvalidFilterError(CatalogError):
    """Raised when filter or identifier values are out of range or contradictory."""

    http_status = 400

    def __init__(self, message: str, errors: Optional[List[str]] = None, **kwargs):
        details: Dict[str, Any] = kwargs.pop("details", None) or {}
        details.setdefault("errors", list(errors or [message]))
        super().__init__(message, details=details, **kwargs)
        self.errors = details["errors"]


class PersistenceError(CatalogError):
    """Raised by repositories when the backing store fails."""

    http_status = 500

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        details: Dict[str, Any] = kwargs.pop("details", None) or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details, **kwargs)
        self.operation = operation
