"""Exception hierarchy for neo-catalog."""

from .base import CatalogError, create_error_response, get_http_status_code
from .domain import (
    DuplicateSkuError,
    EntityNotFoundError,
    InvalidFilterError,
    PersistenceError,
)
from .infrastructure import (
    CacheError,
    CacheSerializationError,
    CacheUnavailableError,
    ConfigurationError,
)

__all__ = [
    "CatalogError",
    "create_error_response",
    "get_http_status_code",
    "DuplicateSkuError",
    "EntityNotFoundError",
    "InvalidFilterError",
    "PersistenceError",
    "CacheError",
    "CacheSerializationError",
    "CacheUnavailableError",
    "ConfigurationError",
]
