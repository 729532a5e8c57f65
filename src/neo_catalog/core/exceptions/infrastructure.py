"""Infrastructure exceptions for cache and configuration failures."""

from .base import CatalogError


class ConfigurationError(CatalogError):
    """Raised when settings cannot produce a working component."""


class CacheError(CatalogError):
    """Base for cache backend failures.

    Cache errors never leave the cache-aside layer; they are logged and the
    call falls through to the uncached path.
    """

    http_status = 503


class CacheUnavailableError(CacheError):
    """Raised when the cache backend cannot be reached."""


class CacheSerializationError(CacheError):
    """Raised when a value cannot be encoded to or decoded from the cache."""
