"""Configuration for neo-catalog."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    setup_logging,
)
from .settings import (
    CacheBackend,
    CacheSettings,
    CatalogSettings,
    get_cache_settings,
    get_settings,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "CacheBackend",
    "CacheSettings",
    "CatalogSettings",
    "get_cache_settings",
    "get_settings",
]
