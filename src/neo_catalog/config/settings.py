"""Environment-driven settings for neo-catalog."""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheBackend(str, Enum):
    """Cache backend types."""
    MEMORY = "memory"
    REDIS = "redis"
    NONE = "none"


class CacheSettings(BaseSettings):
    """Cache settings for the product cache-aside layer."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_CATALOG_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Enable read-through caching")
    backend: CacheBackend = Field(default=CacheBackend.MEMORY, description="Cache backend")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_socket_timeout: float = Field(default=3.0, gt=0, description="Redis command timeout in seconds")
    key_prefix: str = Field(default="", max_length=32, description="Namespace prepended to every cache key")

    default_ttl_seconds: int = Field(default=300, ge=1, description="TTL used when a caller passes none")
    by_id_ttl_seconds: int = Field(default=600, ge=1, description="TTL for single product entries")
    paged_ttl_seconds: int = Field(default=45, ge=1, description="TTL for paged query entries")

    atomic_index_registration: bool = Field(
        default=True,
        description="Write a paged entry and its index membership in one cache transaction",
    )

    @field_validator("key_prefix")
    @classmethod
    def validate_key_prefix(cls, v):
        """Key prefixes end with a separator so families stay distinguishable."""
        if v and not v.endswith(":"):
            v = f"{v}:"
        return v


class CatalogSettings(BaseSettings):
    """Top-level catalog settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: Optional[str] = Field(default=None, description="PostgreSQL DSN for the product store")
    database_schema: str = Field(default="public", description="Schema holding the product tables")
    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)

    default_page_size: int = Field(default=20, ge=1, le=100)
    max_page_size: int = Field(default=100, ge=1, le=100, description="Server-side page size clamp")

    @field_validator("database_schema")
    @classmethod
    def validate_schema(cls, v):
        """Schema name is interpolated into SQL, so only identifiers are allowed."""
        if not v.replace("_", "").isalnum():
            raise ValueError("Schema name must contain only letters, numbers and underscores")
        return v


@lru_cache()
def get_settings() -> CatalogSettings:
    """Get cached catalog settings."""
    return CatalogSettings()


@lru_cache()
def get_cache_settings() -> CacheSettings:
    """Get cached cache settings."""
    return CacheSettings()
