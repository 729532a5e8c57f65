"""Pytest configuration and fixtures for neo-catalog tests."""

import pytest
import pytest_asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from neo_catalog.config.settings import CacheSettings
from neo_catalog.features.cache.adapters.memory_adapter import MemoryAdapter
from neo_catalog.features.cache.services.cache_service import CacheService
from neo_catalog.features.products.entities.product import Color, Product, Size
from neo_catalog.features.products.models.requests import CreateProductRequest
from neo_catalog.features.products.repositories.memory_repository import InMemoryProductRepository
from neo_catalog.features.products.services.cached_product_service import CachedProductService
from neo_catalog.features.products.services.product_service import ProductService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_create_request(index: int = 1, **overrides) -> CreateProductRequest:
    """Build a valid create request, varying fields by index."""
    data = {
        "name": f"Product {index:03d}",
        "description": f"Description for product {index}",
        "model": f"M-{index}",
        "brand": "Acme",
        "sku": f"SKU-{index}",
        "price": Decimal("10.00") + index,
        "category": "Footwear",
        "color_ids": [],
        "size_ids": [],
    }
    data.update(overrides)
    return CreateProductRequest(**data)


def make_product(product_id: int, **overrides) -> Product:
    """Build a stored product entity with deterministic timestamps."""
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    data = {
        "id": product_id,
        "name": f"Product {product_id:03d}",
        "description": None,
        "model": f"M-{product_id}",
        "brand": "Acme",
        "sku": f"SKU-{product_id}",
        "price": Decimal("10.00") + product_id,
        "category": "Footwear",
        "created_at": base_time + timedelta(minutes=product_id),
        "updated_at": base_time + timedelta(minutes=product_id),
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def request_factory():
    return make_create_request


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def sample_colors():
    return [
        Color(id=1, name="Red", hex_code="#FF0000"),
        Color(id=2, name="Green", hex_code="#00FF00"),
        Color(id=3, name="Blue", hex_code="#0000FF"),
    ]


@pytest.fixture
def sample_sizes():
    return [
        Size(id=1, name="Small", code="S", sort_order=1),
        Size(id=2, name="Medium", code="M", sort_order=2),
        Size(id=3, name="Large", code="L", sort_order=3),
    ]


@pytest.fixture
def repository(sample_colors, sample_sizes):
    """Empty in-memory product repository with colors and sizes."""
    return InMemoryProductRepository(colors=sample_colors, sizes=sample_sizes)


@pytest_asyncio.fixture
async def populated_repository(repository):
    """Repository holding 25 products created through the service."""
    service = ProductService(repository)
    for index in range(1, 26):
        result = await service.create_product(make_create_request(index))
        assert result.is_success
    return repository


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_settings():
    return CacheSettings(
        enabled=True,
        by_id_ttl_seconds=600,
        paged_ttl_seconds=45,
        default_ttl_seconds=300,
        atomic_index_registration=True,
    )


@pytest.fixture
def memory_adapter(clock):
    return MemoryAdapter(clock=clock)


@pytest.fixture
def cache_service(memory_adapter, cache_settings):
    return CacheService(memory_adapter, cache_settings)


@pytest.fixture
def product_service(repository):
    return ProductService(repository)


@pytest.fixture
def cached_service(product_service, cache_service, cache_settings):
    return CachedProductService(product_service, cache_service, cache_settings)


@pytest.fixture
def mock_database_repository():
    """Mock database repository for testing."""
    mock_db = AsyncMock()
    mock_db.execute_query = AsyncMock(return_value=[])
    mock_db.execute_fetchrow = AsyncMock(return_value=None)
    mock_db.execute_fetchval = AsyncMock(return_value=None)
    mock_db.execute_command = AsyncMock(return_value="DELETE 1")

    conn = AsyncMock()
    conn.execute_fetchval = AsyncMock(return_value=101)
    conn.execute_command = AsyncMock(return_value="UPDATE 1")
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=conn)
    transaction.__aexit__ = AsyncMock(return_value=False)
    mock_db.transaction = MagicMock(return_value=transaction)
    mock_db.connection = conn
    return mock_db


@pytest.fixture
def mock_inner_service():
    """Mock product service for decorator tests."""
    service = AsyncMock()
    service.get_product = AsyncMock()
    service.get_products = AsyncMock()
    service.create_product = AsyncMock()
    service.update_product = AsyncMock()
    service.delete_product = AsyncMock()
    service.seed_products = AsyncMock()
    return service
