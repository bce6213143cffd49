"""Pytest configuration and fixtures for the catalog service."""

import pytest
import pytest_asyncio
from fakeredis import aioredis as fakeredis
from httpx import ASGITransport, AsyncClient

from src.models.catalog import Product
from src.services.storage.redis_storage import RedisCatalogStorage, get_catalog_storage


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest_asyncio.fixture()
async def redis_client():
    """Provide a fake Redis client for each test."""
    client = fakeredis.FakeRedis(decode_responses=True)
    try:
        yield client
    finally:
        await client.flushdb()
        await client.aclose()


@pytest_asyncio.fixture()
async def storage(redis_client):
    """Catalog storage bound to the fake Redis and wired into the app."""
    from src.main import app

    catalog_storage = RedisCatalogStorage(redis_client, key_prefix="test:")
    app.dependency_overrides[get_catalog_storage] = lambda: catalog_storage
    try:
        yield catalog_storage
    finally:
        app.dependency_overrides.pop(get_catalog_storage, None)


@pytest_asyncio.fixture()
async def client(storage):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client


def make_product(product_id: str, **overrides) -> Product:
    """Build a product with sensible defaults for filtering tests."""
    fields = {
        "id": product_id,
        "name": f"Product {product_id}",
        "description": "",
        "price": 1000,
        "image_url": f"https://images.example.com/{product_id}.jpg",
        "category": "rings",
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture()
def product_factory():
    """Expose ``make_product`` to tests as a fixture."""
    return make_product
