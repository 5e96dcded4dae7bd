"""
Pytest configuration and fixtures for Supplier Service tests.
"""

import asyncio
import os
from decimal import Decimal
from typing import Any, AsyncGenerator

import pytest
from fastapi.testclient import TestClient

# Set up test environment variables before importing anything else
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SUPPLIER_DATABASE_URL", "sqlite+aiosqlite:///./supplier_test.db")
os.environ.setdefault("SEED_TEST_DATA", "false")

from supplier_service.app.api.dependencies import get_async_session  # noqa: E402
from supplier_service.app.core.database import SupplierDatabaseManager  # noqa: E402
from supplier_service.app.main import app  # noqa: E402
from supplier_service.app.models.category import Category  # noqa: E402
from supplier_service.app.models.product import Product  # noqa: E402


@pytest.fixture
def database_url(tmp_path) -> str:
    """File backed SQLite database, fresh for every test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'supplier_test.db'}"


@pytest.fixture
async def db_manager(database_url: str) -> AsyncGenerator[SupplierDatabaseManager, None]:
    manager = SupplierDatabaseManager(database_url=database_url)
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def db_session(db_manager: SupplierDatabaseManager) -> AsyncGenerator[Any, None]:
    """Create a test database session."""
    async with db_manager.async_session_maker() as session:
        yield session


@pytest.fixture
async def electronics(db_session) -> Category:
    """Category{name="Electronics"} holding a Phone priced 999.99."""
    category = Category(name="Electronics")
    db_session.add(category)
    db_session.add(
        Product(
            name="Phone",
            description="Flagship phone",
            price=Decimal("999.99"),
            category=category,
        )
    )
    await db_session.commit()
    return category


@pytest.fixture
def sync_db_manager(database_url: str):
    """Database manager for TestClient based tests, which run their own loops."""
    manager = SupplierDatabaseManager(database_url=database_url)
    asyncio.run(manager.create_tables())
    yield manager
    asyncio.run(manager.close())


@pytest.fixture
def client(sync_db_manager: SupplierDatabaseManager):
    """FastAPI test client bound to the per-test database."""

    async def override_session() -> AsyncGenerator[Any, None]:
        async with sync_db_manager.async_session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(client: TestClient):
    """Client with Category{Electronics} and Product{Phone, 999.99} created via the API."""
    category = client.post("/categories", json={"name": "Electronics"}).json()
    client.post(
        "/products",
        json={
            "name": "Phone",
            "description": "Flagship phone",
            "price": 999.99,
            "categoryId": category["id"],
        },
    )
    return client
