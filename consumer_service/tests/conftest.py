"""
Pytest configuration and fixtures for Consumer Service tests.

Integration tests run the real Supplier Service in-process: the consumer's
SupplierClient talks to it through ``httpx.ASGITransport`` and the supplier
stores its rows in a per-test SQLite file.
"""

import asyncio
import os
from typing import Any, AsyncGenerator, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

# Set up test environment variables before importing anything else
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SUPPLIER_SERVICE_URL", "http://supplier-service")
os.environ.setdefault("SUPPLIER_DATABASE_URL", "sqlite+aiosqlite:///./supplier_test.db")

from consumer_service.app.clients.supplier_client import SupplierClient  # noqa: E402
from consumer_service.app.main import app  # noqa: E402
from supplier_service.app.api.dependencies import get_async_session  # noqa: E402
from supplier_service.app.core.database import SupplierDatabaseManager  # noqa: E402
from supplier_service.app.main import app as supplier_app  # noqa: E402


@pytest.fixture
def supplier_db(tmp_path):
    """Fresh supplier store backing the in-process supplier app."""
    manager = SupplierDatabaseManager(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'supplier.db'}"
    )
    asyncio.run(manager.create_tables())

    async def override_session() -> AsyncGenerator[Any, None]:
        async with manager.async_session_maker() as session:
            yield session

    supplier_app.dependency_overrides[get_async_session] = override_session
    yield manager
    supplier_app.dependency_overrides.clear()
    asyncio.run(manager.close())


@pytest.fixture
def client(supplier_db):
    """Consumer test client whose SupplierClient calls the supplier app in-process."""
    app.state.supplier_client = SupplierClient(
        "http://supplier-service",
        timeout=5.0,
        transport=httpx.ASGITransport(app=supplier_app),
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def catalog(client: TestClient) -> dict:
    """Category{Electronics} holding Product{Phone, 999.99}, created via the consumer."""
    category = client.post("/categories", json={"name": "Electronics"}).json()
    product = client.post(
        "/products",
        json={
            "name": "Phone",
            "description": "Flagship phone",
            "price": 999.99,
            "categoryId": category["id"],
        },
    ).json()
    return {"category": category, "product": product}


@pytest.fixture
def mock_supplier() -> Callable[[Callable[[httpx.Request], httpx.Response]], SupplierClient]:
    """Build a SupplierClient whose transport is a plain request handler."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> SupplierClient:
        return SupplierClient(
            "http://supplier-service",
            timeout=0.5,
            transport=httpx.MockTransport(handler),
        )

    return build


@pytest.fixture
def supplier_stub() -> dict:
    """Tests put the supplier request handler under the "handler" key."""
    return {}


@pytest.fixture
def mocked_client(mock_supplier, supplier_stub: dict):
    """Consumer test client backed by the handler in ``supplier_stub``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return supplier_stub["handler"](request)

    app.state.supplier_client = mock_supplier(handler)
    with TestClient(app) as test_client:
        yield test_client
