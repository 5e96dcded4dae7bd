import json
from decimal import Decimal

import httpx
import pytest

from consumer_service.app.core.exceptions import (
    SupplierBadResponseError,
    SupplierResponseError,
    SupplierTimeoutError,
    SupplierUnavailableError,
)


class TestSupplierClient:
    """SupplierClient against an httpx.MockTransport."""

    @pytest.mark.asyncio
    async def test_forwards_paging_and_correlation_id(self, mock_supplier):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        client = mock_supplier(handler)
        try:
            await client.filter_products_by_price_range(
                Decimal("500"), Decimal("1500"), 2, 5, correlation_id="corr-1"
            )
        finally:
            await client.close()

        request = seen[0]
        assert request.url.path == "/products/price/range/"
        assert dict(request.url.params) == {
            "min": "500",
            "max": "1500",
            "page": "2",
            "size": "5",
        }
        assert request.headers["X-Correlation-ID"] == "corr-1"

    @pytest.mark.asyncio
    async def test_sends_json_body(self, mock_supplier):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"id": 1, "name": "Books"})

        client = mock_supplier(handler)
        try:
            result = await client.create_category({"name": "Books"})
        finally:
            await client.close()

        assert bodies == [{"name": "Books"}]
        assert result == {"id": 1, "name": "Books"}

    @pytest.mark.asyncio
    async def test_no_content_returns_none(self, mock_supplier):
        client = mock_supplier(lambda request: httpx.Response(204))
        try:
            assert await client.delete_product(3) is None
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_error_status_carries_supplier_detail(self, mock_supplier):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                409,
                json={
                    "error": {
                        "type": "category_exists",
                        "message": "Category with id 1 already exists",
                    }
                },
            )

        client = mock_supplier(handler)
        try:
            with pytest.raises(SupplierResponseError) as exc_info:
                await client.create_category({"id": 1, "name": "Dup"})
        finally:
            await client.close()

        assert exc_info.value.status_code == 409
        assert exc_info.value.detail == "Category with id 1 already exists"
        assert exc_info.value.upstream_type == "category_exists"

    @pytest.mark.asyncio
    async def test_server_error_with_plain_body(self, mock_supplier):
        client = mock_supplier(lambda request: httpx.Response(500, text="boom"))
        try:
            with pytest.raises(SupplierResponseError) as exc_info:
                await client.list_products(0, 10)
        finally:
            await client.close()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "boom"

    @pytest.mark.asyncio
    async def test_timeout(self, mock_supplier):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = mock_supplier(handler)
        try:
            with pytest.raises(SupplierTimeoutError):
                await client.get_product(1)
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_connection_failure(self, mock_supplier):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = mock_supplier(handler)
        try:
            with pytest.raises(SupplierUnavailableError):
                await client.list_categories(0, 10)
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_non_json_success_body(self, mock_supplier):
        client = mock_supplier(
            lambda request: httpx.Response(200, text="<html>proxy</html>")
        )
        try:
            with pytest.raises(SupplierBadResponseError):
                await client.list_products(0, 10)
        finally:
            await client.close()
