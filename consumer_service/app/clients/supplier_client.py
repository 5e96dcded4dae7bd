"""
HTTP client for the Supplier Service.

Every consumer operation goes through this client, which owns the single
``httpx.AsyncClient`` of the process and maps transport failures and non-2xx
answers onto the exceptions in ``core.exceptions``.
"""

import time
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import (
    SupplierBadResponseError,
    SupplierResponseError,
    SupplierTimeoutError,
    SupplierUnavailableError,
)
from ..utils.logging import setup_consumer_logging

logger = setup_consumer_logging("consumer_service.supplier_client")


def parse_supplier_payload(expected: Any, payload: Any) -> Any:
    """Validate a decoded supplier body; a shape mismatch is a bad upstream answer."""
    try:
        return TypeAdapter(expected).validate_python(payload)
    except ValidationError as e:
        logger.error(
            "Supplier returned an unexpected payload",
            extra={"expected": str(expected), "error_count": e.error_count()},
        )
        raise SupplierBadResponseError(
            "Supplier service returned an unexpected payload"
        ) from e


class SupplierClient:
    """Client for the Supplier Service catalog API"""

    def __init__(
        self,
        supplier_service_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = supplier_service_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    @staticmethod
    def _error_detail(response: httpx.Response) -> Tuple[str, Optional[str]]:
        """Pull message and type out of the supplier's error envelope."""
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase, None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return error.get("message", response.reason_phrase), error.get("type")
        if isinstance(body, dict) and "detail" in body:
            return str(body["detail"]), None
        return response.text, None

    async def _request(
        self,
        method: str,
        path: str,
        correlation_id: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = {"X-Correlation-ID": correlation_id} if correlation_id else {}
        start_time = time.time()

        try:
            response = await self.client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.TimeoutException as e:
            logger.error(
                "Supplier request timeout",
                extra={
                    "method": method,
                    "path": path,
                    "timeout": self.timeout,
                    "correlation_id": correlation_id,
                    "error": str(e),
                },
            )
            raise SupplierTimeoutError(
                f"Supplier service did not respond within {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Supplier connection error",
                extra={
                    "method": method,
                    "path": path,
                    "correlation_id": correlation_id,
                    "error": str(e),
                },
            )
            raise SupplierUnavailableError(
                f"Cannot connect to supplier service: {type(e).__name__}"
            ) from e

        response_time_ms = round((time.time() - start_time) * 1000, 2)

        if response.is_error:
            detail, upstream_type = self._error_detail(response)
            logger.warning(
                "Supplier returned an error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "response_time_ms": response_time_ms,
                    "correlation_id": correlation_id,
                },
            )
            raise SupplierResponseError(response.status_code, detail, upstream_type)

        logger.info(
            "Supplier request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "response_time_ms": response_time_ms,
                "correlation_id": correlation_id,
            },
        )

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Supplier returned a non-JSON body",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "content_type": response.headers.get("content-type"),
                    "correlation_id": correlation_id,
                },
            )
            raise SupplierBadResponseError(
                "Supplier service returned a body that is not JSON"
            ) from e

    async def health(self) -> Dict[str, Any]:
        return await self._request("GET", "/health")

    @staticmethod
    def _page(page: int, size: int, **params: Any) -> Dict[str, Any]:
        return {**params, "page": page, "size": size}

    # Categories

    async def list_categories(
        self, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET", "/categories", correlation_id, params=self._page(page, size)
        )

    async def get_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._request("GET", f"/categories/{category_id}", correlation_id)

    async def create_category(
        self, payload: Dict[str, Any], correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._request("POST", "/categories", correlation_id, json=payload)

    async def update_category(
        self,
        category_id: int,
        payload: Dict[str, Any],
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._request(
            "PUT", f"/categories/{category_id}", correlation_id, json=payload
        )

    async def delete_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> None:
        await self._request("DELETE", f"/categories/{category_id}", correlation_id)

    # Products

    async def list_products(
        self, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET", "/products", correlation_id, params=self._page(page, size)
        )

    async def get_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._request("GET", f"/products/{product_id}", correlation_id)

    async def create_product(
        self, payload: Dict[str, Any], correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._request("POST", "/products", correlation_id, json=payload)

    async def update_product(
        self,
        product_id: int,
        payload: Dict[str, Any],
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._request(
            "PUT", f"/products/{product_id}", correlation_id, json=payload
        )

    async def delete_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> None:
        await self._request("DELETE", f"/products/{product_id}", correlation_id)

    async def filter_products_by_price_range(
        self,
        min_price: Decimal,
        max_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = self._page(page, size, min=str(min_price), max=str(max_price))
        return await self._request(
            "GET", "/products/price/range/", correlation_id, params=params
        )

    async def filter_products_by_price_greater(
        self,
        min_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = self._page(page, size, min=str(min_price))
        return await self._request(
            "GET", "/products/price/greater/", correlation_id, params=params
        )

    async def filter_products_by_price_less(
        self,
        max_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = self._page(page, size, max=str(max_price))
        return await self._request(
            "GET", "/products/price/less/", correlation_id, params=params
        )

    async def search_products_by_category_id(
        self,
        category_id: int,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET",
            f"/products/search/category/{category_id}",
            correlation_id,
            params=self._page(page, size),
        )

    async def search_products_by_name(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET",
            "/products/search/name/",
            correlation_id,
            params=self._page(page, size, keyword=keyword),
        )

    async def search_products_by_name_not_containing(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET",
            "/products/search/name/not-containing/",
            correlation_id,
            params=self._page(page, size, keyword=keyword),
        )

    async def search_products_by_description(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self._request(
            "GET",
            "/products/search/description/",
            correlation_id,
            params=self._page(page, size, keyword=keyword),
        )
