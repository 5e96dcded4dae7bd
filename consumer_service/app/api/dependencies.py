"""
FastAPI dependency injection for Consumer Service

Services are built per request around the process-wide SupplierClient held
on ``app.state``.
"""

from typing import Optional

from fastapi import Depends, Query, Request

from ..clients.supplier_client import SupplierClient
from ..core.setting import get_settings
from ..services.category_service import CategoryService
from ..services.product_service import ProductService


def get_supplier_client(request: Request) -> SupplierClient:
    """Provide the SupplierClient created at startup"""
    return request.app.state.supplier_client


def get_product_service(
    client: SupplierClient = Depends(get_supplier_client),
) -> ProductService:
    return ProductService(client)


def get_category_service(
    client: SupplierClient = Depends(get_supplier_client),
) -> CategoryService:
    return CategoryService(client)


def get_correlation_id(request: Request) -> Optional[str]:
    """Extract correlation ID from request headers or state"""
    correlation_id = request.headers.get("X-Correlation-ID")

    # Fallback to request state (from middleware)
    if not correlation_id:
        correlation_id = getattr(request.state, "correlation_id", None)

    return correlation_id


class Pagination:
    """``page``/``size`` query parameters of the list endpoints"""

    def __init__(
        self,
        page: int = Query(0, ge=0, description="Zero-based page number"),
        size: Optional[int] = Query(None, ge=1, description="Page size"),
    ):
        self.page = page
        self.size = size if size is not None else get_settings().DEFAULT_PAGE_SIZE


CorrelationIdDep = Depends(get_correlation_id)
PaginationDep = Depends(Pagination)
ProductServiceDep = Depends(get_product_service)
CategoryServiceDep = Depends(get_category_service)
