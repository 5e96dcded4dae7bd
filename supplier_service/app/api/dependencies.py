"""
FastAPI dependency injection for Supplier Service

Provides database sessions, per-request service objects and correlation ID
extraction for the API routers.
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db_session
from ..services.category_service import CategoryService
from ..services.product_service import ProductService

# =====================================================
# DATABASE DEPENDENCIES
# =====================================================


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide async database session"""
    async for session in get_db_session():
        yield session


# =====================================================
# SERVICE DEPENDENCIES
# =====================================================


def get_product_service(
    session: AsyncSession = Depends(get_async_session),
) -> ProductService:
    """Provide ProductService bound to the request session"""
    return ProductService(session)


def get_category_service(
    session: AsyncSession = Depends(get_async_session),
) -> CategoryService:
    """Provide CategoryService bound to the request session"""
    return CategoryService(session)


# =====================================================
# REQUEST CONTEXT DEPENDENCIES
# =====================================================


def get_correlation_id(request: Request) -> Optional[str]:
    """Extract correlation ID from request headers or state"""
    correlation_id = request.headers.get("X-Correlation-ID")

    # Fallback to request state (from middleware)
    if not correlation_id:
        correlation_id = getattr(request.state, "correlation_id", None)

    return correlation_id


# =====================================================
# COMMON DEPENDENCY ALIASES
# =====================================================

CorrelationIdDep = Depends(get_correlation_id)
ProductServiceDep = Depends(get_product_service)
CategoryServiceDep = Depends(get_category_service)
