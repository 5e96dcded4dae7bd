"""Category API endpoints, forwarded to the Supplier Service"""

from typing import List, Optional

from fastapi import APIRouter, Response, status

from ...schemas.category import CategoryDto
from ...services.category_service import CategoryService
from ..dependencies import (
    CategoryServiceDep,
    CorrelationIdDep,
    Pagination,
    PaginationDep,
)

router = APIRouter(prefix="/categories")


@router.get("", response_model=List[CategoryDto])
async def get_all_categories(
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """List categories one page at a time"""
    return await service.get_all_categories(
        pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/{category_id}", response_model=CategoryDto)
async def get_category(
    category_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    return await service.get_category(category_id, correlation_id=correlation_id)


@router.post("", response_model=CategoryDto, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryDto,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    return await service.create_category(category, correlation_id=correlation_id)


@router.put("/{category_id}", response_model=CategoryDto)
async def update_category(
    category_id: int,
    category: CategoryDto,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    return await service.update_category(
        category_id, category, correlation_id=correlation_id
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    await service.delete_category(category_id, correlation_id=correlation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
