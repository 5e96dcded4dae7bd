"""Category API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Response, status

from ...schemas.category import (
    MAX_STORE_ID,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from ...services.category_service import CategoryService
from ..dependencies import CategoryServiceDep, CorrelationIdDep

router = APIRouter(prefix="/categories")


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Create a new category"""
    return await service.create_category(
        category_data=category_data, correlation_id=correlation_id
    )


@router.get("", response_model=List[CategoryResponse])
async def get_all_categories(
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """List every category"""
    return await service.get_all_categories(correlation_id=correlation_id)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Get category details by ID"""
    category = await service.get_category(
        category_id=category_id, correlation_id=correlation_id
    )

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Category not found"
        )

    return category


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_data: CategoryUpdate,
    category_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Rename a category"""
    category = await service.update_category(
        category_id=category_id,
        category_data=category_data,
        correlation_id=correlation_id,
    )

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Category not found"
        )

    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: CategoryService = CategoryServiceDep,
):
    """Delete a category together with its products"""
    await service.delete_category(category_id=category_id, correlation_id=correlation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
