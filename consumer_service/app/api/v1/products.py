"""Product API endpoints, forwarded to the Supplier Service"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from ...schemas.product import ProductDto
from ...services.product_service import ProductService
from ..dependencies import (
    CorrelationIdDep,
    Pagination,
    PaginationDep,
    ProductServiceDep,
)

router = APIRouter(prefix="/products")


@router.get("", response_model=List[ProductDto])
async def get_all_products(
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """List products one page at a time"""
    return await service.get_all_products(
        pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductDto,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.create_product(product, correlation_id=correlation_id)


@router.get("/price/range/", response_model=List[ProductDto])
async def filter_products_by_price_range(
    min_price: Decimal = Query(..., alias="min"),
    max_price: Decimal = Query(..., alias="max"),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced between ``min`` and ``max`` inclusive"""
    return await service.filter_products_by_price_range(
        min_price,
        max_price,
        pagination.page,
        pagination.size,
        correlation_id=correlation_id,
    )


@router.get("/price/greater/", response_model=List[ProductDto])
async def filter_products_by_price_greater(
    min_price: Decimal = Query(..., alias="min"),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced strictly above ``min``"""
    return await service.filter_products_by_price_greater(
        min_price, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/price/less/", response_model=List[ProductDto])
async def filter_products_by_price_less(
    max_price: Decimal = Query(..., alias="max"),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced strictly below ``max``"""
    return await service.filter_products_by_price_less(
        max_price, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/search/category/{category_id}", response_model=List[ProductDto])
async def search_products_by_category_id(
    category_id: int,
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_category_id(
        category_id, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/search/name/", response_model=List[ProductDto])
async def search_products_by_name(
    keyword: str = Query(...),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_name(
        keyword, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/search/name/not-containing/", response_model=List[ProductDto])
async def search_products_by_name_not_containing(
    keyword: str = Query(...),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_name_not_containing(
        keyword, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/search/description/", response_model=List[ProductDto])
async def search_products_by_description(
    keyword: str = Query(...),
    pagination: Pagination = PaginationDep,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_description(
        keyword, pagination.page, pagination.size, correlation_id=correlation_id
    )


@router.get("/{product_id}", response_model=ProductDto)
async def get_product(
    product_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.get_product(product_id, correlation_id=correlation_id)


@router.put("/{product_id}", response_model=ProductDto)
async def update_product(
    product_id: int,
    product: ProductDto,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Update a product; the supplier keeps its category unchanged"""
    return await service.update_product(
        product_id, product, correlation_id=correlation_id
    )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    await service.delete_product(product_id, correlation_id=correlation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
