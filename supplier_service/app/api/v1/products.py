"""Product API endpoints"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, Response, status

from ...schemas.category import MAX_STORE_ID
from ...schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductDto,
    ProductUpdate,
)
from ...services.product_service import ProductService
from ..dependencies import CorrelationIdDep, ProductServiceDep

router = APIRouter(prefix="/products")


@router.post(
    "", response_model=ProductDetailResponse, status_code=status.HTTP_201_CREATED
)
async def create_product(
    product_data: ProductCreate,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Create a new product under an existing category"""
    return await service.create_product(
        product_data=product_data, correlation_id=correlation_id
    )


@router.get("", response_model=List[ProductDto])
async def get_all_products(
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """List every product"""
    return await service.get_all_products(correlation_id=correlation_id)


@router.get("/price/greater/", response_model=List[ProductDto])
async def filter_products_by_price_greater(
    min_price: Decimal = Query(..., alias="min"),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced strictly above ``min``"""
    return await service.filter_products_by_price_greater(
        min_price=min_price, correlation_id=correlation_id
    )


@router.get("/price/less/", response_model=List[ProductDto])
async def filter_products_by_price_less(
    max_price: Decimal = Query(..., alias="max"),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced strictly below ``max``"""
    return await service.filter_products_by_price_less(
        max_price=max_price, correlation_id=correlation_id
    )


@router.get("/price/range/", response_model=List[ProductDto])
async def filter_products_by_price_range(
    min_price: Decimal = Query(..., alias="min"),
    max_price: Decimal = Query(..., alias="max"),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Products priced between ``min`` and ``max`` inclusive"""
    return await service.filter_products_by_price_range(
        min_price=min_price, max_price=max_price, correlation_id=correlation_id
    )


@router.get("/search/category/{category_id}", response_model=List[ProductDto])
async def search_products_by_category_id(
    category_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_category_id(
        category_id=category_id, correlation_id=correlation_id
    )


@router.get("/search/name/", response_model=List[ProductDto])
async def search_products_by_name(
    keyword: str,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_name(
        keyword=keyword, correlation_id=correlation_id
    )


@router.get("/search/name/not-containing/", response_model=List[ProductDto])
async def search_products_by_name_not_containing(
    keyword: str,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_name_not_containing(
        keyword=keyword, correlation_id=correlation_id
    )


@router.get("/search/description/", response_model=List[ProductDto])
async def search_products_by_description(
    keyword: str,
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    return await service.search_products_by_description(
        keyword=keyword, correlation_id=correlation_id
    )


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Get product details by ID"""
    product = await service.get_product(
        product_id=product_id, correlation_id=correlation_id
    )

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )

    return product


@router.put("/{product_id}", response_model=ProductDto)
async def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Overwrite name, description and price of a product"""
    product = await service.update_product(
        product_id=product_id,
        product_data=product_data,
        correlation_id=correlation_id,
    )

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int = Path(..., le=MAX_STORE_ID),
    correlation_id: Optional[str] = CorrelationIdDep,
    service: ProductService = ProductServiceDep,
):
    """Delete a product; unknown ids are accepted silently"""
    await service.delete_product(product_id=product_id, correlation_id=correlation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
