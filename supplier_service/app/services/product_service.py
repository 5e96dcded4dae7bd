"""Product service for business logic"""

from decimal import Decimal
from typing import Awaitable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CategoryNotFoundError, ProductServiceError
from ..models.product import Product
from ..repository.category_repository import CategoryRepository
from ..repository.product_repository import ProductRepository
from ..schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductDto,
    ProductUpdate,
)
from ..utils.logging import setup_supplier_logging as setup_logging

# Setup structured logging for the service
logger = setup_logging("product_service")


class ProductService:
    """Service class for product business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = ProductRepository(db)
        self.category_repository = CategoryRepository(db)

    @staticmethod
    def _to_dto(product: Product) -> ProductDto:
        # category is eagerly joined, so this never triggers a lazy load
        return ProductDto(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category_id=product.category.id,
        )

    def _store_error(
        self, operation: str, error: Exception, correlation_id: Optional[str], **context
    ) -> ProductServiceError:
        logger.error(
            f"Failed to {operation}: {str(error)}",
            extra={"correlation_id": correlation_id, "error": str(error), **context},
            exc_info=True,
        )
        return ProductServiceError(f"Failed to {operation}: {str(error)}")

    async def _search(
        self,
        operation: str,
        query: Awaitable[List[Product]],
        correlation_id: Optional[str],
        **criteria,
    ) -> List[ProductDto]:
        try:
            products = await query
        except SQLAlchemyError as e:
            raise self._store_error(operation, e, correlation_id, **criteria) from e

        logger.info(
            "Products searched",
            extra={
                "operation": operation,
                "result_count": len(products),
                "correlation_id": correlation_id,
                **criteria,
            },
        )
        return [self._to_dto(p) for p in products]

    async def create_product(
        self, product_data: ProductCreate, correlation_id: Optional[str] = None
    ) -> ProductDetailResponse:
        """Create a product under an existing category"""
        try:
            category = await self.category_repository.get_category_by_id(
                product_data.category_id
            )
            if not category:
                raise CategoryNotFoundError(product_data.category_id)

            product = await self.repository.create_product(
                name=product_data.name,
                description=product_data.description,
                price=product_data.price,
                category=category,
            )
        except CategoryNotFoundError as e:
            logger.warning(
                f"Failed to create product: {str(e)}",
                extra={"category_id": e.category_id, "correlation_id": correlation_id},
            )
            raise
        except SQLAlchemyError as e:
            raise self._store_error(
                "create product",
                e,
                correlation_id,
                category_id=product_data.category_id,
            ) from e

        logger.info(
            "Product created successfully",
            extra={
                "product_id": product.id,
                "category_id": product.category_id,
                "correlation_id": correlation_id,
            },
        )
        return ProductDetailResponse.model_validate(product)

    async def get_all_products(
        self, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        return await self._search(
            "get all products", self.repository.get_all_products(), correlation_id
        )

    async def get_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> Optional[ProductDetailResponse]:
        """Get product by ID"""
        try:
            product = await self.repository.get_product_by_id(product_id)
        except SQLAlchemyError as e:
            raise self._store_error(
                "get product by id", e, correlation_id, product_id=product_id
            ) from e

        if not product:
            return None

        logger.info(
            "Product retrieved",
            extra={"product_id": product_id, "correlation_id": correlation_id},
        )
        return ProductDetailResponse.model_validate(product)

    async def update_product(
        self,
        product_id: int,
        product_data: ProductUpdate,
        correlation_id: Optional[str] = None,
    ) -> Optional[ProductDto]:
        """Overwrite name, description and price.

        Returns None when the product does not exist. Store failures raise
        ProductServiceError, so callers can tell the two apart.
        """
        try:
            product = await self.repository.update_product(product_id, product_data)
        except SQLAlchemyError as e:
            raise self._store_error(
                "update product", e, correlation_id, product_id=product_id
            ) from e

        if not product:
            logger.info(
                "Product to update not found",
                extra={"product_id": product_id, "correlation_id": correlation_id},
            )
            return None

        logger.info(
            "Product updated successfully",
            extra={"product_id": product_id, "correlation_id": correlation_id},
        )
        return self._to_dto(product)

    async def delete_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> None:
        """Delete product by id; a missing id is not an error"""
        try:
            await self.repository.delete_product(product_id)
        except SQLAlchemyError as e:
            raise self._store_error(
                "delete product", e, correlation_id, product_id=product_id
            ) from e

        logger.info(
            "Product deleted",
            extra={"product_id": product_id, "correlation_id": correlation_id},
        )

    async def filter_products_by_price_range(
        self,
        min_price: Decimal,
        max_price: Decimal,
        correlation_id: Optional[str] = None,
    ) -> List[ProductDto]:
        """Products with min_price <= price <= max_price"""
        return await self._search(
            "filter products by price range",
            self.repository.find_by_price_between(min_price, max_price),
            correlation_id,
            min_price=min_price,
            max_price=max_price,
        )

    async def filter_products_by_price_greater(
        self, min_price: Decimal, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        """Products strictly more expensive than min_price"""
        return await self._search(
            "filter products by price greater",
            self.repository.find_by_price_greater_than(min_price),
            correlation_id,
            min_price=min_price,
        )

    async def filter_products_by_price_less(
        self, max_price: Decimal, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        """Products strictly cheaper than max_price"""
        return await self._search(
            "filter products by price less",
            self.repository.find_by_price_less_than(max_price),
            correlation_id,
            max_price=max_price,
        )

    async def search_products_by_category_id(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        return await self._search(
            "search products by category id",
            self.repository.find_by_category_id(category_id),
            correlation_id,
            category_id=category_id,
        )

    async def search_products_by_name(
        self, keyword: str, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        return await self._search(
            "search products by name",
            self.repository.find_by_name_containing(keyword),
            correlation_id,
            keyword=keyword,
        )

    async def search_products_by_name_not_containing(
        self, keyword: str, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        return await self._search(
            "search products by name not containing",
            self.repository.find_by_name_not_containing(keyword),
            correlation_id,
            keyword=keyword,
        )

    async def search_products_by_description(
        self, keyword: str, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        return await self._search(
            "search products by description",
            self.repository.find_by_description_containing(keyword),
            correlation_id,
            keyword=keyword,
        )
