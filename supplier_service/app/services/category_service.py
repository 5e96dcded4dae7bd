"""Category service for business logic"""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CategoryAlreadyExistsError, CategoryServiceError
from ..repository.category_repository import CategoryRepository
from ..schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from ..utils.logging import setup_supplier_logging as setup_logging

# Setup structured logging for the service
logger = setup_logging("category_service")


class CategoryService:
    """Service class for category business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = CategoryRepository(db)

    def _store_error(
        self, operation: str, error: Exception, correlation_id: Optional[str], **context
    ) -> CategoryServiceError:
        logger.error(
            f"Failed to {operation}: {str(error)}",
            extra={"correlation_id": correlation_id, "error": str(error), **context},
            exc_info=True,
        )
        return CategoryServiceError(f"Failed to {operation}: {str(error)}")

    async def create_category(
        self, category_data: CategoryCreate, correlation_id: Optional[str] = None
    ) -> CategoryResponse:
        """Create a category, rejecting a client supplied id that is taken"""
        try:
            if category_data.id is not None and await self.repository.exists_by_id(
                category_data.id
            ):
                raise CategoryAlreadyExistsError(category_data.id)

            category = await self.repository.create_category(category_data)
        except CategoryAlreadyExistsError as e:
            logger.warning(
                f"Failed to create category: {str(e)}",
                extra={"category_id": e.category_id, "correlation_id": correlation_id},
            )
            raise
        except SQLAlchemyError as e:
            raise self._store_error(
                "create category", e, correlation_id, category_name=category_data.name
            ) from e

        logger.info(
            "Category created successfully",
            extra={
                "category_id": category.id,
                "category_name": category.name,
                "correlation_id": correlation_id,
            },
        )
        return CategoryResponse.model_validate(category)

    async def get_all_categories(
        self, correlation_id: Optional[str] = None
    ) -> List[CategoryResponse]:
        try:
            categories = await self.repository.get_all_categories()
        except SQLAlchemyError as e:
            raise self._store_error("get all categories", e, correlation_id) from e

        return [CategoryResponse.model_validate(c) for c in categories]

    async def get_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> Optional[CategoryResponse]:
        """Get category by ID"""
        try:
            category = await self.repository.get_category_by_id(category_id)
        except SQLAlchemyError as e:
            raise self._store_error(
                "find category by id", e, correlation_id, category_id=category_id
            ) from e

        if not category:
            return None

        logger.info(
            "Category retrieved",
            extra={"category_id": category_id, "correlation_id": correlation_id},
        )
        return CategoryResponse.model_validate(category)

    async def update_category(
        self,
        category_id: int,
        category_data: CategoryUpdate,
        correlation_id: Optional[str] = None,
    ) -> Optional[CategoryResponse]:
        """Rename a category; returns None when it does not exist"""
        try:
            category = await self.repository.update_category(category_id, category_data)
        except SQLAlchemyError as e:
            raise self._store_error(
                "update category", e, correlation_id, category_id=category_id
            ) from e

        if not category:
            return None

        logger.info(
            "Category updated successfully",
            extra={"category_id": category_id, "correlation_id": correlation_id},
        )
        return CategoryResponse.model_validate(category)

    async def delete_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> bool:
        """Delete a category with its products; unknown ids are a no-op"""
        try:
            deleted = await self.repository.delete_category(category_id)
        except SQLAlchemyError as e:
            raise self._store_error(
                "delete category", e, correlation_id, category_id=category_id
            ) from e

        if deleted:
            logger.info(
                "Category deleted successfully",
                extra={"category_id": category_id, "correlation_id": correlation_id},
            )
        return deleted
