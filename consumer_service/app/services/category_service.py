"""Category operations forwarded to the Supplier Service"""

from typing import List, Optional

from ..clients.supplier_client import SupplierClient, parse_supplier_payload
from ..schemas.category import CategoryDto
from ..utils.logging import setup_consumer_logging as setup_logging
from ..utils.pagination import paginate

logger = setup_logging("consumer_service.category_service")


class CategoryService:
    """Reissues category operations against the supplier and reshapes the results"""

    def __init__(self, client: SupplierClient):
        self.client = client

    async def get_all_categories(
        self, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[CategoryDto]:
        items = await self.client.list_categories(page, size, correlation_id)
        categories = parse_supplier_payload(List[CategoryDto], items)
        return paginate(categories, page, size)

    async def get_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> CategoryDto:
        return parse_supplier_payload(
            CategoryDto, await self.client.get_category(category_id, correlation_id)
        )

    async def create_category(
        self, category: CategoryDto, correlation_id: Optional[str] = None
    ) -> CategoryDto:
        created = parse_supplier_payload(
            CategoryDto,
            await self.client.create_category(
                category.model_dump(mode="json", by_alias=True, exclude_none=True),
                correlation_id,
            ),
        )
        logger.info(
            "Category created through supplier",
            extra={"category_id": created.id, "correlation_id": correlation_id},
        )
        return created

    async def update_category(
        self,
        category_id: int,
        category: CategoryDto,
        correlation_id: Optional[str] = None,
    ) -> CategoryDto:
        updated = await self.client.update_category(
            category_id,
            category.model_dump(mode="json", by_alias=True, exclude={"id"}),
            correlation_id,
        )
        return parse_supplier_payload(CategoryDto, updated)

    async def delete_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> None:
        await self.client.delete_category(category_id, correlation_id)
        logger.info(
            "Category deleted through supplier",
            extra={"category_id": category_id, "correlation_id": correlation_id},
        )
