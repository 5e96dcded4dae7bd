"""Product operations forwarded to the Supplier Service"""

from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..clients.supplier_client import SupplierClient, parse_supplier_payload
from ..schemas.product import ProductDto
from ..utils.logging import setup_consumer_logging as setup_logging
from ..utils.pagination import paginate

logger = setup_logging("consumer_service.product_service")


class ProductService:
    """Reissues product operations against the supplier and reshapes the results"""

    def __init__(self, client: SupplierClient):
        self.client = client

    @staticmethod
    def _page_of(items: List[Dict[str, Any]], page: int, size: int) -> List[ProductDto]:
        # the supplier returns full result sets, so the page is cut here
        products = parse_supplier_payload(List[ProductDto], items)
        return paginate(products, page, size)

    @staticmethod
    def _payload(product: ProductDto) -> Dict[str, Any]:
        return product.model_dump(
            mode="json", by_alias=True, exclude={"id"}, exclude_none=True
        )

    async def get_all_products(
        self, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        items = await self.client.list_products(page, size, correlation_id)
        return self._page_of(items, page, size)

    async def get_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> ProductDto:
        return parse_supplier_payload(
            ProductDto, await self.client.get_product(product_id, correlation_id)
        )

    async def create_product(
        self, product: ProductDto, correlation_id: Optional[str] = None
    ) -> ProductDto:
        created = parse_supplier_payload(
            ProductDto,
            await self.client.create_product(self._payload(product), correlation_id),
        )
        logger.info(
            "Product created through supplier",
            extra={
                "product_id": created.id,
                "category_id": product.category_id,
                "correlation_id": correlation_id,
            },
        )
        return created

    async def update_product(
        self, product_id: int, product: ProductDto, correlation_id: Optional[str] = None
    ) -> ProductDto:
        """Update through the supplier and return what the supplier stored"""
        updated = await self.client.update_product(
            product_id, self._payload(product), correlation_id
        )
        return parse_supplier_payload(ProductDto, updated)

    async def delete_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> None:
        await self.client.delete_product(product_id, correlation_id)

    async def filter_products_by_price_range(
        self,
        min_price: Decimal,
        max_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[ProductDto]:
        items = await self.client.filter_products_by_price_range(
            min_price, max_price, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def filter_products_by_price_greater(
        self,
        min_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[ProductDto]:
        items = await self.client.filter_products_by_price_greater(
            min_price, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def filter_products_by_price_less(
        self,
        max_price: Decimal,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[ProductDto]:
        items = await self.client.filter_products_by_price_less(
            max_price, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def search_products_by_category_id(
        self,
        category_id: int,
        page: int,
        size: int,
        correlation_id: Optional[str] = None,
    ) -> List[ProductDto]:
        items = await self.client.search_products_by_category_id(
            category_id, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def search_products_by_name(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        items = await self.client.search_products_by_name(
            keyword, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def search_products_by_name_not_containing(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        items = await self.client.search_products_by_name_not_containing(
            keyword, page, size, correlation_id
        )
        return self._page_of(items, page, size)

    async def search_products_by_description(
        self, keyword: str, page: int, size: int, correlation_id: Optional[str] = None
    ) -> List[ProductDto]:
        items = await self.client.search_products_by_description(
            keyword, page, size, correlation_id
        )
        return self._page_of(items, page, size)
