"""Product repository for database operations"""

from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.category import Category
from ..models.product import Product
from ..schemas.product import ProductUpdate


class ProductRepository:
    """Repository for product database operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_all(self, *criteria: Any) -> List[Product]:
        query = select(Product).where(*criteria).order_by(Product.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create_product(
        self, name: str, description: str, price: Decimal, category: Category
    ) -> Product:
        """Insert a product owned by an already loaded category"""
        product = Product(
            name=name,
            description=description,
            price=price,
            category=category,
        )

        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        query = select(Product).where(Product.id == product_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all_products(self) -> List[Product]:
        return await self._find_all()

    async def update_product(
        self, product_id: int, product_data: ProductUpdate
    ) -> Optional[Product]:
        """Overwrite name, description and price; the category never changes"""
        product = await self.get_product_by_id(product_id)
        if not product:
            return None

        product.name = product_data.name
        product.description = product_data.description
        product.price = product_data.price

        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete_product(self, product_id: int) -> None:
        """Delete by id without checking that the row exists"""
        await self.db.execute(delete(Product).where(Product.id == product_id))
        await self.db.commit()

    async def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return await self._find_all(Product.price.between(min_price, max_price))

    async def find_by_price_greater_than(self, min_price: Decimal) -> List[Product]:
        return await self._find_all(Product.price > min_price)

    async def find_by_price_less_than(self, max_price: Decimal) -> List[Product]:
        return await self._find_all(Product.price < max_price)

    async def find_by_category_id(self, category_id: int) -> List[Product]:
        return await self._find_all(Product.category_id == category_id)

    async def find_by_name_containing(self, keyword: str) -> List[Product]:
        return await self._find_all(Product.name.icontains(keyword, autoescape=True))

    async def find_by_name_not_containing(self, keyword: str) -> List[Product]:
        return await self._find_all(~Product.name.icontains(keyword, autoescape=True))

    async def find_by_description_containing(self, keyword: str) -> List[Product]:
        return await self._find_all(
            Product.description.icontains(keyword, autoescape=True)
        )
