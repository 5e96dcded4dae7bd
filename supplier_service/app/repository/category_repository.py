"""Category repository for database operations"""

from typing import List, Optional

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.category import Category
from ..schemas.category import CategoryCreate, CategoryUpdate


class CategoryRepository:
    """Repository for category database operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_category(self, category_data: CategoryCreate) -> Category:
        """Insert a category; the store assigns its id"""
        category = Category(name=category_data.name)

        self.db.add(category)
        await self.db.commit()
        await self.db.refresh(category)
        return category

    async def exists_by_id(self, category_id: int) -> bool:
        query = select(exists().where(Category.id == category_id))
        result = await self.db.execute(query)
        return bool(result.scalar())

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Get category by ID"""
        query = select(Category).where(Category.id == category_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all_categories(self) -> List[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def count_categories(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Category))
        return result.scalar_one()

    async def update_category(
        self, category_id: int, category_data: CategoryUpdate
    ) -> Optional[Category]:
        """Overwrite the category name; returns None when the id is unknown"""
        category = await self.get_category_by_id(category_id)
        if not category:
            return None

        category.name = category_data.name

        await self.db.commit()
        await self.db.refresh(category)
        return category

    async def delete_category(self, category_id: int) -> bool:
        """Delete category and, through the foreign key, its products"""
        category = await self.get_category_by_id(category_id)
        if not category:
            return False

        await self.db.delete(category)
        await self.db.commit()
        return True
