"""Sample catalog loaded into an empty store when SEED_TEST_DATA is enabled"""

from decimal import Decimal
from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..models.category import Category
from ..models.product import Product
from ..repository.category_repository import CategoryRepository
from ..utils.logging import setup_supplier_logging as setup_logging

logger = setup_logging("supplier_service.seed")

SAMPLE_CATALOG: List[Tuple[str, List[Tuple[str, str, str]]]] = [
    (
        "Electronics",
        [
            ("Smartphone", "Top smartphone", "999.99"),
            ("Laptop", "Top laptop", "1499.99"),
        ],
    ),
    (
        "Clothing",
        [
            ("T-shirt", "Big t-shirt", "19.99"),
            ("T-shirt", "Small t-shirt", "14.99"),
        ],
    ),
    (
        "Food",
        [
            ("Milk", "Gallon from cow", "2.99"),
            ("Apple", "Green", "0.99"),
        ],
    ),
    ("Cars", [("Honda", "Civic", "19999.99")]),
]


async def seed_sample_catalog(session_maker: async_sessionmaker[AsyncSession]) -> int:
    """Insert the sample catalog unless categories already exist.

    Returns the number of products inserted.
    """
    async with session_maker() as session:
        if await CategoryRepository(session).count_categories():
            logger.info("Store already populated, skipping sample catalog")
            return 0

        inserted = 0
        for category_name, products in SAMPLE_CATALOG:
            category = Category(name=category_name)
            session.add(category)
            for name, description, price in products:
                session.add(
                    Product(
                        name=name,
                        description=description,
                        price=Decimal(price),
                        category=category,
                    )
                )
                inserted += 1
        await session.commit()

    logger.info(
        "Sample catalog loaded",
        extra={"categories": len(SAMPLE_CATALOG), "products": inserted},
    )
    return inserted
