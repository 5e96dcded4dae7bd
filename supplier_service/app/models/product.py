from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import NUMERIC, TEXT, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import SupplierServiceBaseModel

if TYPE_CHECKING:
    from .category import Category


class Product(SupplierServiceBaseModel):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(TEXT, nullable=False)
    price: Mapped[Decimal] = mapped_column(NUMERIC(10, 2), nullable=False)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Eager: every product returned to a caller carries its category id
    category: Mapped["Category"] = relationship(
        back_populates="products", lazy="joined", innerjoin=True
    )
