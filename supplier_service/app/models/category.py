from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import SupplierServiceBaseModel

if TYPE_CHECKING:
    from .product import Product


class Category(SupplierServiceBaseModel):
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Never loaded implicitly; deletes cascade in the database
    products: Mapped[List["Product"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="select",
    )
