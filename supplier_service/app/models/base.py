from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class SupplierServiceBase(DeclarativeBase):
    """Base class for all Supplier Service database models."""

    pass


class SupplierServiceBaseModel(SupplierServiceBase):
    """Base model with the store-generated primary key."""

    __abstract__ = True
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
