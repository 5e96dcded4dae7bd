"""Supplier Service Models"""

from .base import SupplierServiceBase, SupplierServiceBaseModel
from .category import Category
from .product import Product

__all__ = [
    "SupplierServiceBase",
    "SupplierServiceBaseModel",
    "Category",
    "Product",
]
