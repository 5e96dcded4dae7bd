"""Business layer for Supplier Service"""

from .category_service import CategoryService
from .product_service import ProductService

__all__ = [
    "ProductService",
    "CategoryService",
]
