"""Domain exceptions raised by the Supplier Service business layer"""


class SupplierServiceError(Exception):
    """Base class for Supplier Service failures."""

    error_type = "store_error"


class CategoryServiceError(SupplierServiceError):
    """A category operation failed in the store."""


class ProductServiceError(SupplierServiceError):
    """A product operation failed in the store."""


class CategoryAlreadyExistsError(CategoryServiceError):
    """A client supplied category id collides with an existing row."""

    error_type = "category_exists"

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category with id {category_id} already exists")


class CategoryNotFoundError(ProductServiceError):
    """A product references a category that does not exist."""

    error_type = "category_not_found"

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__("Category not found")
