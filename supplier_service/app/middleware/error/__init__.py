"""
Error middleware for Supplier Service.
"""

from .error_handler import SupplierServiceErrorHandler, setup_supplier_error_handling

__all__ = ["SupplierServiceErrorHandler", "setup_supplier_error_handling"]
