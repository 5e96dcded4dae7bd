"""
Middleware modules for Consumer Service
"""

from .logging.request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
