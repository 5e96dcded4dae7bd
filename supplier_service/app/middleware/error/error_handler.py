"""
Error handling for Supplier Service.
Maps domain exceptions and request errors to standardized JSON responses.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    SupplierServiceError,
)
from ...utils.logging import setup_supplier_logging

logger = setup_supplier_logging("supplier_service_error_handler")

# Domain errors that are the caller's fault rather than the store's
_DOMAIN_STATUS_CODES = {
    CategoryAlreadyExistsError: status.HTTP_409_CONFLICT,
    CategoryNotFoundError: status.HTTP_404_NOT_FOUND,
}


class SupplierServiceErrorHandler:
    """
    Centralized error handling for Supplier Service.

    Features:
    - Standardized error response format
    - Domain exception to status code mapping
    - Correlation ID tracking
    """

    @staticmethod
    def setup_error_handlers(app: FastAPI) -> None:
        """
        Setup all error handlers for the FastAPI application.
        """

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(
            request: Request, exc: StarletteHTTPException
        ) -> JSONResponse:
            """Handle HTTP exceptions from Starlette/FastAPI."""
            return SupplierServiceErrorHandler._create_error_response(
                request=request,
                status_code=exc.status_code,
                error_type="http_error",
                message=str(exc.detail),
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            """Handle malformed or incomplete request payloads."""
            error_details = [
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ]

            return SupplierServiceErrorHandler._create_error_response(
                request=request,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                error_type="validation_error",
                message="Request validation failed",
                details={"validation_errors": error_details},
            )

        @app.exception_handler(SupplierServiceError)
        async def supplier_service_exception_handler(
            request: Request, exc: SupplierServiceError
        ) -> JSONResponse:
            """Handle business layer failures."""
            status_code = _DOMAIN_STATUS_CODES.get(
                type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
            )
            if status_code >= 500:
                logger.error(
                    "Store operation failed",
                    extra={
                        "correlation_id": getattr(
                            request.state, "correlation_id", "unknown"
                        ),
                        "path": request.url.path,
                        "method": request.method,
                        "exception_type": type(exc).__name__,
                        "exception_message": str(exc),
                    },
                )

            return SupplierServiceErrorHandler._create_error_response(
                request=request,
                status_code=status_code,
                error_type=exc.error_type,
                message=str(exc),
                details={"exception_type": type(exc).__name__},
            )

    @staticmethod
    def _create_error_response(
        request: Request,
        status_code: int,
        error_type: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """
        Create a standardized error response.

        Args:
            request: The FastAPI request object
            status_code: HTTP status code
            error_type: Type of error for categorization
            message: Human-readable error message
            details: Additional error details

        Returns:
            JSONResponse with standardized error format
        """
        correlation_id = getattr(request.state, "correlation_id", "unknown")

        error_response: Dict[str, Any] = {
            "error": {
                "type": error_type,
                "message": message,
                "correlation_id": correlation_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
                "method": request.method,
            }
        }

        if details:
            error_response["error"]["details"] = details

        if status_code < 500:
            logger.warning(
                f"Client error: {error_type}",
                extra={
                    "correlation_id": correlation_id,
                    "status_code": status_code,
                    "error_type": error_type,
                    "path": request.url.path,
                    "method": request.method,
                },
            )

        return JSONResponse(
            status_code=status_code, content=jsonable_encoder(error_response)
        )


def setup_supplier_error_handling(app: FastAPI) -> None:
    """
    Convenience function to setup error handling for Supplier Service.

    Args:
        app: FastAPI application instance
    """
    SupplierServiceErrorHandler.setup_error_handlers(app)

    logger.info(
        "Supplier Service error handling configured",
        extra={"event_type": "error_handler_setup"},
    )
