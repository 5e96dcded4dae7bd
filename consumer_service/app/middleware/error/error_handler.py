"""
Error handling for Consumer Service.

Upstream failures are translated uniformly: a supplier error status is passed
through and a timeout becomes 504. An unreachable supplier or a 2xx answer that is
not the expected JSON becomes 502.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import (
    SupplierClientError,
    SupplierResponseError,
    SupplierTimeoutError,
)
from ...utils.logging import setup_consumer_logging

logger = setup_consumer_logging("consumer_service_error_handler")


class ConsumerServiceErrorHandler:
    """Centralized error handling for Consumer Service."""

    @staticmethod
    def setup_error_handlers(app: FastAPI) -> None:
        """
        Setup all error handlers for the FastAPI application.
        """

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(
            request: Request, exc: StarletteHTTPException
        ) -> JSONResponse:
            return ConsumerServiceErrorHandler._create_error_response(
                request=request,
                status_code=exc.status_code,
                error_type="http_error",
                message=str(exc.detail),
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            """Malformed or incomplete payloads are a client error, not a 500."""
            error_details = [
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ]

            return ConsumerServiceErrorHandler._create_error_response(
                request=request,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                error_type="validation_error",
                message="Request validation failed",
                details={"validation_errors": error_details},
            )

        @app.exception_handler(SupplierClientError)
        async def supplier_client_exception_handler(
            request: Request, exc: SupplierClientError
        ) -> JSONResponse:
            if isinstance(exc, SupplierResponseError):
                return ConsumerServiceErrorHandler._create_error_response(
                    request=request,
                    status_code=exc.status_code,
                    error_type=exc.upstream_type or exc.error_type,
                    message=exc.detail,
                    details={"upstream_status": exc.status_code},
                )

            # unreachable supplier or malformed 2xx body are both 502
            status_code = (
                status.HTTP_504_GATEWAY_TIMEOUT
                if isinstance(exc, SupplierTimeoutError)
                else status.HTTP_502_BAD_GATEWAY
            )

            logger.error(
                "Supplier call failed",
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

            return ConsumerServiceErrorHandler._create_error_response(
                request=request,
                status_code=status_code,
                error_type=exc.error_type,
                message=str(exc),
            )

    @staticmethod
    def _create_error_response(
        request: Request,
        status_code: int,
        error_type: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
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


def setup_consumer_error_handling(app: FastAPI) -> None:
    """
    Convenience function to setup error handling for Consumer Service.

    Args:
        app: FastAPI application instance
    """
    ConsumerServiceErrorHandler.setup_error_handlers(app)

    logger.info(
        "Consumer Service error handling configured",
        extra={"event_type": "error_handler_setup"},
    )
