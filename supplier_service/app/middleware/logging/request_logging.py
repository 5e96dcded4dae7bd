"""
HTTP request logging middleware for Supplier Service.

Assigns a request ID, adopts the caller's correlation ID (the consumer
service forwards one) and logs each request with its duration.
"""

import time
import uuid
from typing import TYPE_CHECKING, Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import setup_supplier_logging

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = setup_supplier_logging("supplier_service_request_logging")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request/response lifecycle logging for Supplier Service"""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = str(uuid.uuid4())
        correlation_id = request.headers.get("X-Correlation-ID") or request_id
        start_time = time.time()

        request.state.request_id = request_id
        request.state.correlation_id = correlation_id

        logger.info(
            "HTTP request started",
            extra={
                "request_id": request_id,
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "event_type": "http_request_start",
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"HTTP request failed: {str(e)}",
                extra={
                    "request_id": request_id,
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                    "event_type": "http_request_error",
                },
                exc_info=True,
            )
            raise

        duration_ms = round((time.time() - start_time) * 1000, 2)
        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "HTTP request completed",
            extra={
                "request_id": request_id,
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "event_type": "http_request_complete",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def setup_supplier_request_logging(app: "FastAPI") -> None:
    """Install the request logging middleware"""
    app.add_middleware(RequestLoggingMiddleware)
