"""
HTTP request logging middleware for Consumer Service.

Every request gets a request ID and a correlation ID. The correlation ID is
taken from the caller when present, forwarded to the supplier by the route
handlers, and echoed back in the response headers.
"""

import time
import uuid
from typing import TYPE_CHECKING, Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import setup_consumer_logging

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = setup_consumer_logging("consumer_service_request_logging")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """HTTP request logging middleware for Consumer Service"""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = str(uuid.uuid4())
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        start_time = time.time()

        logger.info(
            "Consumer HTTP request started",
            extra={
                "request_id": request_id,
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": self._get_client_ip(request),
                "event_type": "http_request_start",
            },
        )

        request.state.request_id = request_id
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Consumer HTTP request failed: {str(e)}",
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
            log_level = "ERROR"
        elif response.status_code >= 400 or duration_ms > 5000:
            log_level = "WARNING"
        else:
            log_level = "INFO"

        getattr(logger, log_level.lower())(
            "Consumer HTTP request completed",
            extra={
                "request_id": request_id,
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "event_type": "http_request_complete",
                "slow_request": duration_ms > 1000,
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Correlation-ID"] = correlation_id
        return response

    def _get_client_ip(self, request: Request) -> str:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"


def setup_consumer_request_logging(app: "FastAPI") -> None:
    """Install the request logging middleware"""
    app.add_middleware(RequestLoggingMiddleware)
