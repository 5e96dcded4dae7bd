"""
Consumer Service FastAPI Application
====================================

Stateless front for the Supplier Service. Mirrors the supplier's category
and product endpoints, forwards each call through a single SupplierClient
and pages list results for its own callers.
"""

import os
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.categories import router as categories_router
from .api.v1.health import router as health_router
from .api.v1.products import router as products_router
from .clients.supplier_client import SupplierClient
from .core.setting import get_settings
from .middleware.error.error_handler import setup_consumer_error_handling
from .middleware.logging.request_logging import setup_consumer_request_logging
from .utils.logging import setup_consumer_logging

settings = get_settings()
environment = os.getenv("ENVIRONMENT", settings.ENVIRONMENT).lower()

logger = setup_consumer_logging(
    "consumer_service",
    log_level=settings.LOG_LEVEL,
    enable_file_logging=environment in ["production", "staging"],
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the supplier client on startup and close it on shutdown."""
    startup_start = time.time()

    # tests may install a client wired to an in-process supplier
    if getattr(app.state, "supplier_client", None) is None:
        app.state.supplier_client = SupplierClient(
            settings.SUPPLIER_SERVICE_URL, timeout=settings.SUPPLIER_REQUEST_TIMEOUT
        )

    logger.info(
        "Consumer service started successfully",
        extra={
            "environment": environment,
            "service_version": settings.APP_VERSION,
            "supplier_service_url": app.state.supplier_client.base_url,
            "supplier_request_timeout": app.state.supplier_client.timeout,
            "total_startup_duration_ms": int((time.time() - startup_start) * 1000),
        },
    )

    yield

    logger.info("Starting consumer service shutdown")
    await app.state.supplier_client.close()
    app.state.supplier_client = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.supplier_client = None

    _setup_middleware(app)
    _setup_cors(app)
    _setup_routers(app)

    return app


def _setup_middleware(app: FastAPI) -> None:
    setup_consumer_request_logging(app)
    setup_consumer_error_handling(app)


def _setup_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )


def _setup_routers(app: FastAPI) -> None:
    routers_info: list[dict[str, Any]] = []

    app.include_router(health_router, tags=["Health"])
    routers_info.append({"router": "health", "tags": ["Health"]})

    app.include_router(categories_router, tags=["Categories"])
    routers_info.append({"router": "categories", "tags": ["Categories"]})

    app.include_router(products_router, tags=["Products"])
    routers_info.append({"router": "products", "tags": ["Products"]})

    logger.info(
        "API routes configured",
        extra={"total_routers": len(routers_info), "routers": routers_info},
    )


app = create_app()
