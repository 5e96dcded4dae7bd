"""
Supplier Service FastAPI Application
====================================

Main application entry point for the Supplier Service microservice.
Owns the Category and Product records and exposes CRUD plus filter/search
endpoints over HTTP.
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
from .core.database import database_manager
from .core.seed import seed_sample_catalog
from .core.setting import get_settings
from .middleware.error.error_handler import setup_supplier_error_handling
from .middleware.logging.request_logging import setup_supplier_request_logging
from .utils.logging import setup_supplier_logging

settings = get_settings()
environment = os.getenv("ENVIRONMENT", settings.ENVIRONMENT).lower()
enable_file_logging = environment in ["production", "staging"]

logger = setup_supplier_logging(
    "supplier_service",
    log_level=settings.LOG_LEVEL,
    enable_file_logging=enable_file_logging,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager for startup and shutdown."""
    startup_start = time.time()

    try:
        await database_manager.create_tables()
        if settings.SEED_TEST_DATA:
            await seed_sample_catalog(database_manager.async_session_maker)
    except Exception as e:
        logger.error(
            "Failed to start supplier service",
            exc_info=True,
            extra={
                "startup_duration_ms": int((time.time() - startup_start) * 1000),
                "error_type": type(e).__name__,
            },
        )
        raise

    logger.info(
        "Supplier service started successfully",
        extra={
            "environment": environment,
            "service_version": settings.APP_VERSION,
            "total_startup_duration_ms": int((time.time() - startup_start) * 1000),
        },
    )

    yield

    logger.info("Starting supplier service shutdown")
    await database_manager.close()


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

    _setup_middleware(app)
    _setup_cors(app)
    _setup_routers(app)

    return app


def _setup_middleware(app: FastAPI) -> None:
    setup_supplier_request_logging(app)
    setup_supplier_error_handling(app)
    logger.info("Supplier service middleware configured")


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

    app.include_router(categories_router, tags=["Category Management"])
    routers_info.append({"router": "categories", "tags": ["Category Management"]})

    app.include_router(products_router, tags=["Product Management"])
    routers_info.append({"router": "products", "tags": ["Product Management"]})

    logger.info(
        "API routes configured",
        extra={"total_routers": len(routers_info), "routers": routers_info},
    )


app = create_app()
