"""
Supplier Service Health Check Utilities
=======================================

Self-contained health check payload for the Supplier Service. The catalog
store check issues a round trip through the request's database session.
"""

import inspect
import time
from typing import Any, Awaitable, Callable, Dict, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

_STARTED_AT = time.time()

HealthCheck = Callable[[], Union[Dict[str, Any], Awaitable[Dict[str, Any]]]]


class SupplierServiceHealthChecker:
    """Runs named health checks and aggregates their status"""

    def __init__(self, service_name: str = "supplier_service") -> None:
        self.service_name = service_name
        self.checks: Dict[str, HealthCheck] = {}

    def add_check(self, name: str, check_func: HealthCheck) -> None:
        """Add a health check function"""
        self.checks[name] = check_func

    async def run_checks(self) -> Dict[str, Any]:
        results = {}
        check_start_time = time.time()

        for name, check_func in self.checks.items():
            individual_start = time.time()
            try:
                result = check_func()
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                result = {"status": "error", "error": str(e)}
            result["duration_ms"] = round((time.time() - individual_start) * 1000, 2)
            results[name] = result

        return {
            "service": self.service_name,
            "status": "healthy"
            if all(r.get("status") == "healthy" for r in results.values())
            else "unhealthy",
            "checks": results,
            "total_duration_ms": round((time.time() - check_start_time) * 1000, 2),
            "uptime_seconds": round(time.time() - _STARTED_AT, 2),
            "timestamp": time.time(),
        }


async def check_catalog_store(
    session: AsyncSession, database_type: str
) -> Dict[str, Any]:
    """Run ``SELECT 1`` against the catalog store"""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return {
            "status": "unhealthy",
            "database_type": database_type,
            "error": str(e),
        }
    return {
        "status": "healthy",
        "message": "Catalog store reachable",
        "database_type": database_type,
    }


async def create_supplier_service_health_check(
    service_name: str, version: str, database_type: str, session: AsyncSession
) -> Dict[str, Any]:
    """Build the Supplier Service health payload"""
    health_checker = SupplierServiceHealthChecker(service_name)
    health_checker.add_check(
        "basic",
        lambda: {
            "status": "healthy",
            "message": "Supplier Service is running",
            "version": version,
        },
    )
    health_checker.add_check(
        "catalog_store", lambda: check_catalog_store(session, database_type)
    )
    return await health_checker.run_checks()
