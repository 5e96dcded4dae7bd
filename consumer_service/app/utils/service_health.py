"""
Consumer Service Health Check Utilities
=======================================

Self-contained health check functionality for the Consumer Service. Checks
may be plain callables or coroutines, since the supplier check is an HTTP
call.
"""

import inspect
import time
from typing import Any, Awaitable, Callable, Dict, Union

HealthCheck = Callable[[], Union[Dict[str, Any], Awaitable[Dict[str, Any]]]]


class ConsumerServiceHealthChecker:
    """Consumer Service specific health checker"""

    def __init__(self, service_name: str = "consumer_service") -> None:
        self.service_name = service_name
        self.checks: Dict[str, HealthCheck] = {}
        self.start_time = time.time()

    def add_check(self, name: str, check_func: HealthCheck) -> None:
        """Add a health check function"""
        self.checks[name] = check_func

    async def run_checks(self) -> Dict[str, Any]:
        """Run all health checks"""
        results: Dict[str, Dict[str, Any]] = {}
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
            "uptime_seconds": round(time.time() - self.start_time, 2),
            "timestamp": time.time(),
        }
