from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...clients.supplier_client import SupplierClient
from ...core.exceptions import SupplierClientError
from ...core.setting import get_settings
from ...utils.service_health import ConsumerServiceHealthChecker
from ..dependencies import get_supplier_client

router = APIRouter()


@router.get("/health")
async def health_check(
    client: SupplierClient = Depends(get_supplier_client),
) -> Dict[str, Any]:
    """Health of the consumer and reachability of the supplier."""
    settings = get_settings()
    checker = ConsumerServiceHealthChecker(settings.SERVICE_NAME)

    checker.add_check(
        "basic",
        lambda: {
            "status": "healthy",
            "message": "Consumer Service is running",
            "version": settings.APP_VERSION,
        },
    )

    async def supplier_check() -> Dict[str, Any]:
        try:
            await client.health()
        except SupplierClientError as e:
            return {"status": "unhealthy", "url": client.base_url, "error": str(e)}
        return {"status": "healthy", "url": client.base_url}

    checker.add_check("supplier_service", supplier_check)
    return await checker.run_checks()
