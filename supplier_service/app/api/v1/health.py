from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.database import database_manager
from ...core.setting import get_settings
from ...utils.service_health import create_supplier_service_health_check
from ..dependencies import get_async_session

router = APIRouter()


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_async_session),
) -> Dict[str, Any]:
    """Health check endpoint for the supplier service."""
    settings = get_settings()
    return await create_supplier_service_health_check(
        settings.SERVICE_NAME,
        settings.APP_VERSION,
        "sqlite" if database_manager.is_sqlite else "postgresql",
        session,
    )
