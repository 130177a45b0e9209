"""Health check endpoint. No database access; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from crm.core.config import Settings, get_settings
from crm.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=settings.app_version)
