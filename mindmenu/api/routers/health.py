"""
Liveness endpoint.

Routes: GET /health

Dependencies: fastapi, mindmenu.configs
System role: Load balancer and uptime checks
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mindmenu.configs import Settings, get_settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    service: str


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Process is up and serving requests."""
    return HealthResponse(status="ok", service=settings.service_name)
