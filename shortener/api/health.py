"""
Health Endpoints

Service info, liveness and readiness probes. These never fail; they are
registered ahead of the URL router so the catch-all route cannot shadow
them.
"""

from fastapi import APIRouter, Depends

from shortener.api.dependencies import get_health_service
from shortener.api.schemas import HealthResponse, ServiceInfo
from shortener.services.health_service import HealthService

router = APIRouter(tags=["Health"])


@router.get("/", response_model=ServiceInfo, summary="Service info")
async def root(health_service: HealthService = Depends(get_health_service)) -> ServiceInfo:
    """
    Root endpoint describing the running service.

    Returns:
        Service name, version, environment and a static "running" status
    """
    return health_service.service_info()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(
    health_service: HealthService = Depends(get_health_service)
) -> HealthResponse:
    """Health check endpoint for monitoring."""
    return health_service.health()


@router.get("/ready", response_model=HealthResponse, summary="Readiness check")
async def readiness_check(
    health_service: HealthService = Depends(get_health_service)
) -> HealthResponse:
    return health_service.readiness()
