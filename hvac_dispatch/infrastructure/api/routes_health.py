"""Health check endpoint."""

from fastapi import APIRouter, Depends

from hvac_dispatch.application.use_cases.dispatch_job import DispatchJobUseCase
from hvac_dispatch.config import settings
from hvac_dispatch.infrastructure.api.dependencies import get_dispatch_uc

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(uc: DispatchJobUseCase = Depends(get_dispatch_uc)):
    """Report which providers the engine is wired with."""
    return {
        "status": "ok",
        "distance_provider": settings.distance_provider.value,
        "performance_provider": settings.performance_provider.value,
        "distance_unit": uc.config.distance.unit,
        "service": "HVAC Dispatch Engine",
    }
