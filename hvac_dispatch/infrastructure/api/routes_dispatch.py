"""Dispatch endpoints — recommend, batch-recommend and override."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from hvac_dispatch.application.ports.distance_port import DistanceProviderError
from hvac_dispatch.application.ports.performance_port import PerformanceProviderError
from hvac_dispatch.application.use_cases.dispatch_job import (
    DispatchJobUseCase,
    override_assignment,
)
from hvac_dispatch.domain.errors import InvalidJobError, OverrideError
from hvac_dispatch.domain.policies.dispatch_stats import compute_dispatch_stats
from hvac_dispatch.infrastructure.api.dependencies import get_dispatch_uc
from hvac_dispatch.infrastructure.api.schemas import (
    BatchDispatchRequest,
    DispatchRequest,
    OverrideRequest,
    serialize_result,
    serialize_stats,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dispatch", tags=["dispatch"])


@router.post("")
def dispatch_job(
    body: DispatchRequest,
    uc: DispatchJobUseCase = Depends(get_dispatch_uc),
):
    """Rank the technician snapshot for one job."""
    try:
        result = uc.get_top_candidates(
            body.job.to_entity(), [t.to_entity() for t in body.technicians]
        )
    except InvalidJobError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (DistanceProviderError, PerformanceProviderError) as e:
        logger.exception("Provider failure dispatching job %s", body.job.id)
        raise HTTPException(status_code=502, detail=str(e))

    return serialize_result(result)


@router.post("/batch")
def dispatch_batch(
    body: BatchDispatchRequest,
    uc: DispatchJobUseCase = Depends(get_dispatch_uc),
):
    """Rank the same snapshot independently for several jobs."""
    technicians = [t.to_entity() for t in body.technicians]
    try:
        results = uc.batch_dispatch([j.to_entity() for j in body.jobs], technicians)
    except InvalidJobError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (DistanceProviderError, PerformanceProviderError) as e:
        logger.exception("Provider failure during batch dispatch")
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "results": [serialize_result(r) for r in results],
        "stats": serialize_stats(compute_dispatch_stats(results)),
    }


@router.post("/override")
def dispatch_override(
    body: OverrideRequest,
    uc: DispatchJobUseCase = Depends(get_dispatch_uc),
):
    """Re-run the recommendation and assign a dispatcher-chosen candidate."""
    try:
        result = uc.get_top_candidates(
            body.job.to_entity(), [t.to_entity() for t in body.technicians]
        )
        result = override_assignment(result, body.technician_id, body.reason)
    except (InvalidJobError, OverrideError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (DistanceProviderError, PerformanceProviderError) as e:
        logger.exception("Provider failure dispatching job %s", body.job.id)
        raise HTTPException(status_code=502, detail=str(e))

    return serialize_result(result)
