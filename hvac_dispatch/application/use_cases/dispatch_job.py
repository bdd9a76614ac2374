"""DispatchJobUseCase — eligibility → scoring → ranking for one or many jobs."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from hvac_dispatch.application.ports.distance_port import (
    DistanceProvider,
    DistanceProviderError,
)
from hvac_dispatch.application.ports.performance_port import PerformanceScorer
from hvac_dispatch.domain.entities.dispatch_result import (
    AssignmentOverride,
    DispatchResult,
)
from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.errors import InvalidJobError, OverrideError
from hvac_dispatch.domain.policies.eligibility import filter_eligible, needs_distance
from hvac_dispatch.domain.policies.ranking import rank
from hvac_dispatch.domain.policies.scoring import score_technicians
from hvac_dispatch.domain.value_objects.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
)

logger = logging.getLogger(__name__)


class DispatchJobUseCase:
    """Recommends technicians for a job from a snapshot of the pool.

    Holds only injected collaborators and configuration; every call is
    independent and nothing is persisted.
    """

    def __init__(
        self,
        distance_provider: DistanceProvider,
        performance_provider: PerformanceScorer,
        config: ScoringConfig = DEFAULT_SCORING_CONFIG,
        rng: random.Random | None = None,
    ):
        self._distance = distance_provider
        self._performance = performance_provider
        self._config = config
        self._rng = rng

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def get_top_candidates(
        self, job: Job, technicians: list[Technician]
    ) -> DispatchResult:
        """Run the full pipeline for one job.

        Pipeline:
        1. Eligibility filter (reasons kept for manual dispatch)
        2. Five-factor scoring, emergency overrides included
        3. Ranking with tie-break for first place
        4. Top-N slate, element 0 recommended

        Raises:
            InvalidJobError: if the job has no usable coordinates.
            DistanceProviderError / PerformanceProviderError: provider failures.
        """
        if job.location is None or not job.location.is_valid():
            raise InvalidJobError(f"Job {job.id} has no valid coordinates")

        logger.info("Job %s: checking %d technicians", job.id, len(technicians))
        distances = self._measure(job, needs_distance(technicians))
        eligibility = filter_eligible(technicians, job, distances, self._config)

        if not eligibility.eligible:
            logger.warning(
                "Job %s: no eligible technicians → manual dispatch (%s)",
                job.id,
                ", ".join(f"{i.technician.id}: {i.reason}" for i in eligibility.ineligible),
            )
            return DispatchResult(
                job_id=job.id,
                is_emergency=job.is_emergency(),
                manual_dispatch=True,
                ineligible=list(eligibility.ineligible),
            )

        performances = [self._performance.score(t) for t in eligibility.eligible]
        scores = score_technicians(
            eligibility.eligible, job, eligibility.distances, performances, self._config
        )
        ranked = rank(scores, job, self._config, self._rng)
        assigned = ranked[0]

        logger.info(
            "Job %s → %s (%.2f pts, %.2f %s, %d eligible)",
            job.id, assigned.technician.name, assigned.total_score,
            assigned.distance, self._config.distance.unit, len(ranked),
        )
        return DispatchResult(
            job_id=job.id,
            is_emergency=job.is_emergency(),
            manual_dispatch=False,
            assigned=assigned,
            top3=ranked[: self._config.ranking.top_n],
            total_eligible=len(ranked),
        )

    def _measure(self, job: Job, technicians: list[Technician]) -> list[float]:
        """One provider round-trip for every technician that needs a travel cost."""
        if not technicians:
            return []
        distances = self._distance.distances(job.location, [t.location for t in technicians])
        if len(distances) != len(technicians):
            raise DistanceProviderError(
                f"Provider returned {len(distances)} distances for "
                f"{len(technicians)} technicians on job {job.id}"
            )
        return list(distances)

    def batch_dispatch(
        self, jobs: list[Job], technicians: list[Technician]
    ) -> list[DispatchResult]:
        """Dispatch each job independently against the same snapshot."""
        logger.info("Batch dispatch of %d jobs", len(jobs))
        results = [self.get_top_candidates(job, technicians) for job in jobs]
        assigned = sum(1 for r in results if not r.manual_dispatch)
        logger.info("Batch complete: %d/%d auto-assigned", assigned, len(results))
        return results


def override_assignment(
    result: DispatchResult, technician_id: str, reason: str
) -> DispatchResult:
    """Swap the recommended technician for another candidate from the slate.

    Raises:
        OverrideError: if the result is a manual dispatch or the technician
            is not among the recommended candidates.
    """
    if result.manual_dispatch:
        raise OverrideError(
            f"Job {result.job_id} requires manual dispatch; nothing to override"
        )

    chosen = next((s for s in result.top3 if s.technician_id == technician_id), None)
    if chosen is None:
        available = ", ".join(
            f"{s.technician_id} ({s.technician.name})" for s in result.top3
        )
        raise OverrideError(
            f"Technician {technician_id} is not a recommended candidate for job "
            f"{result.job_id}. Available: {available}"
        )

    original = result.assigned.technician_id if result.assigned else None
    logger.info(
        "Job %s: override %s → %s (%s)", result.job_id, original, technician_id, reason
    )
    return replace(
        result,
        assigned=chosen,
        override=AssignmentOverride(
            technician_id=technician_id,
            reason=reason,
            original_technician_id=original,
        ),
    )
