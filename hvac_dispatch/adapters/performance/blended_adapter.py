"""Blended performance score — first-time fix, rating and efficiency."""

from __future__ import annotations

from hvac_dispatch.application.ports.performance_port import PerformanceScorer
from hvac_dispatch.domain.entities.technician import CompletedJob, Technician

FIRST_TIME_FIX_WEIGHT = 0.4
RATING_WEIGHT = 0.3
EFFICIENCY_WEIGHT = 0.3
NEUTRAL_SCORE = 0.5


def efficiency(job: CompletedJob) -> float:
    """Map actual/estimated duration onto 0..1 where on-estimate is ideal."""
    if not job.estimated_duration_minutes or not job.actual_duration_minutes:
        return 1.0
    ratio = job.actual_duration_minutes / job.estimated_duration_minutes
    if ratio > 1.5:
        return 0.2
    if ratio > 1.2:
        return 0.4
    if ratio > 0.8:
        return 1.0
    return 0.8


def blended_score(jobs: list[CompletedJob]) -> float:
    """Normalised 0..1 score averaged over recent jobs (0.5 with no jobs)."""
    if not jobs:
        return NEUTRAL_SCORE

    total = 0.0
    for job in jobs:
        fix = 1.0 if job.first_time_fix else 0.0
        rating = job.customer_rating / 5 if job.customer_rating else 0.0
        total += (
            fix * FIRST_TIME_FIX_WEIGHT
            + rating * RATING_WEIGHT
            + efficiency(job) * EFFICIENCY_WEIGHT
        )
    return round(total / len(jobs), 3)


class BlendedPerformanceAdapter(PerformanceScorer):
    """Scales the 0..1 blend onto the performance factor's point range."""

    def __init__(self, max_points: float = 10.0):
        self._max_points = max_points

    def score(self, technician: Technician) -> float:
        return blended_score(technician.recent_jobs) * self._max_points
