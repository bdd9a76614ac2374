"""Bucketed performance score — average recent outcome mapped to points."""

from __future__ import annotations

from hvac_dispatch.application.ports.performance_port import PerformanceScorer
from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.value_objects.scoring_config import PerformanceConfig


class BucketPerformanceAdapter(PerformanceScorer):
    """Default points until enough history exists, then bucket by average.

    With the stock config: >=95 → 10, >=90 → 9, >=85 → 7, >=75 → 5, else 3,
    and 7 for technicians with fewer than 10 outcomes.
    """

    def __init__(self, config: PerformanceConfig | None = None):
        self._config = config or PerformanceConfig()

    def score(self, technician: Technician) -> float:
        history = technician.finite_history()
        if len(history) < self._config.min_jobs_for_score:
            return self._config.default

        average = sum(history) / len(history)
        for threshold, points in self._config.buckets:
            if average >= threshold:
                return points
        return self._config.floor_points
