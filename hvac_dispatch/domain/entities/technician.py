"""Technician entity — a field-service employee who can be dispatched."""

import math
from dataclasses import dataclass, field

from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class CompletedJob:
    """One finished job as seen by the blended performance formula."""

    first_time_fix: bool = False
    customer_rating: float | None = None  # 1..5
    actual_duration_minutes: float | None = None
    estimated_duration_minutes: float | None = None


@dataclass
class Technician:
    id: str
    name: str
    active: bool = True
    available: bool = True
    max_concurrent_jobs: int = 1
    current_job_count: int = 0
    location: GeoPoint | None = None
    skill_level: int = 0
    recent_performance_history: list[float] = field(default_factory=list)
    recent_jobs: list[CompletedJob] = field(default_factory=list)

    def has_valid_location(self) -> bool:
        return self.location is not None and self.location.is_valid()

    def finite_history(self) -> list[float]:
        return [
            float(v) for v in self.recent_performance_history
            if v is not None and math.isfinite(v)
        ]

    def history_total(self) -> float:
        """Sum of recent outcomes, used as the first tie-breaker."""
        return sum(self.finite_history())
