"""ScoringConfig — immutable weights and thresholds for the dispatch engine.

Distances are expressed in "distance units": kilometres for the geometric
providers, minutes when a routing provider reports drive time. The
``unit`` label only affects human-readable reasons.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DistanceConfig:
    excellent: float = 0.0
    good: float = 25.0
    max: float = 50.0
    max_points: float = 40.0
    good_points: float = 20.0
    unit: str = "km"


@dataclass(frozen=True)
class AvailabilityConfig:
    zero_load: float = 20.0
    half_load: float = 10.0


@dataclass(frozen=True)
class SkillConfig:
    exact: float = 20.0
    one_level_over: float = 15.0
    two_or_more_over: float = 10.0


@dataclass(frozen=True)
class PerformanceConfig:
    default: float = 7.0
    min_jobs_for_score: int = 10
    max_points: float = 10.0
    # (minimum average outcome, points), checked top-down
    buckets: tuple[tuple[float, float], ...] = (
        (95.0, 10.0),
        (90.0, 9.0),
        (85.0, 7.0),
        (75.0, 5.0),
    )
    floor_points: float = 3.0


@dataclass(frozen=True)
class WorkloadConfig:
    zero_jobs: float = 10.0
    three_jobs: float = 5.0
    six_or_more: float = 0.0


@dataclass(frozen=True)
class EmergencyConfig:
    distance_multiplier: float = 1.5
    availability_penalty: float = 10.0
    workload_penalty: float = 10.0
    max_distance_factor: float = 0.5


@dataclass(frozen=True)
class RankingConfig:
    tie_threshold: float = 0.1
    top_n: int = 3
    deterministic_tie_break: bool = False


@dataclass(frozen=True)
class ScoringConfig:
    distance: DistanceConfig = field(default_factory=DistanceConfig)
    availability: AvailabilityConfig = field(default_factory=AvailabilityConfig)
    skill: SkillConfig = field(default_factory=SkillConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    workload: WorkloadConfig = field(default_factory=WorkloadConfig)
    emergency: EmergencyConfig = field(default_factory=EmergencyConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)

    def max_travel_distance(self, is_emergency: bool) -> float:
        """Eligibility cut-off; emergencies only accept nearby technicians."""
        if is_emergency:
            return self.distance.max * self.emergency.max_distance_factor
        return self.distance.max


DEFAULT_SCORING_CONFIG = ScoringConfig()
