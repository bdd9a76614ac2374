"""ScoringPolicy — five-factor weighted score for eligible technicians."""

from __future__ import annotations

import logging
import math

from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.entities.technician_score import TechnicianScore
from hvac_dispatch.domain.value_objects.scoring_config import (
    AvailabilityConfig,
    DEFAULT_SCORING_CONFIG,
    DistanceConfig,
    EmergencyConfig,
    ScoringConfig,
    SkillConfig,
    WorkloadConfig,
)

logger = logging.getLogger(__name__)


def _lerp(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    if x1 == x0:
        return y1
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


def distance_score(distance: float, cfg: DistanceConfig) -> float:
    """Three-segment curve: max points up to `excellent`, down to good points
    at `good`, down to zero at `max`."""
    if distance is None or math.isnan(distance) or distance < 0:
        return 0.0
    if distance <= cfg.excellent:
        return cfg.max_points
    if distance <= cfg.good:
        return _lerp(distance, cfg.excellent, cfg.good, cfg.max_points, cfg.good_points)
    return max(0.0, _lerp(distance, cfg.good, cfg.max, cfg.good_points, 0.0))


def availability_score(current_jobs: int, max_jobs: int, cfg: AvailabilityConfig) -> float:
    if current_jobs <= 0:
        return cfg.zero_load
    if max_jobs <= 0:
        return 0.0
    ratio = current_jobs / max_jobs
    if ratio <= 0.5:
        return cfg.half_load
    return max(0.0, _lerp(ratio, 0.5, 1.0, cfg.half_load, 0.0))


def skill_score(skill_level: int, required_level: int, cfg: SkillConfig) -> float:
    diff = abs(skill_level - required_level)
    if diff == 0:
        return cfg.exact
    if diff == 1:
        return cfg.one_level_over
    return cfg.two_or_more_over


def workload_score(current_jobs: int, cfg: WorkloadConfig) -> float:
    if current_jobs <= 0:
        return cfg.zero_jobs
    if current_jobs < 3:
        return _lerp(current_jobs, 0, 3, cfg.zero_jobs, cfg.three_jobs)
    if current_jobs == 3:
        return cfg.three_jobs
    if current_jobs < 6:
        return _lerp(current_jobs, 3, 6, cfg.three_jobs, cfg.six_or_more)
    return cfg.six_or_more


def apply_emergency_overrides(
    distance_pts: float,
    availability_pts: float,
    workload_pts: float,
    cfg: EmergencyConfig,
) -> tuple[float, float, float]:
    """Reward proximity, de-emphasise load. Skill/performance are untouched."""
    return (
        distance_pts * cfg.distance_multiplier,
        max(0.0, availability_pts - cfg.availability_penalty),
        max(0.0, workload_pts - cfg.workload_penalty),
    )


def sanitize_performance(value: float, max_points: float, tech_id: str) -> float:
    """Clamp a provider value into [0, max_points]; NaN counts as zero."""
    if value is None or math.isnan(value):
        logger.warning("Technician %s: performance score is NaN, using 0", tech_id)
        return 0.0
    if value < 0 or value > max_points:
        logger.warning(
            "Technician %s: performance score %s out of range, clamping", tech_id, value
        )
    return min(max(0.0, float(value)), max_points)


def score_technician(
    tech: Technician,
    job: Job,
    distance: float,
    performance: float,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> TechnicianScore:
    """Score one technician given an already-computed distance and performance."""
    if distance is None or math.isnan(distance) or distance < 0:
        logger.warning("Technician %s: unusable distance %s, scoring 0", tech.id, distance)
        distance = math.inf

    dist_pts = distance_score(distance, config.distance)
    avail_pts = availability_score(
        tech.current_job_count, tech.max_concurrent_jobs, config.availability
    )
    skill_pts = skill_score(tech.skill_level, job.required_skill_level, config.skill)
    perf_pts = sanitize_performance(performance, config.performance.max_points, tech.id)
    work_pts = workload_score(tech.current_job_count, config.workload)

    if job.is_emergency():
        dist_pts, avail_pts, work_pts = apply_emergency_overrides(
            dist_pts, avail_pts, work_pts, config.emergency
        )

    total = dist_pts + avail_pts + skill_pts + perf_pts + work_pts
    return TechnicianScore(
        technician=tech,
        distance_score=dist_pts,
        availability_score=avail_pts,
        skill_score=skill_pts,
        performance_score=perf_pts,
        workload_score=work_pts,
        total_score=total,
        distance=distance,
    )


def score_technicians(
    technicians: list[Technician],
    job: Job,
    distances: list[float],
    performances: list[float],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[TechnicianScore]:
    """Score every technician for the job (unsorted, input order).

    ``distances`` and ``performances`` are aligned with ``technicians``.

    Raises:
        ValueError: if either list does not match ``technicians`` in length.
    """
    if not len(technicians) == len(distances) == len(performances):
        raise ValueError(
            f"Job {job.id}: {len(technicians)} technicians but {len(distances)} "
            f"distances and {len(performances)} performance scores"
        )

    scores = []
    for tech, distance, performance in zip(technicians, distances, performances, strict=True):
        scored = score_technician(tech, job, distance, performance, config)
        logger.debug(
            "Job %s: %s → %.2f (dist=%.2f avail=%.2f skill=%.2f perf=%.2f work=%.2f)",
            job.id, tech.id, scored.total_score, scored.distance_score,
            scored.availability_score, scored.skill_score,
            scored.performance_score, scored.workload_score,
        )
        scores.append(scored)
    return scores
