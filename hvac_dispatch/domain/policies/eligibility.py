"""EligibilityPolicy — decide which technicians may be scored for a job."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from hvac_dispatch.domain.entities.dispatch_result import IneligibleTechnician
from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.value_objects.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EligibilityResult:
    """Result of the eligibility policy, in input order.

    ``distances[i]`` is the travel cost of ``eligible[i]``.
    """

    eligible: list[Technician] = field(default_factory=list)
    distances: list[float] = field(default_factory=list)
    ineligible: list[IneligibleTechnician] = field(default_factory=list)


def precheck_reason(tech: Technician) -> str | None:
    """Checks that need no travel cost. Returns the first failing reason."""
    if not tech.active:
        return "Inactive"
    if not tech.available:
        return "Not available"
    if tech.max_concurrent_jobs <= 0:
        return "Invalid capacity configuration"
    if tech.current_job_count >= tech.max_concurrent_jobs:
        return f"Max jobs reached ({tech.current_job_count}/{tech.max_concurrent_jobs})"
    if not tech.has_valid_location():
        return "No valid location"
    return None


def needs_distance(technicians: list[Technician]) -> list[Technician]:
    """Technicians that pass every check not involving travel cost."""
    return [t for t in technicians if precheck_reason(t) is None]


def travel_reason(
    tech: Technician,
    job: Job,
    distance: float | None,
    config: ScoringConfig,
) -> str | None:
    """Checks that run once the travel cost is known."""
    if distance is None or math.isnan(distance) or distance < 0:
        return "Invalid distance"

    limit = config.max_travel_distance(job.is_emergency())
    if distance > limit:
        unit = config.distance.unit
        return f"Too far ({distance:.2f}{unit} > {limit:g}{unit})"

    if tech.skill_level < job.required_skill_level:
        return f"Insufficient skill ({tech.skill_level} < {job.required_skill_level})"
    return None


def filter_eligible(
    technicians: list[Technician],
    job: Job,
    distances: list[float],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> EligibilityResult:
    """Split the pool into eligible and ineligible technicians.

    ``distances`` holds one travel cost per technician returned by
    ``needs_distance(technicians)``, in the same order.

    Rules run in a fixed order and the first failure is the recorded reason:
      1. inactive
      2. off duty
      3. capacity misconfigured (max_concurrent_jobs <= 0)
      4. at capacity
      5. no usable location
      6. unusable distance (NaN or negative)
      7. beyond max travel distance (halved for emergencies)
      8. skill level below the job's requirement

    Raises:
        ValueError: if ``distances`` does not match the measured technicians.
    """
    measured = needs_distance(technicians)
    if len(distances) != len(measured):
        raise ValueError(
            f"Expected {len(measured)} distances for job {job.id}, got {len(distances)}"
        )
    remaining = iter(distances)

    result = EligibilityResult()
    for tech in technicians:
        reason = precheck_reason(tech)
        if reason is None:
            distance = next(remaining)
            reason = travel_reason(tech, job, distance, config)

        if reason is None:
            result.eligible.append(tech)
            result.distances.append(distance)
        else:
            logger.debug("Job %s: %s ineligible (%s)", job.id, tech.id, reason)
            result.ineligible.append(IneligibleTechnician(technician=tech, reason=reason))

    return result
