"""DispatchStats — aggregate figures over a set of dispatch results."""

from __future__ import annotations

from dataclasses import dataclass

from hvac_dispatch.domain.entities.dispatch_result import DispatchResult


@dataclass(frozen=True)
class DispatchStats:
    total_jobs: int
    auto_assigned: int
    manual_dispatch_required: int
    emergency_jobs: int
    average_eligible_techs: float
    override_rate: float | None = None  # percentage


def compute_dispatch_stats(
    results: list[DispatchResult],
    overrides_count: int | None = None,
) -> DispatchStats:
    """Summarise results; override rate is relative to auto-assigned jobs."""
    total_jobs = len(results)
    auto_assigned = sum(1 for r in results if not r.manual_dispatch)
    total_eligible = sum(r.total_eligible for r in results)

    override_rate = None
    if overrides_count is not None and auto_assigned > 0:
        override_rate = round(overrides_count / auto_assigned * 100, 2)

    return DispatchStats(
        total_jobs=total_jobs,
        auto_assigned=auto_assigned,
        manual_dispatch_required=total_jobs - auto_assigned,
        emergency_jobs=sum(1 for r in results if r.is_emergency),
        average_eligible_techs=round(total_eligible / total_jobs, 2) if total_jobs else 0.0,
        override_rate=override_rate,
    )
