"""Request/response schemas for the dispatch endpoints."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from hvac_dispatch.domain.entities.dispatch_result import DispatchResult
from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.entities.technician import CompletedJob, Technician
from hvac_dispatch.domain.entities.technician_score import TechnicianScore
from hvac_dispatch.domain.policies.dispatch_stats import DispatchStats
from hvac_dispatch.domain.value_objects.enums import JobPriority
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


class CompletedJobIn(BaseModel):
    first_time_fix: bool = False
    customer_rating: float | None = None
    actual_duration_minutes: float | None = None
    estimated_duration_minutes: float | None = None


class TechnicianIn(BaseModel):
    id: str
    name: str
    active: bool = True
    available: bool = True
    max_concurrent_jobs: int = 1
    current_job_count: int = 0
    latitude: float | None = None
    longitude: float | None = None
    skill_level: int = 0
    recent_performance_history: list[float] = Field(default_factory=list)
    recent_jobs: list[CompletedJobIn] = Field(default_factory=list)

    def to_entity(self) -> Technician:
        location = None
        if self.latitude is not None and self.longitude is not None:
            location = GeoPoint(latitude=self.latitude, longitude=self.longitude)
        return Technician(
            id=self.id,
            name=self.name,
            active=self.active,
            available=self.available,
            max_concurrent_jobs=self.max_concurrent_jobs,
            current_job_count=self.current_job_count,
            location=location,
            skill_level=self.skill_level,
            recent_performance_history=list(self.recent_performance_history),
            recent_jobs=[CompletedJob(**j.model_dump()) for j in self.recent_jobs],
        )


class JobIn(BaseModel):
    id: str
    latitude: float
    longitude: float
    priority: JobPriority = JobPriority.NORMAL
    required_skill_level: int = 0

    def to_entity(self) -> Job:
        return Job(
            id=self.id,
            location=GeoPoint(latitude=self.latitude, longitude=self.longitude),
            priority=self.priority,
            required_skill_level=self.required_skill_level,
        )


class DispatchRequest(BaseModel):
    job: JobIn
    technicians: list[TechnicianIn]


class BatchDispatchRequest(BaseModel):
    jobs: list[JobIn]
    technicians: list[TechnicianIn]


class OverrideRequest(DispatchRequest):
    technician_id: str
    reason: str


def serialize_score(s: TechnicianScore) -> dict:
    return {
        "technician_id": s.technician.id,
        "technician_name": s.technician.name,
        "distance": s.distance if math.isfinite(s.distance) else None,
        "distance_score": s.distance_score,
        "availability_score": s.availability_score,
        "skill_score": s.skill_score,
        "performance_score": s.performance_score,
        "workload_score": s.workload_score,
        "total_score": s.total_score,
    }


def serialize_result(r: DispatchResult) -> dict:
    """Convert a DispatchResult to an API response dict."""
    data = {
        "job_id": r.job_id,
        "is_emergency": r.is_emergency,
        "manual_dispatch": r.manual_dispatch,
        "total_eligible": r.total_eligible,
        "assigned": serialize_score(r.assigned) if r.assigned else None,
        "top3": [serialize_score(s) for s in r.top3],
        "ineligible": [
            {"technician_id": i.technician.id, "technician_name": i.technician.name, "reason": i.reason}
            for i in r.ineligible
        ],
    }

    if r.override:
        data["override"] = {
            "technician_id": r.override.technician_id,
            "original_technician_id": r.override.original_technician_id,
            "reason": r.override.reason,
        }
    else:
        data["override"] = None

    return data


def serialize_stats(s: DispatchStats) -> dict:
    return {
        "total_jobs": s.total_jobs,
        "auto_assigned": s.auto_assigned,
        "manual_dispatch_required": s.manual_dispatch_required,
        "emergency_jobs": s.emergency_jobs,
        "average_eligible_techs": s.average_eligible_techs,
        "override_rate": s.override_rate,
    }
