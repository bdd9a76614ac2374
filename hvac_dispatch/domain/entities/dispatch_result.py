"""DispatchResult — the outcome of running the engine for one job."""

from dataclasses import dataclass, field

from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.entities.technician_score import TechnicianScore


@dataclass(frozen=True)
class IneligibleTechnician:
    technician: Technician
    reason: str


@dataclass(frozen=True)
class AssignmentOverride:
    """A dispatcher picked someone other than the top recommendation."""

    technician_id: str
    reason: str
    original_technician_id: str | None


@dataclass(frozen=True)
class DispatchResult:
    job_id: str
    is_emergency: bool
    manual_dispatch: bool
    assigned: TechnicianScore | None = None
    top3: list[TechnicianScore] = field(default_factory=list)
    # Only populated when manual_dispatch is true
    ineligible: list[IneligibleTechnician] = field(default_factory=list)
    total_eligible: int = 0
    override: AssignmentOverride | None = None
