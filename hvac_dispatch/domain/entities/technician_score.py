"""TechnicianScore — per-job score breakdown for one eligible technician."""

from dataclasses import dataclass

from hvac_dispatch.domain.entities.technician import Technician


@dataclass(frozen=True)
class TechnicianScore:
    technician: Technician
    distance_score: float
    availability_score: float
    skill_score: float
    performance_score: float
    workload_score: float
    total_score: float
    distance: float

    @property
    def technician_id(self) -> str:
        return self.technician.id
