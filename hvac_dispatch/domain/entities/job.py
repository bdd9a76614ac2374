"""Job entity — a service call waiting for a technician."""

from dataclasses import dataclass

from hvac_dispatch.domain.value_objects.enums import JobPriority
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


@dataclass
class Job:
    id: str
    location: GeoPoint
    priority: JobPriority = JobPriority.NORMAL
    required_skill_level: int = 0

    def is_emergency(self) -> bool:
        return self.priority == JobPriority.EMERGENCY
