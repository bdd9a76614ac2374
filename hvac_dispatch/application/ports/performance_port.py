"""Port interface for turning job history into a performance score."""

from abc import ABC, abstractmethod

from hvac_dispatch.domain.entities.technician import Technician
from hvac_dispatch.domain.errors import DispatchError


class PerformanceProviderError(DispatchError):
    """The provider failed to compute a score for a technician."""


class PerformanceScorer(ABC):
    @abstractmethod
    def score(self, technician: Technician) -> float:
        """Performance points on the 0..max_points scale of the config."""
        ...
