"""Port interface for travel cost between a technician and a job."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from hvac_dispatch.domain.errors import DispatchError
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


class DistanceProviderError(DispatchError):
    """The provider could not produce a travel cost (network, no route, ...)."""


class DistanceProvider(ABC):
    @abstractmethod
    def distance(self, origin: GeoPoint, destination: GeoPoint) -> float:
        """Travel cost in distance units (km or minutes, per deployment).

        Raises DistanceProviderError when the cost cannot be determined.
        """
        ...

    def distances(
        self, origin: GeoPoint, destinations: Sequence[GeoPoint]
    ) -> list[float]:
        """Travel cost from one origin to many points, in input order.

        Adapters backed by a batch API should override this.
        """
        return [self.distance(origin, d) for d in destinations]
