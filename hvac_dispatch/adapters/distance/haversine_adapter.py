"""Haversine distance adapter — great-circle km."""

from hvac_dispatch.application.ports.distance_port import DistanceProvider
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


class HaversineDistanceAdapter(DistanceProvider):
    def distance(self, origin: GeoPoint, destination: GeoPoint) -> float:
        return origin.haversine_km(destination)
