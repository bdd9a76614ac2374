"""Planar distance adapter — flat-earth km, the default metric."""

from hvac_dispatch.application.ports.distance_port import DistanceProvider
from hvac_dispatch.domain.value_objects.geo_point import GeoPoint


class PlanarDistanceAdapter(DistanceProvider):
    """sqrt(Δlat² + Δlon²) × 111. Only ever compared against fixed thresholds."""

    def distance(self, origin: GeoPoint, destination: GeoPoint) -> float:
        return origin.planar_km(destination)
