"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass

KM_PER_DEGREE = 111.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Both coordinates present, finite and within WGS84 bounds."""
        for value in (self.latitude, self.longitude):
            if value is None or isinstance(value, bool):
                return False
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                return False
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180

    def planar_km(self, other: "GeoPoint") -> float:
        """Flat-earth approximation: degree delta scaled by km-per-degree."""
        dlat = other.latitude - self.latitude
        dlon = other.longitude - self.longitude
        return math.sqrt(dlat**2 + dlon**2) * KM_PER_DEGREE

    def haversine_km(self, other: "GeoPoint") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        earth_radius_km = 6371.0

        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return earth_radius_km * c
