"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class JobPriority(str, Enum):
    NORMAL = "normal"
    EMERGENCY = "emergency"


class DistanceProviderKind(str, Enum):
    PLANAR = "planar"
    HAVERSINE = "haversine"
    OSRM = "osrm"


class PerformanceProviderKind(str, Enum):
    BUCKET = "bucket"
    BLENDED = "blended"
