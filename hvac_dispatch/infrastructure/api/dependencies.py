"""FastAPI dependency injection — wires providers into the dispatch use case."""

from __future__ import annotations

import logging

from hvac_dispatch.adapters.distance.haversine_adapter import HaversineDistanceAdapter
from hvac_dispatch.adapters.distance.osrm_adapter import OsrmDistanceAdapter
from hvac_dispatch.adapters.distance.planar_adapter import PlanarDistanceAdapter
from hvac_dispatch.adapters.performance.blended_adapter import BlendedPerformanceAdapter
from hvac_dispatch.adapters.performance.bucket_adapter import BucketPerformanceAdapter
from hvac_dispatch.application.ports.distance_port import DistanceProvider
from hvac_dispatch.application.ports.performance_port import PerformanceScorer
from hvac_dispatch.application.use_cases.dispatch_job import DispatchJobUseCase
from hvac_dispatch.config import Settings, build_scoring_config, settings
from hvac_dispatch.domain.value_objects.enums import (
    DistanceProviderKind,
    PerformanceProviderKind,
)
from hvac_dispatch.domain.value_objects.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)


def build_distance_provider(s: Settings) -> DistanceProvider:
    if s.distance_provider == DistanceProviderKind.OSRM:
        logger.info("Using OSRM (%s) for travel %s", s.osrm_base_url, s.osrm_annotation)
        return OsrmDistanceAdapter(
            base_url=s.osrm_base_url,
            timeout=s.osrm_timeout_seconds,
            annotation=s.osrm_annotation,
        )
    if s.distance_provider == DistanceProviderKind.HAVERSINE:
        return HaversineDistanceAdapter()
    return PlanarDistanceAdapter()


def build_performance_provider(s: Settings, config: ScoringConfig) -> PerformanceScorer:
    if s.performance_provider == PerformanceProviderKind.BLENDED:
        logger.info("Using blended performance formula")
        return BlendedPerformanceAdapter(max_points=config.performance.max_points)
    return BucketPerformanceAdapter(config.performance)


# Singletons: providers hold no per-request state
_scoring_config = build_scoring_config(settings)
_dispatch_uc = DispatchJobUseCase(
    distance_provider=build_distance_provider(settings),
    performance_provider=build_performance_provider(settings, _scoring_config),
    config=_scoring_config,
)


def get_dispatch_uc() -> DispatchJobUseCase:
    return _dispatch_uc
