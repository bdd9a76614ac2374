"""Application configuration via Pydantic Settings.

NOTE: We explicitly map .env variable names (DISTANCE_PROVIDER, OSRM_BASE_URL,
TIE_THRESHOLD, etc.) to avoid silent misconfiguration.
"""

from dataclasses import replace

from pydantic import Field
from pydantic_settings import BaseSettings

from hvac_dispatch.domain.value_objects.enums import (
    DistanceProviderKind,
    PerformanceProviderKind,
)
from hvac_dispatch.domain.value_objects.scoring_config import ScoringConfig


class Settings(BaseSettings):
    # Distance provider
    distance_provider: DistanceProviderKind = Field(
        default=DistanceProviderKind.PLANAR,
        validation_alias="DISTANCE_PROVIDER",
    )
    osrm_base_url: str = Field(
        default="https://router.project-osrm.org",
        validation_alias="OSRM_BASE_URL",
    )
    osrm_timeout_seconds: float = Field(default=10.0, validation_alias="OSRM_TIMEOUT_SECONDS")
    osrm_annotation: str = Field(default="duration", validation_alias="OSRM_ANNOTATION")

    # Performance provider
    performance_provider: PerformanceProviderKind = Field(
        default=PerformanceProviderKind.BUCKET,
        validation_alias="PERFORMANCE_PROVIDER",
    )

    # Scoring overrides (None = built-in default)
    max_travel_distance: float | None = Field(default=None, validation_alias="MAX_TRAVEL_DISTANCE")
    tie_threshold: float | None = Field(default=None, validation_alias="TIE_THRESHOLD")
    deterministic_tie_break: bool = Field(default=False, validation_alias="DETERMINISTIC_TIE_BREAK")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def build_scoring_config(s: Settings) -> ScoringConfig:
    """Freeze the process settings into the engine's scoring table."""
    config = ScoringConfig()

    distance = config.distance
    if s.max_travel_distance is not None:
        distance = replace(distance, max=s.max_travel_distance)
    if s.distance_provider == DistanceProviderKind.OSRM and s.osrm_annotation == "duration":
        distance = replace(distance, unit="min")

    ranking = replace(config.ranking, deterministic_tie_break=s.deterministic_tie_break)
    if s.tie_threshold is not None:
        ranking = replace(ranking, tie_threshold=s.tie_threshold)

    return replace(config, distance=distance, ranking=ranking)


settings = Settings()
