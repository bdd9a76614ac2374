"""Tests for Settings → ScoringConfig wiring."""

from hvac_dispatch.adapters.distance.osrm_adapter import OsrmDistanceAdapter
from hvac_dispatch.adapters.distance.planar_adapter import PlanarDistanceAdapter
from hvac_dispatch.adapters.performance.blended_adapter import BlendedPerformanceAdapter
from hvac_dispatch.config import Settings, build_scoring_config
from hvac_dispatch.infrastructure.api.dependencies import (
    build_distance_provider,
    build_performance_provider,
)


def test_defaults_match_builtin_table():
    config = build_scoring_config(Settings())
    assert config.distance.max == 50.0
    assert config.distance.unit == "km"
    assert config.ranking.tie_threshold == 0.1
    assert config.ranking.deterministic_tie_break is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MAX_TRAVEL_DISTANCE", "40")
    monkeypatch.setenv("TIE_THRESHOLD", "0.5")
    monkeypatch.setenv("DETERMINISTIC_TIE_BREAK", "true")
    config = build_scoring_config(Settings())
    assert config.distance.max == 40.0
    assert config.max_travel_distance(is_emergency=True) == 20.0
    assert config.ranking.tie_threshold == 0.5
    assert config.ranking.deterministic_tie_break is True


def test_osrm_duration_switches_unit_to_minutes(monkeypatch):
    monkeypatch.setenv("DISTANCE_PROVIDER", "osrm")
    s = Settings()
    assert build_scoring_config(s).distance.unit == "min"
    assert isinstance(build_distance_provider(s), OsrmDistanceAdapter)


def test_provider_selection_defaults():
    s = Settings()
    assert isinstance(build_distance_provider(s), PlanarDistanceAdapter)


def test_blended_provider_selection(monkeypatch):
    monkeypatch.setenv("PERFORMANCE_PROVIDER", "blended")
    s = Settings()
    provider = build_performance_provider(s, build_scoring_config(s))
    assert isinstance(provider, BlendedPerformanceAdapter)
