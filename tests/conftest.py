"""Pytest configuration and shared fixtures."""

import random

import pytest

from hvac_dispatch.adapters.distance.planar_adapter import PlanarDistanceAdapter
from hvac_dispatch.adapters.performance.bucket_adapter import BucketPerformanceAdapter
from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.value_objects.enums import JobPriority
from tests.factories import JOB_POINT


@pytest.fixture
def normal_job():
    return Job(id="J1", location=JOB_POINT, priority=JobPriority.NORMAL, required_skill_level=2)


@pytest.fixture
def emergency_job():
    return Job(id="J2", location=JOB_POINT, priority=JobPriority.EMERGENCY, required_skill_level=2)


@pytest.fixture
def planar():
    return PlanarDistanceAdapter()


@pytest.fixture
def bucket():
    return BucketPerformanceAdapter()


@pytest.fixture
def rng():
    return random.Random(1234)
