"""Pytest configuration and fixtures for the resource estimator tests."""

import pytest

from resource_estimator.models import (
    EstimateInput,
    ReferencePoint,
    ResourcePair,
    ServiceCurve,
    ServiceInfo,
)
from resource_estimator.store import CalibrationStore, get_default_store
from resource_estimator.types import ScalingFactor


@pytest.fixture
def default_input() -> EstimateInput:
    """The estimator form's initial values: 300 users, 5000 repos, 5 monorepos."""
    return EstimateInput()


@pytest.fixture
def store() -> CalibrationStore:
    return get_default_store()


@pytest.fixture
def linear_curve() -> ServiceCurve:
    """Two points, CPU doubling its request from 0 to 100."""
    return ServiceCurve(
        service_name="linear",
        scaling_factor=ScalingFactor.ENGAGED_USERS,
        reference_points=(
            ReferencePoint(value=0, replicas=1, cpu=ResourcePair(request=1, limit=2)),
            ReferencePoint(value=100, replicas=3, cpu=ResourcePair(request=5, limit=10)),
        ),
    )


@pytest.fixture
def tiny_store(linear_curve: ServiceCurve) -> CalibrationStore:
    """Store with one curve and no defaults."""
    return CalibrationStore(
        [linear_curve],
        defaults={},
        service_info={"linear": ServiceInfo(label="Linear", pod_name="linear", compose_name="lin")},
    )
