"""Estimator models: calibration points, curves, envelopes, inputs, and results.

Every model is frozen: calibration data is shared process-wide and results are
built by returning new values rather than mutating accumulators.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from resource_estimator.types import DeploymentType, ScalingFactor


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ResourcePair(FrozenModel):
    """A request/limit pair. ``(0, 0)`` means unset for the curve that produced it."""

    request: float = 0.0
    limit: float = 0.0

    @property
    def is_unset(self) -> bool:
        return self.request == 0 and self.limit == 0


class Range(FrozenModel):
    min: float
    max: float

    def clamp(self, value: int) -> int:
        return int(max(self.min, min(self.max, value)))


class ReferencePoint(FrozenModel):
    """One hand-authored calibration sample observed at ``value`` of a scaling factor."""

    value: float
    replicas: int = 0
    cpu: ResourcePair = ResourcePair()
    memory_gb: ResourcePair = ResourcePair()
    ephemeral_gb: ResourcePair = ResourcePair()
    storage_gb: float = 0.0
    contact_support: bool = False
    note: str = ""


class ServiceCurve(FrozenModel):
    service_name: str
    scaling_factor: ScalingFactor
    reference_points: tuple[ReferencePoint, ...]

    @property
    def max_value(self) -> float:
        return self.reference_points[-1].value


class ServiceEnvelope(FrozenModel):
    """Resource recommendation for one service, or one curve's partial contribution."""

    replicas: int = 0
    cpu: ResourcePair = ResourcePair()
    memory_gb: ResourcePair = ResourcePair()
    ephemeral_gb: ResourcePair = ResourcePair()
    storage_gb: float = 0.0
    contact_support: bool = False


class PodGroup(FrozenModel):
    name: str
    services: tuple[str, ...]


class ServiceInfo(FrozenModel):
    label: str
    pod_name: str
    compose_name: str


class EstimateInput(FrozenModel):
    users: int = 300
    engagement_rate: int = 100
    repositories: int = 5000
    large_monorepos: int = 5
    total_repo_size_gb: int = 500
    largest_repo_size_gb: int = 5
    largest_index_size_gb: int = 3
    code_insight_enabled: bool = True
    code_intel_enabled: bool = True
    deployment_type: DeploymentType = DeploymentType.KUBERNETES

    def clamped(self) -> EstimateInput:
        """Return a copy with every numeric field clamped to its supported range."""
        from resource_estimator.references import INPUT_RANGES

        return self.model_copy(
            update={key: rng.clamp(getattr(self, key)) for key, rng in INPUT_RANGES.items()}
        )


class CurveEvaluation(FrozenModel):
    service_name: str
    scaling_factor: ScalingFactor
    value: float
    contact_support: bool


class EstimateTotals(FrozenModel):
    # Raw sums over every counted service
    cpu_requests: float
    cpu_limits: float
    memory_requests_gb: float
    memory_limits_gb: float

    # Requests plus half the request/limit gap
    total_cpu: float
    total_memory_gb: float
    total_storage_gb: float

    # Largest single limit, offered as an oversubscribed sizing for small deployments
    shared_cpu: float
    shared_memory_gb: float

    @property
    def cpu_cores(self) -> int:
        return math.ceil(self.total_cpu)

    @property
    def memory_size_gb(self) -> int:
        return math.ceil(self.total_memory_gb)

    @property
    def storage_size_gb(self) -> int:
        return math.ceil(self.total_storage_gb)

    @property
    def shared_cpu_cores(self) -> int:
        return math.ceil(self.shared_cpu)

    @property
    def shared_memory_size_gb(self) -> int:
        return math.ceil(self.shared_memory_gb)


class EstimateResult(FrozenModel):
    estimate_input: EstimateInput

    engaged_users: int
    average_repositories: int
    user_repo_sum_ratio: int

    services: Mapping[str, ServiceEnvelope]
    totals: EstimateTotals
    contact_support: bool
    trace: tuple[CurveEvaluation, ...]

    @field_validator("services", mode="after")
    @classmethod
    def _read_only_services(
        cls, services: Mapping[str, ServiceEnvelope]
    ) -> Mapping[str, ServiceEnvelope]:
        return MappingProxyType(dict(services))

    @field_serializer("services")
    def _dump_services(self, services: Mapping[str, ServiceEnvelope]) -> dict[str, ServiceEnvelope]:
        return dict(services)

    @property
    def deployment_type(self) -> DeploymentType:
        return self.estimate_input.deployment_type

    @property
    def suggest_shared_resources(self) -> bool:
        """Small deployments may run on the largest single limit instead of the blended total."""
        return self.engaged_users < 650 / 2 and self.average_repositories < 1500 / 2

    def services_needing_support(self) -> list[str]:
        return [name for name, env in self.services.items() if env.contact_support]


class RenderedArtifact(BaseModel):
    format: str
    filename: str
    content: str
