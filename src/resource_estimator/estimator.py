"""Estimator — turns business metrics into per-service resource envelopes.

The estimation pipeline:
1. Derive engaged users, average repositories, and the user/repo sum ratio
2. For each curve in declaration order, pick its scaling-factor value
3. Interpolate the curve at that value
4. Apply the service's storage formula and quantize
5. Fold the partial into the service's envelope
6. Synchronize replica counts within pod groups
7. Aggregate totals together with the deployment type's baseline defaults
"""

from __future__ import annotations

import logging

from resource_estimator.aggregate import aggregate
from resource_estimator.combine import combine
from resource_estimator.interpolate import interpolate
from resource_estimator.models import (
    CurveEvaluation,
    EstimateInput,
    EstimateResult,
    ServiceCurve,
    ServiceEnvelope,
)
from resource_estimator.pods import synchronize_pods
from resource_estimator.references import CODE_INSIGHT_USERS, CODE_INTEL_SERVICES, MONOREPO_FACTOR
from resource_estimator.rounding import quantize
from resource_estimator.store import CalibrationStore, get_default_store
from resource_estimator.types import DeploymentType, ScalingFactor

logger = logging.getLogger(__name__)


class DerivedMetrics:
    """Scalar metrics computed once per estimate from the raw input."""

    def __init__(self, estimate_input: EstimateInput) -> None:
        self.engaged_users = estimate_input.users * estimate_input.engagement_rate // 100
        # Number of total repositories including monorepos
        self.average_repositories = (
            estimate_input.repositories + estimate_input.large_monorepos * MONOREPO_FACTOR
        )
        self.user_repo_sum_ratio = (estimate_input.users + self.average_repositories) // 1000


def scaling_value(
    factor: ScalingFactor,
    estimate_input: EstimateInput,
    derived: DerivedMetrics,
) -> float:
    """Value of ``factor`` for this estimate."""
    match factor:
        case ScalingFactor.ENGAGED_USERS:
            if estimate_input.code_insight_enabled:
                return float(derived.engaged_users + CODE_INSIGHT_USERS)
            return float(derived.engaged_users)
        case ScalingFactor.AVERAGE_REPOSITORIES:
            return float(derived.average_repositories)
        case ScalingFactor.TOTAL_REPO_SIZE:
            return float(estimate_input.total_repo_size_gb)
        case ScalingFactor.LARGE_MONOREPOS:
            return float(estimate_input.large_monorepos)
        case ScalingFactor.LARGEST_REPO_SIZE:
            return float(estimate_input.largest_repo_size_gb)
        case ScalingFactor.LARGEST_INDEX_SIZE:
            return float(estimate_input.largest_index_size_gb)
        case ScalingFactor.USER_REPO_SUM_RATIO:
            return float(derived.user_repo_sum_ratio)


def storage_gb(service: str, estimate_input: EstimateInput) -> float:
    """Persistent storage for a service, or 0 for services without volumes.

    Repository clones take 120% of the reported size. Indexed search needs half
    of that; docker-compose splits it evenly between the webserver and the
    indexserver, while on Kubernetes both containers share the webserver volume.
    """
    docker_factor, k8s_factor = 1, 0
    if estimate_input.deployment_type == DeploymentType.DOCKER_COMPOSE:
        docker_factor, k8s_factor = 2, 1

    repo_storage = estimate_input.total_repo_size_gb * 120 // 100
    match service:
        case "gitserver":
            return float(repo_storage)
        case "minio":
            return float(estimate_input.largest_index_size_gb)
        case "zoekt-webserver":
            return float(repo_storage // 2 // docker_factor)
        case "zoekt-indexserver":
            return float(repo_storage // 2 // docker_factor * k8s_factor)
        case _:
            return 0.0


class Estimator:
    """Evaluates every calibration curve for an input and aggregates the result."""

    def __init__(self, store: CalibrationStore | None = None) -> None:
        self._store = store if store is not None else get_default_store()

    @property
    def store(self) -> CalibrationStore:
        return self._store

    def estimate(self, estimate_input: EstimateInput) -> EstimateResult:
        derived = DerivedMetrics(estimate_input)

        services: dict[str, ServiceEnvelope] = {}
        trace: list[CurveEvaluation] = []
        for curve in self._store.curves():
            if not self._enabled(curve, estimate_input):
                continue
            value = scaling_value(curve.scaling_factor, estimate_input, derived)
            partial = interpolate(curve, value)
            partial = quantize(
                partial.model_copy(
                    update={"storage_gb": storage_gb(curve.service_name, estimate_input)}
                )
            )
            logger.debug(
                "%s by %s at %s: replicas=%d cpu=%s memory=%s",
                curve.service_name,
                curve.scaling_factor,
                value,
                partial.replicas,
                partial.cpu,
                partial.memory_gb,
            )
            if partial.contact_support:
                logger.info(
                    "%s exceeds its calibrated range: %s=%s > %s",
                    curve.service_name,
                    curve.scaling_factor,
                    value,
                    curve.max_value,
                )
            trace.append(
                CurveEvaluation(
                    service_name=curve.service_name,
                    scaling_factor=curve.scaling_factor,
                    value=value,
                    contact_support=partial.contact_support,
                )
            )
            services[curve.service_name] = combine(
                services.get(curve.service_name, ServiceEnvelope()), partial
            )

        services = synchronize_pods(services, self._store.pod_groups())
        totals = aggregate(services, self._store.defaults(estimate_input.deployment_type))

        return EstimateResult(
            estimate_input=estimate_input,
            engaged_users=derived.engaged_users,
            average_repositories=derived.average_repositories,
            user_repo_sum_ratio=derived.user_repo_sum_ratio,
            services=services,
            totals=totals,
            contact_support=any(env.contact_support for env in services.values()),
            trace=trace,
        )

    @staticmethod
    def _enabled(curve: ServiceCurve, estimate_input: EstimateInput) -> bool:
        if curve.service_name in CODE_INTEL_SERVICES:
            return estimate_input.code_intel_enabled
        return True


def estimate(estimate_input: EstimateInput) -> EstimateResult:
    """Estimate with the process-wide calibration store."""
    return Estimator().estimate(estimate_input)
