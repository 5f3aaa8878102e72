"""Calibration Store — the single source of truth for curves, defaults, and pod groups."""

from __future__ import annotations

from functools import lru_cache
import logging
from collections.abc import Iterable, Mapping

from resource_estimator.models import PodGroup, ServiceCurve, ServiceEnvelope, ServiceInfo
from resource_estimator.types import DeploymentType

logger = logging.getLogger(__name__)


class CalibrationError(ValueError):
    """Raised when the compiled-in calibration data is inconsistent."""


class UnknownServiceError(ValueError):
    def __init__(self, name: str, available: Iterable[str]) -> None:
        super().__init__(f"Unknown service '{name}'. Available: {', '.join(available)}")


class CalibrationStore:
    """Immutable catalogue of service curves, baseline defaults, and pod groups.

    Reference points of every curve are stably sorted ascending by value at
    construction. Nothing is written after that.
    """

    def __init__(
        self,
        curves: Iterable[ServiceCurve],
        *,
        defaults: Mapping[DeploymentType, Mapping[str, ServiceEnvelope]],
        pod_groups: Iterable[PodGroup] = (),
        service_info: Mapping[str, ServiceInfo] | None = None,
    ) -> None:
        sorted_curves: list[ServiceCurve] = []
        for curve in curves:
            if not curve.reference_points:
                raise CalibrationError(
                    f"Curve for '{curve.service_name}' by {curve.scaling_factor} "
                    f"has no reference points"
                )
            points = tuple(sorted(curve.reference_points, key=lambda p: p.value))
            sorted_curves.append(curve.model_copy(update={"reference_points": points}))
        self._curves: tuple[ServiceCurve, ...] = tuple(sorted_curves)

        # dict preserves first-declaration order of each service
        by_service: dict[str, list[ServiceCurve]] = {}
        for curve in self._curves:
            by_service.setdefault(curve.service_name, []).append(curve)
        self._by_service: dict[str, tuple[ServiceCurve, ...]] = {
            name: tuple(group) for name, group in by_service.items()
        }

        self._defaults = {
            deployment: dict(services) for deployment, services in defaults.items()
        }
        self._pod_groups: tuple[PodGroup, ...] = tuple(pod_groups)
        for group in self._pod_groups:
            for name in group.services:
                if name not in self._by_service:
                    raise CalibrationError(
                        f"Pod group '{group.name}' references '{name}', which has no curves"
                    )

        self._service_info = dict(service_info) if service_info is not None else None
        if self._service_info is not None:
            for name in self._by_service:
                if name not in self._service_info:
                    raise CalibrationError(f"Service '{name}' has curves but no service info")

        logger.debug(
            "Calibration store built: %d curves across %d services",
            len(self._curves),
            len(self._by_service),
        )

    def curves(self) -> tuple[ServiceCurve, ...]:
        return self._curves

    def curves_for(self, service: str) -> tuple[ServiceCurve, ...]:
        curves = self._by_service.get(service)
        if curves is None:
            raise UnknownServiceError(service, self._by_service)
        return curves

    def service_names(self) -> list[str]:
        return list(self._by_service)

    def info(self, service: str) -> ServiceInfo:
        if self._service_info is None:
            return ServiceInfo(label=service, pod_name=service, compose_name=service)
        info = self._service_info.get(service)
        if info is None:
            raise UnknownServiceError(service, self._service_info)
        return info

    def defaults(self, deployment: DeploymentType) -> dict[str, ServiceEnvelope]:
        return dict(self._defaults.get(deployment, {}))

    def default_for(self, service: str, deployment: DeploymentType) -> ServiceEnvelope:
        """Baseline envelope for a service, or an empty envelope when it has none."""
        return self._defaults.get(deployment, {}).get(service, ServiceEnvelope())

    def pod_groups(self) -> tuple[PodGroup, ...]:
        return self._pod_groups

    def __len__(self) -> int:
        return len(self._curves)


def build_default_store() -> CalibrationStore:
    """Build the store from the compiled-in catalogue."""
    from resource_estimator.references import DEFAULTS, POD_GROUPS, REFERENCES, SERVICE_INFO

    return CalibrationStore(
        REFERENCES,
        defaults=DEFAULTS,
        pod_groups=POD_GROUPS,
        service_info=SERVICE_INFO,
    )


@lru_cache
def get_default_store() -> CalibrationStore:
    """Process-wide store, built on first use and shared read-only afterwards."""
    return build_default_store()
