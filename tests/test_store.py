"""Unit tests for the calibration store and the compiled-in catalogue."""

from __future__ import annotations

import pytest

from resource_estimator.models import (
    PodGroup,
    ReferencePoint,
    ServiceCurve,
    ServiceEnvelope,
    ServiceInfo,
)
from resource_estimator.references import (
    AUTHORED_CURVES,
    CODE_INTEL_SERVICES,
    DEFAULTS,
    REFERENCES,
    SERVICE_INFO,
)
from resource_estimator.store import (
    CalibrationError,
    CalibrationStore,
    UnknownServiceError,
    build_default_store,
    get_default_store,
)
from resource_estimator.types import DeploymentType, ScalingFactor


def _curve(service: str, *values: float, notes: tuple[str, ...] = ()) -> ServiceCurve:
    points = tuple(
        ReferencePoint(value=v, replicas=i + 1, note=notes[i] if notes else "")
        for i, v in enumerate(values)
    )
    return ServiceCurve(
        service_name=service,
        scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
        reference_points=points,
    )


class TestConstruction:
    def test_points_sorted_ascending(self):
        store = CalibrationStore([_curve("svc", 300, 5, 100)], defaults={})
        values = [p.value for p in store.curves()[0].reference_points]
        assert values == [5, 100, 300]

    def test_sort_is_stable_for_ties(self):
        store = CalibrationStore(
            [_curve("svc", 10, 5, 10, notes=("first", "low", "second"))], defaults={}
        )
        notes = [p.note for p in store.curves()[0].reference_points]
        assert notes == ["low", "first", "second"]

    def test_empty_curve_rejected(self):
        with pytest.raises(CalibrationError, match="no reference points"):
            CalibrationStore([_curve("svc")], defaults={})

    def test_pod_group_member_without_curve_rejected(self):
        with pytest.raises(CalibrationError, match="ghost"):
            CalibrationStore(
                [_curve("svc", 1)],
                defaults={},
                pod_groups=[PodGroup(name="pod", services=("svc", "ghost"))],
            )

    def test_curve_without_service_info_rejected(self):
        with pytest.raises(CalibrationError, match="no service info"):
            CalibrationStore(
                [_curve("svc", 1)],
                defaults={},
                service_info={"other": ServiceInfo(label="O", pod_name="o", compose_name="o")},
            )

    def test_calibration_error_is_value_error(self):
        assert issubclass(CalibrationError, ValueError)


class TestLookups:
    def test_service_names_in_declaration_order_without_duplicates(self):
        store = CalibrationStore(
            [_curve("b", 1), _curve("a", 1), _curve("b", 2)],
            defaults={},
        )
        assert store.service_names() == ["b", "a"]
        assert len(store.curves_for("b")) == 2

    def test_unknown_service(self, tiny_store):
        with pytest.raises(UnknownServiceError, match="nope"):
            tiny_store.curves_for("nope")
        with pytest.raises(ValueError):
            tiny_store.info("nope")

    def test_info_without_catalogue_falls_back_to_name(self):
        store = CalibrationStore([_curve("svc", 1)], defaults={})
        info = store.info("svc")
        assert info.label == info.pod_name == info.compose_name == "svc"

    def test_default_for_missing_service_is_empty(self, store):
        assert store.default_for("frontend", DeploymentType.KUBERNETES) == ServiceEnvelope()

    def test_defaults_returns_a_copy(self, store):
        defaults = store.defaults(DeploymentType.KUBERNETES)
        defaults.clear()
        assert store.defaults(DeploymentType.KUBERNETES)

    def test_empty_store_has_no_length(self):
        assert len(CalibrationStore([], defaults={})) == 0


class TestDefaultStore:
    def test_singleton(self):
        assert get_default_store() is get_default_store()

    def test_builds_every_curve(self):
        store = build_default_store()
        assert len(store) == len(REFERENCES)

    def test_every_curve_is_sorted(self, store):
        for curve in store.curves():
            values = [p.value for p in curve.reference_points]
            assert values == sorted(values)

    def test_every_service_has_info(self, store):
        assert set(store.service_names()) <= set(SERVICE_INFO)

    def test_authored_points_never_need_support(self, store):
        for curve in store.curves():
            assert not any(p.contact_support for p in curve.reference_points)

    def test_authored_requests_do_not_exceed_limits(self, store):
        for curve in store.curves():
            for p in curve.reference_points:
                assert p.cpu.request <= p.cpu.limit
                assert p.memory_gb.request <= p.memory_gb.limit
                assert p.ephemeral_gb.request <= p.ephemeral_gb.limit

    def test_code_intel_services_are_calibrated(self, store):
        assert CODE_INTEL_SERVICES <= set(store.service_names())

    def test_authored_curves_cite_no_spreadsheet_rows(self):
        for curve in AUTHORED_CURVES:
            notes = {p.note for p in curve.reference_points}
            assert notes <= {"speculative", "projection"}, curve.service_name

    def test_authored_curves_are_evaluated(self):
        assert all(curve in REFERENCES for curve in AUTHORED_CURVES)

    def test_defaults_cover_both_deployment_types(self):
        assert set(DEFAULTS) == set(DeploymentType)

    def test_zoekt_pod_group(self, store):
        (group,) = store.pod_groups()
        assert set(group.services) == {"zoekt-webserver", "zoekt-indexserver"}

    def test_gitserver_memory_curve_comes_first(self, store):
        factors = [c.scaling_factor for c in store.curves_for("gitserver")]
        assert factors == [ScalingFactor.LARGEST_REPO_SIZE, ScalingFactor.AVERAGE_REPOSITORIES]
