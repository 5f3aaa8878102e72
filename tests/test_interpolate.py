"""Unit tests for piecewise-linear interpolation."""

from __future__ import annotations

from resource_estimator.interpolate import find_bracket, interpolate
from resource_estimator.models import ReferencePoint, ResourcePair, ServiceCurve
from resource_estimator.types import ScalingFactor


def _curve(*points: ReferencePoint) -> ServiceCurve:
    return ServiceCurve(
        service_name="svc",
        scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
        reference_points=points,
    )


class TestFindBracket:
    def test_between_points(self, linear_curve):
        a, b = find_bracket(linear_curve.reference_points, 50)
        assert (a.value, b.value) == (0, 100)

    def test_on_point_brackets_from_previous(self, linear_curve):
        a, b = find_bracket(linear_curve.reference_points, 100)
        assert (a.value, b.value) == (0, 100)

    def test_below_first_point(self, linear_curve):
        a, b = find_bracket(linear_curve.reference_points, -5)
        assert a is b
        assert a.value == 0

    def test_above_last_point(self, linear_curve):
        assert find_bracket(linear_curve.reference_points, 101) is None


class TestInterpolate:
    def test_midpoint(self, linear_curve):
        env = interpolate(linear_curve, 50)
        assert env.cpu == ResourcePair(request=3, limit=6)
        assert env.replicas == 2
        assert not env.contact_support

    def test_upper_boundary_is_exact(self, linear_curve):
        env = interpolate(linear_curve, 100)
        assert env.cpu == ResourcePair(request=5, limit=10)
        assert env.replicas == 3
        assert not env.contact_support

    def test_lower_boundary_is_exact(self, linear_curve):
        env = interpolate(linear_curve, 0)
        assert env.cpu == ResourcePair(request=1, limit=2)
        assert env.replicas == 1

    def test_below_minimum_uses_first_point(self, linear_curve):
        env = interpolate(linear_curve, -40)
        assert env.cpu == ResourcePair(request=1, limit=2)
        assert env.replicas == 1
        assert not env.contact_support

    def test_replicas_round_half_away_from_zero(self, linear_curve):
        # 1 + 2 * 0.25 = 1.5 → 2
        assert interpolate(linear_curve, 25).replicas == 2
        # 1 + 2 * 0.2 = 1.4 → 1
        assert interpolate(linear_curve, 20).replicas == 1

    def test_unset_fields_stay_unset(self, linear_curve):
        env = interpolate(linear_curve, 50)
        assert env.memory_gb.is_unset
        assert env.ephemeral_gb.is_unset

    def test_single_point_curve(self):
        curve = _curve(ReferencePoint(value=10, replicas=2, cpu=ResourcePair(request=1, limit=1)))
        assert interpolate(curve, 3).replicas == 2
        assert interpolate(curve, 10).cpu == ResourcePair(request=1, limit=1)
        assert interpolate(curve, 11).contact_support

    def test_storage_taken_from_lower_point(self):
        curve = _curve(
            ReferencePoint(value=0, storage_gb=10),
            ReferencePoint(value=10, storage_gb=20),
        )
        assert interpolate(curve, 5).storage_gb == 10


class TestExtrapolationCeiling:
    def test_above_top_returns_top_point_with_contact_support(self):
        curve = _curve(
            ReferencePoint(value=5, replicas=1, memory_gb=ResourcePair(request=4, limit=8)),
            ReferencePoint(
                value=50000,
                replicas=4,
                cpu=ResourcePair(request=6, limit=12),
                memory_gb=ResourcePair(request=80, limit=80),
            ),
        )
        env = interpolate(curve, 80000)
        assert env.contact_support
        assert env.replicas == 4
        assert env.cpu == ResourcePair(request=6, limit=12)
        assert env.memory_gb == ResourcePair(request=80, limit=80)

    def test_top_value_itself_needs_no_support(self):
        curve = _curve(ReferencePoint(value=0), ReferencePoint(value=50000, replicas=4))
        assert not interpolate(curve, 50000).contact_support
