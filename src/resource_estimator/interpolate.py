"""Piecewise-linear interpolation over a curve's reference points.

Queries above the largest calibrated value are never extrapolated: the largest
point is returned unchanged and flagged ``contact_support``.
"""

from __future__ import annotations

from resource_estimator.models import ReferencePoint, ResourcePair, ServiceCurve, ServiceEnvelope
from resource_estimator.rounding import round_half_away


def find_bracket(
    points: tuple[ReferencePoint, ...], value: float
) -> tuple[ReferencePoint, ReferencePoint] | None:
    """Return ``(a, b)`` where ``b`` is the first point with ``b.value >= value``.

    ``a`` is the point before ``b``, or ``b`` itself when ``b`` is the first
    point. Returns None when every point is below ``value``.
    """
    for i, point in enumerate(points):
        if point.value >= value:
            return (points[i - 1] if i > 0 else point), point
    return None


def _lerp(low: float, high: float, t: float) -> float:
    if t == 1:
        return high
    return low + (high - low) * t


def _lerp_pair(low: ResourcePair, high: ResourcePair, t: float) -> ResourcePair:
    return ResourcePair(
        request=_lerp(low.request, high.request, t),
        limit=_lerp(low.limit, high.limit, t),
    )


def _envelope_of(point: ReferencePoint, *, contact_support: bool) -> ServiceEnvelope:
    return ServiceEnvelope(
        replicas=point.replicas,
        cpu=point.cpu,
        memory_gb=point.memory_gb,
        ephemeral_gb=point.ephemeral_gb,
        storage_gb=point.storage_gb,
        contact_support=contact_support,
    )


def interpolate(curve: ServiceCurve, value: float) -> ServiceEnvelope:
    """Compute the partial envelope a curve prescribes at ``value``.

    Resource fields stay unrounded; see ``rounding.quantize``. Storage is taken
    from the lower bracket point since it is computed by per-service formulas
    rather than interpolated.
    """
    bracket = find_bracket(curve.reference_points, value)
    if bracket is None:
        # There is not a large enough reference point.
        return _envelope_of(curve.reference_points[-1], contact_support=True)

    a, b = bracket
    span = b.value - a.value
    t = (value - a.value) / (span or 1)

    return ServiceEnvelope(
        replicas=a.replicas + int(round_half_away((b.replicas - a.replicas) * t)),
        cpu=_lerp_pair(a.cpu, b.cpu, t),
        memory_gb=_lerp_pair(a.memory_gb, b.memory_gb, t),
        ephemeral_gb=_lerp_pair(a.ephemeral_gb, b.ephemeral_gb, t),
        storage_gb=a.storage_gb,
    )
