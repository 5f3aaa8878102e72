"""Hypothesis strategies for generating estimator domain objects.

Curves drawn here use whole-number values so that interpolated fields compare
exactly against their bracketing points.
"""

from hypothesis import strategies as st

from resource_estimator.models import (
    EstimateInput,
    ReferencePoint,
    ResourcePair,
    ServiceCurve,
    ServiceEnvelope,
)
from resource_estimator.types import DeploymentType, ScalingFactor

# =============================================================================
# ENUMERATIONS
# =============================================================================

scaling_factors = st.sampled_from(list(ScalingFactor))
deployment_types = st.sampled_from(list(DeploymentType))

# =============================================================================
# RESOURCE STRATEGIES
# =============================================================================


@st.composite
def resource_pairs(draw, max_value: int = 256):
    """Request/limit pair with ``request <= limit``."""
    request = draw(st.integers(min_value=0, max_value=max_value))
    limit = draw(st.integers(min_value=request, max_value=max_value))
    return ResourcePair(request=float(request), limit=float(limit))


@st.composite
def service_envelopes(draw):
    return ServiceEnvelope(
        replicas=draw(st.integers(min_value=0, max_value=20)),
        cpu=draw(resource_pairs()),
        memory_gb=draw(resource_pairs()),
        ephemeral_gb=draw(resource_pairs()),
        storage_gb=float(draw(st.integers(min_value=0, max_value=5000))),
        contact_support=draw(st.booleans()),
    )


@st.composite
def service_maps(draw, min_size: int = 0):
    names = draw(
        st.lists(
            st.sampled_from(
                ["frontend", "gitserver", "searcher", "symbols", "pgsql", "redis-cache"]
            ),
            min_size=min_size,
            unique=True,
        )
    )
    return {name: draw(service_envelopes()) for name in names}


# =============================================================================
# CURVE STRATEGIES
# =============================================================================


@st.composite
def reference_points(draw, value: float):
    return ReferencePoint(
        value=value,
        replicas=draw(st.integers(min_value=0, max_value=20)),
        cpu=draw(resource_pairs()),
        memory_gb=draw(resource_pairs()),
        ephemeral_gb=draw(resource_pairs(max_value=2000)),
    )


@st.composite
def curves(draw, min_points: int = 1, max_points: int = 6):
    """A curve with distinct, ascending point values."""
    values = draw(
        st.lists(
            st.integers(min_value=0, max_value=100_000),
            min_size=min_points,
            max_size=max_points,
            unique=True,
        )
    )
    points = tuple(draw(reference_points(float(v))) for v in sorted(values))
    return ServiceCurve(
        service_name="svc",
        scaling_factor=draw(scaling_factors),
        reference_points=points,
    )


@st.composite
def monotone_curves(draw, min_points: int = 2, max_points: int = 6):
    """A curve whose every field is non-decreasing as the value grows."""
    values = sorted(
        draw(
            st.lists(
                st.integers(min_value=0, max_value=100_000),
                min_size=min_points,
                max_size=max_points,
                unique=True,
            )
        )
    )
    steps = st.integers(min_value=0, max_value=16)

    points = []
    replicas = cpu_req = cpu_lim = mem_req = mem_lim = 0
    for v in values:
        replicas += draw(steps)
        cpu_req += draw(steps)
        cpu_lim = max(cpu_lim, cpu_req) + draw(steps)
        mem_req += draw(steps)
        mem_lim = max(mem_lim, mem_req) + draw(steps)
        points.append(
            ReferencePoint(
                value=float(v),
                replicas=replicas,
                cpu=ResourcePair(request=float(cpu_req), limit=float(cpu_lim)),
                memory_gb=ResourcePair(request=float(mem_req), limit=float(mem_lim)),
            )
        )
    return ServiceCurve(
        service_name="svc",
        scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
        reference_points=tuple(points),
    )


# =============================================================================
# INPUT STRATEGIES
# =============================================================================


@st.composite
def estimate_inputs(draw):
    """Inputs spanning the supported ranges and somewhat beyond them."""
    return EstimateInput(
        users=draw(st.integers(min_value=0, max_value=40_000)),
        engagement_rate=draw(st.integers(min_value=0, max_value=100)),
        repositories=draw(st.integers(min_value=0, max_value=6_000_000)),
        large_monorepos=draw(st.integers(min_value=0, max_value=15)),
        total_repo_size_gb=draw(st.integers(min_value=0, max_value=8000)),
        largest_repo_size_gb=draw(st.integers(min_value=0, max_value=8000)),
        largest_index_size_gb=draw(st.integers(min_value=0, max_value=150)),
        code_insight_enabled=draw(st.booleans()),
        code_intel_enabled=draw(st.booleans()),
        deployment_type=draw(deployment_types),
    )
