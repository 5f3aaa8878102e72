"""Unit strings for Kubernetes and docker-compose resource fields."""

from __future__ import annotations

import math

from resource_estimator.models import ServiceEnvelope
from resource_estimator.rounding import resource_round


def add_unit(value: float, unit: str, *, milli: str = "M") -> str:
    """Format a quantity: values below 1 in thousandths (``250M``), others truncated (``2G``).

    CPU passes ``milli="m"`` so that fractions render as millicores.
    """
    if value < 1:
        return f"{math.trunc(value * 1000)}{milli}"
    return f"{math.trunc(value)}{unit}"


def format_number(value: float) -> str:
    """Shortest decimal form: ``2.0`` → ``2``, ``0.25`` → ``0.25``."""
    return f"{value:g}"


def per_replica(total: float, replicas: int) -> float:
    return total / max(replicas, 1)


def storage_size(envelope: ServiceEnvelope) -> str:
    """Persistent volume claim size for one replica."""
    return add_unit(resource_round(per_replica(envelope.storage_gb, envelope.replicas)), "Gi")


def ephemeral_request(envelope: ServiceEnvelope) -> str:
    return add_unit(
        resource_round(math.floor(per_replica(envelope.ephemeral_gb.request, envelope.replicas))),
        "G",
    )


def ephemeral_limit(envelope: ServiceEnvelope) -> str:
    return add_unit(resource_round(per_replica(envelope.ephemeral_gb.limit, envelope.replicas)), "G")
