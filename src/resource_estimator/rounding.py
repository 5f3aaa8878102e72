"""Quantization of interpolated resources to deployable units."""

from __future__ import annotations

import math

from resource_estimator.models import ResourcePair, ServiceEnvelope


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero (``round`` would use banker's rounding)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def resource_round(value: float) -> float:
    """Round values > 1 to the nearest whole number, and values <= 1 to the nearest quarter.

    This ensures 0.25 CPU doesn't get rounded to zero, and 0.517829457364341 CPU
    gets rounded to 0.5.
    """
    if value > 1:
        return round_half_away(value)
    return round_half_away(value * 4) / 4


def _round_pair(pair: ResourcePair) -> ResourcePair:
    return ResourcePair(request=resource_round(pair.request), limit=resource_round(pair.limit))


def quantize(envelope: ServiceEnvelope) -> ServiceEnvelope:
    """Round CPU, memory, ephemeral storage, and storage. Replicas are already whole."""
    return envelope.model_copy(
        update={
            "cpu": _round_pair(envelope.cpu),
            "memory_gb": _round_pair(envelope.memory_gb),
            "ephemeral_gb": _round_pair(envelope.ephemeral_gb),
            "storage_gb": resource_round(envelope.storage_gb),
        }
    )
