"""Envelope Combiner — folds the partial envelopes of one service into its final envelope.

Each field group (replicas, CPU pair, memory pair, ephemeral pair, storage) is
owned by the first curve that sets it. Later curves only fill groups that are
still empty, so a replica curve and a monorepo-driven memory curve never fight
over the same field.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import Any

from resource_estimator.models import ServiceEnvelope


def combine(accumulator: ServiceEnvelope, partial: ServiceEnvelope) -> ServiceEnvelope:
    """Return a new envelope with ``partial`` merged under first-write-wins rules."""
    update: dict[str, Any] = {
        "contact_support": accumulator.contact_support or partial.contact_support,
    }
    if accumulator.replicas == 0:
        update["replicas"] = partial.replicas
    if accumulator.cpu.is_unset:
        update["cpu"] = partial.cpu
    if accumulator.memory_gb.is_unset:
        update["memory_gb"] = partial.memory_gb
    # Curves without ephemeral storage semantics never declare a limit
    if partial.ephemeral_gb.limit > 0 and accumulator.ephemeral_gb.is_unset:
        update["ephemeral_gb"] = partial.ephemeral_gb
    if partial.storage_gb > 0 and accumulator.storage_gb == 0:
        update["storage_gb"] = partial.storage_gb
    return accumulator.model_copy(update=update)


def combine_all(partials: Iterable[ServiceEnvelope]) -> ServiceEnvelope:
    """Left fold of ``combine`` over partials in curve declaration order."""
    return functools.reduce(combine, partials, ServiceEnvelope())
