"""Aggregator — deployment-wide totals from per-service envelopes and baseline defaults."""

from __future__ import annotations

from collections.abc import Mapping

from resource_estimator.models import EstimateTotals, ServiceEnvelope

# Share of the request/limit gap added on top of requests. Requests alone
# describe no peak load; all limits are rarely reached at the same time.
LIMIT_GAP_SHARE = 0.5


def blend(requests: float, limits: float) -> float:
    return requests + (limits - requests) * LIMIT_GAP_SHARE


def aggregate(
    services: Mapping[str, ServiceEnvelope],
    defaults: Mapping[str, ServiceEnvelope],
) -> EstimateTotals:
    """Sum computed services plus the defaults of services that were not computed.

    A service is counted once; its computed envelope takes precedence over its
    default. Services flagged ``contact_support`` still contribute their
    ceiling values.
    """
    counted: dict[str, ServiceEnvelope] = dict(services)
    for name, envelope in defaults.items():
        counted.setdefault(name, envelope)

    cpu_requests = cpu_limits = memory_requests = memory_limits = storage = 0.0
    largest_cpu_limit = largest_memory_limit = 0.0
    for envelope in counted.values():
        cpu_requests += envelope.cpu.request
        cpu_limits += envelope.cpu.limit
        memory_requests += envelope.memory_gb.request
        memory_limits += envelope.memory_gb.limit
        storage += envelope.storage_gb
        largest_cpu_limit = max(largest_cpu_limit, envelope.cpu.limit)
        largest_memory_limit = max(largest_memory_limit, envelope.memory_gb.limit)

    return EstimateTotals(
        cpu_requests=cpu_requests,
        cpu_limits=cpu_limits,
        memory_requests_gb=memory_requests,
        memory_limits_gb=memory_limits,
        total_cpu=blend(cpu_requests, cpu_limits),
        total_memory_gb=blend(memory_requests, memory_limits),
        total_storage_gb=storage,
        shared_cpu=largest_cpu_limit,
        shared_memory_gb=largest_memory_limit,
    )
