"""Pod Replica Synchronizer — services sharing a pod report the same replica count."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from resource_estimator.models import PodGroup, ServiceEnvelope


def synchronize_pods(
    services: Mapping[str, ServiceEnvelope],
    pod_groups: Iterable[PodGroup],
) -> dict[str, ServiceEnvelope]:
    """Raise every member of each pod group to the group's largest replica count.

    Members absent from ``services`` (e.g. disabled features) are skipped.
    Returns a new mapping; ``services`` is left untouched.
    """
    synced = dict(services)
    for group in pod_groups:
        members = [name for name in group.services if name in synced]
        if not members:
            continue
        max_replicas = max(synced[name].replicas for name in members)
        for name in members:
            if synced[name].replicas != max_replicas:
                synced[name] = synced[name].model_copy(update={"replicas": max_replicas})
    return synced
