"""docker-compose exporter.

Compose runs one container per service, so each container gets the combined
CPU request and memory limit of all the replicas it stands in for.
"""

from __future__ import annotations

import yaml

from resource_estimator.models import EstimateResult, RenderedArtifact
from resource_estimator.store import CalibrationStore, get_default_store
from resource_estimator.units import add_unit

COMPOSE_VERSION = "2.4"


class ComposeExporter:
    format: str = "compose"
    name: str = "docker-compose override"

    def __init__(self, store: CalibrationStore | None = None) -> None:
        self._store = store if store is not None else get_default_store()

    def render(self, result: EstimateResult) -> RenderedArtifact:
        services: dict[str, dict[str, str]] = {}
        for service, envelope in result.services.items():
            compose_name = self._store.info(service).compose_name
            services[compose_name] = {
                "cpus": add_unit(envelope.cpu.request * envelope.replicas, "").lower(),
                "mem_limit": add_unit(envelope.memory_gb.limit * envelope.replicas, "g").lower(),
            }
        document = {"version": COMPOSE_VERSION, "services": services}
        return RenderedArtifact(
            format=self.format,
            filename="docker-compose.override.yaml",
            content=yaml.safe_dump(document, default_flow_style=False, sort_keys=True),
        )
