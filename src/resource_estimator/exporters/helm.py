"""Helm exporter.

Renders a values override with per-service replica counts, resource requests
and limits, and persistent volume sizes. Ephemeral storage and volume sizes are
per replica.
"""

from __future__ import annotations

from typing import Any

import yaml

from resource_estimator.models import EstimateResult, RenderedArtifact, ServiceEnvelope
from resource_estimator.units import add_unit, ephemeral_limit, ephemeral_request, storage_size


class HelmExporter:
    format: str = "helm"
    name: str = "Helm values"

    def render(self, result: EstimateResult) -> RenderedArtifact:
        values = {
            service: self._service_values(envelope)
            for service, envelope in result.services.items()
        }
        return RenderedArtifact(
            format=self.format,
            filename="values.yaml",
            content=yaml.safe_dump(values, default_flow_style=False, sort_keys=True),
        )

    @staticmethod
    def _service_values(envelope: ServiceEnvelope) -> dict[str, Any]:
        requests: dict[str, str] = {
            "cpu": add_unit(envelope.cpu.request, "", milli="m"),
            "memory": add_unit(envelope.memory_gb.request, "G"),
        }
        limits: dict[str, str] = {
            "cpu": add_unit(envelope.cpu.limit, "", milli="m"),
            "memory": add_unit(envelope.memory_gb.limit, "G"),
        }
        if envelope.ephemeral_gb.limit > 0:
            requests["ephemeral-storage"] = ephemeral_request(envelope)
            limits["ephemeral-storage"] = ephemeral_limit(envelope)

        values: dict[str, Any] = {"resources": {"requests": requests, "limits": limits}}
        if envelope.replicas:
            values["replicaCount"] = envelope.replicas
        if envelope.storage_gb > 0:
            values["storageSize"] = storage_size(envelope)
        return values
