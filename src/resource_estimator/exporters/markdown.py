"""Markdown exporter: the human-readable estimate summary and service table."""

from __future__ import annotations

from resource_estimator.models import EstimateResult, RenderedArtifact, ServiceEnvelope
from resource_estimator.store import CalibrationStore, get_default_store
from resource_estimator.types import DeploymentType
from resource_estimator.units import (
    add_unit,
    ephemeral_limit,
    ephemeral_request,
    format_number,
    storage_size,
)

NON_DEFAULT = "ꜝ"

_TABLE_HEADER = (
    "| Service | Replica | CPU requests | CPU limits | MEM requests | MEM limits "
    "| EPH requests | EPH limits | Storage |\n"
    "|-------|:-------:|:-------:|:-------:|:-------:|:-------:|:-------:|:-------:|:-------:|\n"
)

# Rows for services beyond their calibrated range
_UNAVAILABLE_CELLS = ["n/a", "n/a", "n/a", "n/a", "n/a", "-", "-", "-"]


class MarkdownExporter:
    format: str = "markdown"
    name: str = "Markdown summary"

    def __init__(self, store: CalibrationStore | None = None) -> None:
        self._store = store if store is not None else get_default_store()

    def render(self, result: EstimateResult) -> RenderedArtifact:
        lines = ["### Estimate summary", ""]
        if result.contact_support:
            lines.extend(self._unavailable_summary(result))
        else:
            lines.extend(self._summary(result))
        lines.append("")
        lines.append(_TABLE_HEADER.rstrip("\n"))
        lines.extend(self._row(name, result) for name in sorted(result.services))
        lines.append("")
        lines.append(f"> {NON_DEFAULT}<small> This is a non-default value.</small>")
        lines.append("")
        return RenderedArtifact(format=self.format, filename="estimate.md", content="\n".join(lines))

    def _unavailable_summary(self, result: EstimateResult) -> list[str]:
        lines = [
            "**Estimation is currently not available for your instance size. "
            "Please contact support for further assistance.**",
            "",
            "* **Estimated vCPUs:** not available",
            "* **Estimated Memory:** not available",
            "* **Estimated Minimum Volume Size:** not available",
        ]
        lines.extend(
            f"* {self._store.info(name).label} exceeds its calibrated range"
            for name in result.services_needing_support()
        )
        return lines

    def _summary(self, result: EstimateResult) -> list[str]:
        totals = result.totals
        lines = [
            f"* **Deployment Type:** {result.deployment_type}",
            f"* **Estimated vCPUs:** {totals.cpu_cores}",
            f"* **Estimated Memory:** {totals.memory_size_gb}g",
            f"* **Estimated Minimum Volume Size:** {totals.storage_size_gb}g",
            "",
            "<small>**Note:** The estimated values include default values for services "
            "that are not listed in the estimator. The defaults for those services "
            "work well with instances of all sizes.</small>",
        ]
        if result.suggest_shared_resources:
            match result.deployment_type:
                case DeploymentType.DOCKER_COMPOSE:
                    how = (
                        "apply the limits shown below normally, but only provision "
                        "a machine with the resources shown above"
                    )
                case DeploymentType.KUBERNETES:
                    how = (
                        'apply the "limits" shown below normally and remove or reduce '
                        'the "requests" for each service'
                    )
            lines.extend(
                [
                    "* <details><summary>**IMPORTANT:** Cost-saving option to reduce "
                    "resource consumption is available</summary><br><blockquote>",
                    "  <p>You may choose to use _shared resources_ to reduce the costs "
                    "of your deployment:</p>",
                    "  <ul>",
                    f"  <li>**Estimated total _shared_ CPUs:** {totals.shared_cpu_cores}</li>",
                    f"  <li>**Estimated total _shared_ memory:** "
                    f"{totals.shared_memory_size_gb}g</li>",
                    "  </ul><br>",
                    "  <p>**What this means:** Not every service can run at peak load at "
                    "the same time, which may show up as slow searches while indexing "
                    "jobs are running.</p>",
                    f"  <p>To use shared resources, {how}.</p>",
                    "  </blockquote></details>",
                ]
            )
        return lines

    def _row(self, service: str, result: EstimateResult) -> str:
        envelope = result.services[service]
        info = self._store.info(service)
        default = self._store.default_for(service, result.deployment_type)
        match result.deployment_type:
            case DeploymentType.DOCKER_COMPOSE:
                name = f"**{info.compose_name}**"
                values = self._compose_cells(envelope)
            case DeploymentType.KUBERNETES:
                name = f"**{info.label}**</br><small>(pod: {info.pod_name})</small>"
                values = self._kubernetes_cells(envelope, default)
        if envelope.contact_support:
            values = _UNAVAILABLE_CELLS
        return "| " + " | ".join([name, *values]) + " |"

    @staticmethod
    def _compose_cells(envelope: ServiceEnvelope) -> list[str]:
        # One container carries every replica's share
        ephemeral = "-"
        if envelope.ephemeral_gb.limit > 0:
            ephemeral = f"{format_number(envelope.ephemeral_gb.limit)}G{NON_DEFAULT}"
        storage = "-"
        if envelope.storage_gb > 0:
            storage = f"{format_number(envelope.storage_gb)}G{NON_DEFAULT}"
        return [
            "1",
            "-",
            format_number(envelope.cpu.limit * envelope.replicas),
            "-",
            f"{format_number(envelope.memory_gb.limit * envelope.replicas)}g",
            "-",
            ephemeral,
            storage,
        ]

    @staticmethod
    def _kubernetes_cells(envelope: ServiceEnvelope, default: ServiceEnvelope) -> list[str]:
        def mark(text: str, changed: bool) -> str:
            return text + NON_DEFAULT if changed else text

        ephemeral_req = ephemeral_lim = "-"
        if envelope.ephemeral_gb.limit > 0:
            ephemeral_req = ephemeral_request(envelope)
            ephemeral_lim = ephemeral_limit(envelope) + NON_DEFAULT
        storage = "-"
        if envelope.storage_gb > 0:
            storage = storage_size(envelope) + NON_DEFAULT
        return [
            mark(str(envelope.replicas), envelope.replicas != default.replicas),
            mark(format_number(envelope.cpu.request), envelope.cpu.request != default.cpu.request),
            mark(format_number(envelope.cpu.limit), envelope.cpu.limit != default.cpu.limit),
            mark(
                add_unit(envelope.memory_gb.request, "G"),
                envelope.memory_gb.request != default.memory_gb.request,
            ),
            mark(
                add_unit(envelope.memory_gb.limit, "G"),
                envelope.memory_gb.limit != default.memory_gb.limit,
            ),
            ephemeral_req,
            ephemeral_lim,
            storage,
        ]
