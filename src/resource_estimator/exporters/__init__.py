"""Exporter protocol, built-in exporters, and plugin discovery.

Exporters format an EstimateResult; they never recompute its numbers.
Third-party exporters register under the ``resource_estimator.exporters``
entry point group.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resource_estimator.models import EstimateResult, RenderedArtifact

EXPORTER_GROUP = "resource_estimator.exporters"


@runtime_checkable
class Exporter(Protocol):
    format: str
    name: str

    def render(self, result: EstimateResult) -> RenderedArtifact: ...


class UnknownFormatError(ValueError):
    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(f"Unknown format '{name}'. Available: {', '.join(available)}")


def builtin_exporters() -> list[Exporter]:
    from resource_estimator.exporters.compose import ComposeExporter
    from resource_estimator.exporters.helm import HelmExporter
    from resource_estimator.exporters.markdown import MarkdownExporter

    return [MarkdownExporter(), HelmExporter(), ComposeExporter()]


def discover_exporters() -> list[Exporter]:
    """Built-in exporters followed by any registered via entry points.

    A plugin whose format is already taken is skipped.
    """
    exporters = builtin_exporters()
    seen = {e.format for e in exporters}
    for ep in entry_points(group=EXPORTER_GROUP):
        obj = ep.load()
        exporter = obj() if callable(obj) else obj
        if not isinstance(exporter, Exporter):
            raise TypeError(f"{ep.name} does not implement Exporter")
        if exporter.format in seen:
            continue
        seen.add(exporter.format)
        exporters.append(exporter)
    return exporters


def get_exporter(format: str) -> Exporter:
    exporters = discover_exporters()
    for exporter in exporters:
        if exporter.format == format:
            return exporter
    raise UnknownFormatError(format, [e.format for e in exporters])
