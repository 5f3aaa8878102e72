"""Typer CLI for resource-estimator.

Commands:
  estimate          Estimate resources for an instance and render or write the artifacts
  list-services     List services with calibration curves
  describe-service  Show the reference points of every curve for a service
"""

from __future__ import annotations

import json
import logging
from pathlib import Path  # noqa: TC003 (Typer evaluates type hints at runtime)
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from resource_estimator.estimator import Estimator
from resource_estimator.exporters import UnknownFormatError, discover_exporters, get_exporter
from resource_estimator.models import EstimateInput, EstimateResult
from resource_estimator.settings import EstimatorSettings
from resource_estimator.store import UnknownServiceError, get_default_store
from resource_estimator.types import UnknownDeploymentTypeError, parse_deployment_type

app = typer.Typer(
    name="resource-estimator",
    help="Resource estimator for self-hosted code search deployments",
    no_args_is_help=True,
)
console = Console()


def _load_settings() -> EstimatorSettings:
    settings = EstimatorSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


def _build_input(settings: EstimatorSettings, **options: object) -> EstimateInput:
    """Merge CLI options over settings defaults. ``None`` means not given."""
    values = {
        key: getattr(settings, key) if value is None else value for key, value in options.items()
    }
    return EstimateInput(**values)


def _print_summary(result: EstimateResult) -> None:
    store = get_default_store()
    if result.contact_support:
        console.print("[red]Estimation is not available for this instance size.[/red]")
        for name in result.services_needing_support():
            console.print(f"  [red]✗[/red] {store.info(name).label} exceeds its calibrated range")
        return

    totals = result.totals
    console.print(f"[bold]Deployment type:[/bold] {result.deployment_type}")
    console.print(
        f"Engaged users: {result.engaged_users}  "
        f"Average repositories: {result.average_repositories}"
    )
    console.print(
        f"[bold]Estimated vCPUs:[/bold] {totals.cpu_cores}  "
        f"[bold]Memory:[/bold] {totals.memory_size_gb}g  "
        f"[bold]Volume size:[/bold] {totals.storage_size_gb}g"
    )
    if result.suggest_shared_resources:
        console.print(
            f"[yellow]Shared resources possible:[/yellow] "
            f"{totals.shared_cpu_cores} vCPUs, {totals.shared_memory_size_gb}g memory"
        )
    console.print()

    table = Table(title="Services")
    table.add_column("Service", style="cyan")
    table.add_column("Replicas", justify="right")
    table.add_column("CPU req/lim", style="green")
    table.add_column("Memory GB req/lim", style="green")
    table.add_column("Ephemeral GB req/lim")
    table.add_column("Storage GB", justify="right")
    for name in sorted(result.services):
        env = result.services[name]
        table.add_row(
            store.info(name).label,
            str(env.replicas),
            f"{env.cpu.request:g}/{env.cpu.limit:g}",
            f"{env.memory_gb.request:g}/{env.memory_gb.limit:g}",
            f"{env.ephemeral_gb.request:g}/{env.ephemeral_gb.limit:g}"
            if env.ephemeral_gb.limit
            else "-",
            f"{env.storage_gb:g}" if env.storage_gb else "-",
        )
    console.print(table)


def _write_artifacts(result: EstimateResult, target: Path) -> None:
    from whenever import Instant

    target.mkdir(parents=True, exist_ok=True)
    (target / "estimate.json").write_text(result.model_dump_json(indent=2))

    files = ["estimate.json"]
    for exporter in discover_exporters():
        artifact = exporter.render(result)
        (target / artifact.filename).write_text(artifact.content)
        files.append(artifact.filename)

    manifest = {
        "generated_at": str(Instant.now()),
        "deployment_type": str(result.deployment_type),
        "contact_support": result.contact_support,
        "files": files,
    }
    (target / "manifest.json").write_text(json.dumps(manifest, indent=2) + "\n")


@app.command()
def estimate(
    users: Annotated[int | None, typer.Option("--users", "-u", help="Total user count")] = None,
    engagement_rate: Annotated[
        int | None, typer.Option("--engagement-rate", help="Percentage of engaged users")
    ] = None,
    repositories: Annotated[
        int | None, typer.Option("--repositories", "-r", help="Total repository count")
    ] = None,
    large_monorepos: Annotated[
        int | None, typer.Option("--large-monorepos", help="Number of large monorepos")
    ] = None,
    total_repo_size_gb: Annotated[
        int | None, typer.Option("--total-repo-size", help="Total repository size in GB")
    ] = None,
    largest_repo_size_gb: Annotated[
        int | None, typer.Option("--largest-repo-size", help="Largest repository size in GB")
    ] = None,
    largest_index_size_gb: Annotated[
        int | None, typer.Option("--largest-index-size", help="Largest code-intel index in GB")
    ] = None,
    code_insight: Annotated[
        bool | None, typer.Option("--code-insight/--no-code-insight", help="Code insight enabled")
    ] = None,
    code_intel: Annotated[
        bool | None, typer.Option("--code-intel/--no-code-intel", help="Precise code intel enabled")
    ] = None,
    deployment: Annotated[
        str | None,
        typer.Option("--deployment", "-d", help="Deployment type: kubernetes or docker-compose"),
    ] = None,
    clamp: Annotated[
        bool, typer.Option("--clamp", help="Clamp inputs to their supported ranges")
    ] = False,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Estimate name (stored under the output directory)"),
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output", help="Explicit output directory (overrides --name)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, or an exporter format"),
    ] = "text",
) -> None:
    """Estimate resources for an instance."""
    settings = _load_settings()

    try:
        deployment_type = (
            parse_deployment_type(deployment) if deployment is not None else settings.deployment_type
        )
    except UnknownDeploymentTypeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    estimate_input = _build_input(
        settings,
        users=users,
        engagement_rate=engagement_rate,
        repositories=repositories,
        large_monorepos=large_monorepos,
        total_repo_size_gb=total_repo_size_gb,
        largest_repo_size_gb=largest_repo_size_gb,
        largest_index_size_gb=largest_index_size_gb,
        code_insight_enabled=code_insight,
        code_intel_enabled=code_intel,
        deployment_type=deployment_type,
    )
    if clamp:
        estimate_input = estimate_input.clamped()

    result = Estimator().estimate(estimate_input)

    if name is not None or output_dir is not None:
        target = output_dir if output_dir else settings.output_dir / name
        _write_artifacts(result, target)
        console.print(f"[green]Artifacts written to {target}[/green]")
        if result.contact_support:
            console.print("[yellow]Some services exceed their calibrated range[/yellow]")
        return

    match format:
        case "text":
            _print_summary(result)
        case "json":
            console.print_json(result.model_dump_json())
        case _:
            try:
                exporter = get_exporter(format)
            except UnknownFormatError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(1) from None
            # Raw output so the artifact can be redirected to a file
            typer.echo(exporter.render(result).content, nl=False)


@app.command("list-services")
def list_services() -> None:
    """List services with calibration curves."""
    _load_settings()
    store = get_default_store()

    table = Table(title="Calibrated Services")
    table.add_column("Service", style="cyan")
    table.add_column("Label")
    table.add_column("Pod")
    table.add_column("Curves", justify="right")
    table.add_column("Scaling Factors", style="green")

    for service in store.service_names():
        curves = store.curves_for(service)
        info = store.info(service)
        table.add_row(
            service,
            info.label,
            info.pod_name,
            str(len(curves)),
            ", ".join(str(c.scaling_factor) for c in curves),
        )

    console.print(table)


@app.command("describe-service")
def describe_service(
    service: Annotated[str, typer.Argument(help="Service name")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Show the reference points of every curve for a service."""
    _load_settings()
    store = get_default_store()

    try:
        curves = store.curves_for(service)
    except UnknownServiceError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    if format == "json":
        console.print_json(json.dumps([c.model_dump(mode="json") for c in curves]))
        return

    info = store.info(service)
    console.print(f"[bold]{info.label}[/bold] — pod {info.pod_name}, compose {info.compose_name}")
    console.print()

    for curve in curves:
        table = Table(title=f"By {curve.scaling_factor}")
        table.add_column("Value", style="cyan", justify="right")
        table.add_column("Replicas", justify="right")
        table.add_column("CPU req/lim", style="green")
        table.add_column("Memory GB req/lim", style="green")
        table.add_column("Ephemeral GB req/lim")
        table.add_column("Note")
        for point in curve.reference_points:
            table.add_row(
                f"{point.value:g}",
                str(point.replicas) if point.replicas else "-",
                "-" if point.cpu.is_unset else f"{point.cpu.request:g}/{point.cpu.limit:g}",
                "-"
                if point.memory_gb.is_unset
                else f"{point.memory_gb.request:g}/{point.memory_gb.limit:g}",
                "-"
                if point.ephemeral_gb.is_unset
                else f"{point.ephemeral_gb.request:g}/{point.ephemeral_gb.limit:g}",
                point.note,
            )
        console.print(table)
        console.print()
