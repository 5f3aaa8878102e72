"""CLI tests using Typer's CliRunner."""

from __future__ import annotations

import json

import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from resource_estimator import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep Rich tables from wrapping inside the runner's 80-column output."""
    monkeypatch.setattr(cli, "console", Console(width=200))


class TestEstimate:
    def test_text_summary(self):
        result = runner.invoke(cli.app, ["estimate"])
        assert result.exit_code == 0
        assert "Estimated vCPUs:" in result.output
        assert "Frontend" in result.output

    def test_json(self):
        result = runner.invoke(cli.app, ["estimate", "--format", "json", "--users", "1000"])
        assert result.exit_code == 0
        assert '"users": 1000' in result.output

    def test_helm_output_is_raw_yaml(self):
        result = runner.invoke(cli.app, ["estimate", "--format", "helm"])
        assert result.exit_code == 0
        values = yaml.safe_load(result.output)
        assert values["frontend"]["replicaCount"] == 3

    def test_compose_deployment(self):
        result = runner.invoke(
            cli.app, ["estimate", "--deployment", "docker-compose", "--format", "compose"]
        )
        assert result.exit_code == 0
        assert yaml.safe_load(result.output)["version"] == "2.4"

    def test_unknown_format(self):
        result = runner.invoke(cli.app, ["estimate", "--format", "bogus"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_unknown_deployment(self):
        result = runner.invoke(cli.app, ["estimate", "--deployment", "swarm"])
        assert result.exit_code == 1
        assert "Unknown deployment type" in result.output

    def test_out_of_range_reports_support(self):
        result = runner.invoke(cli.app, ["estimate", "--users", "30000"])
        assert result.exit_code == 0
        assert "not available" in result.output

    def test_clamp(self):
        result = runner.invoke(
            cli.app, ["estimate", "--users", "30000", "--no-code-insight", "--clamp"]
        )
        assert result.exit_code == 0
        assert "not available" not in result.output

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("RESOURCE_ESTIMATOR_USERS", "30000")
        result = runner.invoke(cli.app, ["estimate"])
        assert result.exit_code == 0
        assert "not available" in result.output

    def test_option_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("RESOURCE_ESTIMATOR_USERS", "30000")
        result = runner.invoke(cli.app, ["estimate", "--users", "300"])
        assert "not available" not in result.output

    def test_writes_artifacts(self, tmp_path):
        target = tmp_path / "estimate"
        result = runner.invoke(cli.app, ["estimate", "--output", str(target)])
        assert result.exit_code == 0

        manifest = json.loads((target / "manifest.json").read_text())
        assert manifest["deployment_type"] == "kubernetes"
        assert manifest["contact_support"] is False
        assert manifest["generated_at"]
        for filename in manifest["files"]:
            assert (target / filename).exists()
        assert {"estimate.json", "estimate.md", "values.yaml", "docker-compose.override.yaml"} <= set(
            manifest["files"]
        )

    def test_name_writes_under_output_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RESOURCE_ESTIMATOR_OUTPUT_DIR", str(tmp_path))
        result = runner.invoke(cli.app, ["estimate", "--name", "small"])
        assert result.exit_code == 0
        assert (tmp_path / "small" / "estimate.json").exists()


class TestListServices:
    def test_lists_calibrated_services(self):
        result = runner.invoke(cli.app, ["list-services"])
        assert result.exit_code == 0
        assert "gitserver" in result.output
        assert "largest_repo_size" in result.output


class TestDescribeService:
    def test_text(self):
        result = runner.invoke(cli.app, ["describe-service", "gitserver"])
        assert result.exit_code == 0
        assert "By largest_repo_size" in result.output
        assert "bare minimum" in result.output

    def test_json(self):
        result = runner.invoke(cli.app, ["describe-service", "pgsql", "--format", "json"])
        assert result.exit_code == 0
        curves = json.loads(result.output)
        assert curves[0]["service_name"] == "pgsql"

    def test_unknown_service(self):
        result = runner.invoke(cli.app, ["describe-service", "nope"])
        assert result.exit_code == 1
        assert "Unknown service" in result.output
