"""CLI settings.

Defaults for the estimate form and the CLI itself, overridable through
``RESOURCE_ESTIMATOR_*`` environment variables. The engine never reads these;
the CLI turns them into option defaults and an EstimateInput.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from resource_estimator.types import DeploymentType


class EstimatorSettings(BaseSettings):
    """Settings for the resource-estimator CLI."""

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")
    deployment_type: DeploymentType = Field(
        default=DeploymentType.KUBERNETES, description="Deployment type to size for"
    )
    output_dir: Path = Field(
        default=Path(".resource-estimator"), description="Base directory for written estimates"
    )

    # Form defaults
    users: int = Field(default=300, description="Total user count")
    engagement_rate: int = Field(default=100, description="Percentage of users that are engaged")
    repositories: int = Field(default=5000, description="Total repository count")
    large_monorepos: int = Field(default=5, description="Number of large monorepos")
    total_repo_size_gb: int = Field(default=500, description="Total size of all repositories")
    largest_repo_size_gb: int = Field(default=5, description="Size of the largest repository")
    largest_index_size_gb: int = Field(default=3, description="Size of the largest code-intel index")
    code_insight_enabled: bool = Field(default=True, description="Whether code insight is enabled")
    code_intel_enabled: bool = Field(default=True, description="Whether precise code intel is enabled")

    model_config = {"env_prefix": "RESOURCE_ESTIMATOR_"}
