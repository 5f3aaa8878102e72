"""Closed enumerations shared by the calibration store, engine, and exporters."""

from enum import StrEnum


class ScalingFactor(StrEnum):
    ENGAGED_USERS = "engaged_users"
    AVERAGE_REPOSITORIES = "average_repositories"
    TOTAL_REPO_SIZE = "total_repo_size"
    LARGE_MONOREPOS = "large_monorepos"
    LARGEST_REPO_SIZE = "largest_repo_size"
    LARGEST_INDEX_SIZE = "largest_index_size"
    USER_REPO_SUM_RATIO = "user_repo_sum_ratio"


class DeploymentType(StrEnum):
    KUBERNETES = "kubernetes"
    DOCKER_COMPOSE = "docker-compose"


class UnknownDeploymentTypeError(ValueError):
    def __init__(self, name: str) -> None:
        available = ", ".join(d.value for d in DeploymentType)
        super().__init__(f"Unknown deployment type '{name}'. Available: {available}")


def parse_deployment_type(name: str) -> DeploymentType:
    """Parse a deployment type name.

    ``"type"`` is the unselected placeholder of the estimator form and resolves
    to Kubernetes.
    """
    token = name.strip().lower()
    if token in ("", "type"):
        return DeploymentType.KUBERNETES
    try:
        return DeploymentType(token)
    except ValueError:
        raise UnknownDeploymentTypeError(name) from None
