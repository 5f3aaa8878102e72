"""Calibration catalogue for the resource estimator.

Reference points come from a spreadsheet of known good deployment
configurations. Rows of that sheet are cited in each point's note; points marked
"projection" or "speculative" extend the sheet to the edges of the supported
input ranges. Curves listed in ``AUTHORED_CURVES`` have no rows in the sheet at
all, so every one of their points is marked that way. Points may be declared in
any order; the store sorts each curve once at construction.

The order of curves for one service is significant: the combiner keeps the
first non-zero value per field group, so an earlier curve owns the fields it
sets.
"""

from resource_estimator.models import (
    PodGroup,
    Range,
    ReferencePoint,
    ResourcePair,
    ServiceCurve,
    ServiceEnvelope,
    ServiceInfo,
)
from resource_estimator.types import DeploymentType, ScalingFactor

# Heuristic which pretends 1 large monorepo == N average repositories.
MONOREPO_FACTOR = 50

# Added to the engaged-user count when code insights run background queries.
CODE_INSIGHT_USERS = 1000

USERS_RANGE = Range(min=5, max=25000)
REPOSITORIES_RANGE = Range(min=5, max=5_000_000)
TOTAL_REPO_SIZE_RANGE = Range(min=1, max=5000)
LARGE_MONOREPOS_RANGE = Range(min=0, max=10)
LARGEST_REPO_SIZE_RANGE = Range(min=0, max=5000)
LARGEST_INDEX_SIZE_RANGE = Range(min=0, max=100)
AVERAGE_REPOSITORIES_RANGE = Range(
    min=REPOSITORIES_RANGE.min + LARGE_MONOREPOS_RANGE.min * MONOREPO_FACTOR,
    max=REPOSITORIES_RANGE.max + LARGE_MONOREPOS_RANGE.max * MONOREPO_FACTOR,
)
USER_REPO_SUM_RATIO_RANGE = Range(min=1, max=200)
ENGAGEMENT_RATE_RANGE = Range(min=5, max=100)

# EstimateInput field → supported range
INPUT_RANGES: dict[str, Range] = {
    "users": USERS_RANGE,
    "engagement_rate": ENGAGEMENT_RATE_RANGE,
    "repositories": REPOSITORIES_RANGE,
    "large_monorepos": LARGE_MONOREPOS_RANGE,
    "total_repo_size_gb": TOTAL_REPO_SIZE_RANGE,
    "largest_repo_size_gb": LARGEST_REPO_SIZE_RANGE,
    "largest_index_size_gb": LARGEST_INDEX_SIZE_RANGE,
}


def _r(request: float, limit: float) -> ResourcePair:
    return ResourcePair(request=request, limit=limit)


# =========================================================================
# Frontend
# =========================================================================

# Frontend scales based on the number of engaged users.
FRONTEND_BY_USERS = ServiceCurve(
    service_name="frontend",
    scaling_factor=ScalingFactor.ENGAGED_USERS,
    reference_points=(
        ReferencePoint(
            value=USERS_RANGE.max, replicas=9, cpu=_r(2, 2), memory_gb=_r(2, 4), note="projection"
        ),
        ReferencePoint(
            value=1750 + 1425 * 2, replicas=5, cpu=_r(2, 2), memory_gb=_r(2, 4), note="projection"
        ),
        ReferencePoint(
            value=1750 + 1425 * 1, replicas=4, cpu=_r(2, 2), memory_gb=_r(2, 4), note="projection"
        ),
        ReferencePoint(
            value=7000 * 0.25,
            replicas=3,
            cpu=_r(2, 2),
            memory_gb=_r(2, 4),
            note="1750 users, row 3 of spreadsheet",
        ),
        ReferencePoint(
            value=1300 * 0.25,
            replicas=3,
            cpu=_r(2, 2),
            memory_gb=_r(2, 4),
            note="325 users, row 2 of spreadsheet",
        ),
        ReferencePoint(
            value=USERS_RANGE.min, replicas=1, cpu=_r(2, 2), memory_gb=_r(2, 4), note="bare minimum"
        ),
    ),
)

# =========================================================================
# Gitserver
# =========================================================================

# Gitserver memory is driven by the largest repository it must serve (git
# operations on a monorepo hold large packfiles in memory). Declared before the
# replica curve so that it owns the memory pair.
GITSERVER_BY_LARGEST_REPO = ServiceCurve(
    service_name="gitserver",
    scaling_factor=ScalingFactor.LARGEST_REPO_SIZE,
    reference_points=(
        ReferencePoint(value=LARGEST_REPO_SIZE_RANGE.max, memory_gb=_r(64, 64), note="projection"),
        ReferencePoint(value=500, memory_gb=_r(32, 32), note="speculative"),
        ReferencePoint(value=50, memory_gb=_r(8, 16), note="speculative"),
        ReferencePoint(value=5, memory_gb=_r(4, 8), note="speculative"),
        ReferencePoint(value=LARGEST_REPO_SIZE_RANGE.min, memory_gb=_r(4, 8), note="speculative"),
    ),
)

# Gitserver replicas scale based on the number of average repositories.
GITSERVER_BY_REPOSITORIES = ServiceCurve(
    service_name="gitserver",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.max,
            replicas=5,
            cpu=_r(4, 8),
            memory_gb=_r(4, 8),
            note="projection",
        ),
        ReferencePoint(
            value=15000 + 13500, replicas=4, cpu=_r(4, 8), memory_gb=_r(4, 8), note="projection"
        ),
        ReferencePoint(
            value=15000,
            replicas=3,
            cpu=_r(4, 8),
            memory_gb=_r(4, 8),
            note="from row 3 of spreadsheet",
        ),
        ReferencePoint(
            value=1500,
            replicas=2,
            cpu=_r(4, 8),
            memory_gb=_r(4, 8),
            note="from row 4 of spreadsheet",
        ),
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.min,
            replicas=1,
            cpu=_r(4, 8),
            memory_gb=_r(4, 8),
            note="bare minimum",
        ),
    ),
)

# =========================================================================
# Searcher, symbols, and replacer
# =========================================================================

# Searcher replicas scale based on the number of average repositories, and its
# resources scale based on the size of repositories (i.e. when large monorepos
# are in the picture).
SEARCHER_BY_REPOSITORIES = ServiceCurve(
    service_name="searcher",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.max, replicas=12, note="projection"),
        ReferencePoint(value=15000 + 13500, replicas=9, note="28500 repos, projection"),
        ReferencePoint(value=15000, replicas=6, note="row 3 of spreadsheet"),
        ReferencePoint(value=1500, replicas=3, note="row 4 of spreadsheet"),
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.min, replicas=1, note="bare minimum"),
    ),
)

SEARCHER_BY_MONOREPOS = ServiceCurve(
    service_name="searcher",
    scaling_factor=ScalingFactor.LARGE_MONOREPOS,
    reference_points=(
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.max, cpu=_r(0.5, 2), memory_gb=_r(1, 4), note="speculative"
        ),
        ReferencePoint(value=1, cpu=_r(0.5, 2), memory_gb=_r(1, 4), note="speculative"),
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.min,
            cpu=_r(0.5, 2),
            memory_gb=_r(0.5, 2),
            note="bare minimum",
        ),
    ),
)

# Searcher keeps unpacked repository archives on ephemeral disk; the cache is
# sized against the total repository size and split across replicas.
SEARCHER_BY_TOTAL_REPO_SIZE = ServiceCurve(
    service_name="searcher",
    scaling_factor=ScalingFactor.TOTAL_REPO_SIZE,
    reference_points=(
        ReferencePoint(
            value=TOTAL_REPO_SIZE_RANGE.max, ephemeral_gb=_r(1000, 2000), note="projection"
        ),
        ReferencePoint(value=1000, ephemeral_gb=_r(250, 500), note="speculative"),
        ReferencePoint(value=100, ephemeral_gb=_r(50, 100), note="speculative"),
        ReferencePoint(
            value=TOTAL_REPO_SIZE_RANGE.min, ephemeral_gb=_r(25, 26), note="speculative"
        ),
    ),
)

SYMBOLS_BY_REPOSITORIES = ServiceCurve(
    service_name="symbols",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.max, replicas=8, note="projection"),
        ReferencePoint(value=15000 + 13500, replicas=6, note="28500 repos, projection"),
        ReferencePoint(value=15000, replicas=4, note="row 3 of spreadsheet"),
        ReferencePoint(value=1500, replicas=2, note="row 4 of spreadsheet"),
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.min, replicas=1, note="bare minimum"),
    ),
)

SYMBOLS_BY_MONOREPOS = ServiceCurve(
    service_name="symbols",
    scaling_factor=ScalingFactor.LARGE_MONOREPOS,
    reference_points=(
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.max,
            cpu=_r(2, 4),
            memory_gb=_r(1, 4),
            note="estimate based on entire spreadsheet",
        ),
        ReferencePoint(
            value=1,
            cpu=_r(2, 4),
            memory_gb=_r(1, 4),
            note="estimate based on entire spreadsheet",
        ),
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.min,
            cpu=_r(0.5, 2),
            memory_gb=_r(0.5, 2),
            note="bare minimum",
        ),
    ),
)

# Symbols caches its per-commit SQLite databases on ephemeral disk.
SYMBOLS_BY_TOTAL_REPO_SIZE = ServiceCurve(
    service_name="symbols",
    scaling_factor=ScalingFactor.TOTAL_REPO_SIZE,
    reference_points=(
        ReferencePoint(
            value=TOTAL_REPO_SIZE_RANGE.max, ephemeral_gb=_r(400, 800), note="projection"
        ),
        ReferencePoint(value=1000, ephemeral_gb=_r(100, 200), note="speculative"),
        ReferencePoint(value=100, ephemeral_gb=_r(20, 40), note="speculative"),
        ReferencePoint(
            value=TOTAL_REPO_SIZE_RANGE.min, ephemeral_gb=_r(10, 12), note="speculative"
        ),
    ),
)

REPLACER_BY_REPOSITORIES = ServiceCurve(
    service_name="replacer",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.max, replicas=12, note="projection"),
        ReferencePoint(value=15000 + 13500, replicas=9, note="28500 repos, projection"),
        ReferencePoint(
            value=15000,
            replicas=6,
            note="speculative, replacer is nearly identical to searcher in scaling",
        ),
        ReferencePoint(
            value=1500,
            replicas=3,
            note="speculative, replacer is nearly identical to searcher in scaling",
        ),
        ReferencePoint(value=AVERAGE_REPOSITORIES_RANGE.min, replicas=1, note="bare minimum"),
    ),
)

REPLACER_BY_MONOREPOS = ServiceCurve(
    service_name="replacer",
    scaling_factor=ScalingFactor.LARGE_MONOREPOS,
    reference_points=(
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.max,
            cpu=_r(2, 4),
            memory_gb=_r(2, 2),
            note="very speculative",
        ),
        ReferencePoint(value=1, cpu=_r(1, 4), memory_gb=_r(1, 1), note="very speculative"),
        ReferencePoint(
            value=LARGE_MONOREPOS_RANGE.min,
            cpu=_r(0.5, 4),
            memory_gb=_r(0.5, 0.5),
            note="bare minimum",
        ),
    ),
)

# =========================================================================
# Indexed search (zoekt)
# =========================================================================

# zoekt-indexserver memory usage scales based on whether it must index large
# monorepos. Its CPU usage and replicas scale based on the number of average
# repos it must index.
ZOEKT_INDEXSERVER_BY_MONOREPOS = ServiceCurve(
    service_name="zoekt-indexserver",
    scaling_factor=ScalingFactor.LARGE_MONOREPOS,
    reference_points=(
        ReferencePoint(value=LARGE_MONOREPOS_RANGE.max, memory_gb=_r(16, 16), note="speculative"),
        ReferencePoint(value=1, memory_gb=_r(16, 16), note="from row 9 of spreadsheet"),
        ReferencePoint(value=LARGE_MONOREPOS_RANGE.min, memory_gb=_r(4, 8), note="bare minimum"),
    ),
)

ZOEKT_INDEXSERVER_BY_REPOSITORIES = ServiceCurve(
    service_name="zoekt-indexserver",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.max,
            replicas=2,
            cpu=_r(6, 12),
            note="speculative based on row 8 of spreadsheet",
        ),
        ReferencePoint(
            value=17000, replicas=2, cpu=_r(4, 8), note="derived from row 9 of spreadsheet"
        ),
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.min, replicas=1, cpu=_r(4, 8), note="bare minimum"
        ),
    ),
)

# zoekt-webserver memory usage and replicas scale based on how many average
# repositories it is serving (roughly 2/3 the size of the actual repos is the
# memory usage). Its CPU usage is based on the number of users it serves; the
# size of the index matters too, but # users and # repos are assumed to
# correlate.
ZOEKT_WEBSERVER_BY_REPOSITORIES = ServiceCurve(
    service_name="zoekt-webserver",
    scaling_factor=ScalingFactor.AVERAGE_REPOSITORIES,
    reference_points=(
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.max,
            replicas=2,
            memory_gb=_r(80, 80),
            note="derived from row 8 of spreadsheet",
        ),
        ReferencePoint(
            value=17000, replicas=2, memory_gb=_r(50, 50), note="derived from row 9 of spreadsheet"
        ),
        ReferencePoint(
            value=11000, replicas=1, memory_gb=_r(64, 64), note="derived from row 2 of spreadsheet"
        ),
        ReferencePoint(
            value=1500, replicas=1, memory_gb=_r(34, 34), note="derived from row 4 of spreadsheet"
        ),
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.min,
            replicas=1,
            memory_gb=_r(4, 8),
            note="bare minimum",
        ),
    ),
)

ZOEKT_WEBSERVER_BY_USERS = ServiceCurve(
    service_name="zoekt-webserver",
    scaling_factor=ScalingFactor.ENGAGED_USERS,
    reference_points=(
        ReferencePoint(value=USERS_RANGE.max, cpu=_r(192, 192), note="projection"),
        ReferencePoint(value=USERS_RANGE.max * 0.25, cpu=_r(48, 48), note="projection"),
        ReferencePoint(
            value=210 * 4,
            cpu=_r(16, 16),
            note="840 engaged users, derived from row 9 of spreadsheet",
        ),
        ReferencePoint(
            value=1300 * 0.50, cpu=_r(12, 12), note="650 engaged users, row 2 of spreadsheet"
        ),
        ReferencePoint(value=USERS_RANGE.min, cpu=_r(0.5, 2), note="bare minimum"),
    ),
)

# =========================================================================
# Syntax highlighting
# =========================================================================

# syntect_server internally runs 4 worker processes, each of which can consume
# up to 1.1G of memory and concurrently serves many HTTP requests. Once its
# memory reaches 4.4G total, scaling becomes linear based on request load,
# primarily with CPU being the bottleneck.
SYNTECT_SERVER_BY_USERS = ServiceCurve(
    service_name="syntect-server",
    scaling_factor=ScalingFactor.ENGAGED_USERS,
    reference_points=(
        ReferencePoint(
            value=USERS_RANGE.max,
            replicas=1,
            cpu=_r(12, 64),
            memory_gb=_r(6, 10),
            note="speculative",
        ),
        ReferencePoint(
            value=8000, replicas=1, cpu=_r(6, 32), memory_gb=_r(5, 9), note="speculative"
        ),
        ReferencePoint(
            value=6000, replicas=1, cpu=_r(4, 16), memory_gb=_r(4, 8), note="speculative"
        ),
        ReferencePoint(
            value=4000, replicas=1, cpu=_r(2, 8), memory_gb=_r(3, 7), note="speculative"
        ),
        ReferencePoint(
            value=2000,
            replicas=1,
            cpu=_r(0.25, 4),
            memory_gb=_r(2, 6),
            note="observed on a production instance",
        ),
        ReferencePoint(
            value=USERS_RANGE.min,
            replicas=1,
            cpu=_r(0.25, 4),
            memory_gb=_r(2, 6),
            note="bare minimum",
        ),
    ),
)

# =========================================================================
# Databases
# =========================================================================

# The main database grows with both the user base and the repository catalogue.
PGSQL_BY_USER_REPO_RATIO = ServiceCurve(
    service_name="pgsql",
    scaling_factor=ScalingFactor.USER_REPO_SUM_RATIO,
    reference_points=(
        ReferencePoint(
            value=AVERAGE_REPOSITORIES_RANGE.max // 1000 + USERS_RANGE.max // 1000,
            replicas=1,
            cpu=_r(16, 32),
            memory_gb=_r(32, 32),
            note="projection",
        ),
        ReferencePoint(
            value=USER_REPO_SUM_RATIO_RANGE.max,
            replicas=1,
            cpu=_r(8, 16),
            memory_gb=_r(16, 16),
            note="speculative",
        ),
        ReferencePoint(value=30, replicas=1, cpu=_r(4, 8), memory_gb=_r(8, 8), note="speculative"),
        ReferencePoint(
            value=USER_REPO_SUM_RATIO_RANGE.min,
            replicas=1,
            cpu=_r(2, 4),
            memory_gb=_r(2, 4),
            note="speculative",
        ),
    ),
)

# =========================================================================
# Code intelligence
# =========================================================================

# Processing an upload holds the whole index in memory several times over, and
# the worker downloads it to ephemeral disk first.
PRECISE_CODE_INTEL_WORKER_BY_INDEX_SIZE = ServiceCurve(
    service_name="precise-code-intel-worker",
    scaling_factor=ScalingFactor.LARGEST_INDEX_SIZE,
    reference_points=(
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.max,
            replicas=1,
            cpu=_r(4, 8),
            memory_gb=_r(200, 400),
            ephemeral_gb=_r(100, 200),
            note="projection",
        ),
        ReferencePoint(
            value=25,
            replicas=1,
            cpu=_r(2, 4),
            memory_gb=_r(50, 100),
            ephemeral_gb=_r(25, 50),
            note="speculative",
        ),
        ReferencePoint(
            value=5,
            replicas=1,
            cpu=_r(2, 4),
            memory_gb=_r(10, 20),
            ephemeral_gb=_r(5, 10),
            note="speculative",
        ),
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.min,
            replicas=1,
            cpu=_r(2, 4),
            memory_gb=_r(2, 4),
            ephemeral_gb=_r(1, 2),
            note="speculative",
        ),
    ),
)

CODEINTEL_DB_BY_INDEX_SIZE = ServiceCurve(
    service_name="codeintel-db",
    scaling_factor=ScalingFactor.LARGEST_INDEX_SIZE,
    reference_points=(
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.max,
            replicas=1,
            cpu=_r(4, 8),
            memory_gb=_r(8, 16),
            note="projection",
        ),
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.min,
            replicas=1,
            cpu=_r(2, 4),
            memory_gb=_r(2, 4),
            note="speculative",
        ),
    ),
)

# Blob storage for uploaded indexes; sized by the formula in the estimator.
MINIO_BY_INDEX_SIZE = ServiceCurve(
    service_name="minio",
    scaling_factor=ScalingFactor.LARGEST_INDEX_SIZE,
    reference_points=(
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.max,
            replicas=1,
            cpu=_r(1, 1),
            memory_gb=_r(0.5, 0.5),
            note="speculative",
        ),
        ReferencePoint(
            value=LARGEST_INDEX_SIZE_RANGE.min,
            replicas=1,
            cpu=_r(1, 1),
            memory_gb=_r(0.5, 0.5),
            note="speculative",
        ),
    ),
)


# Declaration order is evaluation order.
REFERENCES: tuple[ServiceCurve, ...] = (
    FRONTEND_BY_USERS,
    GITSERVER_BY_LARGEST_REPO,
    GITSERVER_BY_REPOSITORIES,
    SEARCHER_BY_REPOSITORIES,
    SEARCHER_BY_MONOREPOS,
    SEARCHER_BY_TOTAL_REPO_SIZE,
    SYMBOLS_BY_REPOSITORIES,
    SYMBOLS_BY_MONOREPOS,
    SYMBOLS_BY_TOTAL_REPO_SIZE,
    REPLACER_BY_REPOSITORIES,
    REPLACER_BY_MONOREPOS,
    ZOEKT_INDEXSERVER_BY_MONOREPOS,
    ZOEKT_INDEXSERVER_BY_REPOSITORIES,
    ZOEKT_WEBSERVER_BY_REPOSITORIES,
    ZOEKT_WEBSERVER_BY_USERS,
    SYNTECT_SERVER_BY_USERS,
    PGSQL_BY_USER_REPO_RATIO,
    PRECISE_CODE_INTEL_WORKER_BY_INDEX_SIZE,
    CODEINTEL_DB_BY_INDEX_SIZE,
    MINIO_BY_INDEX_SIZE,
)

# Curves with no spreadsheet rows behind them; every point is an estimate.
AUTHORED_CURVES: tuple[ServiceCurve, ...] = (
    GITSERVER_BY_LARGEST_REPO,
    SEARCHER_BY_TOTAL_REPO_SIZE,
    SYMBOLS_BY_TOTAL_REPO_SIZE,
    PGSQL_BY_USER_REPO_RATIO,
    PRECISE_CODE_INTEL_WORKER_BY_INDEX_SIZE,
    CODEINTEL_DB_BY_INDEX_SIZE,
    MINIO_BY_INDEX_SIZE,
)

# Services only deployed when precise code intelligence is enabled.
CODE_INTEL_SERVICES: frozenset[str] = frozenset(
    {"precise-code-intel-worker", "codeintel-db", "minio"}
)

# Services in one pod must run the same number of replicas.
POD_GROUPS: tuple[PodGroup, ...] = (
    PodGroup(name="indexed-search", services=("zoekt-webserver", "zoekt-indexserver")),
)

SERVICE_INFO: dict[str, ServiceInfo] = {
    "frontend": ServiceInfo(
        label="Frontend", pod_name="sourcegraph-frontend", compose_name="sourcegraph-frontend-0"
    ),
    "gitserver": ServiceInfo(label="Gitserver", pod_name="gitserver", compose_name="gitserver-0"),
    "searcher": ServiceInfo(label="Searcher", pod_name="searcher", compose_name="searcher-0"),
    "symbols": ServiceInfo(label="Symbols", pod_name="symbols", compose_name="symbols-0"),
    "replacer": ServiceInfo(label="Replacer", pod_name="replacer", compose_name="replacer"),
    "zoekt-indexserver": ServiceInfo(
        label="Zoekt Indexserver", pod_name="indexed-search", compose_name="zoekt-indexserver-0"
    ),
    "zoekt-webserver": ServiceInfo(
        label="Zoekt Webserver", pod_name="indexed-search", compose_name="zoekt-webserver-0"
    ),
    "syntect-server": ServiceInfo(
        label="Syntect Server", pod_name="syntect-server", compose_name="syntect-server"
    ),
    "pgsql": ServiceInfo(label="Postgres", pod_name="pgsql", compose_name="pgsql"),
    "precise-code-intel-worker": ServiceInfo(
        label="Precise Code Intel Worker",
        pod_name="precise-code-intel-worker",
        compose_name="precise-code-intel-worker",
    ),
    "codeintel-db": ServiceInfo(
        label="Code Intel DB", pod_name="codeintel-db", compose_name="codeintel-db"
    ),
    "minio": ServiceInfo(label="MinIO", pod_name="minio", compose_name="minio"),
}


def _d(replicas: int, cpu: ResourcePair, memory_gb: ResourcePair) -> ServiceEnvelope:
    return ServiceEnvelope(replicas=replicas, cpu=cpu, memory_gb=memory_gb)


# Baseline envelopes per deployment type. Services without curves contribute
# these to the totals; services with curves use them only as the reference for
# "non-default value" markers.
DEFAULTS: dict[DeploymentType, dict[str, ServiceEnvelope]] = {
    DeploymentType.KUBERNETES: {
        "prometheus": _d(1, _r(0.5, 0.5), _r(2, 2)),
        "query-runner": _d(1, _r(0.5, 1), _r(1, 1)),
        "redis-store": _d(1, _r(1, 1), _r(6, 6)),
        "redis-cache": _d(1, _r(1, 1), _r(6, 6)),
        "replacer": _d(1, _r(0.5, 4), _r(0.5, 0.5)),
        "repo-updater": _d(1, _r(0.1, 0.1), _r(0.5, 0.5)),
        "searcher": _d(1, _r(0.5, 2), _r(0.5, 2)),
        "symbols": _d(1, _r(0.5, 2), _r(0.5, 2)),
        "syntect-server": _d(1, _r(0.25, 4), _r(2, 6)),
    },
    DeploymentType.DOCKER_COMPOSE: {
        "prometheus": _d(1, _r(0.5, 4), _r(2, 8)),
        "query-runner": _d(1, _r(0.5, 1), _r(1, 1)),
        "redis-store": _d(1, _r(1, 1), _r(6, 6)),
        "redis-cache": _d(1, _r(1, 1), _r(6, 6)),
        "replacer": _d(1, _r(0.5, 1), _r(0.5, 0.5)),
        "repo-updater": _d(1, _r(0.1, 4), _r(0.5, 4)),
        "searcher": _d(1, _r(0.5, 2), _r(0.5, 2)),
        "symbols": _d(1, _r(0.5, 2), _r(0.5, 4)),
        "syntect-server": _d(1, _r(0.25, 4), _r(2, 6)),
    },
}
