"""Resource estimator for self-hosted code search deployments.

Pipeline:
- Calibration store: hand-authored reference points per service and scaling factor
- Interpolator: piecewise-linear between bracketing points, ceiling above the top point
- Combiner: first non-zero value per field group wins across a service's curves
- Pod synchronizer: co-located services share the largest replica count
- Aggregator: requests plus half the request/limit gap, with baseline defaults

Key Principle: "Replay, don't fit"
- Every number comes from a calibrated point or a straight line between two
- Inputs beyond the calibrated range are flagged for support, never extrapolated
"""

from .estimator import Estimator, estimate
from .models import (
    CurveEvaluation,
    EstimateInput,
    EstimateResult,
    EstimateTotals,
    ReferencePoint,
    ResourcePair,
    ServiceCurve,
    ServiceEnvelope,
)
from .store import CalibrationError, CalibrationStore, UnknownServiceError, get_default_store
from .types import DeploymentType, ScalingFactor, UnknownDeploymentTypeError

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Estimator",
    "estimate",
    # Calibration
    "CalibrationStore",
    "get_default_store",
    "ReferencePoint",
    "ServiceCurve",
    # Inputs and results
    "EstimateInput",
    "EstimateResult",
    "EstimateTotals",
    "ServiceEnvelope",
    "ResourcePair",
    "CurveEvaluation",
    # Enumerations
    "DeploymentType",
    "ScalingFactor",
    # Errors
    "CalibrationError",
    "UnknownServiceError",
    "UnknownDeploymentTypeError",
]
