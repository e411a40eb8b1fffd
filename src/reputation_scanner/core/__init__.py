"""Scan pipeline core: models, scoring, recommendations and the scanner engine."""

from .engine import ReputationScanner, run_full_scan, run_quick_scan
from .models import CheckResult, ReputationReport
from .recommendations import derive_recommendations
from .scoring import aggregate_score, classify_risk

__all__ = [
    "CheckResult",
    "ReputationReport",
    "ReputationScanner",
    "aggregate_score",
    "classify_risk",
    "derive_recommendations",
    "run_full_scan",
    "run_quick_scan",
]
