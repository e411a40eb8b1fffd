"""Score aggregation and risk classification."""

from typing import Sequence

from .models import CheckResult, RiskLevel

# Lower bounds, highest first.
RISK_THRESHOLDS = (
    (90, "low"),
    (70, "medium"),
    (40, "high"),
)


def aggregate_score(checks: Sequence[CheckResult]) -> int:
    """
    Unweighted floor average of check scores.

    Every check contributes equally regardless of what it evaluates.
    An empty sequence scores 0.
    """
    if not checks:
        return 0
    return sum(check.score for check in checks) // len(checks)


def classify_risk(score: int) -> RiskLevel:
    """Map an overall score to a risk level."""
    for lower_bound, level in RISK_THRESHOLDS:
        if score >= lower_bound:
            return level
    return "critical"
