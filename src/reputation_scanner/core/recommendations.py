"""Guidance derived from check results."""

from typing import List, Sequence

from .models import CheckResult

ALL_CLEAR_RECOMMENDATION = "✓ Address passed all automated checks"
MANUAL_REVIEW_RECOMMENDATION = "⚠️  Manual review still recommended for high-value transactions"


def format_failure(check: CheckResult) -> str:
    return f"⚠️  {check.name}: {check.details}"


def derive_recommendations(checks: Sequence[CheckResult]) -> List[str]:
    """
    Build recommendations in check order.

    Each failed check yields one entry. Warnings are not reported individually.
    When nothing failed, the all-clear and manual review reminders are returned.
    """
    recommendations = [format_failure(check) for check in checks if check.status == "fail"]

    if not recommendations:
        recommendations = [ALL_CLEAR_RECOMMENDATION, MANUAL_REVIEW_RECOMMENDATION]

    return recommendations
