"""Plain-text rendering of reputation reports for the console."""

from typing import List

from ..core.models import ReputationReport
from .helpers import _format_time, _risk_emoji, _rule, _status_icon

DISCLAIMER = [
    "⚠️  This is an automated assessment. Always conduct",
    "   additional due diligence for high-value transactions.",
]


def format_report(report: ReputationReport) -> str:
    """
    Render the full report with score, checks and recommendations.

    Args:
        report: Report to render

    Returns:
        Multi-line text ending with a newline
    """
    lines: List[str] = [
        _rule(),
        "  REPUTATION REPORT",
        _rule(),
        f"Address: {report.address}",
        f"Network: {report.network}",
        f"Time:    {_format_time(report.timestamp)}",
        "",
        f"Overall Score: {report.overall_score}/100",
        f"Risk Level:    {_risk_emoji(report.risk_level)} {report.risk_level.upper()}",
        "",
        "CHECKS:",
        _rule('─'),
    ]

    for check in report.checks:
        lines.append(f"  {_status_icon(check.status)} {check.name:<25} [{check.score}%] {check.status}")
        lines.append(f"     └─ {check.details}")

    lines.extend(["", "RECOMMENDATIONS:", _rule('─')])
    lines.extend(f"  {rec}" for rec in report.recommendations)

    lines.extend(["", _rule(), *DISCLAIMER, _rule()])
    return "\n".join(lines) + "\n"


def format_batch_line(report: ReputationReport) -> str:
    """One-line batch summary: truncated address, risk level, score and glyph."""
    return (
        f"{report.address[:20]}... [{report.risk_level}] "
        f"Score: {report.overall_score}/100 {_risk_emoji(report.risk_level)}"
    )
