"""Shared formatting helpers for report rendering."""

from datetime import datetime, timezone

RULE_WIDTH = 60


def _risk_emoji(level: str) -> str:
    """
    Convert risk level string to emoji.

    Args:
        level: Risk level ("low", "medium", "high", "critical")

    Returns:
        Emoji string
    """
    return {
        'low': '🟢',
        'medium': '🟡',
        'high': '🟠',
        'critical': '🔴'
    }.get(level.lower(), '⚪')


def _status_icon(status: str) -> str:
    """Convert check status to its console icon."""
    return {
        'warning': '⚠️',
        'fail': '✗'
    }.get(status.lower(), '✓')


def _rule(char: str = '═') -> str:
    return char * RULE_WIDTH


def _format_time(timestamp: datetime) -> str:
    """Render a report timestamp in UTC. Naive timestamps are taken as UTC."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return f"{timestamp.strftime('%Y-%m-%d %H:%M:%S')} UTC"
