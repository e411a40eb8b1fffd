"""Report formatting and output writers."""

from .generators import reports_to_json, save_json_results
from .text import format_batch_line, format_report

__all__ = [
    "format_batch_line",
    "format_report",
    "reports_to_json",
    "save_json_results",
]
