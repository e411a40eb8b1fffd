"""JSON result writers."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.models import ReputationReport

logger = logging.getLogger(__name__)


def reports_to_json(reports: Sequence[ReputationReport]) -> List[Dict[str, Any]]:
    return [report.to_json_dict() for report in reports]


def save_json_results(reports: Sequence[ReputationReport], json_output: Path):
    """
    Save reports to a JSON file as an array.

    Args:
        reports: Reports to persist, in output order
        json_output: Path to JSON output file
    """
    logger.info(f"Saving {len(reports)} report(s) to {json_output}")
    with open(json_output, 'w', encoding='utf-8') as f:
        json.dump(reports_to_json(reports), f, indent=2, ensure_ascii=False)
