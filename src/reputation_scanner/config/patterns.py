"""Deny-list sources for the Known Patterns check."""

import json
import logging
from pathlib import Path
from typing import Any, List

import requests

logger = logging.getLogger(__name__)


def _patterns_from_json(data: Any, source: str) -> List[str]:
    # Accept a bare list or {"patterns": [...]} / {"addresses": [...]}
    if isinstance(data, dict):
        data = data.get('patterns', data.get('addresses'))
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ValueError(f"Deny-list from {source} must be a list of strings")
    return [item.strip() for item in data if item.strip()]


def parse_patterns(text: str, source: str = "<text>") -> List[str]:
    """
    Parse a deny-list document.

    JSON documents (list, or object with a "patterns" key) are parsed as JSON;
    anything else is read as one pattern per line with # comments.
    """
    stripped = text.strip()
    if stripped.startswith('[') or stripped.startswith('{'):
        try:
            return _patterns_from_json(json.loads(stripped), source)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON deny-list in {source}: {e}") from e

    patterns = []
    for line in text.splitlines():
        line = line.split('#', 1)[0].strip()
        if line:
            patterns.append(line)
    return patterns


def load_patterns_file(path: Path) -> List[str]:
    """Read deny-list patterns from a local file. Read errors propagate."""
    path = Path(path).expanduser()
    logger.info(f"Loading deny-list patterns from {path}")
    patterns = parse_patterns(path.read_text(encoding='utf-8'), str(path))
    logger.info(f"Loaded {len(patterns)} pattern(s) from {path}")
    return patterns


def fetch_patterns(url: str, timeout: float = 10) -> List[str]:
    """
    Fetch deny-list patterns from a URL.

    A failed download leaves the configured deny-list untouched, so errors
    are logged and an empty list is returned.
    """
    logger.info(f"Fetching deny-list patterns from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        patterns = parse_patterns(response.text, url)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Failed to fetch deny-list from {url}: {e}")
        return []

    logger.info(f"Fetched {len(patterns)} pattern(s) from {url}")
    return patterns
