"""Configuration loading: settings file, environment and deny-list sources."""

from .patterns import fetch_patterns, load_patterns_file, parse_patterns
from .settings import (
    DEFAULT_MALICIOUS_PATTERNS,
    SUPPORTED_NETWORKS,
    ScannerSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_MALICIOUS_PATTERNS",
    "SUPPORTED_NETWORKS",
    "ScannerSettings",
    "fetch_patterns",
    "load_patterns_file",
    "load_settings",
    "parse_patterns",
]
