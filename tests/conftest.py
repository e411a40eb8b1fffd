"""
Pytest fixtures for scanner tests. Isolates settings from the user's
config directory and environment, and pins report timestamps.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from reputation_scanner.config import settings as settings_module
from reputation_scanner.config.settings import ScannerSettings
from reputation_scanner.core import ReputationScanner

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)
VALID_ADDRESS = "0x120e011fB8a12bfcB61e5c1d751C26A5D33Aae91"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """No config file and no scanner or API key variables from the host."""
    monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_FILE", tmp_path / "no-config.json")
    for name in (
        "REPUTATION_SCANNER_CONFIG",
        "REPUTATION_CHECK_TIMEOUT",
        "REPUTATION_BATCH_DELAY",
        "REPUTATION_PATTERNS_URL",
        "ETHEREUM_API_KEY",
        "BASE_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return ScannerSettings()


@pytest.fixture
def scanner(settings):
    return ReputationScanner(settings=settings, clock=lambda: FIXED_TIME)
