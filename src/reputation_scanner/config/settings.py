"""
Scanner configuration.

Settings come from three layers, later ones winning:
1. Built-in defaults
2. JSON config file (~/.config/agent-reputation-scanner/config.json,
   or REPUTATION_SCANNER_CONFIG / --config)
3. Environment variables (also read from .env by the CLI)

Explorer API keys are looked up per network: <NETWORK>_API_KEY from the
environment first, then the ``api_keys`` mapping of the config file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "agent-reputation-scanner"
CONFIG_DIR_DISPLAY = "~/.config/agent-reputation-scanner/"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "config.json"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
DEFAULT_MALICIOUS_PATTERNS = [
    ZERO_ADDRESS,  # Burn address (context dependent)
]

SUPPORTED_NETWORKS = ["ethereum", "base"]


class ScannerSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_keys: Dict[str, str] = Field(default_factory=dict)
    malicious_patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_MALICIOUS_PATTERNS))
    patterns_url: Optional[str] = None
    check_timeout: Optional[float] = Field(default=10.0, gt=0)
    max_concurrent_checks: Optional[int] = Field(default=None, ge=1)
    batch_delay: float = Field(default=0.2, ge=0)
    default_network: str = "ethereum"
    results_file: str = "reputation-results.json"

    @field_validator("api_keys")
    @classmethod
    def _normalize_networks(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {network.lower(): key for network, key in value.items() if key}

    @field_validator("malicious_patterns")
    @classmethod
    def _dedupe_patterns(cls, value: List[str]) -> List[str]:
        return merge_patterns([], value)

    def get_api_key(self, network: str) -> Optional[str]:
        """
        Explorer API key for a network, or None.

        <NETWORK>_API_KEY in the environment takes priority over the config file.
        """
        env_value = (os.getenv(api_key_env_var(network)) or "").strip()
        if env_value:
            return env_value
        return self.api_keys.get(network.lower()) or None

    def with_patterns(self, patterns: List[str]) -> "ScannerSettings":
        """Copy of the settings with extra deny-list patterns appended."""
        return self.model_copy(
            update={"malicious_patterns": merge_patterns(self.malicious_patterns, patterns)}
        )


def api_key_env_var(network: str) -> str:
    return network.strip().upper().replace("-", "_") + "_API_KEY"


def merge_patterns(existing: List[str], extra: List[str]) -> List[str]:
    """Append patterns that are not present yet (case-insensitive), keeping order."""
    merged = []
    seen = set()
    for pattern in list(existing) + list(extra):
        pattern = pattern.strip()
        if not pattern or pattern.lower() in seen:
            continue
        seen.add(pattern.lower())
        merged.append(pattern)
    return merged


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    with open(config_file, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must contain a JSON object")
    return data


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    timeout = os.getenv('REPUTATION_CHECK_TIMEOUT')
    if timeout:
        # 0 disables the per-check timeout
        overrides['check_timeout'] = float(timeout) or None

    delay = os.getenv('REPUTATION_BATCH_DELAY')
    if delay:
        overrides['batch_delay'] = float(delay)

    patterns_url = os.getenv('REPUTATION_PATTERNS_URL')
    if patterns_url:
        overrides['patterns_url'] = patterns_url

    return overrides


def load_settings(config_file: Optional[Path] = None) -> ScannerSettings:
    """
    Load settings from the config file and environment.

    Args:
        config_file: Explicit config path. Must exist when given. When omitted,
            REPUTATION_SCANNER_CONFIG or the default location is used if present.

    Returns:
        Validated ScannerSettings

    Raises:
        OSError: Explicit config file cannot be read
        ValueError: Config file or environment values are invalid
    """
    data: Dict[str, Any] = {}

    if config_file is None and os.getenv('REPUTATION_SCANNER_CONFIG'):
        config_file = Path(os.environ['REPUTATION_SCANNER_CONFIG'])

    if config_file is not None:
        logger.info(f"Loading config from {config_file}")
        data = _read_config_file(Path(config_file).expanduser())
    elif DEFAULT_CONFIG_FILE.is_file():
        logger.info(f"Loading config from {DEFAULT_CONFIG_FILE}")
        data = _read_config_file(DEFAULT_CONFIG_FILE)
    else:
        logger.info("No config file found, using defaults")

    try:
        data.update(_env_overrides())
        settings = ScannerSettings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid scanner configuration: {e}") from e

    logger.info(
        f"Settings: {len(settings.malicious_patterns)} deny-list pattern(s), "
        f"API keys for {sorted(settings.api_keys) or 'no networks'}, "
        f"check timeout {settings.check_timeout}"
    )
    return settings
