"""Source verification check backed by a block explorer API key."""

import logging
from typing import Callable, Optional

from ..config.settings import CONFIG_DIR_DISPLAY
from ..core.models import CheckResult
from .base import Check

logger = logging.getLogger(__name__)


class ContractVerificationCheck(Check):
    """
    Reports whether explorer verification could be queried for the network.

    Both branches are neutral warnings: with a key the explorer integration
    is still pending, without one nothing can be queried.
    """

    name = "Contract Verification"

    def __init__(self, api_key_lookup: Callable[[str], Optional[str]]):
        self.api_key_lookup = api_key_lookup

    def run(self, address: str, network: str) -> CheckResult:
        api_key = self.api_key_lookup(network)
        if not api_key:
            logger.debug(f"No explorer API key for network {network}")
            return self.warning("No API key configured")

        return self.warning(f"API integration required (config in {CONFIG_DIR_DISPLAY})")
