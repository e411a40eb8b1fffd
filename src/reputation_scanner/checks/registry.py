"""Ordered check registry with full and quick scan subsets."""

import logging
from typing import List, Optional

from ..config.settings import ScannerSettings
from .address import AddressFormatCheck
from .base import Check
from .onchain import AccountAgeCheck, ContractCheck, TransactionVolumeCheck
from .patterns import KnownPatternsCheck
from .verification import ContractVerificationCheck

logger = logging.getLogger(__name__)


class CheckRegistry:
    """
    Checks in declared execution order.

    The full scan runs every registered check; the quick scan runs the ones
    registered with ``quick=True``, keeping the same relative order.
    """

    def __init__(self):
        self._checks: List[Check] = []
        self._quick_names = set()

    def register(self, check: Check, quick: bool = False) -> "CheckRegistry":
        if not check.name:
            raise ValueError(f"Check {check!r} has no name")
        if check.name in self.names():
            raise ValueError(f"Check '{check.name}' is already registered")

        self._checks.append(check)
        if quick:
            self._quick_names.add(check.name)
        logger.debug(f"Registered check '{check.name}' (quick={quick})")
        return self

    def names(self) -> List[str]:
        return [check.name for check in self._checks]

    def full(self) -> List[Check]:
        return list(self._checks)

    def quick(self) -> List[Check]:
        return [check for check in self._checks if check.name in self._quick_names]

    def __len__(self) -> int:
        return len(self._checks)


def build_default_registry(settings: Optional[ScannerSettings] = None) -> CheckRegistry:
    """
    Registry with the six built-in checks.

    Args:
        settings: Supplies the API key lookup and deny-list (default: built-in defaults)

    Returns:
        CheckRegistry in full-scan order, Address Format and Known Patterns flagged quick
    """
    settings = settings or ScannerSettings()

    registry = CheckRegistry()
    registry.register(AddressFormatCheck(), quick=True)
    registry.register(ContractCheck())
    registry.register(ContractVerificationCheck(settings.get_api_key))
    registry.register(AccountAgeCheck())
    registry.register(TransactionVolumeCheck())
    registry.register(KnownPatternsCheck(settings.malicious_patterns), quick=True)
    return registry
