"""Checks that need live chain data. They report a neutral warning until wired to an RPC."""

from ..core.models import CheckResult
from .base import Check


class ContractCheck(Check):
    name = "Contract Check"

    def run(self, address: str, network: str) -> CheckResult:
        return self.warning(f"Requires RPC connection (see: cast code {address})")


class AccountAgeCheck(Check):
    """Placeholder for first-transaction timestamp analysis."""

    name = "Account Age"

    def run(self, address: str, network: str) -> CheckResult:
        return self.warning(f"Requires blockchain query (see: cast tx-count {address})")


class TransactionVolumeCheck(Check):
    """Placeholder for activity-level analysis."""

    name = "Transaction Volume"

    def run(self, address: str, network: str) -> CheckResult:
        return self.warning("Requires blockchain query")
