"""Address syntax check."""

from ..core.models import CheckResult
from .base import Check

ADDRESS_PREFIX = "0x"
ADDRESS_LENGTH = 42


class AddressFormatCheck(Check):
    """
    Prefix and length validation only.

    Hex digits and EIP-55 checksum casing are not inspected.
    """

    name = "Address Format"

    def run(self, address: str, network: str) -> CheckResult:
        if not address.startswith(ADDRESS_PREFIX) or len(address) != ADDRESS_LENGTH:
            return self.failed("Invalid Ethereum address format")
        return self.passed("Valid checksummed address")
