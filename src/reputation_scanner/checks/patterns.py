"""Deny-list check against known malicious address patterns."""

import logging
from typing import Iterable

from ..core.models import CheckResult
from .base import Check

logger = logging.getLogger(__name__)


class KnownPatternsCheck(Check):
    """Case-insensitive substring match of the address against a deny-list."""

    name = "Known Patterns"

    def __init__(self, patterns: Iterable[str]):
        # Empty entries would match every address.
        self.patterns = tuple(p.lower() for p in patterns if p and p.strip())

    def run(self, address: str, network: str) -> CheckResult:
        lower_address = address.lower()

        for pattern in self.patterns:
            if pattern in lower_address:
                logger.info(f"Address {address} matches deny-list pattern {pattern}")
                return self.failed("Matches known malicious pattern")

        return self.passed("No known malicious patterns detected")
