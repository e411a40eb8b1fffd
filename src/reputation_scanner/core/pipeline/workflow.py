"""Scan entry points combining the execution and finalize stages."""

import logging

from ..models import ReputationReport
from .execution import ScannerExecutionMixin
from .finalize import ScannerFinalizeMixin

logger = logging.getLogger(__name__)


class ScannerPipelineMixin(ScannerExecutionMixin, ScannerFinalizeMixin):
    """Full and quick scan flows over the registry."""

    def run_full_scan(self, address: str, network: str) -> ReputationReport:
        """Run every registered check against the address."""
        logger.info(f"Full scan of {address} on {network}")
        checks = self._run_checks(self.registry.full(), address, network)
        return self._build_report(address, network, checks)

    def run_quick_scan(self, address: str, network: str) -> ReputationReport:
        """Run the quick subset (format and known patterns), as used for batches."""
        logger.info(f"Quick scan of {address} on {network}")
        checks = self._run_checks(self.registry.quick(), address, network)
        return self._build_report(address, network, checks)
