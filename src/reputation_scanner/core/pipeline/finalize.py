"""Pipeline stage: derive scores and assemble the report."""

import logging
from typing import List

from ..models import CheckResult, ReputationReport

logger = logging.getLogger(__name__)


class ScannerFinalizeMixin:
    def _build_report(self, address: str, network: str, checks: List[CheckResult]) -> ReputationReport:
        report = ReputationReport.from_checks(address, network, checks, timestamp=self.clock())
        logger.info(
            f"Report for {address} on {network}: score {report.overall_score}/100, "
            f"risk {report.risk_level}"
        )
        return report
