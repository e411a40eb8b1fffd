"""Batch scanning of address lists."""

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..core.engine import ReputationScanner
from ..core.models import ReputationReport
from .throttle import Throttle

logger = logging.getLogger(__name__)


def read_address_file(path: Path) -> List[str]:
    """
    Read one address per line.

    Blank lines and lines that do not start with 0x are skipped. Read errors
    propagate to the caller.
    """
    text = Path(path).read_text(encoding='utf-8')
    addresses = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        address = line.strip()
        if not address:
            continue
        if not address.startswith('0x'):
            logger.info(f"Skipping line {line_number} of {path}: not an 0x address")
            continue
        addresses.append(address)

    logger.info(f"Read {len(addresses)} address(es) from {path}")
    return addresses


def run_batch(
    scanner: ReputationScanner,
    addresses: Iterable[str],
    network: str = "ethereum",
    throttle: Optional[Throttle] = None,
    full: bool = False,
    on_report: Optional[Callable[[ReputationReport], None]] = None,
) -> List[ReputationReport]:
    """
    Scan addresses one by one.

    Args:
        scanner: Scanner used for every address
        addresses: Addresses to scan, in output order
        network: Network label passed to every scan
        throttle: Pause strategy applied between two consecutive scans (default: none)
        full: Run full scans instead of quick scans
        on_report: Called with each report as soon as it is built

    Returns:
        Reports in input order
    """
    throttle = throttle or Throttle()
    scan = scanner.run_full_scan if full else scanner.run_quick_scan
    reports: List[ReputationReport] = []
    t_start = time.time()

    for index, address in enumerate(addresses):
        if index > 0:
            throttle.wait()

        report = scan(address, network)
        reports.append(report)
        if on_report is not None:
            on_report(report)

    elapsed = time.time() - t_start
    logger.info(f"[BATCH] Scanned {len(reports)} address(es) in {elapsed:.1f}s")
    critical = sum(1 for r in reports if r.risk_level == "critical")
    if critical:
        logger.warning(f"[BATCH] {critical} address(es) classified critical")
    return reports
