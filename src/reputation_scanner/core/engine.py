"""Public scanner engine composed from focused mixins."""

from typing import Optional

from ..config.settings import ScannerSettings
from .base import ScannerBase
from .models import ReputationReport
from .pipeline import ScannerPipelineMixin


class ReputationScanner(
    ScannerBase,
    ScannerPipelineMixin,
):
    """Scanner engine with modular flow-oriented implementation."""

    pass


def run_full_scan(
    address: str,
    network: str = "ethereum",
    settings: Optional[ScannerSettings] = None,
) -> ReputationReport:
    return ReputationScanner(settings=settings).run_full_scan(address, network)


def run_quick_scan(
    address: str,
    network: str = "ethereum",
    settings: Optional[ScannerSettings] = None,
) -> ReputationReport:
    return ReputationScanner(settings=settings).run_quick_scan(address, network)
