"""Agent reputation scanner: heuristic trust scoring for blockchain addresses."""

__version__ = "0.1.0"

from .core import ReputationScanner, run_full_scan, run_quick_scan
from .core.models import CheckResult, ReputationReport

__all__ = [
    "__version__",
    "CheckResult",
    "ReputationReport",
    "ReputationScanner",
    "run_full_scan",
    "run_quick_scan",
]
