"""Base scanner state and shared configuration."""

from datetime import datetime, timezone
from typing import Callable, Optional

from ..checks import CheckRegistry, build_default_registry
from ..config.settings import ScannerSettings


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScannerBase:
    """Base class for scanner runtime state. Holds no per-scan state."""

    def __init__(
        self,
        settings: Optional[ScannerSettings] = None,
        registry: Optional[CheckRegistry] = None,
        check_timeout: Optional[float] = None,
        max_concurrent_checks: Optional[int] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize the scanner.

        Args:
            settings: Scanner settings (default: built-in defaults)
            registry: Check registry (default: the six built-in checks built from settings)
            check_timeout: Seconds before a check is reported as timed out
                (default: settings.check_timeout; a None
                settings.check_timeout disables the timeout)
            max_concurrent_checks: Worker threads per scan (default: settings value,
                None means one per check, 1 runs checks sequentially)
            clock: Source of report timestamps
        """
        self.settings = settings or ScannerSettings()
        self.registry = registry if registry is not None else build_default_registry(self.settings)
        self.check_timeout = check_timeout if check_timeout is not None else self.settings.check_timeout
        self.max_concurrent_checks = (
            max_concurrent_checks
            if max_concurrent_checks is not None
            else self.settings.max_concurrent_checks
        )
        self.clock = clock
