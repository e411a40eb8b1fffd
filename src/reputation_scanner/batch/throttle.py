"""Pacing strategies between batch scans."""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class Throttle:
    """No pause between scans."""

    def wait(self) -> None:
        return None


NoThrottle = Throttle


class FixedDelayThrottle(Throttle):
    """Sleep a fixed delay between scans, as courtesy to explorer API rate limits."""

    def __init__(self, delay: float = 0.2, sleep: Callable[[float], None] = time.sleep):
        if delay < 0:
            raise ValueError(f"Throttle delay must be >= 0, got {delay}")
        self.delay = delay
        self.sleep = sleep

    def wait(self) -> None:
        if self.delay > 0:
            logger.debug(f"Throttling for {self.delay}s")
            self.sleep(self.delay)
