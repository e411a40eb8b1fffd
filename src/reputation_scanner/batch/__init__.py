"""Batch scanning and pacing."""

from .runner import read_address_file, run_batch
from .throttle import FixedDelayThrottle, NoThrottle, Throttle

__all__ = [
    "FixedDelayThrottle",
    "NoThrottle",
    "Throttle",
    "read_address_file",
    "run_batch",
]
