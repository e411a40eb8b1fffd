"""Reputation checks and the registry that orders them."""

from .address import AddressFormatCheck
from .base import Check, degraded_result
from .onchain import AccountAgeCheck, ContractCheck, TransactionVolumeCheck
from .patterns import KnownPatternsCheck
from .registry import CheckRegistry, build_default_registry
from .verification import ContractVerificationCheck

__all__ = [
    "AccountAgeCheck",
    "AddressFormatCheck",
    "Check",
    "CheckRegistry",
    "ContractCheck",
    "ContractVerificationCheck",
    "KnownPatternsCheck",
    "TransactionVolumeCheck",
    "build_default_registry",
    "degraded_result",
]
