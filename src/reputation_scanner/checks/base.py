"""Base check contract shared by all reputation checks."""

from ..core.models import CheckResult

NEUTRAL_SCORE = 50


class Check:
    """
    A single named evaluation of an address.

    Subclasses set ``name`` and implement ``run``. ``run`` must always
    resolve to a CheckResult: when evaluation cannot complete (no network,
    no credentials, not implemented yet) it reports a degraded ``warning``
    instead of raising.
    """

    name: str = ""

    def run(self, address: str, network: str) -> CheckResult:
        raise NotImplementedError(f"{type(self).__name__} must implement run()")

    def passed(self, details: str, score: int = 100) -> CheckResult:
        return CheckResult(name=self.name, status="pass", score=score, details=details)

    def warning(self, details: str, score: int = NEUTRAL_SCORE) -> CheckResult:
        return CheckResult(name=self.name, status="warning", score=score, details=details)

    def failed(self, details: str, score: int = 0) -> CheckResult:
        return CheckResult(name=self.name, status="fail", score=score, details=details)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def degraded_result(name: str, details: str) -> CheckResult:
    """Neutral warning used when a check could not produce its own result."""
    return CheckResult(name=name, status="warning", score=NEUTRAL_SCORE, details=details)
