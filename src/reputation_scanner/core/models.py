"""Structured models produced by the scan pipeline."""

from datetime import datetime, timezone
from typing import Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

CheckStatus = Literal["pass", "warning", "fail"]
RiskLevel = Literal["low", "medium", "high", "critical"]


class CheckResult(BaseModel):
    """Outcome of a single check. Bounds are enforced on construction."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str = Field(min_length=1)
    status: CheckStatus
    score: int = Field(ge=0, le=100, strict=True)
    details: str = Field(min_length=1)


class ReputationReport(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    address: str
    network: str
    timestamp: datetime
    overall_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    checks: Tuple[CheckResult, ...] = ()
    recommendations: Tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_derived_fields(self) -> "ReputationReport":
        from .recommendations import derive_recommendations
        from .scoring import aggregate_score, classify_risk

        names = [check.name for check in self.checks]
        if len(names) != len(set(names)):
            raise ValueError(f"Check names must be unique within a report: {names}")

        if self.overall_score != aggregate_score(self.checks):
            raise ValueError("overall_score does not match the report checks")
        if self.risk_level != classify_risk(self.overall_score):
            raise ValueError("risk_level does not match overall_score")
        if list(self.recommendations) != derive_recommendations(self.checks):
            raise ValueError("recommendations do not match the report checks")
        return self

    @classmethod
    def from_checks(
        cls,
        address: str,
        network: str,
        checks: Sequence[CheckResult],
        timestamp: Optional[datetime] = None,
    ) -> "ReputationReport":
        """
        Build a report, deriving score, risk level and recommendations from checks.

        Args:
            address: Address exactly as supplied by the caller
            network: Network label
            checks: Check results in execution order
            timestamp: Scan time (default: now, UTC)

        Returns:
            Fully derived, immutable ReputationReport
        """
        from .recommendations import derive_recommendations
        from .scoring import aggregate_score, classify_risk

        checks = list(checks)
        overall_score = aggregate_score(checks)
        return cls(
            address=address,
            network=network,
            timestamp=timestamp or datetime.now(timezone.utc),
            overall_score=overall_score,
            risk_level=classify_risk(overall_score),
            checks=tuple(checks),
            recommendations=tuple(derive_recommendations(checks)),
        )

    def to_json_dict(self) -> dict:
        """Serialize with JSON-compatible values (ISO timestamp)."""
        return self.model_dump(mode="json")
