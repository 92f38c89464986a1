"""Exception hierarchy for audit-gate."""

from __future__ import annotations

from typing import Any

from audit_gate.validation.models import GateIssue, RejectionKind


class AuditGateError(Exception):
    """Base exception for all audit-gate errors."""


class JSONParseError(AuditGateError):
    """Generator output could not be parsed as JSON."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class GateRejection(AuditGateError):
    """A report failed the gate. Always fatal to the analysis request.

    Subclasses pin ``kind``; ``issues`` carries every violation found by the
    failing stage.
    """

    kind: RejectionKind

    def __init__(self, message: str, issues: list[GateIssue] | None = None) -> None:
        super().__init__(f"{self.kind.value}: {message}")
        self.message = message
        self.issues = list(issues or [])

    @property
    def field_paths(self) -> list[str]:
        return [i.field_path for i in self.issues if i.field_path]

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for API responses and logs."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "issues": [i.to_dict() for i in self.issues],
        }


class SchemaViolation(GateRejection):
    """One or more fields violate the report schema."""

    kind = RejectionKind.SCHEMA_VIOLATION


class ClauseTraceMissing(GateRejection):
    """A scoring-relevant claim lacks a valid clause citation."""

    kind = RejectionKind.CLAUSE_TRACE_MISSING


class ScoringInvariantViolation(GateRejection):
    """A ledger value breaks a structural arithmetic rule."""

    kind = RejectionKind.SCORING_INVARIANT_VIOLATION


class ScoringMathError(GateRejection):
    """The stated final score does not match the recomputed total."""

    kind = RejectionKind.SCORING_MATH_ERROR

    def __init__(
        self,
        message: str,
        issues: list[GateIssue] | None = None,
        *,
        stated: int,
        recomputed: int,
        penalty_sum: int | float,
    ) -> None:
        super().__init__(message, issues)
        self.stated = stated
        self.recomputed = recomputed
        self.penalty_sum = penalty_sum

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            stated=self.stated,
            recomputed=self.recomputed,
            penalty_sum=self.penalty_sum,
        )
        return data
