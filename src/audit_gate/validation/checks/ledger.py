"""Ledger checks: starting score, deduction sign and integrality, final total."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from audit_gate.schema.ledger import (
    INITIAL_SCORE,
    SCORE_CEILING,
    SCORE_FLOOR,
    LedgerEntry,
    PenaltyLedger,
)
from audit_gate.validation.models import GateIssue, RejectionKind


@dataclass
class LedgerAudit:
    """Issues from all three ledger checks, split by rejection kind."""

    invariant_issues: list[GateIssue] = field(default_factory=list)
    math_issues: list[GateIssue] = field(default_factory=list)
    recomputed: int = INITIAL_SCORE
    penalty_sum: Union[int, float] = 0

    @property
    def issues(self) -> list[GateIssue]:
        return [*self.invariant_issues, *self.math_issues]

    @property
    def passed(self) -> bool:
        return not self.invariant_issues and not self.math_issues


def recompute_final_score(entries: list[LedgerEntry]) -> tuple[int, Union[int, float]]:
    """Return ``(clamp(0, 100, 100 + sum), sum)`` over the entries' penalty points."""
    penalty_sum = sum(e.penalty_points for e in entries)
    recomputed = max(SCORE_FLOOR, min(SCORE_CEILING, INITIAL_SCORE + penalty_sum))
    return int(recomputed), penalty_sum


def audit_ledger(ledger: PenaltyLedger) -> LedgerAudit:
    """Run every ledger check; none short-circuits the others."""
    result = LedgerAudit()
    result.invariant_issues.extend(_check_initial_score(ledger))
    result.invariant_issues.extend(_check_entries(ledger))

    recomputed, penalty_sum = recompute_final_score(ledger.entries)
    result.recomputed = recomputed
    result.penalty_sum = penalty_sum
    if ledger.final_score != recomputed:
        result.math_issues.append(
            GateIssue(
                kind=RejectionKind.SCORING_MATH_ERROR,
                message=(
                    f"Reported {ledger.final_score} but calculated {recomputed} "
                    f"({INITIAL_SCORE} + {penalty_sum})"
                ),
                field_path="audit_ledger.final_score",
                actual_value=str(ledger.final_score),
                expected_hint=str(recomputed),
                context={
                    "stated": ledger.final_score,
                    "recomputed": recomputed,
                    "penalty_sum": penalty_sum,
                },
            )
        )

    return result


def _check_initial_score(ledger: PenaltyLedger) -> list[GateIssue]:
    if ledger.initial_score == INITIAL_SCORE:
        return []
    return [
        GateIssue(
            kind=RejectionKind.SCORING_INVARIANT_VIOLATION,
            message=f"Initial score must be {INITIAL_SCORE}, found {ledger.initial_score}",
            field_path="audit_ledger.initial_score",
            actual_value=str(ledger.initial_score),
            expected_hint=str(INITIAL_SCORE),
        )
    ]


def _check_entries(ledger: PenaltyLedger) -> list[GateIssue]:
    issues: list[GateIssue] = []

    for index, entry in enumerate(ledger.entries):
        points = entry.penalty_points
        problems = []
        if points > 0:
            problems.append("must be zero or negative")
        if isinstance(points, float) and not points.is_integer():
            problems.append("must be an integer")
        if not problems:
            continue
        issues.append(
            GateIssue(
                kind=RejectionKind.SCORING_INVARIANT_VIOLATION,
                message=(
                    f"Penalty on entry #{index} ({entry.reason}) "
                    f"{' and '.join(problems)}, found {points}"
                ),
                field_path=f"audit_ledger.entries.{index}.penalty_points",
                entity_name=entry.reason,
                actual_value=str(points),
                expected_hint="integer <= 0",
                context={"entry_index": index},
            )
        )

    return issues
