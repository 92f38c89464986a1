"""Tests for the ledger audit: starting score, deduction rules, final total."""

from __future__ import annotations

import pytest

from audit_gate.schema import LedgerEntry, PenaltyLedger
from audit_gate.validation.checks.ledger import audit_ledger, recompute_final_score
from audit_gate.validation.models import RejectionKind
from tests.factories import entry


def _ledger(points: list, final_score: int, initial_score: int = 100) -> PenaltyLedger:
    return PenaltyLedger.model_validate(
        {
            "initial_score": initial_score,
            "entries": [entry(p, reason=f"Deduction {i}") for i, p in enumerate(points)],
            "final_score": final_score,
        }
    )


class TestRecompute:
    @pytest.mark.parametrize(
        ("points", "expected"),
        [
            ([], 100),
            ([0], 100),
            ([-10, -15], 75),
            ([-30, -15, -20], 35),
            ([-100], 0),
            ([-70, -60], 0),
            ([-1] * 99, 1),
            ([-50, -50, -50, -50], 0),
        ],
    )
    def test_clamped_total(self, points: list[int], expected: int) -> None:
        entries = [LedgerEntry.model_validate(entry(p)) for p in points]
        recomputed, penalty_sum = recompute_final_score(entries)
        assert recomputed == expected == max(0, 100 + sum(points))
        assert penalty_sum == sum(points)


class TestFinalScore:
    @pytest.mark.parametrize(
        "points",
        [[], [-5], [-10, -15], [-33, -33, -33], [-70, -60], [0, 0, -1]],
    )
    def test_consistent_ledger_passes(self, points: list[int]) -> None:
        audit = audit_ledger(_ledger(points, max(0, 100 + sum(points))))
        assert audit.passed
        assert audit.issues == []

    @pytest.mark.parametrize(
        ("points", "stated"),
        [([-10, -15], 80), ([-10, -15], 74), ([], 99), ([-70, -60], -30), ([-70, -60], 5)],
    )
    def test_mismatch_reports_stated_and_recomputed(self, points: list[int], stated: int) -> None:
        audit = audit_ledger(_ledger(points, stated))

        assert audit.invariant_issues == []
        assert len(audit.math_issues) == 1
        issue = audit.math_issues[0]
        assert issue.kind is RejectionKind.SCORING_MATH_ERROR
        assert issue.field_path == "audit_ledger.final_score"
        assert issue.context == {
            "stated": stated,
            "recomputed": max(0, 100 + sum(points)),
            "penalty_sum": sum(points),
        }

    def test_scenario_b_message(self) -> None:
        audit = audit_ledger(_ledger([-10, -15], 80))
        assert audit.math_issues[0].message == "Reported 80 but calculated 75 (100 + -25)"
        assert audit.recomputed == 75
        assert audit.penalty_sum == -25

    def test_unclamped_negative_total_is_a_math_error(self) -> None:
        audit = audit_ledger(_ledger([-70, -60], -30))
        assert audit.math_issues[0].context["recomputed"] == 0


class TestInvariants:
    def test_initial_score_must_be_100(self) -> None:
        # Internally consistent with 99 as a starting point, still invalid
        audit = audit_ledger(_ledger([-10], 89, initial_score=99))
        kinds = [i.kind for i in audit.invariant_issues]
        assert kinds == [RejectionKind.SCORING_INVARIANT_VIOLATION]
        assert audit.invariant_issues[0].field_path == "audit_ledger.initial_score"

    def test_positive_penalty_rejected_even_when_total_adds_up(self) -> None:
        audit = audit_ledger(_ledger([5, -10], 95))
        assert audit.math_issues == []
        assert len(audit.invariant_issues) == 1
        issue = audit.invariant_issues[0]
        assert issue.field_path == "audit_ledger.entries.0.penalty_points"
        assert issue.actual_value == "5"
        assert "must be zero or negative" in issue.message

    def test_fractional_penalty_rejected(self) -> None:
        audit = audit_ledger(_ledger([-2.5], 97))
        assert len(audit.invariant_issues) == 1
        assert "must be an integer" in audit.invariant_issues[0].message
        assert audit.invariant_issues[0].actual_value == "-2.5"

    def test_positive_fractional_penalty_names_both_problems(self) -> None:
        audit = audit_ledger(_ledger([0.5], 100))
        assert "must be zero or negative and must be an integer" in audit.invariant_issues[0].message

    def test_integral_float_penalty_is_accepted(self) -> None:
        audit = audit_ledger(_ledger([-10.0, -15], 75))
        assert audit.passed

    def test_zero_penalty_is_allowed(self) -> None:
        assert audit_ledger(_ledger([0], 100)).passed

    def test_all_checks_run_together(self) -> None:
        audit = audit_ledger(_ledger([3, -1.5, -10], 50, initial_score=90))
        assert [i.field_path for i in audit.invariant_issues] == [
            "audit_ledger.initial_score",
            "audit_ledger.entries.0.penalty_points",
            "audit_ledger.entries.1.penalty_points",
        ]
        assert len(audit.math_issues) == 1
        assert len(audit.issues) == 4
