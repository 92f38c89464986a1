"""Penalty ledger: the itemised scoring record of an audit report.

The schema only pins the numeric *types* here. Arithmetic invariants
(starting score, sign and integrality of deductions, final total) are
checked by ``audit_gate.validation.checks.ledger`` so each one surfaces
as its own rejection kind.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr

from audit_gate.schema.clause import AuditedClauseReference
from audit_gate.schema.enums import PenaltyCategory
from audit_gate.schema.types import JsonNumber, WholeNumber

INITIAL_SCORE = 100
SCORE_FLOOR = 0
SCORE_CEILING = 100


class LedgerEntry(BaseModel):
    """One deduction from the score, tied to the clause that justifies it."""

    model_config = ConfigDict(extra="forbid")

    penalty_points: JsonNumber
    category: PenaltyCategory
    reason: StrictStr
    impact_scenario: StrictStr
    clause_ref: Optional[AuditedClauseReference] = None


class PenaltyLedger(BaseModel):
    """Ordered deductions from a starting score of 100."""

    model_config = ConfigDict(extra="forbid")

    initial_score: WholeNumber
    entries: list[LedgerEntry]
    final_score: WholeNumber

    def penalty_sum(self) -> Union[int, float]:
        return sum(e.penalty_points for e in self.entries)
