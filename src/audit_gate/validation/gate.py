"""The gate: the only entry point that turns raw generator output into a trusted report."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn, Optional

from audit_gate.exceptions import (
    ClauseTraceMissing,
    GateRejection,
    SchemaViolation,
    ScoringInvariantViolation,
    ScoringMathError,
)
from audit_gate.parsing import extract_json
from audit_gate.validation.checks.citations import audit_citations
from audit_gate.validation.checks.ledger import audit_ledger
from audit_gate.validation.models import GateIssue
from audit_gate.validation.structural import validate

if TYPE_CHECKING:
    from audit_gate.core.config import ValidationConfig
    from audit_gate.schema.report import AuditReportDocument

log = logging.getLogger(__name__)

DEFAULT_MAX_ISSUES_IN_MESSAGE = 25


def _summarize(issues: list[GateIssue], limit: int) -> str:
    shown = "; ".join(str(i) for i in issues[:limit])
    if len(issues) > limit:
        shown += f"; ... and {len(issues) - limit} more"
    return shown


class AuditGate:
    """Hard gate over generated audit reports.

    Runs the structural validator, then the citation audit, then the ledger
    audit, stopping at the first stage that finds anything. A report is either
    returned whole or rejected whole; nothing is repaired or partially kept.
    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, config: Optional[ValidationConfig] = None) -> None:
        self._max_issues = (
            config.max_issues_in_message if config is not None else DEFAULT_MAX_ISSUES_IN_MESSAGE
        )

    def accept(self, raw: Any) -> AuditReportDocument:
        """Return the validated report or raise a ``GateRejection`` subclass."""
        structural = validate(raw)
        document = structural.document
        if document is None or structural.issues:
            self._reject(SchemaViolation(_summarize(structural.issues, self._max_issues), structural.issues))

        citation_issues = audit_citations(document)
        if citation_issues:
            self._reject(
                ClauseTraceMissing(_summarize(citation_issues, self._max_issues), citation_issues)
            )

        ledger = audit_ledger(document.audit_ledger)
        if ledger.invariant_issues:
            self._reject(
                ScoringInvariantViolation(
                    _summarize(ledger.invariant_issues, self._max_issues),
                    ledger.issues,
                )
            )
        if ledger.math_issues:
            self._reject(
                ScoringMathError(
                    _summarize(ledger.math_issues, self._max_issues),
                    ledger.math_issues,
                    stated=document.audit_ledger.final_score,
                    recomputed=ledger.recomputed,
                    penalty_sum=ledger.penalty_sum,
                )
            )

        log.info(
            "Report accepted | analysis_id=%s final_score=%d verdict=%s entries=%d",
            document.analysis_id,
            document.audit_ledger.final_score,
            document.final_verdict.label.value,
            len(document.audit_ledger.entries),
        )
        return document

    def accept_text(self, content: str) -> AuditReportDocument:
        """Parse raw generator text (optionally code-fenced) and run the gate."""
        return self.accept(extract_json(content))

    @staticmethod
    def _reject(exc: GateRejection) -> NoReturn:
        log.warning("Report rejected | kind=%s issues=%d", exc.kind.value, len(exc.issues))
        raise exc


_default_gate = AuditGate()


def accept(raw: Any) -> AuditReportDocument:
    """Run the default gate over *raw*. See ``AuditGate.accept``."""
    return _default_gate.accept(raw)
