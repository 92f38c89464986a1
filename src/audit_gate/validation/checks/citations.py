"""Citation checks: every score-moving claim must point at a policy clause."""

from __future__ import annotations

from audit_gate.schema.clause import has_valid_clause
from audit_gate.schema.report import AuditReportDocument
from audit_gate.validation.models import GateIssue, RejectionKind

# Claim-risk sections that must always cite their clause
_MANDATORY_SECTIONS = ("room_rent", "co_payment")


def audit_citations(doc: AuditReportDocument) -> list[GateIssue]:
    """Return one issue per uncited ledger entry or mandatory claim-risk section."""
    issues: list[GateIssue] = []
    issues.extend(_check_ledger_entries(doc))
    issues.extend(_check_claim_risk_sections(doc))
    return issues


def _check_ledger_entries(doc: AuditReportDocument) -> list[GateIssue]:
    issues: list[GateIssue] = []

    for index, entry in enumerate(doc.audit_ledger.entries):
        if has_valid_clause(entry.clause_ref):
            continue
        issues.append(
            GateIssue(
                kind=RejectionKind.CLAUSE_TRACE_MISSING,
                message=f"Ledger entry #{index} ({entry.reason}) lacks valid clause citation",
                field_path=f"audit_ledger.entries.{index}.clause_ref",
                entity_name=entry.reason,
                actual_value="null" if entry.clause_ref is None else repr(entry.clause_ref.clause_id),
                expected_hint="clause_ref with non-empty clause_id",
                context={"entry_index": index},
            )
        )

    return issues


def _check_claim_risk_sections(doc: AuditReportDocument) -> list[GateIssue]:
    issues: list[GateIssue] = []

    for name in _MANDATORY_SECTIONS:
        section = getattr(doc.claim_risk_analysis, name)
        if has_valid_clause(section.clause_ref):
            continue
        issues.append(
            GateIssue(
                kind=RejectionKind.CLAUSE_TRACE_MISSING,
                message=f"{name.replace('_', ' ').capitalize()} analysis lacks clause citation",
                field_path=f"claim_risk_analysis.{name}",
                entity_name=name,
                actual_value="null" if section.clause_ref is None else repr(section.clause_ref.clause_id),
                expected_hint="clause_ref with non-empty clause_id",
            )
        )

    return issues
