"""audit-gate: output-contract gate for generated forensic policy audit reports.

Public API::

    from audit_gate import accept, GateRejection

    try:
        report = accept(raw_json)
    except GateRejection as exc:
        print(exc.kind, exc.message)
"""

from __future__ import annotations

from audit_gate.core.config import AppSettings
from audit_gate.exceptions import (
    AuditGateError,
    ClauseTraceMissing,
    GateRejection,
    JSONParseError,
    SchemaViolation,
    ScoringInvariantViolation,
    ScoringMathError,
)
from audit_gate.parsing import extract_json
from audit_gate.replay import ReplayResult, hash_document, verify_replay
from audit_gate.schema import AuditReportDocument, ClauseReference, LedgerEntry, PenaltyLedger
from audit_gate.validation.gate import AuditGate, accept
from audit_gate.validation.models import GateIssue, RejectionKind

__all__ = [
    "AppSettings",
    "AuditGate",
    "AuditGateError",
    "AuditReportDocument",
    "ClauseReference",
    "ClauseTraceMissing",
    "GateIssue",
    "GateRejection",
    "JSONParseError",
    "LedgerEntry",
    "PenaltyLedger",
    "RejectionKind",
    "ReplayResult",
    "SchemaViolation",
    "ScoringInvariantViolation",
    "ScoringMathError",
    "accept",
    "extract_json",
    "hash_document",
    "verify_replay",
]
