"""Audit report schema: closed pydantic models and enumerations."""

from __future__ import annotations

from audit_gate.schema.clause import (
    MIN_SNIPPET_LENGTH,
    AuditedClauseReference,
    ClauseReference,
    has_valid_clause,
)
from audit_gate.schema.enums import (
    AssumedZone,
    Confidence,
    DocumentQuality,
    ExtractionMethod,
    PenaltyCategory,
    PolicyType,
    PortRecommendation,
    RiskLevel,
    RoomRentLimitType,
    Severity,
    VerdictLabel,
)
from audit_gate.schema.ledger import (
    INITIAL_SCORE,
    SCORE_CEILING,
    SCORE_FLOOR,
    LedgerEntry,
    PenaltyLedger,
)
from audit_gate.schema.report import AuditReportDocument, CoverageStructure

__all__ = [
    "AssumedZone",
    "AuditReportDocument",
    "AuditedClauseReference",
    "ClauseReference",
    "Confidence",
    "CoverageStructure",
    "DocumentQuality",
    "ExtractionMethod",
    "INITIAL_SCORE",
    "LedgerEntry",
    "MIN_SNIPPET_LENGTH",
    "PenaltyCategory",
    "PenaltyLedger",
    "PolicyType",
    "PortRecommendation",
    "RiskLevel",
    "RoomRentLimitType",
    "SCORE_CEILING",
    "SCORE_FLOOR",
    "Severity",
    "VerdictLabel",
    "has_valid_clause",
]
