"""Semantic checks run on a structurally valid report."""

from __future__ import annotations

from audit_gate.validation.checks.citations import audit_citations
from audit_gate.validation.checks.ledger import LedgerAudit, audit_ledger, recompute_final_score

__all__ = [
    "LedgerAudit",
    "audit_citations",
    "audit_ledger",
    "recompute_final_score",
]
