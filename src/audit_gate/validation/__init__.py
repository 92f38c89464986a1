"""Validation module: gate models, structural validator, and audit checks.

Only the plain data models are imported eagerly. Entry point::

    from audit_gate.validation.gate import accept
    document = accept(raw_json)
"""

from __future__ import annotations

from audit_gate.validation.models import GateIssue, RejectionKind

__all__ = [
    "GateIssue",
    "RejectionKind",
]
