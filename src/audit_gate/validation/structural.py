"""Structural validation: untrusted JSON in, typed report or path-qualified issues out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from audit_gate.schema.report import AuditReportDocument
from audit_gate.validation.models import GateIssue, RejectionKind

log = logging.getLogger(__name__)

_MAX_VALUE_CHARS = 80


@dataclass
class StructuralResult:
    """Outcome of validating one raw document against the schema."""

    document: Optional[AuditReportDocument] = None
    issues: list[GateIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.document is not None and not self.issues


def format_path(loc: tuple[Any, ...]) -> str:
    """Render a pydantic error location as ``a.b.2.c``."""
    return ".".join(str(part) for part in loc)


def _short_repr(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_VALUE_CHARS:
        return text[: _MAX_VALUE_CHARS - 3] + "..."
    return text


def validate(raw: Any) -> StructuralResult:
    """Validate *raw* against the report schema, collecting every violation."""
    if not isinstance(raw, dict):
        return StructuralResult(
            issues=[
                GateIssue(
                    kind=RejectionKind.SCHEMA_VIOLATION,
                    message=f"Report must be a JSON object, got {type(raw).__name__}",
                    actual_value=_short_repr(raw),
                    expected_hint="object",
                )
            ]
        )

    try:
        document = AuditReportDocument.model_validate(raw)
    except ValidationError as exc:
        issues = [
            GateIssue(
                kind=RejectionKind.SCHEMA_VIOLATION,
                message=err["msg"],
                field_path=format_path(err["loc"]),
                actual_value=_short_repr(err.get("input")),
                expected_hint=err["type"],
            )
            for err in exc.errors()
        ]
        log.debug("Structural validation found %d issue(s)", len(issues))
        return StructuralResult(issues=issues)

    return StructuralResult(document=document)
