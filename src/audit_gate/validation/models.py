"""Gate data models: rejection kinds and issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RejectionKind(str, Enum):
    """The four mutually exclusive reasons a report is rejected."""

    SCHEMA_VIOLATION = "SCHEMA_VIOLATION"
    CLAUSE_TRACE_MISSING = "CLAUSE_TRACE_MISSING"
    SCORING_INVARIANT_VIOLATION = "SCORING_INVARIANT_VIOLATION"
    SCORING_MATH_ERROR = "SCORING_MATH_ERROR"


@dataclass
class GateIssue:
    """A single violation found by one gate stage."""

    kind: RejectionKind
    message: str
    field_path: str = ""
    entity_name: str = ""
    actual_value: str = ""
    expected_hint: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field_path": self.field_path,
            "entity_name": self.entity_name,
            "actual_value": self.actual_value,
            "expected_hint": self.expected_hint,
            "context": dict(self.context),
        }

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message
