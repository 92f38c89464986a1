"""Clause references: pointers from an analytical claim back to policy text."""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from audit_gate.schema.types import NonBlankStr, Number

MIN_SNIPPET_LENGTH = 5


class _ClauseCitation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page_number: Annotated[StrictInt, Field(ge=1)]
    text_snippet: Annotated[StrictStr, Field(min_length=MIN_SNIPPET_LENGTH)]
    confidence: Annotated[Number, Field(ge=0.0, le=1.0)]


class ClauseReference(_ClauseCitation):
    """A verifiable citation into the source policy document."""

    clause_id: NonBlankStr


class AuditedClauseReference(_ClauseCitation):
    """Citation on a score-moving claim (ledger entries, room rent, co-payment).

    A blank ``clause_id`` passes the schema here so the citation audit can
    report it as a missing citation rather than a malformed document.
    """

    clause_id: StrictStr


def has_valid_clause(ref: Optional[Union[ClauseReference, AuditedClauseReference]]) -> bool:
    """True when *ref* is present and names a clause."""
    return ref is not None and bool(ref.clause_id.strip())
