"""Audit report endpoints: gate a generated report, compare two runs."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from audit_gate.exceptions import JSONParseError
from audit_gate.replay import verify_replay
from audit_gate.validation.gate import AuditGate

router = APIRouter(prefix="/audits", tags=["audits"])


class AcceptedReportResponse(BaseModel):
    """A report that passed every gate stage."""

    status: str = "accepted"
    analysis_id: str
    final_score: int
    verdict: str
    document: dict[str, Any]


class ReplayRequest(BaseModel):
    original: dict[str, Any]
    replay: dict[str, Any]


class ReplayResponse(BaseModel):
    matches: bool
    diffs: list[str] = Field(default_factory=list)
    original_hash: str
    replay_hash: str


def _gate(request: Request) -> AuditGate:
    gate = getattr(request.app.state, "gate", None)
    return gate if gate is not None else AuditGate()


@router.post("/validate", response_model=AcceptedReportResponse)
async def validate_report(request: Request) -> AcceptedReportResponse:
    """Gate a raw generator output.

    The body is the generator's output as-is: a JSON report, optionally
    wrapped in a code fence. Rejections are mapped to 422 by the error
    handlers; unparseable bodies to 400.
    """
    raw = await request.body()
    try:
        body = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise JSONParseError(f"Request body is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    document = _gate(request).accept_text(body)
    return AcceptedReportResponse(
        analysis_id=str(document.analysis_id),
        final_score=document.audit_ledger.final_score,
        verdict=document.final_verdict.label.value,
        document=document.model_dump(mode="json", exclude_unset=True),
    )


@router.post("/replay", response_model=ReplayResponse)
async def replay_report(payload: ReplayRequest) -> ReplayResponse:
    """Compare a recorded report with a re-generated one."""
    result = verify_replay(payload.original, payload.replay)
    return ReplayResponse(
        matches=result.matches,
        diffs=result.diffs,
        original_hash=result.original_hash,
        replay_hash=result.replay_hash,
    )
