"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from audit_gate.exceptions import AuditGateError, GateRejection, JSONParseError


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(GateRejection)
    async def handle_rejection(request: Request, exc: GateRejection) -> JSONResponse:
        return JSONResponse(status_code=422, content={"type": "gate_rejection", **exc.to_dict()})

    @app.exception_handler(JSONParseError)
    async def handle_parse_error(request: Request, exc: JSONParseError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "json_parse_error"})

    @app.exception_handler(AuditGateError)
    async def handle_generic_error(request: Request, exc: AuditGateError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "audit_gate_error"})
