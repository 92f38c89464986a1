"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from audit_gate.api.middleware.error_handler import register_error_handlers
from audit_gate.api.routes import audits, health
from audit_gate.core.config import APIConfig, AppSettings
from audit_gate.core.startup_checks import validate_settings
from audit_gate.hooks import setup_logging
from audit_gate.validation.gate import AuditGate


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("audit-gate")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    app.state.settings = settings
    app.state.gate = AuditGate(settings.validation)
    yield


def create_app() -> FastAPI:
    api_config = APIConfig()
    application = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(application)
    application.include_router(health.router)
    application.include_router(audits.router, prefix="/api")
    return application


app = create_app()
