"""Nested pydantic-settings configuration for the application.

Each group reads its own ``AUDIT_GATE_<GROUP>_*`` env vars::

    export AUDIT_GATE_OBSERVABILITY_LOG_LEVEL=DEBUG
    export AUDIT_GATE_VALIDATION_MAX_ISSUES_IN_MESSAGE=50

Nothing here changes whether a report is accepted; settings only shape
messages, logging, and the HTTP surface.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ValidationConfig(BaseSettings):
    """Gate reporting configuration.

    Env vars use ``AUDIT_GATE_VALIDATION_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_GATE_VALIDATION_"}

    # Issues spelled out in a rejection message; all are kept on the exception
    max_issues_in_message: int = 25


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``AUDIT_GATE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_GATE_OBSERVABILITY_"}

    service_name: str = "audit-gate"
    log_level: str = "INFO"
    # auto: console renderer on a TTY, JSON lines otherwise
    log_format: str = "auto"


class APIConfig(BaseSettings):
    """HTTP API configuration.

    Env vars use ``AUDIT_GATE_API_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_GATE_API_"}

    title: str = "Audit Gate"
    description: str = "Output-contract gate for generated forensic policy audit reports"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    validation: ValidationConfig = ValidationConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
