"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from audit_gate.core.config import AppSettings

log = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})
_LOG_FORMATS = frozenset({"auto", "json", "console"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_log_level(settings)
    _check_log_format(settings)
    _check_issue_cap(settings)


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"AUDIT_GATE_OBSERVABILITY_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}, "
            f"got '{settings.observability.log_level}'."
        )


def _check_log_format(settings: AppSettings) -> None:
    if settings.observability.log_format.lower() not in _LOG_FORMATS:
        raise ValueError(
            f"AUDIT_GATE_OBSERVABILITY_LOG_FORMAT must be one of {', '.join(sorted(_LOG_FORMATS))}, "
            f"got '{settings.observability.log_format}'."
        )


def _check_issue_cap(settings: AppSettings) -> None:
    cap = settings.validation.max_issues_in_message
    if cap < 1:
        raise ValueError(
            f"AUDIT_GATE_VALIDATION_MAX_ISSUES_IN_MESSAGE must be at least 1, got {cap}."
        )
    if cap > 500:
        log.warning(
            "AUDIT_GATE_VALIDATION_MAX_ISSUES_IN_MESSAGE=%d; rejection messages may get very long.",
            cap,
        )
