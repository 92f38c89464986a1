"""Process-level hooks: logging setup."""

from __future__ import annotations

from audit_gate.hooks.logging_config import setup_logging

__all__ = ["setup_logging"]
