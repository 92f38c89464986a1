"""Shared fixtures for audit-gate tests."""

from __future__ import annotations

from typing import Any

import pytest

from tests.factories import golden_report


@pytest.fixture
def report() -> dict[str, Any]:
    """Golden report (accepted as-is), deep-copied per test."""
    return golden_report()


@pytest.fixture
def with_ledger(report: dict[str, Any]):
    """Build a report around the given ledger entries and final score."""

    def _build(entries: list[dict[str, Any]], final_score: Any, initial_score: Any = 100) -> dict[str, Any]:
        report["audit_ledger"] = {
            "initial_score": initial_score,
            "entries": entries,
            "final_score": final_score,
        }
        return report

    return _build
