"""Report builders shared by the test suite."""

from __future__ import annotations

import copy
from typing import Any


def clause(clause_id: str = "3.1", page: int = 1, snippet: str = "Max 1000 per day") -> dict[str, Any]:
    return {"clause_id": clause_id, "page_number": page, "text_snippet": snippet, "confidence": 1}


def entry(
    points: Any,
    *,
    category: str = "AMBIGUITY",
    reason: str = "Ambiguous wording",
    clause_ref: Any = "default",
) -> dict[str, Any]:
    """A ledger entry dict; pass ``clause_ref=None`` for a null citation."""
    item: dict[str, Any] = {
        "penalty_points": points,
        "category": category,
        "reason": reason,
        "impact_scenario": "Claim may be reduced",
    }
    item["clause_ref"] = clause("7.4", 3, "Clause wording is unclear") if clause_ref == "default" else clause_ref
    return item


# Known bad policy: 4-year PED wait, low room rent cap, 20% co-pay. 100 - 30 - 15 - 20 = 35.
GOLDEN_REPORT: dict[str, Any] = {
    "schema_version": "2.0.0",
    "analysis_id": "00000000-0000-0000-0000-000000000000",
    "generated_at": "2026-02-04T12:00:00Z",
    "prompt_hash": "a1b2c3d4" * 8,
    "model_version": "gemini-3-pro-preview",
    "policy_wordings_checksum": "f6e5d4c3" * 8,
    "identity": {
        "insured_names": ["Test User"],
        "confidence": "high",
        "assumed_zone": "A",
        "ages": ["30"],
        "genders": ["Male"],
        "city": "Delhi",
        "health_flags": [],
    },
    "policy_metadata": {
        "insurer_normalized": "Bad Insurer",
        "plan_name_normalized": "Worst Plan",
        "policy_type": "HEALTH",
        "extraction_method": "OCR_TEXT",
        "policy_document_page_count": 5,
        "file_sha256": "0123456789abcdef" * 4,
        "extracted_date": "2024-01-01",
    },
    "policy_timeline": {
        "policy_tenure_years": 1,
        "analysis_date": "2026-02-04",
        "confidence": "high",
        "policy_inception_date": "2024-01-01",
        "policy_expiry_date": "2025-01-01",
        "policy_age_days": 365,
    },
    "coverage_structure": {
        "base_sum_insured": 100000,
        "total_effective_coverage": 100000,
        "confidence": "high",
        "riders": [],
        "top_up": {
            "exists": False,
            "remarks": None,
            "sum_insured": None,
            "deductible": None,
            "type": None,
            "deductible_achievable": None,
        },
        "super_top_up": {
            "exists": False,
            "remarks": None,
            "sum_insured": None,
            "deductible": None,
            "deductible_achievable": None,
        },
        "restoration": {
            "exists": False,
            "remarks": None,
            "type": None,
            "restore_amount": None,
            "trigger_conditions": None,
            "actually_useful": None,
        },
    },
    "waiting_period_analysis": {
        "initial_waiting_period": {
            "duration_days": 30,
            "end_date": None,
            "is_active_today": False,
            "risk_commentary": None,
        },
        "pre_existing_disease": {
            "duration_months": 48,
            "months_remaining": 48,
            "start_date": None,
            "end_date": None,
            "is_active_today": True,
            "risk_commentary": "Critical 4 Year Wait",
            "clause_ref": clause("9.1", 2, "PED wait 48 months"),
        },
        "specific_diseases": {
            "duration_months": 24,
            "diseases_covered": [],
            "end_date": None,
            "is_active_today": True,
            "risk_commentary": None,
            "clause_ref": clause("9.2", 2, "Specific 24 months"),
        },
        "policy_fully_active": False,
    },
    "claim_risk_analysis": {
        "room_rent": {
            "limit_type": "specific_amount",
            "limit_value": "1000/day",
            "risk_level": "critical",
            "explanation": "Low Cap",
            "clause_ref": clause("3.1", 1, "Max 1000 per day"),
        },
        "co_payment": {
            "exists": True,
            "percentage": 20,
            "conditions": "All claims",
            "risk_level": "high",
            "oop_on_5L_claim": 100000,
            "clause_ref": clause("3.2", 1, "20% co-pay applicable"),
        },
        "sub_limits": {"exists": False, "risk_level": "low", "remarks": None, "categories": []},
        "deductibles": {"base_deductible": 0, "per_claim_impact": None, "remarks": None},
    },
    "supplementary_coverage": {},
    "network_limitations": None,
    "benefit_evaluation": None,
    "audit_ledger": {
        "initial_score": 100,
        "entries": [
            entry(
                -30,
                category="WAITING_PERIOD",
                reason="4 Year PED Wait",
                clause_ref=clause("9.1", 2, "PED wait 48 months"),
            ),
            entry(
                -15,
                category="ROOM_RENT",
                reason="Low Room Limit",
                clause_ref=clause("3.1", 1, "Max 1000 per day"),
            ),
            entry(
                -20,
                category="COPAY_DEDUCTIBLE",
                reason="20% Co-pay",
                clause_ref=clause("3.2", 1, "20% co-pay applicable"),
            ),
        ],
        "final_score": 35,
    },
    "final_verdict": {
        "label": "RISKY",
        "summary": "Avoid",
        "key_failure_points": ["4yr Wait", "Low Room Rent", "20% Copay"],
        "will_this_policy_protect_in_real_claim": "No",
        "verdict_clause_refs": [],
    },
    "recommendations": None,
    "data_quality": None,
    "confidence_notes": [],
}


def golden_report() -> dict[str, Any]:
    """A fresh deep copy of the golden report; callers may mutate it freely."""
    return copy.deepcopy(GOLDEN_REPORT)
