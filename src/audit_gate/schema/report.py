"""Forensic audit report schema.

Every object is closed (``extra="forbid"``): a key the schema does not
declare is a validation error at whatever depth it appears. Keys declared
``Optional[...]`` without a default must be present but may be ``null``;
keys with a ``None`` default may be omitted entirely.

Primitive fields use strict types (see ``audit_gate.schema.types``): a value
of the wrong JSON type is rejected, never coerced.
"""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from audit_gate.schema.clause import AuditedClauseReference, ClauseReference
from audit_gate.schema.enums import (
    AssumedZone,
    Confidence,
    DocumentQuality,
    ExtractionMethod,
    PolicyType,
    PortRecommendation,
    RiskLevel,
    RoomRentLimitType,
    Severity,
    VerdictLabel,
)
from audit_gate.schema.ledger import PenaltyLedger
from audit_gate.schema.types import CanonicalUUID, IsoDateTime, Number, Sha256Hex


class _Closed(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ── Identity and policy metadata ─────────────────────────────────────


class PolicyMetadata(_Closed):
    insurer_normalized: StrictStr
    plan_name_normalized: StrictStr
    policy_type: PolicyType
    extraction_method: ExtractionMethod
    policy_document_page_count: Annotated[StrictInt, Field(ge=1)]
    file_sha256: Sha256Hex
    extracted_date: StrictStr


class Identity(_Closed):
    """Who is insured, as read from the schedule."""

    insured_names: list[StrictStr]
    confidence: Confidence
    assumed_zone: AssumedZone
    ages: list[Optional[StrictStr]]
    genders: list[Optional[StrictStr]]
    city: Optional[StrictStr]
    health_flags: list[StrictStr]


class PolicyTimeline(_Closed):
    policy_tenure_years: Number
    analysis_date: StrictStr
    confidence: Confidence
    policy_inception_date: Optional[StrictStr]
    policy_expiry_date: Optional[StrictStr]
    policy_age_days: Number


# ── Coverage structure ───────────────────────────────────────────────


class Rider(_Closed):
    name: StrictStr
    is_material: StrictBool
    coverage_amount: Optional[Number]
    remarks: Optional[StrictStr]
    clause_ref: ClauseReference


class TopUp(_Closed):
    exists: StrictBool
    sum_insured: Optional[Number]
    deductible: Optional[Number]
    type: Optional[StrictStr]
    deductible_achievable: Optional[StrictBool]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class SuperTopUp(_Closed):
    exists: StrictBool
    sum_insured: Optional[Number]
    deductible: Optional[Number]
    deductible_achievable: Optional[StrictBool]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class Restoration(_Closed):
    exists: StrictBool
    type: Optional[StrictStr]
    restore_amount: Optional[Number]
    trigger_conditions: Optional[StrictStr]
    actually_useful: Optional[StrictBool]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class NoClaimBonus(_Closed):
    exists: StrictBool
    rate_per_year: Optional[Number]
    cap_percentage: Optional[Number]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class CoverageStructure(_Closed):
    base_sum_insured: Number
    total_effective_coverage: Number
    confidence: Confidence
    riders: list[Rider]
    top_up: TopUp
    super_top_up: SuperTopUp
    restoration: Restoration
    no_claim_bonus: Optional[NoClaimBonus] = None

    def effective_coverage(self) -> float:
        """Base sum insured plus any top-up and super top-up that exist."""
        total = self.base_sum_insured
        if self.top_up.exists and self.top_up.sum_insured:
            total += self.top_up.sum_insured
        if self.super_top_up.exists and self.super_top_up.sum_insured:
            total += self.super_top_up.sum_insured
        return total


# ── Waiting periods ──────────────────────────────────────────────────


class InitialWaitingPeriod(_Closed):
    duration_days: Number
    end_date: Optional[StrictStr]
    is_active_today: StrictBool
    risk_commentary: Optional[StrictStr]


class PreExistingDisease(_Closed):
    duration_months: Number
    months_remaining: Number
    start_date: Optional[StrictStr]
    end_date: Optional[StrictStr]
    is_active_today: StrictBool
    risk_commentary: Optional[StrictStr]
    clause_ref: ClauseReference


class SpecificDiseases(_Closed):
    duration_months: Number
    diseases_covered: list[StrictStr]
    end_date: Optional[StrictStr]
    is_active_today: StrictBool
    risk_commentary: Optional[StrictStr]
    clause_ref: ClauseReference


class WaitingPeriodAnalysis(_Closed):
    initial_waiting_period: InitialWaitingPeriod
    pre_existing_disease: PreExistingDisease
    specific_diseases: SpecificDiseases
    policy_fully_active: StrictBool


# ── Claim risk ───────────────────────────────────────────────────────


class RoomRent(_Closed):
    limit_type: RoomRentLimitType
    limit_value: Optional[StrictStr]
    risk_level: RiskLevel
    explanation: Optional[StrictStr]
    # Mandatory by the citation audit, not by shape
    clause_ref: Optional[AuditedClauseReference] = None


class CoPayment(_Closed):
    exists: StrictBool
    percentage: Optional[Number]
    conditions: Optional[StrictStr]
    risk_level: RiskLevel
    oop_on_5L_claim: Optional[Number]
    clause_ref: Optional[AuditedClauseReference] = None


class SubLimitCategory(_Closed):
    name: StrictStr
    limit: StrictStr
    clause_ref: ClauseReference


class SubLimits(_Closed):
    exists: StrictBool
    risk_level: RiskLevel
    remarks: Optional[StrictStr]
    categories: list[SubLimitCategory]


class Deductibles(_Closed):
    base_deductible: Number
    per_claim_impact: Optional[StrictStr]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class ClaimRiskAnalysis(_Closed):
    room_rent: RoomRent
    co_payment: CoPayment
    sub_limits: SubLimits
    deductibles: Deductibles


# ── Supplementary coverage and network ───────────────────────────────


class SupplementaryBenefit(_Closed):
    """OPD, maternity, consumables, ambulance, and similar add-ons."""

    covered: StrictBool
    limit: Optional[StrictStr]
    conditions: Optional[StrictStr]
    remarks: Optional[StrictStr]
    clause_ref: Optional[ClauseReference] = None


class NetworkLimitations(_Closed):
    network_type: StrictStr
    hospital_count_in_zone: Union[StrictInt, StrictStr, None]
    major_hospitals_included: list[StrictStr]
    reimbursement_allowed: Optional[StrictBool]
    claim_settlement_ratio: Optional[Number]
    risk_level: RiskLevel
    remarks: Optional[StrictStr]


# ── Benefit evaluation ───────────────────────────────────────────────


class WorkingBenefit(_Closed):
    benefit: StrictStr
    why_it_matters_in_claim: StrictStr
    quantified_value: Optional[StrictStr]


class PolicyFailure(_Closed):
    issue: StrictStr
    real_world_claim_impact: StrictStr
    quantified_oop_risk: Optional[StrictStr]


class RedFlag(_Closed):
    flag: StrictStr
    why_it_is_dangerous: StrictStr
    severity: Severity


class BenefitEvaluation(_Closed):
    what_actually_works: list[WorkingBenefit]
    where_policy_fails: list[PolicyFailure]
    structural_red_flags: list[RedFlag]


# ── Verdict and recommendations ──────────────────────────────────────


class FirstClaimSimulation(_Closed):
    scenario_cost: Number
    estimated_oop: Number
    oop_ratio: Number
    verdict: StrictStr


class SuitabilityAnalysis(_Closed):
    rbc_value: Number
    bcar_ratio: Number
    structural_verdict: VerdictLabel
    first_claim_simulation: Optional[FirstClaimSimulation] = None


class FinalVerdict(_Closed):
    label: VerdictLabel
    summary: StrictStr
    key_failure_points: list[StrictStr]
    will_this_policy_protect_in_real_claim: StrictStr
    verdict_clause_refs: list[ClauseReference]


class CriticalAction(_Closed):
    action: StrictStr
    reason: StrictStr
    oop_risk_if_ignored: Optional[StrictStr]
    suggested_riders_or_topups: list[StrictStr]
    estimated_cost: Optional[StrictStr]


class PortingAdvice(_Closed):
    recommendation: PortRecommendation
    reason: StrictStr
    what_to_look_for: list[StrictStr]


class Action(_Closed):
    action: StrictStr
    reason: StrictStr


class Recommendations(_Closed):
    critical_actions: list[CriticalAction]
    should_port_to_better_policy: PortingAdvice
    medium_priority: list[Action]
    low_priority: list[Action]


class DataQuality(_Closed):
    overall: Confidence
    missing_critical_fields: list[StrictStr]
    ambiguous_clauses: list[StrictStr]
    policy_document_quality: DocumentQuality


# ── Root document ────────────────────────────────────────────────────


class AuditReportDocument(_Closed):
    """Root of a generated forensic audit report."""

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    schema_version: StrictStr
    analysis_id: CanonicalUUID
    generated_at: IsoDateTime
    prompt_hash: Sha256Hex
    model_version: StrictStr
    policy_wordings_checksum: Sha256Hex

    policy_metadata: PolicyMetadata
    identity: Identity
    policy_timeline: PolicyTimeline
    coverage_structure: CoverageStructure
    waiting_period_analysis: WaitingPeriodAnalysis
    claim_risk_analysis: ClaimRiskAnalysis
    supplementary_coverage: dict[str, SupplementaryBenefit]
    network_limitations: Optional[NetworkLimitations]
    benefit_evaluation: Optional[BenefitEvaluation]
    audit_ledger: PenaltyLedger
    suitability_analysis: Optional[SuitabilityAnalysis] = None
    final_verdict: FinalVerdict
    recommendations: Optional[Recommendations]
    data_quality: Optional[DataQuality]
    confidence_notes: list[StrictStr]
