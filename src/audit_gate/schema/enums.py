"""Closed enumerations used by the audit report schema."""

from __future__ import annotations

from enum import Enum

# ── Shared scales ────────────────────────────────────────────────────


class Confidence(str, Enum):
    """Generator's self-reported confidence for a section."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskLevel(str, Enum):
    """Claim-risk rating for an analysed clause."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Severity of a structural red flag."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ── Verdict and scoring ──────────────────────────────────────────────


class VerdictLabel(str, Enum):
    """Final verdict shown to the policyholder."""

    SAFE = "SAFE"
    BORDERLINE = "BORDERLINE"
    RISKY = "RISKY"


class PenaltyCategory(str, Enum):
    """Which aspect of the policy a ledger deduction is charged against."""

    COVERAGE_GAP = "COVERAGE_GAP"
    SUB_LIMIT = "SUB_LIMIT"
    WAITING_PERIOD = "WAITING_PERIOD"
    COPAY_DEDUCTIBLE = "COPAY_DEDUCTIBLE"
    ROOM_RENT = "ROOM_RENT"
    EXCLUSION = "EXCLUSION"
    AMBIGUITY = "AMBIGUITY"


# ── Policy metadata ──────────────────────────────────────────────────


class AssumedZone(str, Enum):
    """City pricing zone used for cost comparisons."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    UNKNOWN = "Unknown"


class PolicyType(str, Enum):
    HEALTH = "HEALTH"
    LIFE = "LIFE"
    VEHICLE = "VEHICLE"
    TRAVEL = "TRAVEL"
    CRITICAL_ILLNESS = "CRITICAL_ILLNESS"
    UNKNOWN = "UNKNOWN"


class ExtractionMethod(str, Enum):
    """How the policy text was obtained before analysis."""

    OCR_TEXT = "OCR_TEXT"
    NATIVE_PDF = "NATIVE_PDF"
    VISION_API = "VISION_API"


# ── Clause-level classifications ─────────────────────────────────────


class RoomRentLimitType(str, Enum):
    NONE = "none"
    SPECIFIC_AMOUNT = "specific_amount"
    ROOM_CATEGORY = "room_category"
    PERCENTAGE_OF_SI = "percentage_of_si"


class PortRecommendation(str, Enum):
    YES = "yes"
    NO = "no"
    CONSIDER = "consider"


class DocumentQuality(str, Enum):
    """Legibility of the source policy document."""

    CLEAR = "clear"
    ACCEPTABLE = "acceptable"
    POOR = "poor"
    UNCLEAR = "unclear"
