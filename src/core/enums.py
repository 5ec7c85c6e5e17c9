"""
Core Enumerations for Claim Financial Calculation.
Source: Claims Financial Processing - Financial Responsibility Calculation
Verified: 2026-10-18
"""

from enum import Enum


# =============================================================================
# Integration Enums
# =============================================================================


class IntegrationMode(str, Enum):
    """System integration mode."""

    DEMO = "demo"  # Demo mode: in-memory collaborator data
    LIVE = "live"  # Live mode: real member/benefit/provider systems


# =============================================================================
# Benefit Enums
# =============================================================================


class BenefitCategory(str, Enum):
    """Benefit categories defined by the insurer."""

    MEDICAL = "medical"
    DENTAL = "dental"
    VISION = "vision"
    WELLNESS = "wellness"
    HOSPITAL = "hospital"
    PRESCRIPTION = "prescription"
    EMERGENCY = "emergency"
    MATERNITY = "maternity"
    SPECIALIST = "specialist"
    OTHER = "other"


# =============================================================================
# Calculation Breakdown Enums
# =============================================================================


class VarianceReason(str, Enum):
    """Why the applied rate differs (or not) from the standard rate."""

    NETWORK_DISCOUNT = "Network Discount"
    STANDARD_RATE = "Standard Rate"


class DeductibleType(str, Enum):
    """Deductible accumulation level."""

    INDIVIDUAL = "individual"
    FAMILY = "family"


class CopayType(str, Enum):
    """How a copay is expressed."""

    FLAT = "flat"
    PERCENTAGE = "percentage"
    TIERED = "tiered"


class DiscountType(str, Enum):
    """Provider discount basis."""

    NEGOTIATED = "negotiated"
    NONE = "none"


class LimitType(str, Enum):
    """Unit a limitation is measured in."""

    VISIT = "visit"
    DOLLAR = "dollar"
    SERVICE = "service"


class LimitationScope(str, Enum):
    """Which cap a limitation describes."""

    BENEFIT = "benefit"
    ANNUAL = "annual"
    LIFETIME = "lifetime"


# =============================================================================
# Analytics Enums
# =============================================================================


class MLRImpact(str, Enum):
    """Direction of a claim's effect on the medical loss ratio."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class PaymentRiskLevel(str, Enum):
    """Risk level used to estimate payment timing."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"
