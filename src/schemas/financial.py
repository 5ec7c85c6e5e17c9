"""
Pydantic Schemas for Claim Financial Calculation.
Source: Claims Financial Processing - Financial Responsibility Calculation
Verified: 2026-10-18
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.enums import (
    CopayType,
    DeductibleType,
    DiscountType,
    LimitationScope,
    LimitType,
    MLRImpact,
    PaymentRiskLevel,
    VarianceReason,
)


# =============================================================================
# Configuration Schemas
# =============================================================================


class CostShare(BaseModel):
    """Cost sharing applied to one benefit category."""

    model_config = ConfigDict(frozen=True)

    copay: Decimal = Field(default=Decimal("0"), ge=0, description="Flat copay amount")
    coinsurance_rate: Decimal = Field(
        default=Decimal("20"),
        ge=0,
        le=100,
        description="Member coinsurance percentage (0-100)",
    )


# =============================================================================
# Request Schemas
# =============================================================================


class ProcedureLineItem(BaseModel):
    """A billed procedure on a claim."""

    model_config = ConfigDict(frozen=True)

    procedure_id: int = Field(default=0, ge=0, description="Procedure ID (0 = unidentified service)")
    quantity: int = Field(default=1, ge=1, description="Units billed")
    unit_rate: Optional[Decimal] = Field(None, ge=0, decimal_places=2, description="Billed rate per unit")
    total_amount: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2, description="Billed line total")

    @property
    def standard_rate(self) -> Decimal:
        """Billed unit rate, derived from the line total when no unit rate is given."""
        if self.unit_rate:
            return self.unit_rate
        return self.total_amount / self.quantity


class ClaimCalculationRequest(BaseModel):
    """Input for a financial responsibility calculation."""

    model_config = ConfigDict(frozen=True)

    claim_id: int
    original_amount: Decimal = Field(..., ge=0, decimal_places=2, description="Billed claim amount")
    member_id: int
    benefit_id: int
    institution_id: int
    procedure_items: list[ProcedureLineItem] = Field(default_factory=list)
    service_date: Optional[date] = Field(None, description="Date of service (defaults to today)")


# =============================================================================
# Rate Schemas
# =============================================================================


class ProcedureRateDetail(BaseModel):
    """Resolved rate for one procedure line."""

    model_config = ConfigDict(frozen=True)

    procedure_id: int
    procedure_name: str
    procedure_code: str
    quantity: int
    standard_rate: Decimal
    negotiated_rate: Decimal
    applied_rate: Decimal
    variance_reason: VarianceReason
    exceeds_standard_rate: bool = False

    @property
    def standard_amount(self) -> Decimal:
        return self.standard_rate * self.quantity

    @property
    def applied_amount(self) -> Decimal:
        return self.applied_rate * self.quantity


class RateResolution(BaseModel):
    """Rate details for every line on a claim."""

    model_config = ConfigDict(frozen=True)

    standard_rates: list[ProcedureRateDetail] = Field(default_factory=list)
    negotiated_rates: list[ProcedureRateDetail] = Field(default_factory=list)
    applied_rates: list[ProcedureRateDetail] = Field(default_factory=list)
    rate_savings: Decimal = Decimal("0")

    @property
    def allowed_amount(self) -> Decimal:
        """Negotiated total both parties split."""
        return sum((r.applied_amount for r in self.applied_rates), Decimal("0"))


# =============================================================================
# Breakdown Schemas
# =============================================================================


class DeductibleBreakdown(BaseModel):
    """Deductible stage result."""

    model_config = ConfigDict(frozen=True)

    deductible_type: DeductibleType = DeductibleType.INDIVIDUAL
    annual_deductible: Decimal
    remaining_deductible: Decimal
    applied_amount: Decimal
    deductible_met: bool


class CopayBreakdown(BaseModel):
    """Copay stage result."""

    model_config = ConfigDict(frozen=True)

    copay_type: CopayType = CopayType.FLAT
    copay_amount: Decimal
    applied_amount: Decimal
    waived: bool
    waiver_reason: Optional[str] = None


class CoinsuranceBreakdown(BaseModel):
    """Coinsurance stage result."""

    model_config = ConfigDict(frozen=True)

    coinsurance_rate: Decimal
    applied_to_amount: Decimal
    coinsurance_amount: Decimal
    remaining_responsibility: Decimal


class ProviderDiscountBreakdown(BaseModel):
    """Network discount between standard and negotiated totals."""

    model_config = ConfigDict(frozen=True)

    discount_type: DiscountType
    standard_amount: Decimal
    discounted_amount: Decimal
    discount_amount: Decimal
    discount_rate: Decimal


class OutOfPocketBreakdown(BaseModel):
    """Out-of-pocket maximum stage result."""

    model_config = ConfigDict(frozen=True)

    annual_maximum: Optional[Decimal] = Field(None, description="None when the plan is uncapped")
    current_total: Decimal
    applied_amount: Decimal
    final_amount: Decimal
    remaining_amount: Optional[Decimal] = None
    available_before_claim: Optional[Decimal] = None
    maximum_met: bool = False


class LimitationBreakdown(BaseModel):
    """Remaining room under a benefit cap."""

    model_config = ConfigDict(frozen=True)

    scope: LimitationScope
    limit_type: LimitType = LimitType.DOLLAR
    limit_amount: Decimal
    used_amount: Decimal
    remaining_amount: Decimal
    applied_limit: bool


class LimitationSet(BaseModel):
    """The three limitation views reported per claim."""

    model_config = ConfigDict(frozen=True)

    benefit_limits: LimitationBreakdown
    annual_limits: LimitationBreakdown
    lifetime_limits: LimitationBreakdown


class ComplianceResult(BaseModel):
    """Advisory compliance annotations for a claim."""

    model_config = ConfigDict(frozen=True)

    billing_compliance: bool
    coding_compliance: bool
    rate_compliance: bool
    compliance_score: Decimal
    issues: list[str] = Field(default_factory=list)


class ResponsibilitySplit(BaseModel):
    """Deductible, copay, coinsurance and OOP stages for one claim."""

    model_config = ConfigDict(frozen=True)

    deductible: DeductibleBreakdown
    copay: CopayBreakdown
    coinsurance: CoinsuranceBreakdown
    out_of_pocket_maximum: OutOfPocketBreakdown

    @property
    def cost_sharing_total(self) -> Decimal:
        """Member cost sharing before any cap."""
        return (
            self.deductible.applied_amount
            + self.copay.applied_amount
            + self.coinsurance.coinsurance_amount
        )


class CalculationBreakdown(BaseModel):
    """Per-stage breakdown reported on the result."""

    model_config = ConfigDict(frozen=True)

    deductible: DeductibleBreakdown
    copay: CopayBreakdown
    coinsurance: CoinsuranceBreakdown
    provider_discount: ProviderDiscountBreakdown
    out_of_pocket_maximum: OutOfPocketBreakdown


# =============================================================================
# Result Schemas
# =============================================================================


class CalculationAmounts(BaseModel):
    """Headline amounts of a calculation."""

    model_config = ConfigDict(frozen=True)

    original_amount: Decimal
    allowed_amount: Decimal
    deductible_amount: Decimal
    copay_amount: Decimal
    coinsurance_amount: Decimal
    provider_discount_amount: Decimal
    member_responsibility: Decimal
    insurer_responsibility: Decimal
    network_savings: Decimal


class CalculationSummary(BaseModel):
    """Derived percentages and savings."""

    model_config = ConfigDict(frozen=True)

    total_savings: Decimal
    member_paid_percentage: Decimal
    insurer_paid_percentage: Decimal
    effective_rate: Decimal


class FinancialCalculationResult(BaseModel):
    """Complete financial responsibility result for a claim."""

    model_config = ConfigDict(frozen=True)

    claim_id: int
    calculations: CalculationAmounts
    breakdown: CalculationBreakdown
    rate_details: RateResolution
    limitations: LimitationSet
    compliance: ComplianceResult
    summary: CalculationSummary

    @property
    def member_responsibility(self) -> Decimal:
        return self.calculations.member_responsibility

    @property
    def insurer_responsibility(self) -> Decimal:
        return self.calculations.insurer_responsibility

    @property
    def allowed_amount(self) -> Decimal:
        return self.calculations.allowed_amount


# =============================================================================
# Analytics Schemas
# =============================================================================


class MLRImpactResult(BaseModel):
    """Effect of a claim on the medical loss ratio."""

    model_config = ConfigDict(frozen=True)

    current_mlr: Decimal
    projected_mlr: Decimal
    impact: MLRImpact
    recommendation: str = ""


class PaymentTimingEstimate(BaseModel):
    """Estimated time until a claim is paid."""

    model_config = ConfigDict(frozen=True)

    claim_id: int
    risk_level: PaymentRiskLevel
    estimated_days: int
    estimated_payment_date: date
    current_date: datetime
