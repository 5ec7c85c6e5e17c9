"""
Pydantic Schemas for Claim Financial Calculation.

This module exports the request, result and collaborator record schemas.
"""

from src.schemas.financial import (
    CalculationAmounts,
    CalculationBreakdown,
    CalculationSummary,
    ClaimCalculationRequest,
    CoinsuranceBreakdown,
    ComplianceResult,
    CopayBreakdown,
    CostShare,
    DeductibleBreakdown,
    FinancialCalculationResult,
    LimitationBreakdown,
    LimitationSet,
    MLRImpactResult,
    OutOfPocketBreakdown,
    PaymentTimingEstimate,
    ProcedureLineItem,
    ProcedureRateDetail,
    ProviderDiscountBreakdown,
    RateResolution,
    ResponsibilitySplit,
)
from src.schemas.plan import (
    AccumulatorState,
    Benefit,
    CompanyBenefit,
    Institution,
    MedicalProcedure,
    Member,
    ProviderProcedureRate,
    UtilizationRecord,
)

__all__ = [
    # Request
    "ClaimCalculationRequest",
    "ProcedureLineItem",
    "CostShare",
    # Rates
    "ProcedureRateDetail",
    "RateResolution",
    # Breakdown
    "DeductibleBreakdown",
    "CopayBreakdown",
    "CoinsuranceBreakdown",
    "ProviderDiscountBreakdown",
    "OutOfPocketBreakdown",
    "ResponsibilitySplit",
    "LimitationBreakdown",
    "LimitationSet",
    "ComplianceResult",
    "CalculationBreakdown",
    # Result
    "CalculationAmounts",
    "CalculationSummary",
    "FinancialCalculationResult",
    "MLRImpactResult",
    "PaymentTimingEstimate",
    # Collaborator records
    "Member",
    "Benefit",
    "CompanyBenefit",
    "Institution",
    "MedicalProcedure",
    "ProviderProcedureRate",
    "UtilizationRecord",
    "AccumulatorState",
]
