"""
Claim Financial Calculation.

Splits a claim between member and insurer and annotates the result
with limitations and compliance findings.

Source: Claims Financial Processing
Verified: 2026-10-18
"""

from src.services.financial.calculator import (
    CalculationInputs,
    FinancialCalculationService,
    create_financial_calculation_service,
)
from src.services.financial.compliance import (
    ComplianceChecker,
    calculate_rate_compliance_score,
)
from src.services.financial.limitations import LimitationTracker
from src.services.financial.mlr import (
    build_payment_timing_estimate,
    calculate_mlr_impact,
    estimate_payment_timing,
    risk_level_from_fraud_risk,
)
from src.services.financial.rate_resolver import RateResolver, synthetic_line_item
from src.services.financial.responsibility import (
    CostSharingTable,
    apply_coinsurance,
    apply_copay,
    apply_deductible,
    apply_out_of_pocket_maximum,
    calculate_provider_discount,
    member_responsibility,
    split_responsibility,
)

__all__ = [
    # Orchestrator
    "FinancialCalculationService",
    "CalculationInputs",
    "create_financial_calculation_service",
    # Rates
    "RateResolver",
    "synthetic_line_item",
    # Responsibility
    "CostSharingTable",
    "apply_deductible",
    "apply_copay",
    "apply_coinsurance",
    "calculate_provider_discount",
    "apply_out_of_pocket_maximum",
    "split_responsibility",
    "member_responsibility",
    # Limitations
    "LimitationTracker",
    # Compliance
    "ComplianceChecker",
    "calculate_rate_compliance_score",
    # MLR / timing
    "calculate_mlr_impact",
    "estimate_payment_timing",
    "risk_level_from_fraud_risk",
    "build_payment_timing_estimate",
]
