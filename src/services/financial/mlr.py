"""
Medical Loss Ratio and Payment Timing.

Secondary helpers used alongside a financial calculation: the effect of
a claim on the medical loss ratio, and the expected days to payment.

Source: Claims Financial Processing - MLR Impact and Payment Timing
Verified: 2026-10-18
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from src.core.config import FinancialSettings, get_financial_settings
from src.core.enums import MLRImpact, PaymentRiskLevel
from src.schemas.financial import MLRImpactResult, PaymentTimingEstimate
from src.services.financial.money import ZERO, percent_of
from src.utils.errors import ValidationError

REVIEW_PREMIUMS = "Review premium rates or benefit designs"
CONSIDER_REDUCTIONS = "Consider premium reductions for members"


def calculate_mlr_impact(
    insurer_responsibility: Decimal,
    member_responsibility: Decimal,
    premium_amount: Decimal,
    settings: Optional[FinancialSettings] = None,
) -> MLRImpactResult:
    """
    Calculate a claim's impact on the medical loss ratio.

    Args:
        insurer_responsibility: Amount paid by the insurer
        member_responsibility: Amount paid by the member
        premium_amount: Premium earned against the claim

    Returns:
        MLRImpactResult with current/projected MLR and a recommendation

    Raises:
        ValidationError: If amounts are negative or premium is not positive
    """
    settings = settings or get_financial_settings()

    if insurer_responsibility < 0 or member_responsibility < 0:
        raise ValidationError("Responsibility amounts must not be negative")
    if premium_amount <= 0:
        raise ValidationError("Premium amount must be greater than zero")

    current_mlr = percent_of(insurer_responsibility, insurer_responsibility + member_responsibility)
    projected_mlr = percent_of(insurer_responsibility, premium_amount)

    if projected_mlr > settings.MLR_UPPER_THRESHOLD:
        impact, recommendation = MLRImpact.NEGATIVE, REVIEW_PREMIUMS
    elif projected_mlr < settings.MLR_LOWER_THRESHOLD:
        impact, recommendation = MLRImpact.POSITIVE, CONSIDER_REDUCTIONS
    else:
        impact, recommendation = MLRImpact.NEUTRAL, ""

    return MLRImpactResult(
        current_mlr=current_mlr,
        projected_mlr=projected_mlr,
        impact=impact,
        recommendation=recommendation,
    )


def risk_level_from_fraud_risk(fraud_risk_level: Optional[str]) -> PaymentRiskLevel:
    """Map a claim's fraud risk level onto a payment risk level."""
    level = (fraud_risk_level or "").strip().lower()
    if level in ("high", "confirmed"):
        return PaymentRiskLevel.HIGH
    if level == "medium":
        return PaymentRiskLevel.MEDIUM
    return PaymentRiskLevel.LOW


def estimate_payment_timing(
    claim_amount: Decimal,
    risk_level: PaymentRiskLevel,
    settings: Optional[FinancialSettings] = None,
) -> int:
    """Estimated days until the claim is paid."""
    settings = settings or get_financial_settings()

    if risk_level in (PaymentRiskLevel.HIGH, PaymentRiskLevel.CRITICAL):
        return settings.PAYMENT_DAYS_HIGH_RISK
    if risk_level == PaymentRiskLevel.MEDIUM:
        return settings.PAYMENT_DAYS_MEDIUM_RISK
    if claim_amount > settings.HIGH_VALUE_CLAIM_THRESHOLD:
        return settings.PAYMENT_DAYS_HIGH_VALUE
    return settings.PAYMENT_DAYS_STANDARD


def build_payment_timing_estimate(
    claim_id: int,
    claim_amount: Decimal,
    fraud_risk_level: Optional[str] = None,
    as_of: Optional[datetime] = None,
    settings: Optional[FinancialSettings] = None,
) -> PaymentTimingEstimate:
    """Estimate payment timing and the expected payment date for a claim."""
    if claim_amount < ZERO:
        raise ValidationError("Claim amount must not be negative")

    as_of = as_of or datetime.now(timezone.utc)
    risk_level = risk_level_from_fraud_risk(fraud_risk_level)
    days = estimate_payment_timing(claim_amount, risk_level, settings=settings)

    return PaymentTimingEstimate(
        claim_id=claim_id,
        risk_level=risk_level,
        estimated_days=days,
        estimated_payment_date=as_of.date() + timedelta(days=days),
        current_date=as_of,
    )
