"""
Compliance Checker.

Flags billing, coding and rate anomalies on a claim. Findings are
advisory annotations and never stop a calculation.

Source: Claims Financial Processing - Billing and Rate Compliance
Verified: 2026-10-18
"""

from decimal import Decimal

from src.core.config import FinancialSettings
from src.schemas.financial import (
    ClaimCalculationRequest,
    ComplianceResult,
    ProcedureRateDetail,
    RateResolution,
)
from src.services.financial.money import HUNDRED, ZERO, round_percent
from src.services.financial.rate_resolver import UNKNOWN_PROCEDURE_CODE

LOW_RATE_COMPLIANCE = "Low rate compliance score"
HIGH_VALUE_CLAIM = "High-value claim requires additional documentation"


def calculate_rate_compliance_score(
    rate_details: list[ProcedureRateDetail],
    max_line_discount: Decimal = Decimal("50"),
) -> Decimal:
    """
    Volume-weighted network discount score on a 0-100 scale.

    Each line contributes its discount percentage, capped at
    ``max_line_discount``, weighted by standard rate x quantity. The
    weighted average is scaled so that a capped discount scores 100.
    Lines priced above standard contribute nothing.
    """
    total_weight = ZERO
    weighted_score = ZERO

    for detail in rate_details:
        weight = detail.standard_amount
        total_weight += weight

        if detail.standard_rate > 0 and detail.applied_rate <= detail.standard_rate:
            discount = (detail.standard_rate - detail.applied_rate) / detail.standard_rate * HUNDRED
            weighted_score += weight * min(discount, max_line_discount)

    if total_weight <= 0:
        return HUNDRED

    return round_percent(weighted_score / total_weight * (HUNDRED / max_line_discount))


class ComplianceChecker:
    """Builds the compliance annotations for a calculation."""

    def __init__(self, settings: FinancialSettings):
        self.settings = settings

    def check_coding(self, rate_details: list[ProcedureRateDetail]) -> list[str]:
        """Issues for lines that reference procedures missing from the catalog."""
        return [
            f"Procedure {detail.procedure_id} not found in procedure catalog"
            for detail in rate_details
            if detail.procedure_id > 0 and detail.procedure_code == UNKNOWN_PROCEDURE_CODE
        ]

    def check_rates(self, rate_details: list[ProcedureRateDetail]) -> list[str]:
        """Issues for negotiated rates above the standard rate."""
        return [
            f"Negotiated rate {detail.negotiated_rate} exceeds standard rate "
            f"{detail.standard_rate} for procedure {detail.procedure_code}"
            for detail in rate_details
            if detail.exceeds_standard_rate
        ]

    def check_compliance(
        self,
        request: ClaimCalculationRequest,
        rate_resolution: RateResolution,
    ) -> ComplianceResult:
        """
        Check billing, coding and rate compliance.

        Args:
            request: The calculation request
            rate_resolution: Resolved rates for the claim

        Returns:
            ComplianceResult with flags, score and issues
        """
        details = rate_resolution.applied_rates
        score = calculate_rate_compliance_score(
            details,
            max_line_discount=self.settings.MAX_LINE_DISCOUNT_SCORE,
        )

        coding_issues = self.check_coding(details)
        rate_issues = self.check_rates(details)

        issues: list[str] = []
        if score < self.settings.BILLING_COMPLIANCE_THRESHOLD:
            issues.append(LOW_RATE_COMPLIANCE)
        if request.original_amount > self.settings.HIGH_VALUE_CLAIM_THRESHOLD:
            issues.append(HIGH_VALUE_CLAIM)
        issues.extend(coding_issues)
        issues.extend(rate_issues)

        return ComplianceResult(
            billing_compliance=score >= self.settings.BILLING_COMPLIANCE_THRESHOLD,
            coding_compliance=not coding_issues,
            rate_compliance=score >= self.settings.RATE_COMPLIANCE_THRESHOLD and not rate_issues,
            compliance_score=score,
            issues=issues,
        )
