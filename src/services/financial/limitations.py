"""
Limitation Tracker.

Reports the remaining room under the benefit, annual and lifetime caps.
A limit of zero means no cap is configured, not that no usage is allowed.

Source: Claims Financial Processing - Benefit Limitations
Verified: 2026-10-18
"""

from decimal import Decimal
from typing import Optional

from src.core.enums import LimitationScope, LimitType
from src.schemas.financial import LimitationBreakdown, LimitationSet
from src.schemas.plan import Benefit, CompanyBenefit, UtilizationRecord
from src.services.financial.money import ZERO, round_money


class LimitationTracker:
    """Computes remaining caps from configured limits and usage to date."""

    def __init__(self, lifetime_multiplier: Decimal = Decimal("5")):
        self.lifetime_multiplier = lifetime_multiplier

    @staticmethod
    def dollar_limit(benefit: Benefit, company_benefit: Optional[CompanyBenefit]) -> Decimal:
        """Company override when set, else the benefit's default, else no cap."""
        if company_benefit is not None and company_benefit.limit_amount:
            return company_benefit.limit_amount
        return benefit.limit_amount or ZERO

    def get_limitation(
        self,
        scope: LimitationScope,
        benefit: Benefit,
        company_benefit: Optional[CompanyBenefit],
        utilization: UtilizationRecord,
    ) -> LimitationBreakdown:
        """
        Compute one limitation view.

        Args:
            scope: benefit, annual or lifetime
            benefit: Benefit definition
            company_benefit: Company selection with optional limit override
            utilization: Year-to-date and lifetime usage

        Returns:
            LimitationBreakdown for the scope
        """
        limit_amount = self.dollar_limit(benefit, company_benefit)

        if scope == LimitationScope.LIFETIME:
            limit_amount = limit_amount * self.lifetime_multiplier
            used_amount = utilization.lifetime_used
        else:
            used_amount = utilization.year_to_date_used

        limit_amount = round_money(limit_amount)
        used_amount = round_money(used_amount)

        return LimitationBreakdown(
            scope=scope,
            limit_type=LimitType.DOLLAR,
            limit_amount=limit_amount,
            used_amount=used_amount,
            remaining_amount=max(ZERO, limit_amount - used_amount),
            applied_limit=limit_amount > 0,
        )

    def get_limitations(
        self,
        benefit: Benefit,
        company_benefit: Optional[CompanyBenefit],
        utilization: UtilizationRecord,
    ) -> LimitationSet:
        """Compute the benefit, annual and lifetime views together."""
        return LimitationSet(
            benefit_limits=self.get_limitation(
                LimitationScope.BENEFIT, benefit, company_benefit, utilization
            ),
            annual_limits=self.get_limitation(
                LimitationScope.ANNUAL, benefit, company_benefit, utilization
            ),
            lifetime_limits=self.get_limitation(
                LimitationScope.LIFETIME, benefit, company_benefit, utilization
            ),
        )
