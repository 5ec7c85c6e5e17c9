"""
Responsibility Splitter.

Splits a claim amount between member and insurer by applying, in order:
1. Deductible
2. Copay
3. Coinsurance
4. Out-of-pocket maximum

Each stage is a pure function that consumes the amount left by the
previous stage and returns it explicitly alongside its breakdown.
The order is fixed: each stage's base depends on what the earlier
stages consumed. Incoming amounts are truncated to whole cents, so no
stage charges more than it was given.

Source: Claims Financial Processing - Member Cost Sharing
Verified: 2026-10-18
"""

from decimal import Decimal
from typing import Mapping, Optional

from src.core.config import FinancialSettings
from src.core.enums import DiscountType
from src.schemas.financial import (
    CoinsuranceBreakdown,
    CopayBreakdown,
    CostShare,
    DeductibleBreakdown,
    OutOfPocketBreakdown,
    ProcedureRateDetail,
    ProviderDiscountBreakdown,
    ResponsibilitySplit,
)
from src.schemas.plan import AccumulatorState
from src.services.financial.money import HUNDRED, ZERO, floor_money, percent_of, round_money


# =============================================================================
# Cost Sharing Table
# =============================================================================


class CostSharingTable:
    """Copay and coinsurance rate per benefit category."""

    def __init__(
        self,
        shares: Mapping[str, CostShare],
        default: Optional[CostShare] = None,
    ):
        self._shares = {key.strip().lower(): share for key, share in shares.items()}
        self.default = default or CostShare()

    @classmethod
    def from_settings(cls, settings: FinancialSettings) -> "CostSharingTable":
        """Build the table from configured cost sharing."""
        return cls(
            settings.COST_SHARING,
            default=CostShare(
                copay=settings.DEFAULT_COPAY,
                coinsurance_rate=settings.DEFAULT_COINSURANCE_RATE,
            ),
        )

    def for_category(self, category: Optional[str]) -> CostShare:
        """Cost share for a category; unknown or missing categories get the default."""
        if not category:
            return self.default
        return self._shares.get(category.strip().lower(), self.default)

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and category.strip().lower() in self._shares


# =============================================================================
# Pipeline Stages
# =============================================================================


def apply_deductible(
    claim_amount: Decimal,
    accumulators: AccumulatorState,
) -> tuple[DeductibleBreakdown, Decimal]:
    """
    Apply the remaining annual deductible.

    Returns:
        Tuple of (breakdown, amount remaining after deductible)
    """
    claim_amount = floor_money(max(ZERO, claim_amount))
    remaining_deductible = round_money(accumulators.remaining_deductible)
    applied = min(claim_amount, remaining_deductible)

    breakdown = DeductibleBreakdown(
        annual_deductible=round_money(accumulators.annual_deductible),
        remaining_deductible=remaining_deductible,
        applied_amount=applied,
        deductible_met=remaining_deductible - applied <= 0,
    )
    return breakdown, claim_amount - applied


def apply_copay(
    amount_after_deductible: Decimal,
    copay_amount: Decimal,
) -> tuple[CopayBreakdown, Decimal]:
    """
    Apply a flat copay to what is left after the deductible.

    Returns:
        Tuple of (breakdown, amount remaining after copay)
    """
    remaining = floor_money(max(ZERO, amount_after_deductible))
    waived = remaining <= 0
    applied = ZERO if waived else round_money(min(copay_amount, remaining))

    breakdown = CopayBreakdown(
        copay_amount=round_money(copay_amount),
        applied_amount=round_money(applied),
        waived=waived,
        waiver_reason="No remaining amount after deductible" if waived else None,
    )
    return breakdown, remaining - applied


def apply_coinsurance(
    amount_after_copay: Decimal,
    coinsurance_rate: Decimal,
) -> CoinsuranceBreakdown:
    """Apply the member's coinsurance percentage to what is left after copay."""
    applied_to = floor_money(max(ZERO, amount_after_copay))
    coinsurance_amount = round_money(applied_to * coinsurance_rate / HUNDRED)

    return CoinsuranceBreakdown(
        coinsurance_rate=coinsurance_rate,
        applied_to_amount=applied_to,
        coinsurance_amount=coinsurance_amount,
        remaining_responsibility=applied_to - coinsurance_amount,
    )


def calculate_provider_discount(
    rate_details: list[ProcedureRateDetail],
) -> ProviderDiscountBreakdown:
    """
    Network discount between standard and applied totals.

    Reported only: the discount lowers the allowed amount, not the
    member's cost sharing.
    """
    standard_amount = round_money(sum((r.standard_amount for r in rate_details), ZERO))
    discounted_amount = round_money(sum((r.applied_amount for r in rate_details), ZERO))
    discount_amount = standard_amount - discounted_amount
    discount_rate = percent_of(discount_amount, standard_amount)

    return ProviderDiscountBreakdown(
        discount_type=DiscountType.NEGOTIATED if discount_rate > 0 else DiscountType.NONE,
        standard_amount=standard_amount,
        discounted_amount=discounted_amount,
        discount_amount=discount_amount,
        discount_rate=discount_rate,
    )


def apply_out_of_pocket_maximum(
    accumulators: AccumulatorState,
    deductible_applied: Decimal,
    copay_applied: Decimal,
    coinsurance_amount: Decimal,
) -> OutOfPocketBreakdown:
    """Combine this claim's cost sharing with year-to-date spend against the OOP maximum."""
    current_total = round_money(accumulators.out_of_pocket_met)
    applied_amount = round_money(deductible_applied + copay_applied + coinsurance_amount)
    annual_maximum = accumulators.out_of_pocket_maximum

    if annual_maximum is None:
        return OutOfPocketBreakdown(
            current_total=current_total,
            applied_amount=applied_amount,
            final_amount=current_total + applied_amount,
        )

    annual_maximum = round_money(annual_maximum)
    final_amount = min(annual_maximum, current_total + applied_amount)
    remaining_amount = max(ZERO, annual_maximum - final_amount)

    return OutOfPocketBreakdown(
        annual_maximum=annual_maximum,
        current_total=current_total,
        applied_amount=applied_amount,
        final_amount=final_amount,
        remaining_amount=remaining_amount,
        available_before_claim=max(ZERO, annual_maximum - current_total),
        maximum_met=remaining_amount <= 0,
    )


# =============================================================================
# Composition
# =============================================================================


def split_responsibility(
    claim_amount: Decimal,
    cost_share: CostShare,
    accumulators: AccumulatorState,
) -> ResponsibilitySplit:
    """
    Run deductible -> copay -> coinsurance -> out-of-pocket maximum.

    Args:
        claim_amount: Amount subject to cost sharing
        cost_share: Copay and coinsurance rate for the benefit category
        accumulators: Year-to-date deductible and OOP state

    Returns:
        ResponsibilitySplit with every stage's breakdown
    """
    deductible, after_deductible = apply_deductible(claim_amount, accumulators)
    copay, after_copay = apply_copay(after_deductible, cost_share.copay)
    coinsurance = apply_coinsurance(after_copay, cost_share.coinsurance_rate)
    out_of_pocket = apply_out_of_pocket_maximum(
        accumulators,
        deductible.applied_amount,
        copay.applied_amount,
        coinsurance.coinsurance_amount,
    )

    return ResponsibilitySplit(
        deductible=deductible,
        copay=copay,
        coinsurance=coinsurance,
        out_of_pocket_maximum=out_of_pocket,
    )


def member_responsibility(split: ResponsibilitySplit, allowed_amount: Decimal) -> Decimal:
    """
    Member share of the allowed amount.

    Bounded by the out-of-pocket room left before this claim and by the
    allowed amount itself, so member + insurer always equals allowed.
    """
    amount = split.cost_sharing_total
    available = split.out_of_pocket_maximum.available_before_claim
    if available is not None:
        amount = min(amount, available)
    amount = min(amount, allowed_amount)
    return round_money(max(ZERO, amount))
