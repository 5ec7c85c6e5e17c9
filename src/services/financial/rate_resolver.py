"""
Rate Resolver.

Resolves the standard and provider-negotiated rate for every procedure
line on a claim. A negotiated rate, once found, is the rate applied.

Source: Claims Financial Processing - Provider Rate Resolution
Verified: 2026-10-18
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from src.core.enums import VarianceReason
from src.schemas.financial import ProcedureLineItem, ProcedureRateDetail, RateResolution
from src.services.adapters.provider_adapter import ProviderAdapter
from src.services.financial.money import ZERO, round_money
from src.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_PROCEDURE_NAME = "Unknown Service"
UNKNOWN_PROCEDURE_CODE = "UNKNOWN"


def synthetic_line_item(amount: Decimal) -> ProcedureLineItem:
    """Single line standing in for a claim billed as one amount."""
    return ProcedureLineItem(
        procedure_id=0,
        quantity=1,
        unit_rate=amount,
        total_amount=amount,
    )


class RateResolver:
    """Resolves standard, negotiated and applied rates per line item."""

    def __init__(self, provider_adapter: ProviderAdapter):
        self.provider_adapter = provider_adapter

    async def resolve_line(
        self,
        institution_id: int,
        item: ProcedureLineItem,
        service_date: Optional[date] = None,
    ) -> ProcedureRateDetail:
        """Resolve the rate for a single line item."""
        procedure = None
        negotiated: Optional[Decimal] = None

        if item.procedure_id > 0:
            procedure = await self.provider_adapter.get_procedure(item.procedure_id)
            negotiated = await self.provider_adapter.get_negotiated_rate(
                institution_id,
                item.procedure_id,
                on_date=service_date,
            )

        standard_rate = round_money(item.standard_rate)
        negotiated_rate = round_money(negotiated) if negotiated is not None else standard_rate

        if negotiated_rate > standard_rate:
            logger.warning(
                f"Negotiated rate {negotiated_rate} exceeds standard rate {standard_rate}: "
                f"institution={institution_id}, procedure={item.procedure_id}"
            )

        return ProcedureRateDetail(
            procedure_id=item.procedure_id,
            procedure_name=procedure.name if procedure else UNKNOWN_PROCEDURE_NAME,
            procedure_code=procedure.code if procedure else UNKNOWN_PROCEDURE_CODE,
            quantity=item.quantity,
            standard_rate=standard_rate,
            negotiated_rate=negotiated_rate,
            applied_rate=negotiated_rate,
            variance_reason=(
                VarianceReason.NETWORK_DISCOUNT
                if negotiated_rate < standard_rate
                else VarianceReason.STANDARD_RATE
            ),
            exceeds_standard_rate=negotiated_rate > standard_rate,
        )

    async def resolve_rates(
        self,
        institution_id: int,
        line_items: list[ProcedureLineItem],
        service_date: Optional[date] = None,
    ) -> RateResolution:
        """
        Resolve rates for every line on a claim.

        Args:
            institution_id: Institution submitting the claim
            line_items: Billed procedure lines
            service_date: Date the negotiated rate must be in force

        Returns:
            RateResolution with per-line details and total rate savings
        """
        details = [
            await self.resolve_line(institution_id, item, service_date)
            for item in line_items
        ]

        total_standard = sum((d.standard_amount for d in details), ZERO)
        total_negotiated = sum((d.negotiated_rate * d.quantity for d in details), ZERO)

        return RateResolution(
            standard_rates=details,
            negotiated_rates=list(details),
            applied_rates=list(details),
            rate_savings=round_money(total_standard - total_negotiated),
        )
