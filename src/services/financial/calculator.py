"""
Financial Calculation Service.

Calculates the member and insurer share of a claim:
- Rate resolution (standard vs negotiated)
- Deductible, copay and coinsurance
- Provider network discount
- Out-of-pocket maximum
- Benefit, annual and lifetime limitations
- Compliance annotations

All collaborator lookups happen up front; the calculation itself is a
pure function of the request and the loaded records.

Source: Claims Financial Processing - Financial Responsibility Calculation
Verified: 2026-10-18
"""

import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.config import FinancialSettings, get_financial_settings
from src.core.enums import IntegrationMode, PaymentRiskLevel
from src.schemas.financial import (
    CalculationAmounts,
    CalculationBreakdown,
    CalculationSummary,
    ClaimCalculationRequest,
    FinancialCalculationResult,
    MLRImpactResult,
    RateResolution,
)
from src.schemas.plan import (
    AccumulatorState,
    Benefit,
    CompanyBenefit,
    Institution,
    Member,
    UtilizationRecord,
)
from src.services.adapters.benefit_adapter import (
    BenefitAdapter,
    create_benefit_adapter,
    get_benefit_adapter,
)
from src.services.adapters.member_adapter import (
    MemberAdapter,
    create_member_adapter,
    get_member_adapter,
)
from src.services.adapters.provider_adapter import (
    ProviderAdapter,
    create_provider_adapter,
    get_provider_adapter,
)
from src.services.financial.compliance import ComplianceChecker
from src.services.financial.limitations import LimitationTracker
from src.services.financial.mlr import calculate_mlr_impact, estimate_payment_timing
from src.services.financial.money import ZERO, percent_of, round_money
from src.services.financial.rate_resolver import RateResolver, synthetic_line_item
from src.services.financial.responsibility import (
    CostSharingTable,
    calculate_provider_discount,
    member_responsibility,
    split_responsibility,
)
from src.utils.errors import FinancialCalculationError, NotFoundError
from src.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalculationInputs:
    """Collaborator records a calculation depends on."""

    member: Member
    benefit: Benefit
    company_benefit: CompanyBenefit
    institution: Institution
    accumulators: AccumulatorState
    utilization: UtilizationRecord
    rate_resolution: RateResolution


class FinancialCalculationService:
    """
    Claim financial responsibility calculator.

    Stateless: collaborators and configuration are injected, and each
    call builds a fresh result.
    """

    def __init__(
        self,
        member_adapter: Optional[MemberAdapter] = None,
        benefit_adapter: Optional[BenefitAdapter] = None,
        provider_adapter: Optional[ProviderAdapter] = None,
        settings: Optional[FinancialSettings] = None,
        cost_sharing: Optional[CostSharingTable] = None,
    ):
        """
        Initialize financial calculation service.

        Args:
            member_adapter: Member, utilization and accumulator lookups
            benefit_adapter: Benefit and company benefit lookups
            provider_adapter: Institution, procedure and negotiated rate lookups
            settings: Financial settings
            cost_sharing: Copay/coinsurance table overriding the configured one
        """
        self.settings = settings or get_financial_settings()
        if member_adapter is None:
            # Plan defaults for members without accumulators come from these settings
            member_adapter = (
                create_member_adapter(self.settings.INTEGRATION_MODE, settings=self.settings)
                if settings is not None
                else get_member_adapter(self.settings.INTEGRATION_MODE)
            )
        self.member_adapter = member_adapter
        self.benefit_adapter = benefit_adapter or get_benefit_adapter(self.settings.INTEGRATION_MODE)
        self.provider_adapter = provider_adapter or get_provider_adapter(self.settings.INTEGRATION_MODE)
        self.cost_sharing = cost_sharing or CostSharingTable.from_settings(self.settings)

        self.rate_resolver = RateResolver(self.provider_adapter)
        self.limitation_tracker = LimitationTracker(self.settings.LIFETIME_LIMIT_MULTIPLIER)
        self.compliance_checker = ComplianceChecker(self.settings)

    async def calculate_financial_responsibility(
        self,
        request: ClaimCalculationRequest,
    ) -> FinancialCalculationResult:
        """
        Calculate financial responsibility for a claim.

        Args:
            request: Claim amount, parties and optional procedure lines

        Returns:
            FinancialCalculationResult with amounts, breakdown and compliance

        Raises:
            NotFoundError: If the member, benefit, company benefit or
                institution does not exist
        """
        start_time = time.perf_counter()
        log = logger.bind(claim_id=request.claim_id)

        try:
            inputs = await self.load_inputs(request)
            result = self.calculate(request, inputs)
        except FinancialCalculationError as e:
            log.error(f"Financial calculation aborted: {e.detail}")
            raise
        except Exception:
            log.exception("Error calculating financial responsibility")
            raise

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        log.info(
            f"Financial calculation complete: "
            f"allowed={result.calculations.allowed_amount}, "
            f"member={result.calculations.member_responsibility}, "
            f"insurer={result.calculations.insurer_responsibility}, "
            f"issues={len(result.compliance.issues)}, "
            f"time_ms={elapsed_ms}"
        )
        return result

    async def load_inputs(self, request: ClaimCalculationRequest) -> CalculationInputs:
        """Fetch every collaborator record, failing fast on the first missing one."""
        member = await self.member_adapter.get_by_id(request.member_id)
        if member is None:
            raise NotFoundError("Member", request.member_id)

        benefit = await self.benefit_adapter.get_by_id(request.benefit_id)
        if benefit is None:
            raise NotFoundError("Benefit", request.benefit_id)

        company_benefit = await self.benefit_adapter.get_company_benefit(
            member.company_id,
            request.benefit_id,
        )
        if company_benefit is None:
            raise NotFoundError(
                "Company benefit",
                f"(company={member.company_id}, benefit={request.benefit_id})",
            )

        institution = await self.provider_adapter.get_by_id(request.institution_id)
        if institution is None:
            raise NotFoundError("Institution", request.institution_id)

        line_items = list(request.procedure_items) or [synthetic_line_item(request.original_amount)]
        rate_resolution = await self.rate_resolver.resolve_rates(
            request.institution_id,
            line_items,
            service_date=request.service_date,
        )

        return CalculationInputs(
            member=member,
            benefit=benefit,
            company_benefit=company_benefit,
            institution=institution,
            accumulators=await self.member_adapter.get_accumulators(member.member_id),
            utilization=await self.member_adapter.get_utilization(
                member.member_id,
                request.benefit_id,
            ),
            rate_resolution=rate_resolution,
        )

    def calculate(
        self,
        request: ClaimCalculationRequest,
        inputs: CalculationInputs,
    ) -> FinancialCalculationResult:
        """
        Assemble the result from loaded inputs.

        Order: rates (already resolved) -> deductible -> copay ->
        coinsurance -> provider discount -> OOP maximum -> limitations ->
        compliance -> summary.
        """
        log = logger.bind(claim_id=request.claim_id)
        rates = inputs.rate_resolution
        allowed_amount = round_money(rates.allowed_amount)

        cost_share = self.cost_sharing.for_category(inputs.benefit.category)
        if inputs.benefit.category not in self.cost_sharing:
            log.debug(
                f"No cost sharing configured for category {inputs.benefit.category!r}; "
                f"using default copay={cost_share.copay}, "
                f"coinsurance={cost_share.coinsurance_rate}%"
            )

        split = split_responsibility(request.original_amount, cost_share, inputs.accumulators)
        log.debug(
            f"Cost sharing: deductible={split.deductible.applied_amount}, "
            f"copay={split.copay.applied_amount}, "
            f"coinsurance={split.coinsurance.coinsurance_amount}, "
            f"oop_met={split.out_of_pocket_maximum.maximum_met}"
        )

        provider_discount = calculate_provider_discount(rates.applied_rates)

        member_amount = member_responsibility(split, allowed_amount)
        insurer_amount = max(ZERO, allowed_amount - member_amount)

        limitations = self.limitation_tracker.get_limitations(
            inputs.benefit,
            inputs.company_benefit,
            inputs.utilization,
        )
        compliance = self.compliance_checker.check_compliance(request, rates)
        for issue in compliance.issues:
            log.debug(f"Compliance issue: {issue}")

        member_paid = percent_of(member_amount, request.original_amount)

        return FinancialCalculationResult(
            claim_id=request.claim_id,
            calculations=CalculationAmounts(
                original_amount=request.original_amount,
                allowed_amount=allowed_amount,
                deductible_amount=split.deductible.applied_amount,
                copay_amount=split.copay.applied_amount,
                coinsurance_amount=split.coinsurance.coinsurance_amount,
                provider_discount_amount=provider_discount.discount_amount,
                member_responsibility=member_amount,
                insurer_responsibility=insurer_amount,
                network_savings=provider_discount.discount_amount,
            ),
            breakdown=CalculationBreakdown(
                deductible=split.deductible,
                copay=split.copay,
                coinsurance=split.coinsurance,
                provider_discount=provider_discount,
                out_of_pocket_maximum=split.out_of_pocket_maximum,
            ),
            rate_details=rates,
            limitations=limitations,
            compliance=compliance,
            summary=CalculationSummary(
                total_savings=provider_discount.discount_amount,
                member_paid_percentage=member_paid,
                insurer_paid_percentage=percent_of(insurer_amount, request.original_amount),
                effective_rate=member_paid if member_amount > 0 else ZERO,
            ),
        )

    def calculate_mlr_impact(
        self,
        insurer_responsibility: Decimal,
        member_responsibility: Decimal,
        premium_amount: Decimal,
    ) -> MLRImpactResult:
        """Impact of a claim on the medical loss ratio."""
        return calculate_mlr_impact(
            insurer_responsibility,
            member_responsibility,
            premium_amount,
            settings=self.settings,
        )

    def estimate_payment_timing(self, claim_amount: Decimal, risk_level: PaymentRiskLevel) -> int:
        """Estimated days to payment."""
        return estimate_payment_timing(claim_amount, risk_level, settings=self.settings)


# =============================================================================
# Factory Functions
# =============================================================================


def create_financial_calculation_service(
    mode: Optional[IntegrationMode] = None,
    settings: Optional[FinancialSettings] = None,
    cost_sharing: Optional[CostSharingTable] = None,
) -> FinancialCalculationService:
    """Create a calculator wired to fresh adapters."""
    settings = settings or get_financial_settings()
    mode = mode or settings.INTEGRATION_MODE

    return FinancialCalculationService(
        member_adapter=create_member_adapter(mode, settings=settings),
        benefit_adapter=create_benefit_adapter(mode),
        provider_adapter=create_provider_adapter(mode),
        settings=settings,
        cost_sharing=cost_sharing,
    )
