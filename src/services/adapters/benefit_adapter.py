"""
Benefit Service Adapter.

Provides unified interface for benefit and company benefit data in
demo/live modes.
"""

from decimal import Decimal
from typing import Optional

from src.core.enums import BenefitCategory
from src.schemas.plan import Benefit, CompanyBenefit
from src.services.adapters.base import AdapterMode, BaseAdapter


class BenefitAdapter(BaseAdapter[Benefit]):
    """Adapter for benefit data access."""

    id_field = "benefit_id"

    def __init__(self, mode: AdapterMode = AdapterMode.DEMO, seed: bool = True):
        """Initialize BenefitAdapter."""
        super().__init__(mode)
        self._company_benefits: dict[tuple[int, int], CompanyBenefit] = {}
        if mode == AdapterMode.DEMO and seed:
            self.seed_defaults()

    def seed_defaults(self) -> None:
        """Seed default demo benefits."""
        self.seed_demo_data([
            Benefit(
                benefit_id=1,
                name="Outpatient Care",
                category=BenefitCategory.MEDICAL.value,
                limit_amount=Decimal("10000"),
            ),
            Benefit(
                benefit_id=2,
                name="Inpatient Hospitalization",
                category=BenefitCategory.HOSPITAL.value,
                limit_amount=Decimal("50000"),
            ),
            Benefit(
                benefit_id=3,
                name="Prescription Drugs",
                category=BenefitCategory.PRESCRIPTION.value,
                limit_amount=Decimal("2000"),
            ),
            Benefit(
                benefit_id=4,
                name="Specialist Consultation",
                category=BenefitCategory.SPECIALIST.value,
            ),
            Benefit(
                benefit_id=5,
                name="Emergency Care",
                category=BenefitCategory.EMERGENCY.value,
                limit_amount=Decimal("25000"),
            ),
            Benefit(
                benefit_id=6,
                name="Dental Care",
                category=BenefitCategory.DENTAL.value,
                limit_amount=Decimal("1500"),
                has_waiting_period=True,
                waiting_period_days=90,
            ),
        ])

        company_benefits = [
            CompanyBenefit(company_id=1, benefit_id=benefit_id)
            for benefit_id in (2, 3, 4, 5, 6)
        ]
        company_benefits.extend([
            CompanyBenefit(
                company_id=1,
                benefit_id=1,
                limit_amount=Decimal("15000"),
                coverage_rate=Decimal("80"),
            ),
            CompanyBenefit(company_id=2, benefit_id=1),
            CompanyBenefit(company_id=2, benefit_id=2),
            CompanyBenefit(company_id=2, benefit_id=3, is_active=False),
        ])
        self.seed_company_benefits(company_benefits)

    def seed_company_benefits(self, records: list[CompanyBenefit]) -> None:
        """Seed company benefit selections."""
        for record in records:
            self._company_benefits[(record.company_id, record.benefit_id)] = record

    def clear_demo_data(self) -> None:
        """Clear benefits and company selections."""
        super().clear_demo_data()
        self._company_benefits.clear()

    async def get_company_benefit(
        self,
        company_id: int,
        benefit_id: int,
    ) -> Optional[CompanyBenefit]:
        """Get a company's active selection of a benefit."""
        self._require_demo_mode()
        record = self._company_benefits.get((company_id, benefit_id))
        if record is None or not record.is_active:
            return None
        return record

    async def get_company_benefits(self, company_id: int) -> list[CompanyBenefit]:
        """Get every active benefit selected by a company."""
        self._require_demo_mode()
        return [
            cb for (cid, _), cb in self._company_benefits.items()
            if cid == company_id and cb.is_active
        ]


# =============================================================================
# Factory Functions
# =============================================================================


_benefit_adapter: Optional[BenefitAdapter] = None


def get_benefit_adapter(mode: AdapterMode = AdapterMode.DEMO) -> BenefitAdapter:
    """Get singleton BenefitAdapter instance."""
    global _benefit_adapter
    if _benefit_adapter is None:
        _benefit_adapter = BenefitAdapter(mode)
    return _benefit_adapter


def create_benefit_adapter(mode: AdapterMode = AdapterMode.DEMO, seed: bool = True) -> BenefitAdapter:
    """Create a new BenefitAdapter instance."""
    return BenefitAdapter(mode, seed=seed)
