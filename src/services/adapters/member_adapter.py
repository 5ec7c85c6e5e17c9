"""
Member Service Adapter.

Provides unified interface for member, utilization and accumulator
data in demo/live modes.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from src.core.config import FinancialSettings, get_financial_settings
from src.schemas.plan import AccumulatorState, Member, UtilizationRecord
from src.services.adapters.base import AdapterMode, BaseAdapter


class MemberAdapter(BaseAdapter[Member]):
    """Adapter for member data access."""

    id_field = "member_id"

    def __init__(
        self,
        mode: AdapterMode = AdapterMode.DEMO,
        settings: Optional[FinancialSettings] = None,
        seed: bool = True,
    ):
        """Initialize MemberAdapter."""
        super().__init__(mode)
        self._settings = settings or get_financial_settings()
        self._utilization: dict[tuple[int, int], UtilizationRecord] = {}
        self._accumulators: dict[int, AccumulatorState] = {}
        if mode == AdapterMode.DEMO and seed:
            self.seed_defaults()

    def seed_defaults(self) -> None:
        """Seed default demo members."""
        self.seed_demo_data([
            Member(
                member_id=1,
                company_id=1,
                first_name="John",
                last_name="Doe",
                date_of_birth=date(1980, 5, 15),
            ),
            Member(
                member_id=2,
                company_id=1,
                first_name="Jane",
                last_name="Doe",
                date_of_birth=date(1982, 8, 22),
            ),
            Member(
                member_id=3,
                company_id=2,
                first_name="Robert",
                last_name="Smith",
                date_of_birth=date(1975, 3, 10),
            ),
        ])

        self.seed_accumulators([
            AccumulatorState(
                member_id=1,
                annual_deductible=Decimal("500"),
                deductible_met=Decimal("100"),
                out_of_pocket_maximum=Decimal("5000"),
                out_of_pocket_met=Decimal("1000"),
            ),
            AccumulatorState(
                member_id=2,
                annual_deductible=Decimal("500"),
                deductible_met=Decimal("500"),
                out_of_pocket_maximum=Decimal("5000"),
                out_of_pocket_met=Decimal("2500"),
            ),
            AccumulatorState(
                member_id=3,
                annual_deductible=Decimal("1000"),
                deductible_met=Decimal("1000"),
                out_of_pocket_maximum=Decimal("5000"),
                out_of_pocket_met=Decimal("4950"),
            ),
        ])

        self.seed_utilization([
            UtilizationRecord(
                member_id=1,
                benefit_id=1,
                year_to_date_used=Decimal("500"),
                lifetime_used=Decimal("2000"),
            ),
        ])

    def seed_utilization(self, records: list[UtilizationRecord]) -> None:
        """Seed benefit utilization records."""
        for record in records:
            self._utilization[(record.member_id, record.benefit_id)] = record

    def seed_accumulators(self, records: list[AccumulatorState]) -> None:
        """Seed deductible/out-of-pocket accumulators."""
        for record in records:
            self._accumulators[record.member_id] = record

    def clear_demo_data(self) -> None:
        """Clear members, utilization and accumulators."""
        super().clear_demo_data()
        self._utilization.clear()
        self._accumulators.clear()

    async def get_by_company(self, company_id: int) -> list[Member]:
        """Get all members of a company."""
        return await self.list_all(filters={"company_id": company_id})

    async def get_utilization(self, member_id: int, benefit_id: int) -> UtilizationRecord:
        """
        Get year-to-date and lifetime usage of a benefit.

        Returns zero usage when nothing has been recorded.
        """
        self._require_demo_mode()
        record = self._utilization.get((member_id, benefit_id))
        if record is None:
            return UtilizationRecord(member_id=member_id, benefit_id=benefit_id)
        return record

    async def get_accumulators(self, member_id: int) -> AccumulatorState:
        """
        Get the member's plan-year deductible and out-of-pocket state.

        Falls back to the configured plan defaults with nothing met.
        """
        self._require_demo_mode()
        record = self._accumulators.get(member_id)
        if record is None:
            return AccumulatorState(
                member_id=member_id,
                annual_deductible=self._settings.DEFAULT_ANNUAL_DEDUCTIBLE,
                out_of_pocket_maximum=self._settings.DEFAULT_OUT_OF_POCKET_MAXIMUM,
            )
        return record


# =============================================================================
# Factory Functions
# =============================================================================


_member_adapter: Optional[MemberAdapter] = None


def get_member_adapter(mode: AdapterMode = AdapterMode.DEMO) -> MemberAdapter:
    """Get singleton MemberAdapter instance."""
    global _member_adapter
    if _member_adapter is None:
        _member_adapter = MemberAdapter(mode)
    return _member_adapter


def create_member_adapter(
    mode: AdapterMode = AdapterMode.DEMO,
    settings: Optional[FinancialSettings] = None,
    seed: bool = True,
) -> MemberAdapter:
    """Create a new MemberAdapter instance."""
    return MemberAdapter(mode, settings=settings, seed=seed)
