"""
Collaborator Adapter Tests.

Tests for demo data, lookups and live mode behaviour of the member,
benefit and provider adapters.
"""

from decimal import Decimal

import pytest

from src.schemas.plan import AccumulatorState, Member
from src.services.adapters import (
    AdapterMode,
    BenefitAdapter,
    MemberAdapter,
    ProviderAdapter,
    create_benefit_adapter,
    create_member_adapter,
    create_provider_adapter,
    get_benefit_adapter,
    get_member_adapter,
    get_provider_adapter,
)


@pytest.mark.unit
class TestMemberAdapter:
    """Tests for MemberAdapter."""

    def test_demo_seed(self, member_adapter):
        assert member_adapter.get_demo_count() == 3
        assert member_adapter.is_demo_mode() is True

    @pytest.mark.asyncio
    async def test_get_by_id(self, member_adapter):
        member = await member_adapter.get_by_id(1)

        assert member.company_id == 1
        assert member.get_full_name() == "John Doe"
        assert await member_adapter.get_by_id(99) is None

    @pytest.mark.asyncio
    async def test_get_by_company(self, member_adapter):
        members = await member_adapter.get_by_company(1)

        assert sorted(m.member_id for m in members) == [1, 2]

    @pytest.mark.asyncio
    async def test_list_all_pagination(self, member_adapter):
        page = await member_adapter.list_all(offset=1, limit=1)

        assert len(page) == 1
        assert page[0].member_id == 2

    @pytest.mark.asyncio
    async def test_utilization(self, member_adapter):
        record = await member_adapter.get_utilization(1, 1)

        assert record.year_to_date_used == Decimal("500")
        assert record.lifetime_used == Decimal("2000")

    @pytest.mark.asyncio
    async def test_utilization_defaults_to_zero(self, member_adapter):
        record = await member_adapter.get_utilization(2, 3)

        assert record.member_id == 2
        assert record.benefit_id == 3
        assert record.year_to_date_used == Decimal("0")
        assert record.lifetime_used == Decimal("0")

    @pytest.mark.asyncio
    async def test_accumulators(self, member_adapter):
        state = await member_adapter.get_accumulators(1)

        assert state.remaining_deductible == Decimal("400")
        assert state.out_of_pocket_met == Decimal("1000")

    @pytest.mark.asyncio
    async def test_accumulators_default_to_plan_settings(self, member_adapter, settings):
        state = await member_adapter.get_accumulators(42)

        assert state.annual_deductible == settings.DEFAULT_ANNUAL_DEDUCTIBLE
        assert state.out_of_pocket_maximum == settings.DEFAULT_OUT_OF_POCKET_MAXIMUM
        assert state.deductible_met == Decimal("0")

    @pytest.mark.asyncio
    async def test_seed_and_clear(self):
        adapter = create_member_adapter(AdapterMode.DEMO, seed=False)
        assert adapter.get_demo_count() == 0

        adapter.seed_demo_data([Member(member_id=7, company_id=3)])
        adapter.seed_accumulators([
            AccumulatorState(member_id=7, annual_deductible=Decimal("250"), deductible_met=Decimal("250")),
        ])

        assert (await adapter.get_by_id(7)).company_id == 3
        assert (await adapter.get_accumulators(7)).remaining_deductible == Decimal("0")

        adapter.clear_demo_data()

        assert adapter.get_demo_count() == 0
        assert (await adapter.get_accumulators(7)).deductible_met == Decimal("0")


@pytest.mark.unit
class TestBenefitAdapter:
    """Tests for BenefitAdapter."""

    def test_demo_seed(self, benefit_adapter):
        assert benefit_adapter.get_demo_count() == 6

    @pytest.mark.asyncio
    async def test_benefit_categories(self, benefit_adapter):
        assert (await benefit_adapter.get_by_id(1)).category == "medical"
        assert (await benefit_adapter.get_by_id(2)).category == "hospital"
        assert (await benefit_adapter.get_by_id(4)).limit_amount is None

    @pytest.mark.asyncio
    async def test_company_benefit_override(self, benefit_adapter):
        company_benefit = await benefit_adapter.get_company_benefit(1, 1)

        assert company_benefit.limit_amount == Decimal("15000")
        assert company_benefit.coverage_rate == Decimal("80")

    @pytest.mark.asyncio
    async def test_inactive_company_benefit_hidden(self, benefit_adapter):
        assert await benefit_adapter.get_company_benefit(2, 3) is None

    @pytest.mark.asyncio
    async def test_unselected_company_benefit(self, benefit_adapter):
        assert await benefit_adapter.get_company_benefit(2, 6) is None

    @pytest.mark.asyncio
    async def test_company_benefits(self, benefit_adapter):
        company_one = await benefit_adapter.get_company_benefits(1)
        company_two = await benefit_adapter.get_company_benefits(2)

        assert sorted(cb.benefit_id for cb in company_one) == [1, 2, 3, 4, 5, 6]
        assert sorted(cb.benefit_id for cb in company_two) == [1, 2]

    @pytest.mark.asyncio
    async def test_list_all_filters(self, benefit_adapter):
        dental = await benefit_adapter.list_all(filters={"has_waiting_period": True})

        assert [b.benefit_id for b in dental] == [6]


@pytest.mark.unit
class TestProviderAdapter:
    """Tests for ProviderAdapter."""

    def test_demo_seed(self, provider_adapter):
        assert provider_adapter.get_demo_count() == 3

    @pytest.mark.asyncio
    async def test_procedure_catalog(self, provider_adapter):
        procedure = await provider_adapter.get_procedure(4)

        assert procedure.code == "70551"
        assert procedure.standard_rate == Decimal("900.00")
        assert await provider_adapter.get_procedure(99) is None

    @pytest.mark.asyncio
    async def test_rates_by_institution(self, provider_adapter):
        rates = await provider_adapter.get_rates_by_institution(1)

        assert len(rates) == 4
        assert await provider_adapter.get_rates_by_institution(3) == []

    @pytest.mark.asyncio
    async def test_negotiated_rate(self, provider_adapter):
        assert await provider_adapter.get_negotiated_rate(1, 1) == Decimal("80.00")
        assert await provider_adapter.get_negotiated_rate(1, 2) is None
        assert await provider_adapter.get_negotiated_rate(3, 1) is None

    @pytest.mark.asyncio
    async def test_inactive_institution_still_resolvable(self, provider_adapter):
        institution = await provider_adapter.get_by_id(3)

        assert institution.is_active is False


@pytest.mark.unit
class TestAdapterModes:
    """Tests for demo/live switching and factories."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "factory",
        [create_member_adapter, create_benefit_adapter, create_provider_adapter],
    )
    async def test_live_mode_not_implemented(self, factory):
        adapter = factory(AdapterMode.LIVE)

        assert adapter.get_demo_count() == 0
        with pytest.raises(NotImplementedError, match="Live mode not yet implemented"):
            await adapter.get_by_id(1)

    @pytest.mark.asyncio
    async def test_set_mode(self, provider_adapter):
        provider_adapter.set_mode(AdapterMode.LIVE)

        assert provider_adapter.mode == AdapterMode.LIVE
        with pytest.raises(NotImplementedError):
            await provider_adapter.get_negotiated_rate(1, 1)

    def test_singletons(self):
        assert isinstance(get_member_adapter(), MemberAdapter)
        assert isinstance(get_benefit_adapter(), BenefitAdapter)
        assert isinstance(get_provider_adapter(), ProviderAdapter)
        assert get_member_adapter() is get_member_adapter()
        assert get_provider_adapter() is get_provider_adapter()

    def test_factories_return_new_instances(self):
        assert create_benefit_adapter() is not create_benefit_adapter()
