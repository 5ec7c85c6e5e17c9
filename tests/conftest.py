"""
Pytest Configuration and Fixtures.
Shared test fixtures for all test modules.
"""

from decimal import Decimal
from typing import Optional

import pytest

from src.core.config import FinancialSettings
from src.schemas.financial import ClaimCalculationRequest, CostShare
from src.schemas.plan import AccumulatorState
from src.services.adapters import (
    AdapterMode,
    create_benefit_adapter,
    create_member_adapter,
    create_provider_adapter,
)
from src.services.financial import CostSharingTable, FinancialCalculationService


@pytest.fixture
def settings():
    """Default financial settings."""
    return FinancialSettings()


@pytest.fixture
def member_adapter(settings):
    """Fresh demo member adapter."""
    return create_member_adapter(AdapterMode.DEMO, settings=settings)


@pytest.fixture
def benefit_adapter():
    """Fresh demo benefit adapter."""
    return create_benefit_adapter(AdapterMode.DEMO)


@pytest.fixture
def provider_adapter():
    """Fresh demo provider adapter."""
    return create_provider_adapter(AdapterMode.DEMO)


@pytest.fixture
def cost_sharing(settings):
    """Cost sharing table from default settings."""
    return CostSharingTable.from_settings(settings)


@pytest.fixture
def calculator(member_adapter, benefit_adapter, provider_adapter, settings):
    """Financial calculation service over fresh demo adapters."""
    return FinancialCalculationService(
        member_adapter=member_adapter,
        benefit_adapter=benefit_adapter,
        provider_adapter=provider_adapter,
        settings=settings,
    )


@pytest.fixture
def medical_cost_share():
    """$20 copay, 20% coinsurance."""
    return CostShare(copay=Decimal("20"), coinsurance_rate=Decimal("20"))


@pytest.fixture
def make_accumulators():
    """Factory for accumulator state."""

    def _make(
        annual_deductible: str = "500",
        deductible_met: str = "0",
        out_of_pocket_maximum: Optional[str] = "5000",
        out_of_pocket_met: str = "0",
    ) -> AccumulatorState:
        return AccumulatorState(
            member_id=1,
            annual_deductible=Decimal(annual_deductible),
            deductible_met=Decimal(deductible_met),
            out_of_pocket_maximum=(
                Decimal(out_of_pocket_maximum) if out_of_pocket_maximum is not None else None
            ),
            out_of_pocket_met=Decimal(out_of_pocket_met),
        )

    return _make


@pytest.fixture
def make_request():
    """Factory for calculation requests against the demo data."""

    def _make(
        original_amount: str = "1000",
        member_id: int = 1,
        benefit_id: int = 1,
        institution_id: int = 1,
        procedure_items=None,
        claim_id: int = 1001,
    ) -> ClaimCalculationRequest:
        return ClaimCalculationRequest(
            claim_id=claim_id,
            original_amount=Decimal(original_amount),
            member_id=member_id,
            benefit_id=benefit_id,
            institution_id=institution_id,
            procedure_items=procedure_items or [],
        )

    return _make


# Configure pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "property: mark test as checking a calculation invariant"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
