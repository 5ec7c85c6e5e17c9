"""
Services Layer for Claim Financial Calculation.

Exports the collaborator adapters and the financial calculation service.
"""

from src.services.adapters import (
    AdapterMode,
    BenefitAdapter,
    MemberAdapter,
    ProviderAdapter,
    get_benefit_adapter,
    get_member_adapter,
    get_provider_adapter,
)
from src.services.financial import (
    FinancialCalculationService,
    create_financial_calculation_service,
)

__all__ = [
    # Adapters
    "AdapterMode",
    "BenefitAdapter",
    "MemberAdapter",
    "ProviderAdapter",
    "get_benefit_adapter",
    "get_member_adapter",
    "get_provider_adapter",
    # Financial calculation
    "FinancialCalculationService",
    "create_financial_calculation_service",
]
