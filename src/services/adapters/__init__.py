"""
Collaborator Adapters for Demo/Live Mode.

Provides the member, benefit and provider lookups the financial
calculator depends on.
"""

from src.services.adapters.base import BaseAdapter, AdapterMode
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


__all__ = [
    # Base
    "BaseAdapter",
    "AdapterMode",
    # Adapters
    "BenefitAdapter",
    "get_benefit_adapter",
    "create_benefit_adapter",
    "MemberAdapter",
    "get_member_adapter",
    "create_member_adapter",
    "ProviderAdapter",
    "get_provider_adapter",
    "create_provider_adapter",
]
