"""
Provider Service Adapter.

Provides unified interface for institution, procedure catalog and
negotiated rate data in demo/live modes.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from src.schemas.plan import Institution, MedicalProcedure, ProviderProcedureRate
from src.services.adapters.base import AdapterMode, BaseAdapter


class ProviderAdapter(BaseAdapter[Institution]):
    """Adapter for institution and rate data access."""

    id_field = "institution_id"

    def __init__(self, mode: AdapterMode = AdapterMode.DEMO, seed: bool = True):
        """Initialize ProviderAdapter."""
        super().__init__(mode)
        self._procedures: dict[int, MedicalProcedure] = {}
        self._rates: dict[int, list[ProviderProcedureRate]] = {}
        if mode == AdapterMode.DEMO and seed:
            self.seed_defaults()

    def seed_defaults(self) -> None:
        """Seed default demo institutions, procedures and rates."""
        self.seed_demo_data([
            Institution(institution_id=1, name="City General Hospital"),
            Institution(institution_id=2, name="Riverside Family Clinic"),
            Institution(institution_id=3, name="Northside Imaging Center", is_active=False),
        ])

        self.seed_procedures([
            MedicalProcedure(
                procedure_id=1,
                name="Office Visit, Established Patient",
                code="99213",
                standard_rate=Decimal("100.00"),
            ),
            MedicalProcedure(
                procedure_id=2,
                name="Complete Blood Count",
                code="85025",
                standard_rate=Decimal("40.00"),
            ),
            MedicalProcedure(
                procedure_id=3,
                name="Chest X-ray, 2 Views",
                code="71046",
                standard_rate=Decimal("120.00"),
            ),
            MedicalProcedure(
                procedure_id=4,
                name="MRI Brain without Contrast",
                code="70551",
                standard_rate=Decimal("900.00"),
            ),
        ])

        self.seed_rates([
            ProviderProcedureRate(
                institution_id=1,
                procedure_id=1,
                agreed_rate=Decimal("80.00"),
                effective_date=date(2020, 1, 1),
            ),
            ProviderProcedureRate(
                institution_id=1,
                procedure_id=2,
                agreed_rate=Decimal("30.00"),
                effective_date=date(2020, 1, 1),
                active=False,
            ),
            ProviderProcedureRate(
                institution_id=1,
                procedure_id=3,
                agreed_rate=Decimal("100.00"),
                effective_date=date(2020, 1, 1),
            ),
            ProviderProcedureRate(
                institution_id=1,
                procedure_id=4,
                agreed_rate=Decimal("700.00"),
                effective_date=date(2020, 1, 1),
            ),
            ProviderProcedureRate(
                institution_id=2,
                procedure_id=1,
                agreed_rate=Decimal("85.00"),
                effective_date=date(2018, 1, 1),
                expiry_date=date(2019, 12, 31),
            ),
        ])

    def seed_procedures(self, procedures: list[MedicalProcedure]) -> None:
        """Seed the procedure catalog."""
        for procedure in procedures:
            self._procedures[procedure.procedure_id] = procedure

    def seed_rates(self, rates: list[ProviderProcedureRate]) -> None:
        """Seed provider-specific procedure rates."""
        for rate in rates:
            self._rates.setdefault(rate.institution_id, []).append(rate)

    def clear_demo_data(self) -> None:
        """Clear institutions, procedures and rates."""
        super().clear_demo_data()
        self._procedures.clear()
        self._rates.clear()

    async def get_procedure(self, procedure_id: int) -> Optional[MedicalProcedure]:
        """Get a catalog procedure."""
        self._require_demo_mode()
        return self._procedures.get(procedure_id)

    async def get_rates_by_institution(self, institution_id: int) -> list[ProviderProcedureRate]:
        """Get all rates recorded for an institution."""
        self._require_demo_mode()
        return list(self._rates.get(institution_id, []))

    async def get_negotiated_rate(
        self,
        institution_id: int,
        procedure_id: int,
        on_date: Optional[date] = None,
    ) -> Optional[Decimal]:
        """
        Get the agreed rate in force for an institution and procedure.

        Args:
            institution_id: Institution submitting the claim
            procedure_id: Catalog procedure
            on_date: Service date (defaults to today)

        Returns:
            The agreed rate, or None when no active rate applies
        """
        on_date = on_date or date.today()
        for rate in await self.get_rates_by_institution(institution_id):
            if rate.procedure_id == procedure_id and rate.is_effective_on(on_date):
                return rate.agreed_rate
        return None


# =============================================================================
# Factory Functions
# =============================================================================


_provider_adapter: Optional[ProviderAdapter] = None


def get_provider_adapter(mode: AdapterMode = AdapterMode.DEMO) -> ProviderAdapter:
    """Get singleton ProviderAdapter instance."""
    global _provider_adapter
    if _provider_adapter is None:
        _provider_adapter = ProviderAdapter(mode)
    return _provider_adapter


def create_provider_adapter(mode: AdapterMode = AdapterMode.DEMO, seed: bool = True) -> ProviderAdapter:
    """Create a new ProviderAdapter instance."""
    return ProviderAdapter(mode, seed=seed)
