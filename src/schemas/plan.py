"""
Pydantic Schemas for Member, Benefit and Provider Records.
Source: Claims Financial Processing - Collaborator Data
Verified: 2026-10-18

Typed views of the records the financial calculator reads from the
member, benefit and provider systems.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Member(BaseModel):
    """Insured member."""

    model_config = ConfigDict(frozen=True)

    member_id: int
    company_id: int
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[date] = None

    def get_full_name(self) -> str:
        """Get member's full name."""
        return f"{self.first_name} {self.last_name}".strip()


class Benefit(BaseModel):
    """Benefit defined by the insurer."""

    model_config = ConfigDict(frozen=True)

    benefit_id: int
    name: str
    category: Optional[str] = Field(None, description="Benefit category (medical, hospital, ...)")
    limit_amount: Optional[Decimal] = Field(None, ge=0, description="Default dollar limit")
    has_waiting_period: bool = False
    waiting_period_days: int = Field(default=0, ge=0)


class CompanyBenefit(BaseModel):
    """Benefit chosen by a company, with optional overrides."""

    model_config = ConfigDict(frozen=True)

    company_id: int
    benefit_id: int
    is_active: bool = True
    limit_amount: Optional[Decimal] = Field(None, ge=0, description="Company-specific limit")
    coverage_rate: Decimal = Field(default=Decimal("100"), ge=0, le=100)


class Institution(BaseModel):
    """Medical institution submitting claims."""

    model_config = ConfigDict(frozen=True)

    institution_id: int
    name: str
    is_active: bool = True


class MedicalProcedure(BaseModel):
    """Catalog procedure."""

    model_config = ConfigDict(frozen=True)

    procedure_id: int = Field(..., gt=0)
    name: str
    code: str
    standard_rate: Decimal = Field(default=Decimal("0"), ge=0)


class ProviderProcedureRate(BaseModel):
    """Rate agreed between an institution and the insurer for a procedure."""

    model_config = ConfigDict(frozen=True)

    institution_id: int
    procedure_id: int
    agreed_rate: Decimal = Field(..., ge=0)
    effective_date: date
    expiry_date: Optional[date] = None
    active: bool = True

    def is_effective_on(self, on_date: date) -> bool:
        """Check the rate is active and in force on a date."""
        if not self.active:
            return False
        if on_date < self.effective_date:
            return False
        if self.expiry_date and on_date > self.expiry_date:
            return False
        return True


class UtilizationRecord(BaseModel):
    """Benefit usage for a member."""

    model_config = ConfigDict(frozen=True)

    member_id: int
    benefit_id: int
    year_to_date_used: Decimal = Field(default=Decimal("0"), ge=0)
    lifetime_used: Decimal = Field(default=Decimal("0"), ge=0)


class AccumulatorState(BaseModel):
    """Year-to-date deductible and out-of-pocket accumulators."""

    model_config = ConfigDict(frozen=True)

    member_id: int
    annual_deductible: Decimal = Field(..., ge=0)
    deductible_met: Decimal = Field(default=Decimal("0"), ge=0)
    out_of_pocket_maximum: Optional[Decimal] = Field(None, ge=0)
    out_of_pocket_met: Decimal = Field(default=Decimal("0"), ge=0)

    @model_validator(mode="after")
    def validate_deductible_met(self) -> "AccumulatorState":
        """Deductible met cannot exceed the annual deductible."""
        if self.deductible_met > self.annual_deductible:
            raise ValueError("deductible_met cannot exceed annual_deductible")
        return self

    @property
    def remaining_deductible(self) -> Decimal:
        return max(Decimal("0"), self.annual_deductible - self.deductible_met)
