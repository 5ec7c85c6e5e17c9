"""
Financial Calculation Configuration
Settings for the claim financial-responsibility calculator.
Source: Claims Financial Processing - Plan Cost Sharing Configuration
Verified: 2026-10-18
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import BenefitCategory, IntegrationMode
from src.schemas.financial import CostShare


def _default_cost_sharing() -> dict[str, CostShare]:
    """Copay and coinsurance per benefit category."""
    return {
        BenefitCategory.MEDICAL.value: CostShare(copay=Decimal("20"), coinsurance_rate=Decimal("20")),
        BenefitCategory.SPECIALIST.value: CostShare(copay=Decimal("40"), coinsurance_rate=Decimal("20")),
        BenefitCategory.HOSPITAL.value: CostShare(copay=Decimal("100"), coinsurance_rate=Decimal("10")),
        BenefitCategory.PRESCRIPTION.value: CostShare(copay=Decimal("10"), coinsurance_rate=Decimal("0")),
        BenefitCategory.EMERGENCY.value: CostShare(copay=Decimal("150"), coinsurance_rate=Decimal("20")),
    }


class FinancialSettings(BaseSettings):
    """
    Financial calculation configuration settings.

    Source: https://docs.pydantic.dev/latest/concepts/pydantic_settings/
    Verified: 2026-10-18
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CLAIMS_FINANCE_",
    )

    # =========================================================================
    # Integration Mode
    # =========================================================================
    INTEGRATION_MODE: IntegrationMode = Field(
        default=IntegrationMode.DEMO,
        description="Collaborator adapters mode: demo (in-memory) or live",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_FILE: Optional[str] = Field(
        default=None,
        description="Optional log file path",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit JSON log records",
    )

    # =========================================================================
    # Cost Sharing
    # =========================================================================
    COST_SHARING: dict[str, CostShare] = Field(
        default_factory=_default_cost_sharing,
        description="Copay and coinsurance rate keyed by benefit category",
    )
    DEFAULT_COPAY: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Copay for categories missing from COST_SHARING",
    )
    DEFAULT_COINSURANCE_RATE: Decimal = Field(
        default=Decimal("20"),
        ge=0,
        le=100,
        description="Coinsurance percentage for categories missing from COST_SHARING",
    )

    # =========================================================================
    # Plan Defaults (used when no accumulator record exists)
    # =========================================================================
    DEFAULT_ANNUAL_DEDUCTIBLE: Decimal = Field(
        default=Decimal("500"),
        ge=0,
        description="Plan annual deductible",
    )
    DEFAULT_OUT_OF_POCKET_MAXIMUM: Optional[Decimal] = Field(
        default=Decimal("5000"),
        ge=0,
        description="Plan annual out-of-pocket maximum (None = uncapped)",
    )

    # =========================================================================
    # Limitations
    # =========================================================================
    LIFETIME_LIMIT_MULTIPLIER: Decimal = Field(
        default=Decimal("5"),
        ge=0,
        description="Lifetime limit as a multiple of the dollar benefit limit",
    )

    # =========================================================================
    # Compliance
    # =========================================================================
    RATE_COMPLIANCE_THRESHOLD: Decimal = Field(
        default=Decimal("90"),
        ge=0,
        le=100,
        description="Minimum compliance score for rate compliance",
    )
    BILLING_COMPLIANCE_THRESHOLD: Decimal = Field(
        default=Decimal("80"),
        ge=0,
        le=100,
        description="Minimum compliance score for billing compliance",
    )
    MAX_LINE_DISCOUNT_SCORE: Decimal = Field(
        default=Decimal("50"),
        gt=0,
        le=100,
        description="Per-line discount percentage cap used in the compliance score",
    )
    HIGH_VALUE_CLAIM_THRESHOLD: Decimal = Field(
        default=Decimal("10000"),
        ge=0,
        description="Claims above this amount require additional documentation",
    )

    # =========================================================================
    # Medical Loss Ratio
    # =========================================================================
    MLR_UPPER_THRESHOLD: Decimal = Field(
        default=Decimal("85"),
        ge=0,
        description="Projected MLR above this is a negative impact",
    )
    MLR_LOWER_THRESHOLD: Decimal = Field(
        default=Decimal("65"),
        ge=0,
        description="Projected MLR below this is a positive impact",
    )

    # =========================================================================
    # Payment Timing (days)
    # =========================================================================
    PAYMENT_DAYS_STANDARD: int = Field(default=14, ge=0)
    PAYMENT_DAYS_HIGH_VALUE: int = Field(default=21, ge=0)
    PAYMENT_DAYS_MEDIUM_RISK: int = Field(default=30, ge=0)
    PAYMENT_DAYS_HIGH_RISK: int = Field(default=45, ge=0)

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("COST_SHARING")
    @classmethod
    def normalize_categories(cls, v: dict[str, CostShare]) -> dict[str, CostShare]:
        """Category keys are matched case-insensitively."""
        return {key.strip().lower(): share for key, share in v.items()}

    @model_validator(mode="after")
    def validate_thresholds(self) -> "FinancialSettings":
        """Billing gate is the looser one; MLR band must be ordered."""
        if self.BILLING_COMPLIANCE_THRESHOLD > self.RATE_COMPLIANCE_THRESHOLD:
            raise ValueError(
                "BILLING_COMPLIANCE_THRESHOLD must not exceed RATE_COMPLIANCE_THRESHOLD"
            )
        if self.MLR_LOWER_THRESHOLD > self.MLR_UPPER_THRESHOLD:
            raise ValueError("MLR_LOWER_THRESHOLD must not exceed MLR_UPPER_THRESHOLD")
        return self

    @property
    def is_demo_mode(self) -> bool:
        """Check if running in demo mode."""
        return self.INTEGRATION_MODE == IntegrationMode.DEMO

    @property
    def is_live_mode(self) -> bool:
        """Check if running in live mode."""
        return self.INTEGRATION_MODE == IntegrationMode.LIVE


# Singleton instance
_financial_settings: Optional[FinancialSettings] = None


def get_financial_settings() -> FinancialSettings:
    """
    Get cached financial settings instance.

    Returns:
        FinancialSettings instance
    """
    global _financial_settings
    if _financial_settings is None:
        _financial_settings = FinancialSettings()
    return _financial_settings
