"""
Unit Tests for Configuration Management
Tests settings defaults, environment overrides and validation
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.config import FinancialSettings, get_financial_settings
from src.core.enums import IntegrationMode
from src.schemas.financial import CostShare


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default configuration values"""

    def test_cost_sharing_defaults(self):
        """Test per-category copay and coinsurance defaults"""
        settings = FinancialSettings()

        assert settings.COST_SHARING["medical"].copay == Decimal("20")
        assert settings.COST_SHARING["medical"].coinsurance_rate == Decimal("20")
        assert settings.COST_SHARING["specialist"].copay == Decimal("40")
        assert settings.COST_SHARING["hospital"].coinsurance_rate == Decimal("10")
        assert settings.COST_SHARING["prescription"].coinsurance_rate == Decimal("0")
        assert settings.COST_SHARING["emergency"].copay == Decimal("150")
        assert "dental" not in settings.COST_SHARING

    def test_calculation_defaults(self):
        settings = FinancialSettings()

        assert settings.DEFAULT_COPAY == Decimal("0")
        assert settings.DEFAULT_COINSURANCE_RATE == Decimal("20")
        assert settings.LIFETIME_LIMIT_MULTIPLIER == Decimal("5")
        assert settings.RATE_COMPLIANCE_THRESHOLD == Decimal("90")
        assert settings.BILLING_COMPLIANCE_THRESHOLD == Decimal("80")
        assert settings.HIGH_VALUE_CLAIM_THRESHOLD == Decimal("10000")
        assert settings.MLR_UPPER_THRESHOLD == Decimal("85")
        assert settings.MLR_LOWER_THRESHOLD == Decimal("65")

    def test_demo_mode_default(self):
        settings = FinancialSettings()

        assert settings.INTEGRATION_MODE == IntegrationMode.DEMO
        assert settings.is_demo_mode is True
        assert settings.is_live_mode is False

    def test_get_settings_singleton(self):
        """Test that get_financial_settings returns the cached instance"""
        assert get_financial_settings() is get_financial_settings()


@pytest.mark.unit
class TestSettingsEnvironment:
    """Test environment variable overrides"""

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CLAIMS_FINANCE_DEFAULT_COINSURANCE_RATE", "30")
        monkeypatch.setenv("CLAIMS_FINANCE_INTEGRATION_MODE", "live")

        settings = FinancialSettings()

        assert settings.DEFAULT_COINSURANCE_RATE == Decimal("30")
        assert settings.is_live_mode is True

    def test_cost_sharing_from_json(self, monkeypatch):
        monkeypatch.setenv(
            "CLAIMS_FINANCE_COST_SHARING",
            '{"Vision": {"copay": "15", "coinsurance_rate": "30"}}',
        )

        settings = FinancialSettings()

        assert set(settings.COST_SHARING) == {"vision"}
        assert settings.COST_SHARING["vision"].copay == Decimal("15")

    def test_uncapped_out_of_pocket(self):
        settings = FinancialSettings(DEFAULT_OUT_OF_POCKET_MAXIMUM=None)

        assert settings.DEFAULT_OUT_OF_POCKET_MAXIMUM is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test configuration validation"""

    def test_log_level_normalized(self):
        assert FinancialSettings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            FinancialSettings(LOG_LEVEL="VERBOSE")

        errors = exc_info.value.errors()
        assert any("LOG_LEVEL" in str(error) for error in errors)

    def test_coinsurance_rate_bounds(self):
        with pytest.raises(ValidationError):
            FinancialSettings(DEFAULT_COINSURANCE_RATE=Decimal("120"))

    def test_billing_threshold_above_rate_threshold(self):
        with pytest.raises(ValidationError) as exc_info:
            FinancialSettings(
                BILLING_COMPLIANCE_THRESHOLD=Decimal("95"),
                RATE_COMPLIANCE_THRESHOLD=Decimal("90"),
            )

        assert "BILLING_COMPLIANCE_THRESHOLD" in str(exc_info.value)

    def test_mlr_band_order(self):
        with pytest.raises(ValidationError):
            FinancialSettings(
                MLR_LOWER_THRESHOLD=Decimal("90"),
                MLR_UPPER_THRESHOLD=Decimal("85"),
            )

    def test_category_keys_normalized(self):
        settings = FinancialSettings(
            COST_SHARING={" Medical ": CostShare(copay=Decimal("25"), coinsurance_rate=Decimal("15"))}
        )

        assert list(settings.COST_SHARING) == ["medical"]

    def test_negative_payment_days(self):
        with pytest.raises(ValidationError):
            FinancialSettings(PAYMENT_DAYS_STANDARD=-1)
