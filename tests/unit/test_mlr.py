"""
Medical Loss Ratio and Payment Timing Tests.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from src.core.enums import MLRImpact, PaymentRiskLevel
from src.services.financial.mlr import (
    CONSIDER_REDUCTIONS,
    REVIEW_PREMIUMS,
    build_payment_timing_estimate,
    calculate_mlr_impact,
    estimate_payment_timing,
    risk_level_from_fraud_risk,
)
from src.utils.errors import ValidationError


@pytest.mark.unit
class TestMLRImpact:
    """Tests for medical loss ratio impact."""

    def test_neutral_impact(self, settings):
        result = calculate_mlr_impact(Decimal("800"), Decimal("200"), Decimal("1000"), settings)

        assert result.current_mlr == Decimal("80.00")
        assert result.projected_mlr == Decimal("80.00")
        assert result.impact == MLRImpact.NEUTRAL
        assert result.recommendation == ""

    def test_negative_impact(self, settings):
        result = calculate_mlr_impact(Decimal("800"), Decimal("200"), Decimal("500"), settings)

        assert result.projected_mlr == Decimal("160.00")
        assert result.impact == MLRImpact.NEGATIVE
        assert result.recommendation == REVIEW_PREMIUMS

    def test_positive_impact(self, settings):
        result = calculate_mlr_impact(Decimal("800"), Decimal("200"), Decimal("2000"), settings)

        assert result.projected_mlr == Decimal("40.00")
        assert result.impact == MLRImpact.POSITIVE
        assert result.recommendation == CONSIDER_REDUCTIONS

    def test_band_edges_are_neutral(self, settings):
        upper = calculate_mlr_impact(Decimal("850"), Decimal("0"), Decimal("1000"), settings)
        lower = calculate_mlr_impact(Decimal("650"), Decimal("0"), Decimal("1000"), settings)

        assert upper.impact == MLRImpact.NEUTRAL
        assert lower.impact == MLRImpact.NEUTRAL

    def test_no_paid_amounts(self, settings):
        result = calculate_mlr_impact(Decimal("0"), Decimal("0"), Decimal("1000"), settings)

        assert result.current_mlr == Decimal("0")
        assert result.impact == MLRImpact.POSITIVE

    @pytest.mark.parametrize("premium", ["0", "-100"])
    def test_premium_must_be_positive(self, settings, premium):
        with pytest.raises(ValidationError) as exc_info:
            calculate_mlr_impact(Decimal("800"), Decimal("200"), Decimal(premium), settings)

        assert exc_info.value.status_code == 422

    def test_negative_responsibility_rejected(self, settings):
        with pytest.raises(ValidationError):
            calculate_mlr_impact(Decimal("-1"), Decimal("200"), Decimal("1000"), settings)

    def test_service_delegates(self, calculator):
        result = calculator.calculate_mlr_impact(Decimal("800"), Decimal("200"), Decimal("1000"))

        assert result.impact == MLRImpact.NEUTRAL


@pytest.mark.unit
class TestPaymentTiming:
    """Tests for estimated days to payment."""

    @pytest.mark.parametrize(
        "amount,risk_level,days",
        [
            ("500", PaymentRiskLevel.CRITICAL, 45),
            ("500", PaymentRiskLevel.HIGH, 45),
            ("20000", PaymentRiskLevel.MEDIUM, 30),
            ("20000", PaymentRiskLevel.LOW, 21),
            ("10000", PaymentRiskLevel.LOW, 14),
            ("500", PaymentRiskLevel.LOW, 14),
        ],
    )
    def test_estimated_days(self, settings, amount, risk_level, days):
        assert estimate_payment_timing(Decimal(amount), risk_level, settings) == days

    @pytest.mark.parametrize(
        "fraud_risk,expected",
        [
            ("high", PaymentRiskLevel.HIGH),
            ("CONFIRMED", PaymentRiskLevel.HIGH),
            ("medium", PaymentRiskLevel.MEDIUM),
            ("low", PaymentRiskLevel.LOW),
            (None, PaymentRiskLevel.LOW),
        ],
    )
    def test_risk_level_from_fraud_risk(self, fraud_risk, expected):
        assert risk_level_from_fraud_risk(fraud_risk) == expected

    def test_build_estimate(self, settings):
        as_of = datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc)

        estimate = build_payment_timing_estimate(
            claim_id=1001,
            claim_amount=Decimal("500"),
            fraud_risk_level="medium",
            as_of=as_of,
            settings=settings,
        )

        assert estimate.claim_id == 1001
        assert estimate.risk_level == PaymentRiskLevel.MEDIUM
        assert estimate.estimated_days == 30
        assert estimate.estimated_payment_date == date(2026, 1, 31)
        assert estimate.current_date == as_of

    def test_build_estimate_rejects_negative_amount(self, settings):
        with pytest.raises(ValidationError):
            build_payment_timing_estimate(1001, Decimal("-1"), settings=settings)

    def test_service_delegates(self, calculator):
        assert calculator.estimate_payment_timing(Decimal("20000"), PaymentRiskLevel.LOW) == 21
