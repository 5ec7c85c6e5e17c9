"""
Decimal rounding helpers for money and percentages.

Source: Claims Financial Processing - Currency Handling
Verified: 2026-10-18
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def round_money(amount: Decimal) -> Decimal:
    """Round to 2 decimal places for currency."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def floor_money(amount: Decimal) -> Decimal:
    """Truncate to whole cents; never exceeds the input."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_DOWN)


def round_percent(value: Decimal) -> Decimal:
    """Round a 0-100 percentage to 2 decimal places."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole as a percentage; zero when whole is zero."""
    if whole <= 0:
        return ZERO
    return round_percent(part / whole * HUNDRED)
