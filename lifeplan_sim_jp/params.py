"""Economic parameters and shared numeric helpers."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class Parameters:
    """Annual rates in percent, applied once per simulated year (compounding)."""

    inflation_rate: float = 1.0               # 物価上昇率（%/年）
    education_cost_increase_rate: float = 2.0  # 教育費上昇率（%/年）
    investment_return: float = 3.0            # 運用利回り（%/年）


def growth_factor(rate_pct: float, years: float) -> float:
    """(1 + rate/100) ** years. No compounding before the base year."""
    if years <= 0:
        return 1.0
    return (1 + rate_pct / 100) ** years


def round1(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    Works on the exact binary value of the float, so 0.25 → 0.3 and
    1.45 (stored as 1.4499999...) → 1.4.
    """
    rounded = float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
    return rounded + 0.0  # -0.0 → 0.0


def _calc_equal_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Calculate monthly loan payment (元利均等返済)"""
    if monthly_rate == 0:
        return principal / months
    r = monthly_rate
    n = months
    return principal * r * (1 + r) ** n / ((1 + r) ** n - 1)
