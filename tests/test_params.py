"""Tests for Parameters and numeric helpers."""

import pytest
from lifeplan_sim_jp import Parameters
from lifeplan_sim_jp.params import _calc_equal_payment, growth_factor, round1


class TestParameters:
    def test_defaults(self):
        p = Parameters()
        assert p.inflation_rate == 1.0
        assert p.education_cost_increase_rate == 2.0
        assert p.investment_return == 3.0

    def test_frozen(self):
        p = Parameters()
        with pytest.raises(AttributeError):
            p.inflation_rate = 2.0


class TestGrowthFactor:
    def test_zero_years(self):
        assert growth_factor(2.0, 0) == 1.0

    def test_negative_years_no_discount(self):
        """Years before the base year are not deflated."""
        assert growth_factor(2.0, -5) == 1.0

    def test_compounding(self):
        assert growth_factor(2.0, 10) == pytest.approx(1.02 ** 10, rel=1e-12)

    def test_zero_rate(self):
        assert growth_factor(0.0, 30) == 1.0


class TestRound1:
    @pytest.mark.parametrize("value,expected", [
        (12.34, 12.3),
        (12.36, 12.4),
        (0.25, 0.3),
        (-0.25, -0.3),
        (240.0, 240.0),
        (0.0, 0.0),
    ])
    def test_values(self, value, expected):
        assert round1(value) == expected

    def test_no_negative_zero(self):
        assert str(round1(-0.04)) == "0.0"

    def test_returns_float(self):
        assert isinstance(round1(3), float)


class TestCalcEqualPayment:
    def test_zero_rate(self):
        assert _calc_equal_payment(1200, 0, 120) == pytest.approx(10.0)

    def test_with_rate(self):
        r = 0.01 / 12
        n = 35 * 12
        expected = 3000 * r * (1 + r) ** n / ((1 + r) ** n - 1)
        assert _calc_equal_payment(3000, r, n) == pytest.approx(expected)

    def test_total_exceeds_principal(self):
        monthly = _calc_equal_payment(3000, 0.01 / 12, 420)
        assert monthly * 420 > 3000
