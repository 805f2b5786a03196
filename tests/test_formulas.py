"""Unit tests for each event finance formula."""

import pytest

from catering.formulas.library import (
    COST_BASES,
    calc_base_revenue,
    calc_break_even_guests,
    calc_business_tax,
    calc_fixed_cost,
    calc_gratuity,
    calc_percentage_cost,
    calc_profit_margin,
    calc_target_revenue,
    split_evenly,
)
from catering.models.enums import CostType, PayType


class TestBaseRevenue:
    def test_basic_calculation(self):
        assert calc_base_revenue(guest_count=50, price_per_guest=85) == pytest.approx(4250)

    def test_zero_guests(self):
        assert calc_base_revenue(guest_count=0, price_per_guest=85) == 0.0

    def test_negative_guests_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            calc_base_revenue(guest_count=-3, price_per_guest=85)


class TestGratuity:
    def test_basic_calculation(self):
        # $4,250 * 18% = $765
        assert calc_gratuity(4250, 18) == pytest.approx(765)

    def test_disabled(self):
        assert calc_gratuity(4250, 18, enabled=False) == 0.0

    def test_percent_over_100_raises(self):
        with pytest.raises(ValueError, match="must be 0-100"):
            calc_gratuity(4250, 120)


class TestSplitEvenly:
    def test_three_ways(self):
        assert split_evenly(765, 3) == pytest.approx(255)

    def test_no_parts(self):
        assert split_evenly(765, 0) == 0.0


class TestBusinessTax:
    def test_profit_is_taxed(self):
        assert calc_business_tax(230, 8) == pytest.approx(18.4)

    def test_zero_profit_untaxed(self):
        assert calc_business_tax(0, 8) == 0.0

    def test_loss_untaxed(self):
        assert calc_business_tax(-500, 8) == 0.0


class TestProfitMargin:
    def test_basic_calculation(self):
        assert calc_profit_margin(250, 1000) == pytest.approx(25)

    def test_zero_revenue(self):
        assert calc_profit_margin(-100, 0) == 0.0


class TestBreakEvenGuests:
    def test_rounds_up(self):
        # 1000 / (75 * 1.2) = 11.11 -> 12
        assert calc_break_even_guests(1000, 75, 20) == 12

    def test_exact_division_is_not_bumped(self):
        # 900 / (75 * 1.2) = 10 exactly
        assert calc_break_even_guests(900, 75, 20) == 10

    def test_zero_price(self):
        assert calc_break_even_guests(1000, 0, 20) == 0

    def test_zero_cost(self):
        assert calc_break_even_guests(0, 75, 20) == 0


class TestTargetRevenue:
    def test_basic_calculation(self):
        # 3000 / (1 - 0.25) = 4000
        assert calc_target_revenue(3000, 25) == pytest.approx(4000)

    def test_full_margin_has_no_solution(self):
        assert calc_target_revenue(3000, 100) == 0.0


class TestCostBases:
    def test_fixed_ignores_revenue(self):
        assert calc_fixed_cost(300, 4250) == 300

    def test_percentage_of_base_revenue(self):
        assert calc_percentage_cost(30, 4250) == pytest.approx(1275)

    def test_negative_fixed_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            calc_fixed_cost(-1, 4250)

    def test_one_basis_per_pay_and_cost_type(self):
        assert set(COST_BASES) == {t.value for t in PayType} == {t.value for t in CostType}

    def test_lookup_by_type_value(self):
        assert COST_BASES[PayType.PERCENTAGE.value] is calc_percentage_cost
        assert COST_BASES[CostType.FIXED.value] is calc_fixed_cost
