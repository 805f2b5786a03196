"""Tests for the target pricing, budget scenario and quote calculators."""

from dataclasses import replace

import pytest

from catering.engine.allocation import compute
from catering.engine.budget import (
    BudgetAllocation,
    compute_budget_scenario,
    compute_scenario_table,
)
from catering.engine.pricing import compute_target_pricing
from catering.engine.quote import QuoteRequest, compute_quote


class TestTargetPricing:
    def test_price_for_25_percent_margin(self, full_event):
        # cost 3117.5 / 0.75 = 4156.67; minus 765 gratuity over 50 guests
        pricing = compute_target_pricing(full_event, 25)
        assert pricing.target_revenue == pytest.approx(3117.5 / 0.75)
        assert pricing.adjusted_price_per_guest == pytest.approx((3117.5 / 0.75 - 765) / 50)
        assert pricing.adjusted_profit == pytest.approx(3117.5 / 0.75 - 3117.5)

    def test_uses_given_output_without_recomputing(self, full_event):
        output = compute(full_event)
        assert compute_target_pricing(full_event, 25, output=output) == compute_target_pricing(
            full_event, 25
        )

    def test_zero_guests(self, full_event):
        pricing = compute_target_pricing(replace(full_event, guest_count=0), 25)
        assert pricing.adjusted_price_per_guest == 0.0

    def test_margin_is_clamped(self, full_event):
        pricing = compute_target_pricing(full_event, 150)
        assert pricing.target_margin_percent == 100
        assert pricing.target_revenue == 0.0
        assert pricing.adjusted_profit == 0.0


class TestBudgetScenarios:
    def test_default_split_for_30_guests(self):
        scenario = compute_budget_scenario(30, 75, BudgetAllocation())
        assert scenario.total_revenue == pytest.approx(2250)
        assert scenario.labor_budget == pytest.approx(675)
        assert scenario.food_budget == pytest.approx(787.5)
        assert scenario.taxes_budget == pytest.approx(450)
        assert scenario.profit_budget == pytest.approx(337.5)
        assert scenario.chef_pay == pytest.approx(405)
        assert scenario.support_staff_pay == pytest.approx(270)

    def test_table_covers_10_to_60_by_5(self):
        table = compute_scenario_table(75, BudgetAllocation())
        assert [s.guests for s in table] == list(range(10, 61, 5))

    def test_allocation_total(self):
        assert BudgetAllocation().total_percent == 100
        assert not BudgetAllocation().over_allocated
        assert BudgetAllocation(labor_percent=40).over_allocated

    def test_bad_step_raises(self):
        with pytest.raises(ValueError, match="step must be positive"):
            compute_scenario_table(75, BudgetAllocation(), step=0)


class TestQuote:
    def test_plain_quote(self):
        result = compute_quote(QuoteRequest(adult_guests=10, child_guests=4))
        assert result.subtotal == pytest.approx(720)
        assert result.gratuity_amount == pytest.approx(144)
        assert result.total == pytest.approx(864)

    def test_protein_upcharge_on_every_plate(self):
        result = compute_quote(
            QuoteRequest(adult_guests=2, child_guests=1, proteins=["Filet Mignon", "Scallops"])
        )
        assert result.protein_upcharge == pytest.approx(12)
        assert result.adult_plate_price == pytest.approx(72)
        assert result.child_plate_price == pytest.approx(42)
        assert result.subtotal == pytest.approx(186)

    def test_more_than_two_proteins_rejected(self):
        with pytest.raises(ValueError, match="At most 2 proteins"):
            compute_quote(QuoteRequest(adult_guests=1, proteins=["Shrimp", "Chicken", "Steak"]))

    def test_unknown_protein_rejected(self):
        with pytest.raises(ValueError, match="Unknown proteins"):
            compute_quote(QuoteRequest(adult_guests=1, proteins=["Tofu"]))

    def test_repeated_protein_rejected(self):
        with pytest.raises(ValueError, match="must not repeat"):
            compute_quote(QuoteRequest(adult_guests=1, proteins=["Steak", "Steak"]))
