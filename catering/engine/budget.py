"""Budget allocation across guest-count scenarios (break-even planning).

Splits revenue into labor, food, taxes and profit budgets by percentage and
tabulates the split over a range of guest counts.
"""

from __future__ import annotations

from dataclasses import dataclass

from catering.engine.result import BudgetScenario
from catering.formulas.library import calc_base_revenue, calc_percentage_of

# Share of the labor budget recommended for the chef; the rest is support staff.
CHEF_SHARE_PERCENT = 60.0

SCENARIO_START = 10
SCENARIO_STOP = 60
SCENARIO_STEP = 5


@dataclass(frozen=True)
class BudgetAllocation:
    """Percent of revenue set aside for each budget category."""

    labor_percent: float = 30.0
    food_percent: float = 35.0
    taxes_percent: float = 20.0
    profit_percent: float = 15.0

    @property
    def total_percent(self) -> float:
        return self.labor_percent + self.food_percent + self.taxes_percent + self.profit_percent

    @property
    def over_allocated(self) -> bool:
        return self.total_percent > 100


def compute_budget_scenario(
    guests: int,
    price_per_guest: float,
    allocation: BudgetAllocation,
) -> BudgetScenario:
    revenue = calc_base_revenue(guests, price_per_guest)
    labor_budget = calc_percentage_of(revenue, allocation.labor_percent)
    chef_pay = calc_percentage_of(labor_budget, CHEF_SHARE_PERCENT)
    return BudgetScenario(
        guests=guests,
        total_revenue=revenue,
        labor_budget=labor_budget,
        food_budget=calc_percentage_of(revenue, allocation.food_percent),
        taxes_budget=calc_percentage_of(revenue, allocation.taxes_percent),
        profit_budget=calc_percentage_of(revenue, allocation.profit_percent),
        chef_pay=chef_pay,
        support_staff_pay=labor_budget - chef_pay,
    )


def compute_scenario_table(
    price_per_guest: float,
    allocation: BudgetAllocation,
    start: int = SCENARIO_START,
    stop: int = SCENARIO_STOP,
    step: int = SCENARIO_STEP,
) -> list[BudgetScenario]:
    """One scenario per guest count from ``start`` to ``stop`` inclusive."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return [
        compute_budget_scenario(guests, price_per_guest, allocation)
        for guests in range(start, stop + 1, step)
    ]
