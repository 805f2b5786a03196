"""Event finance formulas.

Each function is a pure calculation with no side effects. Percentages are
expressed 0-100; all monetary values share the caller's currency (USD in
practice).
"""

from __future__ import annotations

import math
from typing import Callable

# Quotients this close to an integer are treated as that integer before ceil.
_CEIL_PRECISION = 9


def _check_money(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} cannot be negative")


def _check_percent(name: str, value: float) -> None:
    if not (0 <= value <= 100):
        raise ValueError(f"{name} must be 0-100, got {value}")


def calc_fixed_cost(amount: float, base_revenue: float) -> float:
    _check_money("amount", amount)
    return float(amount)


def calc_percentage_cost(percent: float, base_revenue: float) -> float:
    """Cost = base_revenue x percent / 100"""
    return calc_percentage_of(base_revenue, percent)


# Rate -> dollars, keyed by PayType / CostType value
COST_BASES: dict[str, Callable[[float, float], float]] = {
    "fixed": calc_fixed_cost,
    "percentage": calc_percentage_cost,
}


def calc_base_revenue(guest_count: int, price_per_guest: float) -> float:
    """Base_Revenue = guest_count x price_per_guest"""
    if guest_count < 0:
        raise ValueError("guest_count cannot be negative")
    _check_money("price_per_guest", price_per_guest)
    return float(guest_count * price_per_guest)


def calc_percentage_of(amount: float, percent: float) -> float:
    _check_money("amount", amount)
    _check_percent("percent", percent)
    return amount * percent / 100


def calc_gratuity(base_revenue: float, gratuity_percent: float, enabled: bool = True) -> float:
    """Gratuity = base_revenue x gratuity_% / 100, or 0 when disabled."""
    if not enabled:
        return 0.0
    return calc_percentage_of(base_revenue, gratuity_percent)


def split_evenly(amount: float, parts: int) -> float:
    """Share per part; 0 when there is nothing to split across."""
    _check_money("amount", amount)
    if parts <= 0:
        return 0.0
    return amount / parts


def calc_business_tax(gross_profit: float, tax_percent: float) -> float:
    """Tax on profit only; a loss is never taxed."""
    _check_percent("tax_percent", tax_percent)
    if gross_profit <= 0:
        return 0.0
    return gross_profit * tax_percent / 100


def calc_profit_margin(net_profit: float, total_revenue: float) -> float:
    if total_revenue <= 0:
        return 0.0
    return net_profit / total_revenue * 100


def calc_break_even_guests(
    total_cost: float,
    price_per_guest: float,
    gratuity_percent: float,
) -> int:
    """Break_Even = ceil(total_cost / (price x (1 + gratuity_% / 100)))

    Cost is held constant with respect to guest count.
    """
    _check_money("total_cost", total_cost)
    _check_money("price_per_guest", price_per_guest)
    _check_percent("gratuity_percent", gratuity_percent)
    if price_per_guest == 0:
        return 0
    revenue_per_guest = price_per_guest * (1 + gratuity_percent / 100)
    return math.ceil(round(total_cost / revenue_per_guest, _CEIL_PRECISION))


def calc_target_revenue(total_cost: float, target_margin_percent: float) -> float:
    """Target_Revenue = total_cost / (1 - margin_% / 100)

    A 100% margin has no finite solution and yields 0.
    """
    _check_money("total_cost", total_cost)
    _check_percent("target_margin_percent", target_margin_percent)
    if target_margin_percent >= 100:
        return 0.0
    return total_cost / (1 - target_margin_percent / 100)
