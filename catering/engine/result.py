"""Immutable result data structures for event calculations."""

from __future__ import annotations

from dataclasses import dataclass, field

from catering.models.enums import PayType


@dataclass(frozen=True)
class LaborRoleResult:
    """Cost of one labor role, including its share of the gratuity."""

    name: str
    pay_type: PayType
    base_cost: float
    gratuity_share: float
    calculated_cost: float


@dataclass(frozen=True)
class EventFinancialOutput:
    """Complete revenue / cost / profit breakdown for one event."""

    base_revenue: float
    gratuity_amount: float
    total_revenue: float
    labor_role_results: list[LaborRoleResult]
    gratuity_per_role: float
    unallocated_gratuity: float
    total_labor_cost: float
    total_food_cost: float
    total_misc_cost: float
    total_cost: float
    gross_profit: float
    business_tax: float
    net_profit: float
    profit_margin_percent: float
    break_even_guest_count: int
    labor_revenue_percent: float = 0.0
    labor_cap_exceeded: bool = False
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TargetPricing:
    """Price needed to hit a target profit margin at the current cost."""

    target_margin_percent: float
    target_revenue: float
    adjusted_price_per_guest: float
    adjusted_profit: float


@dataclass(frozen=True)
class BudgetScenario:
    """Budget split for a given guest count."""

    guests: int
    total_revenue: float
    labor_budget: float
    food_budget: float
    taxes_budget: float
    profit_budget: float
    chef_pay: float
    support_staff_pay: float


@dataclass(frozen=True)
class QuoteResult:
    adult_guests: int
    child_guests: int
    proteins: list[str]
    protein_upcharge: float
    adult_plate_price: float
    child_plate_price: float
    subtotal: float
    gratuity_percent: float
    gratuity_amount: float
    total: float
