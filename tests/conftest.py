"""Shared test fixtures for the catering profit engine test suite."""

import pytest

from catering.models.enums import CostType, PayType
from catering.models.inputs import (
    EventFinancialInput,
    FoodCostItem,
    LaborRoleInput,
    MiscExpense,
)


def chef(percent=20.0, name="Chef"):
    return LaborRoleInput(name=name, pay_type=PayType.PERCENTAGE, revenue_percent=percent)


def flat_role(amount, name="Server"):
    return LaborRoleInput(name=name, pay_type=PayType.FIXED, fixed_amount=amount)


@pytest.fixture
def no_cost_event() -> EventFinancialInput:
    """15 guests at $60 with 20% gratuity and nothing to pay out."""
    return EventFinancialInput(
        guest_count=15,
        price_per_guest=60,
        gratuity_percent=20,
    )


@pytest.fixture
def chef_event() -> EventFinancialInput:
    """10 guests at $55, one percentage-paid chef, $100 of proteins, 8% tax."""
    return EventFinancialInput(
        guest_count=10,
        price_per_guest=55,
        gratuity_percent=20,
        labor_roles=[chef(20)],
        food_cost_items=[FoodCostItem(type="Proteins", cost=100)],
        business_tax_percent=8,
    )


@pytest.fixture
def full_event() -> EventFinancialInput:
    """The calculator's default wedding: 50 guests at $85, mixed crew."""
    return EventFinancialInput(
        guest_count=50,
        price_per_guest=85,
        gratuity_percent=18,
        labor_roles=[
            flat_role(200, "Chef 1"),
            flat_role(180, "Chef 2"),
            flat_role(120, "Assistant"),
        ],
        food_cost_items=[
            FoodCostItem(type="Food", cost=30, cost_type=CostType.PERCENTAGE),
        ],
        misc_expenses=[
            MiscExpense(type="Equipment rental", cost=300),
            MiscExpense(type="Transportation", cost=150),
            MiscExpense(type="Card fees", cost=3, cost_type=CostType.PERCENTAGE),
        ],
        business_tax_percent=8,
        max_labor_revenue_percent=30,
    )
