"""Pydantic request models for the HTTP boundary.

These only coerce JSON into typed fields; range rules live in
``catering.validation.validator`` so that every caller (HTTP or Python)
gets the same tagged result.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from catering.models.enums import CostType, PayType
from catering.models.inputs import (
    EventFinancialInput,
    FoodCostItem,
    LaborRoleInput,
    MiscExpense,
)


class LaborRoleRequest(BaseModel):
    name: str = Field(min_length=1)
    pay_type: PayType
    revenue_percent: Optional[float] = None
    fixed_amount: Optional[float] = None

    @model_validator(mode="after")
    def rate_matches_pay_type(self) -> LaborRoleRequest:
        if self.pay_type == PayType.PERCENTAGE and self.revenue_percent is None:
            raise ValueError(f"Role '{self.name}' is paid by percentage but has no revenue_percent")
        if self.pay_type == PayType.FIXED and self.fixed_amount is None:
            raise ValueError(f"Role '{self.name}' is paid a fixed amount but has no fixed_amount")
        return self

    def to_input(self) -> LaborRoleInput:
        return LaborRoleInput(
            name=self.name,
            pay_type=self.pay_type,
            revenue_percent=self.revenue_percent,
            fixed_amount=self.fixed_amount,
        )


class FoodCostRequest(BaseModel):
    type: str
    cost: float
    cost_type: CostType = CostType.FIXED

    def to_input(self) -> FoodCostItem:
        return FoodCostItem(type=self.type, cost=self.cost, cost_type=self.cost_type)


class MiscExpenseRequest(BaseModel):
    type: str
    cost: float
    cost_type: CostType = CostType.FIXED

    def to_input(self) -> MiscExpense:
        return MiscExpense(type=self.type, cost=self.cost, cost_type=self.cost_type)


class EventFinancialRequest(BaseModel):
    """JSON shape of an event calculation request."""

    guest_count: int
    price_per_guest: float
    gratuity_percent: float = 0.0
    gratuity_enabled: bool = True
    labor_roles: list[LaborRoleRequest] = Field(default_factory=list)
    food_cost_items: list[FoodCostRequest] = Field(default_factory=list)
    misc_expenses: list[MiscExpenseRequest] = Field(default_factory=list)
    business_tax_percent: float = 0.0
    max_labor_revenue_percent: float = 100.0

    def to_input(self) -> EventFinancialInput:
        return EventFinancialInput(
            guest_count=self.guest_count,
            price_per_guest=self.price_per_guest,
            gratuity_percent=self.gratuity_percent,
            gratuity_enabled=self.gratuity_enabled,
            labor_roles=[r.to_input() for r in self.labor_roles],
            food_cost_items=[f.to_input() for f in self.food_cost_items],
            misc_expenses=[m.to_input() for m in self.misc_expenses],
            business_tax_percent=self.business_tax_percent,
            max_labor_revenue_percent=self.max_labor_revenue_percent,
        )


class TargetPricingRequest(BaseModel):
    input: EventFinancialRequest
    target_margin_percent: float = Field(25.0, ge=0, le=100)


class BudgetAllocationRequest(BaseModel):
    labor_percent: float = Field(default=30, ge=0, le=100)
    food_percent: float = Field(default=35, ge=0, le=100)
    taxes_percent: float = Field(default=20, ge=0, le=100)
    profit_percent: float = Field(default=15, ge=0, le=100)


class BudgetScenarioRequest(BaseModel):
    guest_count: int = Field(default=30, ge=0)
    price_per_guest: float = Field(default=75, ge=0)
    allocation: BudgetAllocationRequest = Field(default_factory=BudgetAllocationRequest)


class QuoteRequestModel(BaseModel):
    adult_guests: int = Field(default=0, ge=0)
    child_guests: int = Field(default=0, ge=0)
    proteins: list[str] = Field(default_factory=list)
    gratuity_percent: float = Field(default=20, ge=0, le=100)


class SaveReportRequest(BaseModel):
    report_name: str = Field(min_length=1)
    input: EventFinancialRequest
    user_id: Optional[str] = None
