from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import CostType, PayType


@dataclass(frozen=True)
class LaborRoleInput:
    """A named pay line, paid as a share of base revenue or a fixed amount.

    Only the value matching ``pay_type`` is read; the other one is ignored.
    """

    name: str
    pay_type: PayType
    revenue_percent: Optional[float] = None
    fixed_amount: Optional[float] = None

    @property
    def rate(self) -> float:
        """The value the engine reads for this role's pay type."""
        if self.pay_type == PayType.PERCENTAGE:
            return self.revenue_percent or 0.0
        return self.fixed_amount or 0.0


@dataclass(frozen=True)
class FoodCostItem:
    """Food cost line; flat dollars unless ``cost_type`` is percentage."""

    type: str
    cost: float
    cost_type: CostType = CostType.FIXED


@dataclass(frozen=True)
class MiscExpense:
    type: str
    cost: float
    cost_type: CostType = CostType.FIXED


@dataclass(frozen=True)
class EventFinancialInput:
    """Everything the allocation engine needs for one event calculation.

    Built fresh from form state for every calculation and owned by the
    caller. Percentages are expressed 0-100, money in a single currency.
    """

    guest_count: int
    price_per_guest: float
    gratuity_percent: float = 0.0
    gratuity_enabled: bool = True
    labor_roles: list[LaborRoleInput] = field(default_factory=list)
    food_cost_items: list[FoodCostItem] = field(default_factory=list)
    misc_expenses: list[MiscExpense] = field(default_factory=list)
    business_tax_percent: float = 0.0
    max_labor_revenue_percent: float = 100.0
