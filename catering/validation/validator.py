"""Input-boundary validation for event financial inputs.

Produces a tagged result instead of raising, so callers (the API, forms)
can report every offending field at once. Negative money and guest counts
are failures; percentages outside 0-100 are clamped and reported as notices.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional

from catering.errors import InvalidInputError
from catering.models.enums import CostType, PayType
from catering.models.inputs import EventFinancialInput

logger = logging.getLogger(__name__)

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Either a usable (clamped) input or the list of fields that failed."""

    value: Optional[EventFinancialInput]
    errors: list[FieldError] = field(default_factory=list)
    notices: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def clamp_percent(value: float) -> float:
    return min(max(value, PERCENT_MIN), PERCENT_MAX)


class _Checker:
    def __init__(self) -> None:
        self.errors: list[FieldError] = []
        self.notices: list[FieldError] = []

    def finite(self, name: str, value: float) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self.errors.append(FieldError(name, "must be a number"))
            return False
        if math.isnan(value) or math.isinf(value):
            self.errors.append(FieldError(name, "must be a finite number"))
            return False
        return True

    def money(self, name: str, value: float) -> None:
        if self.finite(name, value) and value < 0:
            self.errors.append(FieldError(name, "cannot be negative"))

    def percent(self, name: str, value: float) -> float:
        if not self.finite(name, value):
            return value
        clamped = clamp_percent(value)
        if clamped != value:
            self.notices.append(
                FieldError(name, f"clamped from {value} to {clamped}")
            )
        return clamped


def validate_financial_input(data: EventFinancialInput) -> ValidationResult:
    """Check every field of ``data`` and return a tagged result."""
    check = _Checker()

    if isinstance(data.guest_count, bool) or not isinstance(data.guest_count, int):
        check.errors.append(FieldError("guest_count", "must be a whole number"))
    elif data.guest_count < 0:
        check.errors.append(FieldError("guest_count", "cannot be negative"))

    check.money("price_per_guest", data.price_per_guest)
    gratuity_percent = check.percent("gratuity_percent", data.gratuity_percent)
    tax_percent = check.percent("business_tax_percent", data.business_tax_percent)
    max_labor = check.percent(
        "max_labor_revenue_percent", data.max_labor_revenue_percent
    )

    roles = []
    for i, role in enumerate(data.labor_roles):
        if role.pay_type == PayType.PERCENTAGE:
            pct = check.percent(f"labor_roles[{i}].revenue_percent", role.rate)
            roles.append(role if pct == role.rate else replace(role, revenue_percent=pct))
        else:
            check.money(f"labor_roles[{i}].fixed_amount", role.rate)
            roles.append(role)

    food_items = []
    for i, item in enumerate(data.food_cost_items):
        food_items.append(
            _check_cost_line(check, f"food_cost_items[{i}].cost", item)
        )

    misc = []
    for i, item in enumerate(data.misc_expenses):
        misc.append(_check_cost_line(check, f"misc_expenses[{i}].cost", item))

    if check.errors:
        logger.debug("Rejected input: %s", [e.field for e in check.errors])
        return ValidationResult(value=None, errors=check.errors, notices=check.notices)

    cleaned = replace(
        data,
        gratuity_percent=gratuity_percent,
        business_tax_percent=tax_percent,
        max_labor_revenue_percent=max_labor,
        labor_roles=roles,
        food_cost_items=food_items,
        misc_expenses=misc,
    )
    return ValidationResult(value=cleaned, notices=check.notices)


def _check_cost_line(check: _Checker, name: str, item):
    if not check.finite(name, item.cost):
        return item
    # A negative share is a negative cost: rejected, not clamped.
    if item.cost < 0:
        check.errors.append(FieldError(name, "cannot be negative"))
    elif item.cost_type == CostType.PERCENTAGE and item.cost > PERCENT_MAX:
        return replace(item, cost=check.percent(name, item.cost))
    return item


def require_valid(data: EventFinancialInput) -> ValidationResult:
    """Validate and raise ``InvalidInputError`` for the first failing field."""
    result = validate_financial_input(data)
    if not result.ok:
        first = result.errors[0]
        raise InvalidInputError(first.field, first.message)
    return result
