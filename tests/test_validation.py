"""Tests for boundary validation -- tagged results and request schemas."""

import math
from dataclasses import replace

import pytest
from pydantic import ValidationError

from catering.errors import InvalidInputError
from catering.models.enums import CostType, PayType
from catering.models.inputs import EventFinancialInput, FoodCostItem, MiscExpense
from catering.validation.schema import EventFinancialRequest, LaborRoleRequest
from catering.validation.validator import require_valid, validate_financial_input

from conftest import chef, flat_role


class TestValidateFinancialInput:
    def test_valid_input_passes_unchanged(self, full_event):
        result = validate_financial_input(full_event)
        assert result.ok
        assert result.value == full_event
        assert result.errors == []
        assert result.notices == []

    def test_every_bad_field_is_reported(self):
        event = EventFinancialInput(
            guest_count=-2,
            price_per_guest=-1,
            labor_roles=[flat_role(-50)],
            misc_expenses=[MiscExpense(type="Tent", cost=-10)],
        )
        result = validate_financial_input(event)
        assert not result.ok
        assert result.value is None
        assert [e.field for e in result.errors] == [
            "guest_count",
            "price_per_guest",
            "labor_roles[0].fixed_amount",
            "misc_expenses[0].cost",
        ]

    def test_fractional_guest_count_rejected(self):
        result = validate_financial_input(EventFinancialInput(guest_count=2.5, price_per_guest=10))
        assert result.errors[0].field == "guest_count"

    def test_nan_price_rejected(self):
        result = validate_financial_input(
            EventFinancialInput(guest_count=2, price_per_guest=math.nan)
        )
        assert result.errors[0].message == "must be a finite number"

    def test_negative_percentage_cost_rejected(self):
        event = EventFinancialInput(
            guest_count=2,
            price_per_guest=10,
            food_cost_items=[FoodCostItem(type="Food", cost=-30, cost_type=CostType.PERCENTAGE)],
        )
        result = validate_financial_input(event)
        assert result.errors[0].field == "food_cost_items[0].cost"

    def test_role_percent_clamped_with_notice(self):
        event = EventFinancialInput(guest_count=2, price_per_guest=10, labor_roles=[chef(140)])
        result = validate_financial_input(event)
        assert result.ok
        assert result.value.labor_roles[0].revenue_percent == 100
        assert result.notices[0].field == "labor_roles[0].revenue_percent"

    def test_clamping_does_not_touch_caller_input(self, full_event):
        event = replace(full_event, gratuity_percent=250)
        validate_financial_input(event)
        assert event.gratuity_percent == 250

    def test_require_valid_raises_first_error(self):
        with pytest.raises(InvalidInputError) as exc_info:
            require_valid(EventFinancialInput(guest_count=3, price_per_guest=-4))
        assert exc_info.value.field == "price_per_guest"


class TestRequestSchema:
    def test_json_converts_to_input(self):
        body = EventFinancialRequest.model_validate(
            {
                "guest_count": 10,
                "price_per_guest": "55",
                "gratuity_percent": 20,
                "labor_roles": [
                    {"name": "Chef", "pay_type": "percentage", "revenue_percent": 20}
                ],
                "food_cost_items": [{"type": "Proteins", "cost": 100}],
            }
        )
        data = body.to_input()
        assert data.price_per_guest == 55.0
        assert data.labor_roles[0].pay_type == PayType.PERCENTAGE
        assert data.food_cost_items[0].cost_type == CostType.FIXED

    def test_role_without_matching_rate_rejected(self):
        with pytest.raises(ValidationError, match="no fixed_amount"):
            LaborRoleRequest(name="Server", pay_type="fixed", revenue_percent=10)

    def test_unknown_pay_type_rejected(self):
        with pytest.raises(ValidationError):
            LaborRoleRequest(name="Server", pay_type="hourly", fixed_amount=10)

    def test_non_numeric_guest_count_rejected(self):
        with pytest.raises(ValidationError):
            EventFinancialRequest(guest_count="lots", price_per_guest=10)
