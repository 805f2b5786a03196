"""Event profit / cost allocation engine.

Takes an EventFinancialInput and produces an EventFinancialOutput: revenue,
gratuity split across labor roles, food and misc costs, profit, tax,
margin and break-even guest count. Pure and deterministic.
"""

from __future__ import annotations

import logging

from catering.engine.result import EventFinancialOutput, LaborRoleResult
from catering.formulas.library import (
    COST_BASES,
    calc_base_revenue,
    calc_break_even_guests,
    calc_business_tax,
    calc_gratuity,
    calc_profit_margin,
    split_evenly,
)
from catering.models.enums import CostType, PayType
from catering.models.inputs import (
    EventFinancialInput,
    FoodCostItem,
    LaborRoleInput,
    MiscExpense,
)
from catering.validation.validator import require_valid

logger = logging.getLogger(__name__)


class AllocationEngine:
    """Stateless engine that runs event profit calculations."""

    def compute(self, data: EventFinancialInput) -> EventFinancialOutput:
        """Run the full calculation for one event.

        Raises InvalidInputError for negative money or guest counts.
        Out-of-range percentages are clamped and reported in ``warnings``.
        """
        validation = require_valid(data)
        data = validation.value
        warnings = [f"{n.field} {n.message}" for n in validation.notices]

        base_revenue = calc_base_revenue(data.guest_count, data.price_per_guest)
        gratuity_amount = calc_gratuity(
            base_revenue, data.gratuity_percent, enabled=data.gratuity_enabled
        )
        total_revenue = base_revenue + gratuity_amount

        # Gratuity is split evenly across roles; with no roles it stays in profit
        gratuity_per_role = split_evenly(gratuity_amount, len(data.labor_roles))
        role_results = [
            self._cost_labor_role(role, base_revenue, gratuity_per_role)
            for role in data.labor_roles
        ]
        unallocated_gratuity = gratuity_amount if not role_results else 0.0

        total_labor_cost = sum((r.calculated_cost for r in role_results), 0.0)
        total_food_cost = sum(
            (self._cost_line(item, base_revenue) for item in data.food_cost_items), 0.0
        )
        total_misc_cost = sum(
            (self._cost_line(item, base_revenue) for item in data.misc_expenses), 0.0
        )
        total_cost = total_labor_cost + total_food_cost + total_misc_cost

        gross_profit = base_revenue - total_cost + unallocated_gratuity
        business_tax = calc_business_tax(gross_profit, data.business_tax_percent)
        net_profit = gross_profit - business_tax

        labor_revenue_percent = self._labor_revenue_percent(role_results, base_revenue)
        labor_cap_exceeded = labor_revenue_percent > data.max_labor_revenue_percent
        if labor_cap_exceeded:
            warnings.append(
                f"Labor is {labor_revenue_percent:.1f}% of base revenue, above the "
                f"{data.max_labor_revenue_percent:g}% ceiling"
            )

        output = EventFinancialOutput(
            base_revenue=base_revenue,
            gratuity_amount=gratuity_amount,
            total_revenue=total_revenue,
            labor_role_results=role_results,
            gratuity_per_role=gratuity_per_role,
            unallocated_gratuity=unallocated_gratuity,
            total_labor_cost=total_labor_cost,
            total_food_cost=total_food_cost,
            total_misc_cost=total_misc_cost,
            total_cost=total_cost,
            gross_profit=gross_profit,
            business_tax=business_tax,
            net_profit=net_profit,
            profit_margin_percent=calc_profit_margin(net_profit, total_revenue),
            break_even_guest_count=calc_break_even_guests(
                total_cost, data.price_per_guest, data.gratuity_percent
            ),
            labor_revenue_percent=labor_revenue_percent,
            labor_cap_exceeded=labor_cap_exceeded,
            warnings=warnings,
        )
        logger.debug(
            "Computed event: guests=%s revenue=%.2f cost=%.2f net=%.2f",
            data.guest_count,
            total_revenue,
            total_cost,
            net_profit,
        )
        return output

    def _cost_labor_role(
        self,
        role: LaborRoleInput,
        base_revenue: float,
        gratuity_share: float,
    ) -> LaborRoleResult:
        """Cost a single labor role, gratuity share included."""
        base_cost = self._apply_basis(PayType(role.pay_type).value, role.rate, base_revenue)
        return LaborRoleResult(
            name=role.name,
            pay_type=role.pay_type,
            base_cost=base_cost,
            gratuity_share=gratuity_share,
            calculated_cost=base_cost + gratuity_share,
        )

    def _cost_line(self, item: FoodCostItem | MiscExpense, base_revenue: float) -> float:
        return self._apply_basis(CostType(item.cost_type).value, item.cost, base_revenue)

    @staticmethod
    def _apply_basis(basis_id: str, rate: float, base_revenue: float) -> float:
        return COST_BASES[basis_id](rate, base_revenue)

    @staticmethod
    def _labor_revenue_percent(
        role_results: list[LaborRoleResult],
        base_revenue: float,
    ) -> float:
        """Labor pay (gratuity excluded) as a share of base revenue."""
        if base_revenue <= 0:
            return 0.0
        return sum(r.base_cost for r in role_results) / base_revenue * 100


_default_engine = AllocationEngine()


def compute(data: EventFinancialInput) -> EventFinancialOutput:
    """Module-level shortcut for ``AllocationEngine().compute``."""
    return _default_engine.compute(data)
