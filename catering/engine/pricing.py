"""Target-margin pricing: what to charge per guest to hit a profit margin."""

from __future__ import annotations

from catering.engine.allocation import compute
from catering.engine.result import EventFinancialOutput, TargetPricing
from catering.formulas.library import calc_target_revenue
from catering.models.inputs import EventFinancialInput
from catering.validation.validator import clamp_percent


def compute_target_pricing(
    data: EventFinancialInput,
    target_margin_percent: float,
    output: EventFinancialOutput | None = None,
) -> TargetPricing:
    """Solve for the per-guest price that yields ``target_margin_percent``.

    Costs are taken from ``output`` when given (so a displayed result is not
    recomputed), otherwise from a fresh ``compute(data)``. Gratuity is
    subtracted before spreading the target revenue over the guests.
    """
    if output is None:
        output = compute(data)
    margin = clamp_percent(target_margin_percent)

    target_revenue = calc_target_revenue(output.total_cost, margin)
    if target_revenue == 0 or data.guest_count == 0:
        adjusted_price = 0.0
    else:
        adjusted_price = (target_revenue - output.gratuity_amount) / data.guest_count

    return TargetPricing(
        target_margin_percent=margin,
        target_revenue=target_revenue,
        adjusted_price_per_guest=adjusted_price,
        adjusted_profit=target_revenue - output.total_cost if target_revenue else 0.0,
    )
