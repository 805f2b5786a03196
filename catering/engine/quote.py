"""Client quote: adult and child plates, protein upcharges, gratuity."""

from __future__ import annotations

from dataclasses import dataclass, field

from catering.engine.result import QuoteResult
from catering.formulas.library import calc_gratuity

ADULT_PLATE_PRICE = 60.0
CHILD_PLATE_PRICE = 30.0
MAX_PROTEINS = 2
DEFAULT_GRATUITY_PERCENT = 20.0

# Per-plate upcharge by protein; proteins not listed here are not offered.
PROTEIN_UPCHARGES: dict[str, float] = {
    "Shrimp": 0.0,
    "Chicken": 0.0,
    "Steak": 0.0,
    "Filet Mignon": 7.0,
    "Scallops": 5.0,
}


@dataclass(frozen=True)
class QuoteRequest:
    adult_guests: int = 0
    child_guests: int = 0
    proteins: list[str] = field(default_factory=list)
    gratuity_percent: float = DEFAULT_GRATUITY_PERCENT


def compute_quote(request: QuoteRequest) -> QuoteResult:
    """Price a quote; every plate carries the combined protein upcharge."""
    if request.adult_guests < 0 or request.child_guests < 0:
        raise ValueError("guest counts cannot be negative")
    if len(request.proteins) > MAX_PROTEINS:
        raise ValueError(
            f"At most {MAX_PROTEINS} proteins may be selected, got {len(request.proteins)}"
        )
    if len(set(request.proteins)) != len(request.proteins):
        raise ValueError("proteins must not repeat")
    unknown = [p for p in request.proteins if p not in PROTEIN_UPCHARGES]
    if unknown:
        raise ValueError(f"Unknown proteins: {unknown}")

    upcharge = sum((PROTEIN_UPCHARGES[p] for p in request.proteins), 0.0)
    adult_plate = ADULT_PLATE_PRICE + upcharge
    child_plate = CHILD_PLATE_PRICE + upcharge
    subtotal = request.adult_guests * adult_plate + request.child_guests * child_plate
    gratuity = calc_gratuity(subtotal, request.gratuity_percent)

    return QuoteResult(
        adult_guests=request.adult_guests,
        child_guests=request.child_guests,
        proteins=list(request.proteins),
        protein_upcharge=upcharge,
        adult_plate_price=adult_plate,
        child_plate_price=child_plate,
        subtotal=subtotal,
        gratuity_percent=request.gratuity_percent,
        gratuity_amount=gratuity,
        total=subtotal + gratuity,
    )
