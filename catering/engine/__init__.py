"""Event allocation engine and companion calculators."""

from .allocation import AllocationEngine, compute
from .result import (
    BudgetScenario,
    EventFinancialOutput,
    LaborRoleResult,
    QuoteResult,
    TargetPricing,
)

__all__ = [
    "AllocationEngine",
    "compute",
    "BudgetScenario",
    "EventFinancialOutput",
    "LaborRoleResult",
    "QuoteResult",
    "TargetPricing",
]
