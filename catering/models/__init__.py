from .enums import CostType, PayType, ReportType
from .inputs import EventFinancialInput, FoodCostItem, LaborRoleInput, MiscExpense

__all__ = [
    "CostType",
    "PayType",
    "ReportType",
    "EventFinancialInput",
    "FoodCostItem",
    "LaborRoleInput",
    "MiscExpense",
]
