from enum import Enum


class PayType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CostType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"


class ReportType(str, Enum):
    EVENT_CALCULATOR = "event_calculator"
