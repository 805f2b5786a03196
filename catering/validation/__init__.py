from .validator import (
    FieldError,
    ValidationResult,
    clamp_percent,
    require_valid,
    validate_financial_input,
)

__all__ = [
    "FieldError",
    "ValidationResult",
    "clamp_percent",
    "require_valid",
    "validate_financial_input",
]
