"""Hook modules for audit logging."""

from .audit_hooks import log_calculation

__all__ = ["log_calculation"]
