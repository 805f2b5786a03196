"""Pure event finance formulas."""

from .library import COST_BASES

__all__ = ["COST_BASES"]
