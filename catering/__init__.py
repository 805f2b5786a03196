"""Catering event profit engine: revenue, cost and profit allocation."""

__version__ = "0.1.0"
