"""Exception hierarchy for the catering profit engine."""

from __future__ import annotations


class CateringError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(CateringError, ValueError):
    """An input value is malformed (negative money, negative guest count...)."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ReportNotFoundError(CateringError, LookupError):
    def __init__(self, report_id: str):
        super().__init__(f"Report '{report_id}' not found")
        self.report_id = report_id


class ReportSchemaError(CateringError):
    """A stored report blob cannot be read by this schema version."""


class ReportStorageError(CateringError):
    """The report backend failed to read or write."""
