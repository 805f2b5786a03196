"""Saved report snapshots and their storage."""

from .repository import (
    InMemoryReportRepository,
    ReportRepository,
    SupabaseReportRepository,
    get_report_repository,
)
from .serializer import SCHEMA_VERSION, ReportRecord, deserialize, serialize

__all__ = [
    "InMemoryReportRepository",
    "ReportRepository",
    "SupabaseReportRepository",
    "get_report_repository",
    "SCHEMA_VERSION",
    "ReportRecord",
    "deserialize",
    "serialize",
]
