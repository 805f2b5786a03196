"""Saved report storage: in-memory for tests and local use, Supabase in production."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from supabase import create_client

from catering.config.settings import Settings
from catering.errors import ReportNotFoundError, ReportStorageError
from catering.reports.serializer import ReportRecord

logger = logging.getLogger(__name__)


class ReportRepository(ABC):
    """Abstract base for saved report stores."""

    @abstractmethod
    def save(self, record: ReportRecord) -> ReportRecord:
        """Persist a new report and return it with its id and timestamps."""
        ...

    @abstractmethod
    def get(self, report_id: str) -> ReportRecord:
        """Return one report or raise ReportNotFoundError."""
        ...

    @abstractmethod
    def list(self, report_type: Optional[str] = None) -> list[ReportRecord]:
        """Return reports, newest first."""
        ...

    @abstractmethod
    def delete(self, report_id: str) -> None:
        ...


class InMemoryReportRepository(ReportRepository):
    def __init__(self) -> None:
        self._records: dict[str, ReportRecord] = {}

    def save(self, record: ReportRecord) -> ReportRecord:
        now = datetime.now(tz=timezone.utc)
        stored = replace(
            record,
            id=record.id or str(uuid4()),
            created_at=record.created_at or now,
            updated_at=now,
        )
        self._records[stored.id] = stored
        return stored

    def get(self, report_id: str) -> ReportRecord:
        record = self._records.get(report_id)
        if record is None:
            raise ReportNotFoundError(report_id)
        return record

    def list(self, report_type: Optional[str] = None) -> list[ReportRecord]:
        records = [
            r for r in self._records.values()
            if report_type is None or r.report_type == report_type
        ]
        # Later saves win ties on created_at
        return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)

    def delete(self, report_id: str) -> None:
        if self._records.pop(report_id, None) is None:
            raise ReportNotFoundError(report_id)


class SupabaseReportRepository(ReportRepository):
    """Reports stored in the hosted ``saved_reports`` table."""

    def __init__(self, settings: Optional[Settings] = None, client: Any = None):
        self._settings = settings or Settings()
        self._table = self._settings.reports_table
        self._client = client or create_client(
            self._settings.supabase_url, self._settings.supabase_key
        )

    def save(self, record: ReportRecord) -> ReportRecord:
        try:
            res = self._client.table(self._table).insert(record.to_row()).execute()
        except Exception as e:
            logger.exception(f"Failed to save report '{record.report_name}'")
            raise ReportStorageError(f"Could not save report: {e}") from e
        rows = res.data or []
        if not rows:
            raise ReportStorageError("Insert returned no row")
        logger.info("Saved report %s (%s)", rows[0].get("id"), record.report_name)
        return ReportRecord.from_row(rows[0])

    def get(self, report_id: str) -> ReportRecord:
        try:
            res = (
                self._client.table(self._table)
                .select("*")
                .eq("id", report_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Failed to load report {report_id}")
            raise ReportStorageError(f"Could not load report: {e}") from e
        rows = res.data or []
        if not rows:
            raise ReportNotFoundError(report_id)
        return ReportRecord.from_row(rows[0])

    def list(self, report_type: Optional[str] = None) -> list[ReportRecord]:
        try:
            query = self._client.table(self._table).select("*")
            if report_type is not None:
                query = query.eq("report_type", report_type)
            res = query.order("created_at", desc=True).execute()
        except Exception as e:
            logger.exception("Failed to list reports")
            raise ReportStorageError(f"Could not list reports: {e}") from e
        return [ReportRecord.from_row(row) for row in res.data or []]

    def delete(self, report_id: str) -> None:
        try:
            res = self._client.table(self._table).delete().eq("id", report_id).execute()
        except Exception as e:
            logger.exception(f"Failed to delete report {report_id}")
            raise ReportStorageError(f"Could not delete report: {e}") from e
        if not res.data:
            raise ReportNotFoundError(report_id)
        logger.info("Deleted report %s", report_id)


def get_report_repository(settings: Optional[Settings] = None) -> ReportRepository:
    """Supabase when credentials are configured, in-memory otherwise."""
    settings = settings or Settings()
    if settings.supabase_configured:
        return SupabaseReportRepository(settings)
    logger.warning("Supabase not configured; saved reports are kept in memory")
    return InMemoryReportRepository()
