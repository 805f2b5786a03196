"""Snapshot serialization for saved event reports.

A report stores the input and the output of one calculation as a JSON
blob. Loading a report never recomputes it: the numbers shown are the
numbers that were saved.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from catering.engine.result import EventFinancialOutput, LaborRoleResult
from catering.errors import InvalidInputError, ReportSchemaError
from catering.models.enums import CostType, PayType, ReportType
from catering.models.inputs import (
    EventFinancialInput,
    FoodCostItem,
    LaborRoleInput,
    MiscExpense,
)

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ReportRecord:
    """One row of the ``saved_reports`` table."""

    report_name: str
    report_data: dict[str, Any]
    report_type: str = ReportType.EVENT_CALCULATOR.value
    id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_row(self) -> dict[str, Any]:
        row: dict[str, Any] = {
            "report_name": self.report_name,
            "report_type": self.report_type,
            "report_data": self.report_data,
        }
        if self.id is not None:
            row["id"] = self.id
        if self.user_id is not None:
            row["user_id"] = self.user_id
        return row

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> ReportRecord:
        return cls(
            id=row.get("id"),
            report_name=row["report_name"],
            report_type=row.get("report_type") or ReportType.EVENT_CALCULATOR.value,
            report_data=row["report_data"],
            user_id=row.get("user_id"),
            created_at=_parse_timestamp(row.get("created_at")),
            updated_at=_parse_timestamp(row.get("updated_at")),
        )


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _plain(value: Any) -> Any:
    """Make an ``asdict`` tree JSON-plain (enums become their values)."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def serialize(
    data: EventFinancialInput,
    output: EventFinancialOutput,
    name: str,
    report_type: str = ReportType.EVENT_CALCULATOR.value,
    user_id: Optional[str] = None,
) -> ReportRecord:
    """Package one calculation as a named, persistable report."""
    if not name or not name.strip():
        raise InvalidInputError("report_name", "cannot be blank")
    return ReportRecord(
        report_name=name.strip(),
        report_type=_plain(report_type),
        report_data={
            "schema_version": SCHEMA_VERSION,
            "input": _plain(asdict(data)),
            "output": _plain(asdict(output)),
        },
        user_id=user_id,
    )


def deserialize(record: ReportRecord) -> tuple[EventFinancialInput, EventFinancialOutput]:
    """Rebuild the input and output exactly as they were saved."""
    blob = record.report_data or {}
    version = blob.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ReportSchemaError(
            f"Report '{record.report_name}' has schema version {version!r}, "
            f"expected {SCHEMA_VERSION}"
        )
    try:
        return _input_from_dict(blob["input"]), _output_from_dict(blob["output"])
    except (KeyError, TypeError, ValueError) as e:
        raise ReportSchemaError(f"Report '{record.report_name}' is malformed: {e}") from e


def _input_from_dict(raw: dict[str, Any]) -> EventFinancialInput:
    return EventFinancialInput(
        guest_count=raw["guest_count"],
        price_per_guest=raw["price_per_guest"],
        gratuity_percent=raw["gratuity_percent"],
        gratuity_enabled=raw["gratuity_enabled"],
        labor_roles=[
            LaborRoleInput(
                name=r["name"],
                pay_type=PayType(r["pay_type"]),
                revenue_percent=r.get("revenue_percent"),
                fixed_amount=r.get("fixed_amount"),
            )
            for r in raw["labor_roles"]
        ],
        food_cost_items=[
            FoodCostItem(type=f["type"], cost=f["cost"], cost_type=CostType(f["cost_type"]))
            for f in raw["food_cost_items"]
        ],
        misc_expenses=[
            MiscExpense(type=m["type"], cost=m["cost"], cost_type=CostType(m["cost_type"]))
            for m in raw["misc_expenses"]
        ],
        business_tax_percent=raw["business_tax_percent"],
        max_labor_revenue_percent=raw["max_labor_revenue_percent"],
    )


def _output_from_dict(raw: dict[str, Any]) -> EventFinancialOutput:
    fields_ = dict(raw)
    fields_["labor_role_results"] = [
        LaborRoleResult(**{**r, "pay_type": PayType(r["pay_type"])})
        for r in raw["labor_role_results"]
    ]
    fields_["warnings"] = list(raw.get("warnings", []))
    return EventFinancialOutput(**fields_)
