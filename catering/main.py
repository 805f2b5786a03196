"""FastAPI application for the catering profit engine: calculations and saved reports."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catering.config.settings import Settings
from catering.engine.allocation import compute
from catering.engine.budget import BudgetAllocation, compute_budget_scenario, compute_scenario_table
from catering.engine.pricing import compute_target_pricing
from catering.engine.quote import QuoteRequest, compute_quote
from catering.errors import (
    InvalidInputError,
    ReportNotFoundError,
    ReportSchemaError,
    ReportStorageError,
)
from catering.hooks.audit_hooks import log_calculation
from catering.models.inputs import EventFinancialInput
from catering.reports.repository import ReportRepository, get_report_repository
from catering.reports.serializer import ReportRecord, deserialize, serialize
from catering.validation.schema import (
    BudgetScenarioRequest,
    EventFinancialRequest,
    QuoteRequestModel,
    SaveReportRequest,
    TargetPricingRequest,
)
from catering.validation.validator import validate_financial_input

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Catering Profit API", version="0.1.0")

# CORS: allow the admin front-end dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_path(loc: tuple) -> str:
    """``("body", "labor_roles", 0, "name")`` -> ``labor_roles[0].name``"""
    if loc and loc[0] == "body":
        loc = loc[1:]
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Answer malformed bodies with the same field/message list as range errors."""
    errors = [
        {
            "field": _field_path(tuple(err["loc"])),
            "message": err["msg"].removeprefix("Value error, "),
        }
        for err in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": {"errors": errors}})


# Created on first use so importing the app never opens a Supabase client
_repository: ReportRepository | None = None


def get_repository() -> ReportRepository:
    global _repository
    if _repository is None:
        _repository = get_report_repository(settings)
    return _repository


def _validated_input(body: EventFinancialRequest) -> EventFinancialInput:
    """Convert a request body, answering 422 with every offending field."""
    data = body.to_input()
    result = validate_financial_input(data)
    if not result.ok:
        raise HTTPException(
            status_code=422,
            detail={"errors": [asdict(e) for e in result.errors]},
        )
    return data


def _report_payload(record: ReportRecord) -> dict[str, Any]:
    try:
        data, output = deserialize(record)
    except ReportSchemaError as e:
        logger.error(f"Unreadable report {record.id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "id": record.id,
        "report_name": record.report_name,
        "report_type": record.report_type,
        "user_id": record.user_id,
        "created_at": record.created_at,
        "input": asdict(data),
        "output": asdict(output),
    }


@app.post("/api/calculations")
async def calculate(body: EventFinancialRequest):
    """Compute the revenue / cost / profit breakdown for one event."""
    data = _validated_input(body)
    output = compute(data)
    log_calculation("calculate", data, output)
    return asdict(output)


@app.post("/api/calculations/target-pricing")
async def target_pricing(body: TargetPricingRequest):
    """Per-guest price needed to reach a target profit margin."""
    data = _validated_input(body.input)
    output = compute(data)
    pricing = compute_target_pricing(data, body.target_margin_percent, output=output)
    return {"calculation": asdict(output), "pricing": asdict(pricing)}


@app.post("/api/budget-scenarios")
async def budget_scenarios(body: BudgetScenarioRequest):
    """Budget split for the current guest count plus the 10-60 guest table."""
    allocation = BudgetAllocation(
        labor_percent=body.allocation.labor_percent,
        food_percent=body.allocation.food_percent,
        taxes_percent=body.allocation.taxes_percent,
        profit_percent=body.allocation.profit_percent,
    )
    current = compute_budget_scenario(body.guest_count, body.price_per_guest, allocation)
    table = compute_scenario_table(body.price_per_guest, allocation)
    return {
        "allocation_total_percent": allocation.total_percent,
        "over_allocated": allocation.over_allocated,
        "current": asdict(current),
        "scenarios": [asdict(s) for s in table],
    }


@app.post("/api/quotes")
async def quote(body: QuoteRequestModel):
    """Price a client quote."""
    try:
        result = compute_quote(
            QuoteRequest(
                adult_guests=body.adult_guests,
                child_guests=body.child_guests,
                proteins=body.proteins,
                gratuity_percent=body.gratuity_percent,
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return asdict(result)


@app.post("/api/reports", status_code=201)
async def create_report(
    body: SaveReportRequest,
    repository: ReportRepository = Depends(get_repository),
):
    """Compute an event and save the input and output as a named report."""
    data = _validated_input(body.input)
    output = compute(data)
    try:
        record = serialize(
            data,
            output,
            body.report_name,
            report_type=settings.report_type,
            user_id=body.user_id,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail={"errors": [{"field": e.field, "message": e.message}]})
    try:
        saved = repository.save(record)
    except ReportStorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    log_calculation("save_report", data, output, report_id=saved.id)
    return _report_payload(saved)


@app.get("/api/reports")
async def list_reports(repository: ReportRepository = Depends(get_repository)):
    """Saved event calculator reports, newest first."""
    try:
        records = repository.list(report_type=settings.report_type)
    except ReportStorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [_report_payload(r) for r in records]


@app.get("/api/reports/{report_id}")
async def get_report(report_id: str, repository: ReportRepository = Depends(get_repository)):
    """Return a saved report exactly as it was saved (no recomputation)."""
    try:
        record = repository.get(report_id)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReportStorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _report_payload(record)


@app.delete("/api/reports/{report_id}", status_code=204)
async def delete_report(report_id: str, repository: ReportRepository = Depends(get_repository)):
    try:
        repository.delete(report_id)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReportStorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return Response(status_code=204)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
