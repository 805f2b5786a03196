"""Audit hooks: log each calculation for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from catering.engine.result import EventFinancialOutput
from catering.models.inputs import EventFinancialInput

logger = logging.getLogger(__name__)


def log_calculation(
    operation: str,
    data: EventFinancialInput,
    output: EventFinancialOutput,
    report_id: Optional[str] = None,
) -> dict[str, Any]:
    """Record a calculation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "operation": operation,
        "report_id": report_id,
        "guest_count": data.guest_count,
        "price_per_guest": data.price_per_guest,
        "total_revenue": output.total_revenue,
        "total_cost": output.total_cost,
        "net_profit": output.net_profit,
        "warnings": list(output.warnings),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info(
        "Calculation audit: %s guests=%s net_profit=%.2f",
        operation,
        data.guest_count,
        output.net_profit,
    )
    if output.warnings:
        logger.warning("Calculation warnings (%s): %s", operation, output.warnings)
    return entry
