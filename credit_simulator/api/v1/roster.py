"""Roster endpoints - ingest an uploaded roster or search the built-in one"""

from typing import Optional
from fastapi import APIRouter, Query, Request

from credit_simulator.api.v1.schemas import RosterRequest, RosterResponse, RosterSearchResponse, CounterpartSchema
from credit_simulator.api.dependencies import get_request_id
from credit_simulator.domain.ingestion import ingest_report, search_counterparts, split_roster_text
from credit_simulator.domain.models import Counterpart
from credit_simulator.domain.roster import default_roster
from credit_simulator.infrastructure.observability.metrics import record_ingestion
from credit_simulator.infrastructure.observability.logging import log_ingestion

router = APIRouter()


def _to_schema(counterpart: Counterpart) -> CounterpartSchema:
    return CounterpartSchema(
        id=counterpart.id,
        name=counterpart.name,
        tax_id=counterpart.tax_id,
        annual_billing=counterpart.annual_billing,
        max_credit_limit=counterpart.max_credit_limit,
    )


@router.get("/roster", response_model=RosterSearchResponse)
def search_default_roster(
    q: str = Query("", description="Name or tax id fragment"),
    limit: Optional[int] = Query(None, ge=1, description="Max counterparts returned"),
):
    """Search the built-in transporter roster by name or tax id"""
    roster = default_roster()
    matches = search_counterparts(roster, q, limit)
    return RosterSearchResponse(counterparts=[_to_schema(c) for c in matches], total=len(roster))


@router.post("/roster", response_model=RosterResponse)
def ingest_roster(request_body: RosterRequest, request: Request):
    """
    Normalize roster rows into counterparts with their credit ceiling.

    Malformed rows are skipped and counted; repeated tax ids keep the first row.
    """
    rows = split_roster_text(request_body.text) if request_body.text is not None else request_body.rows
    report = ingest_report(rows)

    accepted = len(report.counterparts)
    duplicates = len(report.duplicate_tax_ids)
    record_ingestion(accepted, report.skipped_rows, duplicates)
    log_ingestion(get_request_id(request), accepted, report.skipped_rows, duplicates)

    return RosterResponse(
        counterparts=[_to_schema(c) for c in report.counterparts],
        skipped_rows=report.skipped_rows,
        duplicate_tax_ids=list(report.duplicate_tax_ids),
    )
