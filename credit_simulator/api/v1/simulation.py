"""POST /v1/simulation - financing proposal endpoint"""

import time
import logging
from datetime import date
from typing import Tuple
from fastapi import APIRouter, Depends, HTTPException, Request

from credit_simulator.api.v1.schemas import SimulationRequest, SimulationResponse, AmortizationRowSchema
from credit_simulator.api.dependencies import get_catalog, get_request_id
from credit_simulator.config import settings
from credit_simulator.domain.financing import simulate
from credit_simulator.domain.models import (
    AmortizingPlan,
    BulletPlan,
    CartItem,
    Counterpart,
    PlanParameters,
    PriceCatalogEntry,
)
from credit_simulator.domain.exceptions import InvalidParametersError
from credit_simulator.utils.date_utils import DueDateSchedule
from credit_simulator.infrastructure.observability.metrics import record_simulation, invalid_parameters_counter
from credit_simulator.infrastructure.observability.logging import log_simulation

router = APIRouter()


@router.post("/simulation", response_model=SimulationResponse)
def create_simulation(
    request_body: SimulationRequest,
    request: Request,
    catalog: Tuple[PriceCatalogEntry, ...] = Depends(get_catalog),
):
    """
    Simulate a financing proposal for one transporter.

    Flow:
    1. Build the counterpart and immutable plan parameters from the request
    2. Run the financing engine (cost, schedule, viability)
    3. Record metrics and logs
    4. Return the result; a rejected proposal is still a 200 response
    """
    start_time = time.time()
    request_id = get_request_id(request)

    counterpart = Counterpart(
        id=request_body.counterpart.tax_id,
        name=request_body.counterpart.name,
        tax_id=request_body.counterpart.tax_id,
        annual_billing=request_body.counterpart.annual_billing,
    )
    plan = (
        BulletPlan()
        if request_body.plan.kind == "bullet"
        else AmortizingPlan(months=request_body.plan.months)
    )
    params = PlanParameters(
        cart=tuple(CartItem(catalog_id=i.catalog_id, quantity=i.quantity) for i in request_body.cart),
        down_payment_percent=request_body.down_payment_percent,
        annual_rate=request_body.annual_rate,
        plan=plan,
    )
    due_dates = DueDateSchedule(
        reference=request_body.reference_date or date.today(),
        interval_days=settings.due_date_interval_days,
    )

    try:
        result = simulate(counterpart, params, catalog, due_dates=due_dates)
    except InvalidParametersError as e:
        invalid_parameters_counter.inc()
        logging.warning(f"Invalid simulation parameters: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_simulation(result.is_viable, plan.kind, result.loan_amount)
    log_simulation(request_id, counterpart.tax_id, plan.kind, result.loan_amount, result.is_viable, duration_ms)

    return SimulationResponse(
        monthly_payment=result.monthly_payment,
        final_payment=result.final_payment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        schedule=[
            AmortizationRowSchema(
                period=row.period,
                label=row.label,
                due_date=row.due_date,
                payment=row.payment,
                interest=row.interest,
                principal=row.principal,
                balance=row.balance,
            )
            for row in result.schedule
        ],
        is_viable=result.is_viable,
        viability_message=result.viability_message,
        risk_ratio=result.risk_ratio,
        loan_amount=result.loan_amount,
        total_cost=result.total_cost,
        down_payment_amount=result.down_payment_amount,
        max_credit_limit=counterpart.max_credit_limit,
    )
