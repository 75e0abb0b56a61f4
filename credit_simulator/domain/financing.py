"""Financing engine - cart costing, amortization schedule and viability decision"""

import math
from typing import Callable, List, Sequence, Tuple
from datetime import date
from credit_simulator.domain.models import (
    ANNUAL_BILLING_LIMIT_RATIO,
    AmortizationRow,
    AmortizingPlan,
    BulletPlan,
    CartItem,
    Counterpart,
    PlanParameters,
    PriceCatalogEntry,
    SimulationResult,
)
from credit_simulator.domain.catalog import price_index
from credit_simulator.domain.exceptions import InvalidParametersError

# Installment cannot exceed 35% of estimated monthly income
MAX_INCOME_RATIO = 0.35

BULLET_PERIOD = 12
APPROVED_MESSAGE = "Financing approved"

DueDateFn = Callable[[int], date]


def validate_parameters(params: PlanParameters) -> None:
    """
    Reject structurally invalid parameters before any arithmetic.

    Raises:
        InvalidParametersError: Non-positive term, negative or non-finite rate,
            down payment outside [0, 100], negative or non-integer quantities
    """
    if not math.isfinite(params.annual_rate) or params.annual_rate < 0:
        raise InvalidParametersError(f"Interest rate must be >= 0, got {params.annual_rate}")

    if not math.isfinite(params.down_payment_percent) or not 0 <= params.down_payment_percent <= 100:
        raise InvalidParametersError(
            f"Down payment must be between 0 and 100 percent, got {params.down_payment_percent}"
        )

    if isinstance(params.plan, AmortizingPlan):
        months = params.plan.months
        if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
            raise InvalidParametersError(f"Term must be a positive number of months, got {months!r}")
    elif not isinstance(params.plan, BulletPlan):
        raise InvalidParametersError(f"Unknown payment plan: {params.plan!r}")

    for item in params.cart:
        if isinstance(item.quantity, bool) or not isinstance(item.quantity, int) or item.quantity < 0:
            raise InvalidParametersError(
                f"Quantity for {item.catalog_id} must be a non-negative integer, got {item.quantity!r}"
            )


def aggregate_cost(cart: Sequence[CartItem], catalog: Sequence[PriceCatalogEntry]) -> float:
    """Sum price x quantity; ids missing from the catalog contribute nothing"""
    prices = price_index(catalog)
    return sum(prices.get(item.catalog_id, 0.0) * item.quantity for item in cart)


def compute_principal(total_cost: float, down_payment_percent: float) -> Tuple[float, float]:
    """Returns: (down_payment_amount, loan_amount)"""
    down_payment_amount = total_cost * (down_payment_percent / 100)
    return down_payment_amount, total_cost - down_payment_amount


def build_bullet_schedule(
    loan_amount: float,
    annual_rate: float,
    due_dates: DueDateFn | None = None,
) -> List[AmortizationRow]:
    """
    Single repayment at month 12.

    The nominal annual rate is applied once to the whole principal, with no
    compounding: interest = loan x rate / 100.
    """
    interest = loan_amount * (annual_rate / 100)

    return [
        AmortizationRow(
            period=BULLET_PERIOD,
            label=f"Month {BULLET_PERIOD} (single payment)",
            payment=loan_amount + interest,
            interest=interest,
            principal=loan_amount,
            balance=0.0,
            due_date=due_dates(BULLET_PERIOD) if due_dates else None,
        )
    ]


def monthly_payment_for(loan_amount: float, annual_rate: float, months: int) -> float:
    """
    Fixed installment under the French system.

    Monthly rate is the flat TNA / 12, not an effective-rate conversion.
        P = PV * r / (1 - (1 + r)^-n)
    """
    monthly_rate = (annual_rate / 100) / 12
    if monthly_rate > 0:
        return (loan_amount * monthly_rate) / (1 - (1 + monthly_rate) ** -months)
    return loan_amount / months


def build_amortizing_schedule(
    loan_amount: float,
    annual_rate: float,
    months: int,
    due_dates: DueDateFn | None = None,
) -> List[AmortizationRow]:
    """
    Fixed-payment declining-balance schedule.

    Interest is charged on the opening balance of each period; the rest of the
    payment reduces principal. Floating residue left after the last period is
    cleared so the closing balance is exactly zero.
    """
    monthly_rate = (annual_rate / 100) / 12
    payment = monthly_payment_for(loan_amount, annual_rate, months)
    settle_tolerance = 1e-6 * max(loan_amount, 1.0)

    rows = []
    balance = loan_amount
    for period in range(1, months + 1):
        interest = balance * monthly_rate
        principal = payment - interest
        balance -= principal

        if balance < 0 or (period == months and abs(balance) <= settle_tolerance):
            balance = 0.0

        rows.append(
            AmortizationRow(
                period=period,
                label=f"Month {period}",
                payment=payment,
                interest=interest,
                principal=principal,
                balance=balance,
                due_date=due_dates(period) if due_dates else None,
            )
        )

    return rows


def evaluate_viability(
    counterpart: Counterpart,
    loan_amount: float,
    monthly_payment: float,
    total_interest: float,
    is_bullet: bool,
) -> Tuple[bool, str, float]:
    """
    Apply the credit rules in order; first failing rule decides.

    Rules:
    1. Loan must not exceed 30% of annual billing (all plans)
    2. Monthly payment must not exceed 35% of monthly income (amortizing only)

    Bullet plans report (loan + interest) / annual billing as risk ratio but
    are gated by rule 1 alone.

    Returns: (is_viable, message, risk_ratio)
    """
    annual_billing = counterpart.annual_billing
    max_limit = counterpart.max_credit_limit

    if is_bullet:
        risk_ratio = (loan_amount + total_interest) / annual_billing if annual_billing > 0 else 0.0
    else:
        monthly_income = annual_billing / 12
        risk_ratio = monthly_payment / monthly_income if monthly_income > 0 else 0.0

    if loan_amount > max_limit:
        limit_pct = round(ANNUAL_BILLING_LIMIT_RATIO * 100)
        return (
            False,
            f"Loan amount exceeds {limit_pct}% of annual billing (limit {max_limit:,.2f}).",
            risk_ratio,
        )

    if not is_bullet and risk_ratio > MAX_INCOME_RATIO:
        income_pct = round(MAX_INCOME_RATIO * 100)
        return (
            False,
            f"Monthly payment exceeds {income_pct}% of estimated monthly income.",
            risk_ratio,
        )

    return True, APPROVED_MESSAGE, risk_ratio


def simulate(
    counterpart: Counterpart,
    params: PlanParameters,
    catalog: Sequence[PriceCatalogEntry],
    due_dates: DueDateFn | None = None,
) -> SimulationResult:
    """
    Main entry point: price the cart, build the schedule and decide viability.

    A rejected proposal is a normal result with is_viable=False. Only invalid
    parameters raise.

    Args:
        counterpart: Transporter requesting financing
        params: Cart, down payment, rate and plan
        catalog: Price list used to cost the cart
        due_dates: Optional period -> date function (e.g. DueDateSchedule);
            rows carry no due date when omitted

    Raises:
        InvalidParametersError: Non-finite billing, or see validate_parameters
    """
    if not math.isfinite(counterpart.annual_billing):
        raise InvalidParametersError(f"Annual billing must be a finite amount, got {counterpart.annual_billing}")
    validate_parameters(params)

    total_cost = aggregate_cost(params.cart, catalog)
    down_payment_amount, loan_amount = compute_principal(total_cost, params.down_payment_percent)

    plan = params.plan
    if isinstance(plan, BulletPlan):
        schedule = build_bullet_schedule(loan_amount, params.annual_rate, due_dates)
        monthly_payment = 0.0
        final_payment = schedule[0].payment
        total_payment = down_payment_amount + final_payment
    else:
        schedule = build_amortizing_schedule(loan_amount, params.annual_rate, plan.months, due_dates)
        monthly_payment = schedule[0].payment
        final_payment = 0.0
        total_payment = down_payment_amount + monthly_payment * plan.months

    total_interest = sum(row.interest for row in schedule)

    is_viable, message, risk_ratio = evaluate_viability(
        counterpart,
        loan_amount,
        monthly_payment,
        total_interest,
        is_bullet=isinstance(plan, BulletPlan),
    )

    return SimulationResult(
        monthly_payment=monthly_payment,
        final_payment=final_payment,
        total_payment=total_payment,
        total_interest=total_interest,
        schedule=tuple(schedule),
        is_viable=is_viable,
        viability_message=message,
        risk_ratio=risk_ratio,
        loan_amount=loan_amount,
        total_cost=total_cost,
        down_payment_amount=down_payment_amount,
    )
