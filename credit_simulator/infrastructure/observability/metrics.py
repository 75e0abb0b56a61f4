"""Prometheus metrics for monitoring approval rates, loan sizes and roster quality"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "credit_simulation_total",
    "Total financing simulations run",
    ["outcome", "plan_kind"],  # approved | rejected, bullet | amortizing
)

loan_amount_histogram = Histogram(
    "credit_simulation_loan_amount",
    "Financed principal per simulation",
    buckets=[100_000, 500_000, 1_000_000, 5_000_000, 10_000_000, 50_000_000],
)

invalid_parameters_counter = Counter(
    "credit_simulation_invalid_parameters_total",
    "Simulations rejected for invalid parameters",
)

# Ingestion metrics
roster_rows_counter = Counter(
    "roster_rows_total",
    "Roster rows processed by status",
    ["status"],  # accepted | skipped | duplicate
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(is_viable: bool, plan_kind: str, loan_amount: float) -> None:
    """Record simulation metrics for approval rates and loan size distribution"""
    outcome = "approved" if is_viable else "rejected"
    simulation_counter.labels(outcome=outcome, plan_kind=plan_kind).inc()
    loan_amount_histogram.observe(loan_amount)


def record_ingestion(accepted: int, skipped: int, duplicates: int) -> None:
    """Record per-status roster row counts"""
    roster_rows_counter.labels(status="accepted").inc(accepted)
    roster_rows_counter.labels(status="skipped").inc(skipped)
    roster_rows_counter.labels(status="duplicate").inc(duplicates)
