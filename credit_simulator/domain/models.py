"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import Tuple, Union

# Max financing is 30% of annual billing
ANNUAL_BILLING_LIMIT_RATIO = 0.30


@dataclass(frozen=True)
class Counterpart:
    """Transporter profile built from one roster row"""

    id: str
    name: str
    tax_id: str
    annual_billing: float

    @property
    def max_credit_limit(self) -> float:
        return self.annual_billing * ANNUAL_BILLING_LIMIT_RATIO


@dataclass(frozen=True)
class PriceCatalogEntry:
    """Priced product offered for financing"""

    id: str
    label: str
    unit_price: float


@dataclass(frozen=True)
class CartItem:
    """Catalog reference and quantity; quantity 0 means not in the cart"""

    catalog_id: str
    quantity: int


@dataclass(frozen=True)
class BulletPlan:
    """Single repayment of principal plus interest at month 12"""

    kind: str = field(default="bullet", init=False)


@dataclass(frozen=True)
class AmortizingPlan:
    """Fixed monthly payments over a declining balance (French system)"""

    months: int
    kind: str = field(default="amortizing", init=False)


PaymentPlan = Union[BulletPlan, AmortizingPlan]


@dataclass(frozen=True)
class PlanParameters:
    """Complete input for one simulation run"""

    cart: Tuple[CartItem, ...]
    down_payment_percent: float
    annual_rate: float  # nominal annual rate (TNA), in percent
    plan: PaymentPlan


@dataclass(frozen=True)
class AmortizationRow:
    """Single period in a repayment schedule"""

    period: int
    label: str
    payment: float
    interest: float
    principal: float
    balance: float
    due_date: date | None = None


@dataclass(frozen=True)
class SimulationResult:
    """Output of a financing simulation"""

    monthly_payment: float  # 0 for bullet plans
    final_payment: float  # lump sum for bullet plans, 0 otherwise
    total_payment: float
    total_interest: float
    schedule: Tuple[AmortizationRow, ...]
    is_viable: bool
    viability_message: str
    risk_ratio: float
    loan_amount: float
    total_cost: float
    down_payment_amount: float


@dataclass(frozen=True)
class IngestionReport:
    """Outcome of ingesting a roster batch"""

    counterparts: Tuple[Counterpart, ...]
    skipped_rows: int
    duplicate_tax_ids: Tuple[str, ...]
