"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import date
from typing import List, Literal, Optional, Union, Annotated

from credit_simulator.config import settings


class CatalogEntrySchema(BaseModel):
    """Single priced product"""

    id: str
    label: str
    unit_price: float


class CatalogResponse(BaseModel):
    """Response for GET /v1/catalog"""

    entries: List[CatalogEntrySchema]
    term_options: List[int]


class RosterRequest(BaseModel):
    """Request body for POST /v1/roster - pasted text or decoded sheet rows"""

    text: Optional[str] = Field(None, description="Roster lines in name;taxId;billing format")
    rows: Optional[List[List[Union[str, float, int, None]]]] = Field(
        None, description="Rows already split into cells by a spreadsheet reader"
    )

    @model_validator(mode="after")
    def check_source(self) -> "RosterRequest":
        if (self.text is None) == (self.rows is None):
            raise ValueError("Provide exactly one of 'text' or 'rows'")
        return self


class CounterpartSchema(BaseModel):
    """Transporter profile"""

    id: str
    name: str
    tax_id: str
    annual_billing: float
    max_credit_limit: float


class RosterResponse(BaseModel):
    """Response for POST /v1/roster"""

    counterparts: List[CounterpartSchema]
    skipped_rows: int
    duplicate_tax_ids: List[str]


class RosterSearchResponse(BaseModel):
    """Response for GET /v1/roster"""

    counterparts: List[CounterpartSchema]
    total: int


class CounterpartInput(BaseModel):
    """Counterpart as selected by the caller from an ingested roster"""

    name: str = Field(..., min_length=1)
    tax_id: str = Field(..., min_length=1)
    annual_billing: float = Field(..., ge=0, allow_inf_nan=False)


class CartItemSchema(BaseModel):
    """Catalog id and quantity; validated as non-negative by the engine"""

    catalog_id: str
    quantity: int


class BulletPlanSchema(BaseModel):
    kind: Literal["bullet"] = "bullet"


class AmortizingPlanSchema(BaseModel):
    kind: Literal["amortizing"] = "amortizing"
    months: int = settings.default_term_months


PlanSchema = Annotated[Union[BulletPlanSchema, AmortizingPlanSchema], Field(discriminator="kind")]


class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulation"""

    counterpart: CounterpartInput
    cart: List[CartItemSchema] = Field(default_factory=list)
    down_payment_percent: float = 0.0
    annual_rate: float = settings.default_annual_rate
    plan: PlanSchema = Field(default_factory=AmortizingPlanSchema)
    reference_date: Optional[date] = Field(None, description="Base for due dates (default: today)")


class AmortizationRowSchema(BaseModel):
    """Single schedule period"""

    period: int
    label: str
    due_date: Optional[date] = None
    payment: float
    interest: float
    principal: float
    balance: float


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulation"""

    monthly_payment: float
    final_payment: float
    total_payment: float
    total_interest: float
    schedule: List[AmortizationRowSchema]
    is_viable: bool
    viability_message: str
    risk_ratio: float
    loan_amount: float
    total_cost: float
    down_payment_amount: float
    max_credit_limit: float
