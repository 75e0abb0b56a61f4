"""GET /v1/catalog - price list used to cost carts"""

from typing import Tuple
from fastapi import APIRouter, Depends

from credit_simulator.api.v1.schemas import CatalogResponse, CatalogEntrySchema
from credit_simulator.api.dependencies import get_catalog
from credit_simulator.domain.catalog import TERM_OPTIONS
from credit_simulator.domain.models import PriceCatalogEntry

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
def get_price_catalog(catalog: Tuple[PriceCatalogEntry, ...] = Depends(get_catalog)):
    """Return catalog entries and the preset term lengths"""
    return CatalogResponse(
        entries=[CatalogEntrySchema(id=e.id, label=e.label, unit_price=e.unit_price) for e in catalog],
        term_options=list(TERM_OPTIONS),
    )
