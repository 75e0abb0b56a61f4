"""Dependency injection for FastAPI endpoints"""

from typing import Tuple
from fastapi import Request
from credit_simulator.domain.catalog import DEFAULT_CATALOG
from credit_simulator.domain.models import PriceCatalogEntry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog() -> Tuple[PriceCatalogEntry, ...]:
    """Provide the price catalog used to cost carts"""
    return DEFAULT_CATALOG
