"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from credit_simulator.api.main import create_app
from credit_simulator.domain.catalog import DEFAULT_CATALOG
from credit_simulator.domain.models import Counterpart, PriceCatalogEntry


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def catalog() -> tuple[PriceCatalogEntry, ...]:
    """Default tire catalog: t1=300000, t2=350000, t3=400000"""
    return DEFAULT_CATALOG


@pytest.fixture
def large_fleet() -> Counterpart:
    """Transporter with ample billing: ceiling 6,000,000, monthly income ~1,666,667"""
    return Counterpart(id="30707974237", name="TRANS-CEREAL SA", tax_id="30707974237", annual_billing=20_000_000.0)


@pytest.fixture
def small_fleet() -> Counterpart:
    """Transporter with billing 1,000,000: ceiling 300,000"""
    return Counterpart(id="20175312650", name="MOYANO EDUARDO", tax_id="20175312650", annual_billing=1_000_000.0)


@pytest.fixture
def sample_roster_text() -> str:
    """Roster as pasted by a sales rep, including a blank line"""
    return (
        "MOYANO EDUARDO ALBERTO;20175312650;59833251,71\n"
        "PICCIONI FERNANDO GABRIEL;20236590918;81334211,67\n"
        "\n"
        "CAMINOS AL PUERTO S.R.L.;30714884421;1.350.162.003,89\n"
    )
