"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_simulator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_simulator.api.v1 import catalog, roster, simulation
from credit_simulator.infrastructure.observability.logging import setup_logging
from credit_simulator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Transporter Credit Simulator",
        description="Tire financing proposals with amortization schedule and viability check",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])
    app.include_router(roster.router, prefix="/v1", tags=["roster"])
    app.include_router(simulation.router, prefix="/v1", tags=["simulations"])

    return app


app = create_app()
