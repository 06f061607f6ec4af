"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_guru.api.middleware import RequestIDMiddleware, MetricsMiddleware
from budget_guru.api.v1 import goals, incomes, suggestions
from budget_guru.infrastructure.database.session import init_db
from budget_guru.infrastructure.observability.logging import setup_logging
from budget_guru.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Budget Guru",
        description="Savings suggestions for income payments across goals",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(incomes.router, prefix="/v1", tags=["incomes"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(suggestions.router, prefix="/v1", tags=["suggestions"])

    return app


app = create_app()
