"""Ticket Triage Router: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ticket_triage.config import settings
from ticket_triage.infrastructure.api.dependencies import get_provider_registry
from ticket_triage.infrastructure.api.routes_health import router as health_router
from ticket_triage.infrastructure.api.routes_tickets import router as tickets_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the provider registry up front so bad credentials stop startup."""
    registry = get_provider_registry()
    logger.info("Serving with %d LLM provider(s)", len(registry))
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Ticket Triage Router",
        description="Weighted multi-provider LLM triage for support tickets",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")

    return app


app = create_app()
