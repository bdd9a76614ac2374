"""HVAC Dispatch — FastAPI application factory."""

import logging

from fastapi import FastAPI

from hvac_dispatch.config import settings
from hvac_dispatch.infrastructure.api.routes_dispatch import router as dispatch_router
from hvac_dispatch.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    app = FastAPI(
        title="HVAC Dispatch Engine",
        description="Technician eligibility, scoring and ranking for incoming jobs",
        version="0.1.0",
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(dispatch_router, prefix="/api")

    logger.info(
        "Dispatch engine ready (distance=%s, performance=%s)",
        settings.distance_provider.value, settings.performance_provider.value,
    )
    return app


app = create_app()
