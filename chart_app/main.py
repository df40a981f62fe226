"""
FastAPI application factory + lifespan.

This is the **data engine** of the chart service:
- REST API for chart definitions, ECharts options and dataset export.
- Chart definitions loaded at startup.
- CORS configured for the Flask frontend.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chart_app.api.v1 import api_router
from chart_app.core.config import settings
from chart_app.core.logging import configure_logging
from chart_app.services.broker.chart_config import chart_config_loader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging, load chart definitions.
    Shutdown: nothing to release (HTTP clients are per-request).
    """
    configure_logging(settings)
    chart_config_loader.reload()
    logger.info(
        f"[Main] Starting {settings.APP_NAME} API with "
        f"{len(chart_config_loader.list_ids())} chart(s)"
    )

    yield

    logger.info("[Main] Shutting down API")


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    app = FastAPI(
        title="Chart API",
        description="ECharts options built from remote query datasets",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            f"http://localhost:{settings.FLASK_PORT}",
            f"http://127.0.0.1:{settings.FLASK_PORT}",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": "1.0.0",
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn chart_app.main:app``
app = create_fastapi_app()
