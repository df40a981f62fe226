"""System endpoints — health check."""

from fastapi import APIRouter, Depends

from chart_app.api.v1.dependencies import get_loader
from chart_app.core.config import settings
from chart_app.services.broker.chart_config import ChartConfigLoader

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check(loader: ChartConfigLoader = Depends(get_loader)):
    """Basic liveness probe."""
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "charts_loaded": loader.is_loaded,
        "chart_count": len(loader.list_ids()),
    }
