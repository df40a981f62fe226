"""
FastAPI dependencies — shared lookups for chart endpoints.

Usage in endpoints::

    @router.get("/{chart_id}/options")
    async def chart_options(
        chart_id: str,
        loader: ChartConfigLoader = Depends(get_loader),
        pipeline: ChartPipeline = Depends(get_pipeline),
    ):
        definition = lookup_chart(loader, chart_id)   # 404 when unknown
        lifecycle = await pipeline.run(definition)
"""

from __future__ import annotations

from fastapi import HTTPException

from chart_app.services.broker.chart_config import (
    ChartConfigLoader,
    ChartDefinition,
    chart_config_loader,
)
from chart_app.services.orchestrator.pipeline import ChartPipeline, chart_pipeline


def get_loader() -> ChartConfigLoader:
    """Dependency: the chart definitions loader."""
    return chart_config_loader


def get_pipeline() -> ChartPipeline:
    """Dependency: the chart pipeline."""
    return chart_pipeline


def lookup_chart(loader: ChartConfigLoader, chart_id: str) -> ChartDefinition:
    """Return the definition or raise HTTP 404."""
    definition = loader.get(chart_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Chart '{chart_id}' not found")
    return definition
