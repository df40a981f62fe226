"""
Chart API Endpoints.

Core endpoint: GET /api/v1/charts/{chart_id}/options
  1. Looks up the chart definition.
  2. Runs ChartPipeline (fetch → transform → assemble).
  3. Returns the rendered view: status, message, ECharts options.

Secondary endpoints:
  GET  /api/v1/charts                        → list definitions
  GET  /api/v1/charts/{chart_id}             → one definition
  GET  /api/v1/charts/{chart_id}/dataset.csv → transformed dataset as CSV
  POST /api/v1/charts/reload                 → re-read the definitions file
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from chart_app.api.v1.dependencies import get_loader, get_pipeline, lookup_chart
from chart_app.services.broker.chart_config import ChartConfigLoader
from chart_app.services.charts.classifier import requires_pivot
from chart_app.services.data.export import to_csv
from chart_app.services.orchestrator.lifecycle import FAILURE_MESSAGE, ChartStatus, render
from chart_app.services.orchestrator.pipeline import ChartPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/charts", tags=["charts"])


# ── Pydantic response models ────────────────────────────────────

class ChartSummary(BaseModel):
    chart_id: str
    title: str
    graph_type: str
    query_id: str
    pivot: bool


class ChartDetail(ChartSummary):
    echart_config: Dict[str, Any]


class ChartViewResponse(BaseModel):
    chart_id: str
    status: str
    message: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    render_opts: Dict[str, Any] = {}


# ── Endpoints ────────────────────────────────────────────────────

@router.get("", response_model=List[ChartSummary])
async def list_charts(loader: ChartConfigLoader = Depends(get_loader)):
    """List every configured chart."""
    return [
        ChartSummary(
            chart_id=d.chart_id,
            title=d.title,
            graph_type=d.graph_type,
            query_id=d.query_id,
            pivot=requires_pivot(d.graph_type),
        )
        for d in loader.get_all().values()
    ]


@router.post("/reload")
async def reload_charts(loader: ChartConfigLoader = Depends(get_loader)):
    """
    Re-read the chart definitions file from disk.

    Use after editing the file to pick up changes without restarting.
    """
    loader.reload()
    return {"status": "reloaded", "total_charts": len(loader.list_ids())}


@router.get("/{chart_id}", response_model=ChartDetail)
async def get_chart(chart_id: str, loader: ChartConfigLoader = Depends(get_loader)):
    """Full definition of one chart (does NOT fetch data)."""
    d = lookup_chart(loader, chart_id)
    return ChartDetail(
        chart_id=d.chart_id,
        title=d.title,
        graph_type=d.graph_type,
        query_id=d.query_id,
        pivot=requires_pivot(d.graph_type),
        echart_config=d.echart_config,
    )


@router.get("/{chart_id}/options", response_model=ChartViewResponse)
async def chart_options(
    chart_id: str,
    loader: ChartConfigLoader = Depends(get_loader),
    pipeline: ChartPipeline = Depends(get_pipeline),
):
    """
    Run the chart pipeline and return what to display.

    Failed runs answer 502 with the generic failure message only.
    """
    definition = lookup_chart(loader, chart_id)
    view = render(await pipeline.run(definition))
    body = ChartViewResponse(chart_id=chart_id, **view.to_dict())

    if view.status == ChartStatus.FAILED.value:
        return JSONResponse(status_code=502, content=body.model_dump())
    return body


@router.get("/{chart_id}/dataset.csv", response_class=PlainTextResponse)
async def chart_dataset_csv(
    chart_id: str,
    loader: ChartConfigLoader = Depends(get_loader),
    pipeline: ChartPipeline = Depends(get_pipeline),
):
    """Transformed (wide for stacked charts) dataset as CSV."""
    definition = lookup_chart(loader, chart_id)
    try:
        result = await pipeline.build_dataset(definition)
    except Exception as exc:
        logger.error(
            f"[ChartsAPI] Export failed for '{chart_id}': {exc}", exc_info=True,
        )
        raise HTTPException(status_code=502, detail=FAILURE_MESSAGE)

    return PlainTextResponse(
        to_csv(result.dataset),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{chart_id}.csv"'},
    )
