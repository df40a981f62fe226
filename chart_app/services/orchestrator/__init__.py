"""
Orchestrator package — chart load workflow.

Modules:
  lifecycle — ChartLifecycle state machine + ``render`` projection
  pipeline  — ChartPipeline coordinator

Usage::

    from chart_app.services.orchestrator import chart_pipeline, render

    view = render(await chart_pipeline.run(definition))
"""

from chart_app.services.orchestrator.lifecycle import (
    ChartLifecycle,
    ChartStatus,
    ChartView,
    render,
)
from chart_app.services.orchestrator.pipeline import ChartPipeline, chart_pipeline

__all__ = [
    "ChartLifecycle",
    "ChartPipeline",
    "ChartStatus",
    "ChartView",
    "chart_pipeline",
    "render",
]
