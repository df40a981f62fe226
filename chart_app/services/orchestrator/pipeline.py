"""
ChartPipeline — Thin coordinator for one chart load.

Single Responsibility: wire the phases together in order.

  Fetch     → DatasetClient      (``chart_app.services.broker.dataset_client``)
  Transform → transform_data     (``chart_app.services.charts.transform``)
  Assembly  → assemble_options   (``chart_app.services.charts.assembler``)

Fetch completes before the transform starts; nothing is cached between
runs and every run gets its own ``ChartLifecycle``.

Usage::

    from chart_app.services.orchestrator import chart_pipeline

    lifecycle = await chart_pipeline.run(definition)
    view = render(lifecycle)
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from chart_app.services.broker.chart_config import ChartDefinition
from chart_app.services.broker.dataset_client import DatasetClient, dataset_client
from chart_app.services.charts.assembler import assemble_options
from chart_app.services.charts.transform import TransformResult, transform_data
from chart_app.services.orchestrator.lifecycle import FAILURE_MESSAGE, ChartLifecycle

logger = logging.getLogger(__name__)


class ChartPipeline:
    """
    Master coordinator — fetch, transform, assemble.

    ``run()`` never raises: every error ends in ``lifecycle.fail()``.
    ``build_options()`` / ``build_dataset()`` raise for callers that
    want the error.
    """

    def __init__(self, client: Optional[DatasetClient] = None) -> None:
        self._client = client or dataset_client

    # ─────────────────────────────────────────────────────────
    #  PUBLIC API
    # ─────────────────────────────────────────────────────────

    async def run(self, definition: ChartDefinition) -> ChartLifecycle:
        """Load one chart and return its finished lifecycle."""
        lifecycle = ChartLifecycle()
        lifecycle.start()

        try:
            options = await self.build_options(definition)
        except Exception as exc:
            logger.error(
                f"[ChartPipeline] Error loading chart '{definition.chart_id}': {exc}",
                exc_info=True,
            )
            lifecycle.fail(FAILURE_MESSAGE)
            return lifecycle

        lifecycle.succeed(options)
        return lifecycle

    async def build_options(self, definition: ChartDefinition) -> Dict[str, Any]:
        """Fetch + transform + assemble. Raises on any failure."""
        t0 = time.perf_counter()

        result = await self.build_dataset(definition)
        options = assemble_options(
            definition.echart_config, result.dataset, result.series,
        )

        _log_summary(definition, result, time.perf_counter() - t0)
        return options

    async def build_dataset(self, definition: ChartDefinition) -> TransformResult:
        """Fetch + transform only (dataset export)."""
        dataset = await self._client.fetch(definition.query_id)
        return transform_data(
            dataset, definition.graph_type, definition.original_series,
        )


def _log_summary(
    definition: ChartDefinition,
    result: TransformResult,
    elapsed: float,
) -> None:
    """Log a one-line summary of the completed pipeline."""
    logger.info(
        f"[ChartPipeline] '{definition.chart_id}' ({definition.graph_type}) "
        f"completed in {elapsed:.2f}s — "
        f"{len(result.dataset)} rows, "
        f"{_series_count(result.series)} series, "
        f"pivoted={result.pivoted}"
    )


def _series_count(series) -> int:
    """A single series mapping counts as one."""
    if not series:
        return 0
    return 1 if isinstance(series, dict) else len(series)


# ── Singleton ────────────────────────────────────────────────────
chart_pipeline = ChartPipeline()
