"""
transform_data — entry point of the chart core.

Classifier gates the pivot:
  - stacked types → ``pivot_records`` + ``synthesize_series``.
  - anything else → identity: the very same dataset and series objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from chart_app.services.charts.classifier import classify
from chart_app.services.charts.pivot import Record, SeriesConfig, pivot_records
from chart_app.services.charts.series import synthesize_series

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    dataset: Sequence[Record]
    series: Any
    pivoted: bool = False


def transform_data(
    dataset: Sequence[Record],
    graph_type: str,
    original_series: Any,
) -> TransformResult:
    """
    Reshape ``dataset`` for ``graph_type``.

    Raises:
        ConfigurationError: pivot type without a usable ``series[0]``.
    """
    classification = classify(graph_type)
    if not classification.requires_pivot:
        return TransformResult(dataset=dataset, series=original_series)

    config = SeriesConfig.from_series(original_series)
    pivot = pivot_records(dataset, config)
    series = synthesize_series(pivot.categories, config.x, classification)

    logger.debug(
        f"[Transform] {graph_type}: {len(dataset)} records → "
        f"{len(pivot.rows)} rows × {len(pivot.categories)} categories"
    )

    return TransformResult(
        dataset=pivot.rows,
        series=[s.to_dict() for s in series],
        pivoted=True,
    )
