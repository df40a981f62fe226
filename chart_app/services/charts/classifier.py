"""
ChartTypeClassifier — decides whether a ``graph_type`` needs pivoting.

Pure lookup into ``CHART_TYPE_REGISTRY``. Total over all strings:
unknown identifiers classify as pass-through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chart_app.config.chart_types import CHART_TYPE_REGISTRY


@dataclass(frozen=True)
class ChartClassification:
    """Pivot decision plus the rendering hints of the series to synthesize."""
    graph_type: str
    requires_pivot: bool
    mark_type: Optional[str] = None
    stack: Optional[str] = None
    area_style: bool = False


def classify(graph_type: str) -> ChartClassification:
    """Classify a chart-type identifier."""
    entry = CHART_TYPE_REGISTRY.get(graph_type)
    if entry is None:
        return ChartClassification(graph_type=graph_type, requires_pivot=False)

    return ChartClassification(
        graph_type=graph_type,
        requires_pivot=True,
        mark_type=entry["mark_type"],
        stack=entry.get("stack"),
        area_style=bool(entry.get("area_style", False)),
    )


def requires_pivot(graph_type: str) -> bool:
    """Shorthand for ``classify(graph_type).requires_pivot``."""
    return graph_type in CHART_TYPE_REGISTRY
