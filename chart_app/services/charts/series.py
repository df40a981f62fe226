"""
SeriesSynthesizer — one ECharts series per distinct category value.

Each series reads the wide table produced by ``pivot_records``:
``encode.x`` is the x field, ``encode.y`` is the category-named column.
The category value doubles as the legend label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from chart_app.services.charts.classifier import ChartClassification


@dataclass(frozen=True)
class SeriesEncode:
    x: str
    y: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class SeriesDefinition:
    """A synthesized series, serialized in ECharts' option shape."""
    type: str
    encode: SeriesEncode
    name: Any
    stack: Optional[str] = None
    area_style: bool = False

    def to_dict(self) -> Dict[str, Any]:
        series: Dict[str, Any] = {"type": self.type}
        if self.stack is not None:
            series["stack"] = self.stack
        if self.area_style:
            series["areaStyle"] = {}
        series["encode"] = self.encode.to_dict()
        series["name"] = self.name
        return series


def synthesize_series(
    categories: Sequence[Any],
    x_field: str,
    classification: ChartClassification,
) -> List[SeriesDefinition]:
    """Build the series list in category order."""
    if not classification.requires_pivot:
        raise ValueError(
            f"'{classification.graph_type}' is a pass-through chart type"
        )

    return [
        SeriesDefinition(
            type=classification.mark_type,
            encode=SeriesEncode(x=x_field, y=category),
            name=category,
            stack=classification.stack,
            area_style=classification.area_style,
        )
        for category in categories
    ]
