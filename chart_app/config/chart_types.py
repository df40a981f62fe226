"""
Chart Type Registry.

Maps the ``graph_type`` identifiers that need a long → wide pivot to
their ECharts rendering hints. Any identifier NOT listed here is a
pass-through chart: dataset and series reach ECharts untouched.

Values: dict with:
  mark_type  → str  : ECharts series ``type`` ("line" | "bar").
  stack      → str | None : stack group name, or None for independent series.
  area_style → bool : emit ``areaStyle: {}`` (filled area under the line).

To support a new stacked variant, add an entry here. Nothing else changes.
"""

CHART_TYPE_REGISTRY: dict[str, dict] = {
    "stacked_area_chart": {
        "mark_type": "line",
        "stack": "all",
        "area_style": True,
    },
    "stacked_line_chart": {
        "mark_type": "line",
        "stack": None,
        "area_style": False,
    },
    "stacked_column_chart": {
        "mark_type": "bar",
        "stack": "all",
        "area_style": False,
    },
}
