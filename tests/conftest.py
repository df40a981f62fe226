from __future__ import annotations

import textwrap

import pytest

from chart_app.services.broker.chart_config import ChartConfigLoader, ChartDefinition
from chart_app.services.orchestrator.pipeline import ChartPipeline


class FakeDatasetClient:
    """Returns canned rows (or raises) instead of calling the dataset API."""

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, query_id: str):
        self.calls.append(query_id)
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def sales_rows():
    return [
        {"month": "Jan", "region": "East", "sales": 10},
        {"month": "Jan", "region": "West", "sales": 5},
        {"month": "Feb", "region": "East", "sales": 7},
    ]


@pytest.fixture
def pivot_series():
    return [{"x": "month", "y": "sales", "category": "region"}]


@pytest.fixture
def column_definition(pivot_series):
    return ChartDefinition(
        chart_id="sales",
        query_id="q-sales",
        graph_type="stacked_column_chart",
        echart_config={
            "title": {"text": "Sales"},
            "xAxis": {"type": "category"},
            "series": pivot_series,
        },
        title="Sales",
    )


@pytest.fixture
def make_pipeline():
    def _make(rows=None, error=None):
        client = FakeDatasetClient(rows=rows, error=error)
        return ChartPipeline(client=client), client
    return _make


@pytest.fixture
def charts_file(tmp_path):
    path = tmp_path / "charts.yml"
    path.write_text(textwrap.dedent("""
        sales:
          title: Sales by region
          graph_type: stacked_area_chart
          query_id: q-sales
          echart_config:
            legend: {}
            series:
              - {x: month, y: sales, category: region}
        plain:
          graph_type: line_chart
          query_id: q-plain
          echart_config:
            series:
              - {type: line, encode: {x: day, y: total}}
    """), encoding="utf-8")
    return path


@pytest.fixture
def loader(charts_file):
    return ChartConfigLoader(charts_file)
