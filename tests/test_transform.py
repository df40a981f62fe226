import pytest

from chart_app.core.exceptions import ConfigurationError
from chart_app.services.charts.transform import transform_data

PIVOT_TYPES = ["stacked_area_chart", "stacked_line_chart", "stacked_column_chart"]


@pytest.mark.parametrize("graph_type", ["bar_chart", "line_chart", "", "pie_chart"])
def test_identity_for_pass_through_types(sales_rows, graph_type):
    series = [{"type": "line"}]
    result = transform_data(sales_rows, graph_type, series)

    assert result.dataset is sales_rows
    assert result.series is series
    assert result.pivoted is False


def test_identity_does_not_require_series(sales_rows):
    result = transform_data(sales_rows, "bar_chart", None)
    assert result.series is None


def test_stacked_column_example(sales_rows, pivot_series):
    result = transform_data(sales_rows, "stacked_column_chart", pivot_series)

    assert result.pivoted is True
    assert result.dataset == [
        {"month": "Jan", "East": 10, "West": 5},
        {"month": "Feb", "East": 7, "West": 0},
    ]
    assert [s["name"] for s in result.series] == ["East", "West"]
    for s in result.series:
        assert s["type"] == "bar"
        assert s["stack"] == "all"
        assert s["encode"] == {"x": "month", "y": s["name"]}


@pytest.mark.parametrize("graph_type", PIVOT_TYPES)
def test_row_and_series_count_laws(graph_type, pivot_series):
    rows = [
        {"month": m, "region": r, "sales": 1}
        for m in ("Jan", "Feb", "Mar", "Jan")
        for r in ("N", "S", "N")
    ]
    result = transform_data(rows, graph_type, pivot_series)

    assert len(result.dataset) == 3
    assert len(result.series) == 2


@pytest.mark.parametrize("graph_type", PIVOT_TYPES)
@pytest.mark.parametrize("series", [None, [], [None], {"type": "bar"}])
def test_missing_series_config_raises(sales_rows, graph_type, series):
    with pytest.raises(ConfigurationError):
        transform_data(sales_rows, graph_type, series)


def test_pivot_leaves_inputs_untouched(sales_rows, pivot_series):
    rows_before = [dict(r) for r in sales_rows]
    series_before = [dict(s) for s in pivot_series]

    transform_data(sales_rows, "stacked_area_chart", pivot_series)

    assert sales_rows == rows_before
    assert pivot_series == series_before
