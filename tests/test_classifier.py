import pytest

from chart_app.services.charts.classifier import classify, requires_pivot


def test_stacked_area_is_filled_stacked_line():
    c = classify("stacked_area_chart")
    assert c.requires_pivot
    assert c.mark_type == "line"
    assert c.stack == "all"
    assert c.area_style is True


def test_stacked_line_has_no_stack_and_no_area():
    c = classify("stacked_line_chart")
    assert c.requires_pivot
    assert c.mark_type == "line"
    assert c.stack is None
    assert c.area_style is False


def test_stacked_column_is_stacked_bar():
    c = classify("stacked_column_chart")
    assert c.requires_pivot
    assert c.mark_type == "bar"
    assert c.stack == "all"
    assert c.area_style is False


@pytest.mark.parametrize(
    "graph_type",
    ["bar_chart", "line_chart", "", "STACKED_AREA_CHART", "stacked_area_chart ", "pie"],
)
def test_unknown_types_pass_through(graph_type):
    c = classify(graph_type)
    assert not c.requires_pivot
    assert c.mark_type is None
    assert not requires_pivot(graph_type)
