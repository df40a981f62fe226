from chart_app.services.data.export import records_to_frame, to_csv


def test_to_csv_keeps_column_order():
    rows = [{"month": "Jan", "East": 10, "West": 5}, {"month": "Feb", "East": 7, "West": 0}]

    assert to_csv(rows).splitlines() == ["month,East,West", "Jan,10,5", "Feb,7,0"]


def test_to_csv_empty():
    assert to_csv([]) == ""


def test_records_to_frame_shape():
    frame = records_to_frame([{"a": 1, "b": 2}, {"a": 3, "b": 4}])

    assert list(frame.columns) == ["a", "b"]
    assert len(frame) == 2
