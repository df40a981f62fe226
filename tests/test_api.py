import pytest
from fastapi.testclient import TestClient

from chart_app.api.v1.dependencies import get_loader, get_pipeline
from chart_app.core.exceptions import FetchError
from chart_app.main import create_fastapi_app


@pytest.fixture
def fetch_state(sales_rows):
    return {"rows": sales_rows, "error": None}


@pytest.fixture
def api(loader, make_pipeline, fetch_state):
    state = fetch_state

    def _pipeline():
        pipeline, _ = make_pipeline(rows=state["rows"], error=state["error"])
        return pipeline

    app = create_fastapi_app()
    app.dependency_overrides[get_loader] = lambda: loader
    app.dependency_overrides[get_pipeline] = _pipeline
    return TestClient(app)


def test_health(api):
    resp = api.get("/api/v1/system/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["chart_count"] == 2


def test_list_charts(api):
    resp = api.get("/api/v1/charts")

    assert resp.status_code == 200
    assert resp.json() == [
        {"chart_id": "sales", "title": "Sales by region", "graph_type": "stacked_area_chart",
         "query_id": "q-sales", "pivot": True},
        {"chart_id": "plain", "title": "plain", "graph_type": "line_chart",
         "query_id": "q-plain", "pivot": False},
    ]


def test_chart_detail_and_404(api):
    resp = api.get("/api/v1/charts/sales")
    assert resp.status_code == 200
    assert resp.json()["echart_config"]["legend"] == {}

    assert api.get("/api/v1/charts/missing").status_code == 404
    assert api.get("/api/v1/charts/missing/options").status_code == 404


def test_options_for_stacked_area(api):
    resp = api.get("/api/v1/charts/sales/options")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ready"
    assert body["render_opts"]["renderer"] == "canvas"
    options = body["options"]
    assert options["legend"] == {}
    assert options["dataset"]["source"][1] == {"month": "Feb", "East": 7, "West": 0}
    assert options["series"][0] == {
        "type": "line",
        "stack": "all",
        "areaStyle": {},
        "encode": {"x": "month", "y": "East"},
        "name": "East",
    }


def test_failed_run_hides_error_detail(api, fetch_state):
    fetch_state["error"] = FetchError("API call failed: secret upstream detail", 500)

    resp = api.get("/api/v1/charts/sales/options")

    assert resp.status_code == 502
    body = resp.json()
    assert body["status"] == "failed"
    assert body["message"] == "Failed to load chart data"
    assert "secret" not in resp.text


def test_dataset_csv_is_wide_for_stacked_chart(api):
    resp = api.get("/api/v1/charts/sales/dataset.csv")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.text.splitlines() == ["month,East,West", "Jan,10,5", "Feb,7,0"]


def test_dataset_csv_failure_is_502(api, fetch_state):
    fetch_state["error"] = RuntimeError("boom")

    assert api.get("/api/v1/charts/sales/dataset.csv").status_code == 502


def test_reload(api):
    resp = api.post("/api/v1/charts/reload")

    assert resp.status_code == 200
    assert resp.json() == {"status": "reloaded", "total_charts": 2}
