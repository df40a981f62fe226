import json

import httpx
import pytest

from chart_app.core.exceptions import FetchError
from chart_app.services.broker.dataset_client import DatasetClient

URL = "https://datasets.example.test/content-queries"


def _client(handler, **kwargs):
    return DatasetClient(base_url=URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_posts_query_and_returns_rows():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["accept"] = request.headers["accept"]
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(200, json=[{"a": 1}, {"a": 2}])

    rows = await _client(handler, biscuits=["b1"]).fetch("q-42")

    assert rows == [{"a": 1}, {"a": 2}]
    assert seen == {
        "method": "POST",
        "url": URL,
        "body": {"queryId": "q-42", "biscuits": ["b1"]},
        "accept": "application/json",
        "content_type": "application/json",
    }


@pytest.mark.asyncio
async def test_error_status_raises_fetch_error():
    def handler(request):
        return httpx.Response(503, text="down")

    with pytest.raises(FetchError) as info:
        await _client(handler).fetch("q")

    assert info.value.status_code == 503
    assert str(info.value) == "API call failed: Service Unavailable"


@pytest.mark.asyncio
async def test_transport_error_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(FetchError) as info:
        await _client(handler).fetch("q")

    assert isinstance(info.value.__cause__, httpx.ConnectError)
    assert info.value.status_code is None


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"rows": []}, [1, 2], "text"])
async def test_non_record_payload_raises(payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    with pytest.raises(FetchError):
        await _client(handler).fetch("q")


@pytest.mark.asyncio
async def test_invalid_json_raises():
    def handler(request):
        return httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})

    with pytest.raises(FetchError):
        await _client(handler).fetch("q")
