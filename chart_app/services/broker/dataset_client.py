"""
DatasetClient — Async fetch of a query's result rows.

Single Responsibility: POST one content query to the dataset API and
return its JSON rows. No transformation, no caching, no retries.

Request::

    POST {DATASET_API_URL}
    {"queryId": "<query_id>", "biscuits": [...]}

Unlike a best-effort client this one RAISES: any failure surfaces as
``FetchError`` so the pipeline can mark the chart as failed.

Usage::

    from chart_app.services.broker.dataset_client import dataset_client

    rows = await dataset_client.fetch("3f0c…")   # list[dict]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from chart_app.core.config import settings
from chart_app.core.exceptions import FetchError

logger = logging.getLogger(__name__)

_HEADERS = {
    "accept": "application/json",
    "Content-Type": "application/json",
}


class DatasetClient:
    """
    Executes content-query requests against the dataset API.

    Stateless — each call creates and destroys its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        biscuits: Optional[List[str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url or settings.DATASET_API_URL
        self._timeout = timeout if timeout is not None else settings.DATASET_API_TIMEOUT
        self._biscuits = list(biscuits if biscuits is not None else settings.DATASET_API_BISCUITS)
        self._transport = transport

    async def fetch(self, query_id: str) -> List[Dict[str, Any]]:
        """
        Fetch the rows of ``query_id``.

        Raises:
            FetchError: non-success status, transport failure, or a body
                that is not a JSON list of objects.
        """
        body = {"queryId": query_id, "biscuits": self._biscuits}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport,
            ) as client:
                response = await client.post(self._base_url, headers=_HEADERS, json=body)
        except httpx.HTTPError as exc:
            logger.error(f"[DatasetClient] {query_id}: request failed: {exc}")
            raise FetchError(f"API call failed: {exc}") from exc

        if response.is_error:
            logger.error(
                f"[DatasetClient] {query_id}: HTTP {response.status_code} "
                f"{response.text[:200]}"
            )
            raise FetchError(
                f"API call failed: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(f"API returned invalid JSON: {exc}") from exc

        return self._validate_rows(query_id, data)

    @staticmethod
    def _validate_rows(query_id: str, data: Any) -> List[Dict[str, Any]]:
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise FetchError(
                f"API returned {type(data).__name__} for query '{query_id}', "
                f"expected a list of records"
            )
        logger.debug(f"[DatasetClient] {query_id}: {len(data)} rows")
        return data


# ── Singleton ────────────────────────────────────────────────────
dataset_client = DatasetClient()
