# storegraph/clients/http.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("storegraph.http")


class HttpClient:
    """
    JSON-over-HTTP wrapper around a request-scoped httpx.AsyncClient.

    Failures are not translated: non-2xx responses raise
    httpx.HTTPStatusError and transport problems raise httpx.RequestError.
    """

    def __init__(self, client: httpx.AsyncClient, headers: Optional[Dict[str, str]] = None) -> None:
        self._client = client
        self._headers = dict(headers or {})

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
    ) -> Any:
        merged = {**self._headers, **(headers or {})}
        logger.debug("%s %s", method, url)
        resp = await self._client.request(method, url, json=data, headers=merged)
        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()

    async def get(self, url: str, **kw: Any) -> Any:
        return await self.request("GET", url, **kw)

    async def post(self, url: str, **kw: Any) -> Any:
        return await self.request("POST", url, **kw)

    async def put(self, url: str, **kw: Any) -> Any:
        return await self.request("PUT", url, **kw)

    async def patch(self, url: str, **kw: Any) -> Any:
        return await self.request("PATCH", url, **kw)
