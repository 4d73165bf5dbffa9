# storegraph/clients/session.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from .. import paths
from .http import HttpClient

SEGMENT_COOKIE = "vtex_segment"


class SessionClient(HttpClient):
    """Reads the shopper's segment (campaign tracking) for the current session."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        account: str,
        cookies: Optional[Mapping[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(client, headers)
        self.account = account
        self.cookies = dict(cookies or {})

    async def get_segment_data(self) -> Dict[str, Any]:
        token = self.cookies.get(SEGMENT_COOKIE)
        data = await self.get(paths.segment(self.account, token))
        return data or {}
