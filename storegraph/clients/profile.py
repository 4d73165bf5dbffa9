# storegraph/clients/profile.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx

from .. import paths
from .http import HttpClient


class ProfileClient(HttpClient):
    def __init__(
        self,
        client: httpx.AsyncClient,
        account: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(client, headers)
        self.account = account

    async def get_addresses(self, profile: Dict[str, Any]) -> List[Dict[str, Any]]:
        data = await self.get(paths.profile_addresses(self.account, profile["email"]))
        return data or []

    async def get_payments(self, profile: Dict[str, Any]) -> List[Dict[str, Any]]:
        data = await self.get(paths.profile_payments(self.account, profile["email"]))
        if not data:
            return []
        # the backend stores the card list as a serialized string under paymentData
        raw = data.get("paymentData") if isinstance(data, dict) else data
        if isinstance(raw, str):
            raw = json.loads(raw)
        if isinstance(raw, dict):
            return raw.get("availableAccounts", [])
        return raw or []

    async def get_password_last_update(self) -> Optional[str]:
        data = await self.get(paths.authenticated_user())
        return (data or {}).get("passwordLastUpdate")
