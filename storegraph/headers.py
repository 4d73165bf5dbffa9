# storegraph/headers.py
from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from .settings import settings

HeaderBuilder = Callable[[Optional[str], Mapping[str, str]], Dict[str, str]]

json: Dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def cookie_header(cookies: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Serialize incoming request cookies into a Cookie header (empty dict if none)."""
    if not cookies:
        return {}
    return {"Cookie": "; ".join(f"{k}={v}" for k, v in cookies.items())}


def with_auth_token(base: Optional[Dict[str, str]] = None) -> HeaderBuilder:
    """
    Return a builder that adds the app auth token and the shopper's
    auth cookie (when present) on top of `base`.
    """
    current = dict(base or {})

    def build(auth_token: Optional[str], cookies: Mapping[str, str]) -> Dict[str, str]:
        out = dict(current)
        if auth_token:
            out["Authorization"] = auth_token
        user_token = (cookies or {}).get(settings.auth_cookie_name)
        if user_token:
            out[settings.auth_cookie_name] = user_token
        return out

    return build
