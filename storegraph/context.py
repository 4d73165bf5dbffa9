# storegraph/context.py
"""Per-request resolver context: the collaborators every resolver receives."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, Optional

import httpx
from fastapi import Request

from .clients.checkout import CheckoutClient
from .clients.http import HttpClient
from .clients.profile import ProfileClient
from .clients.session import SessionClient
from .headers import cookie_header, with_auth_token
from .headers import json as json_headers
from .settings import settings


@dataclass(frozen=True)
class ResolverContext:
    account: str
    workspace: str
    auth_token: Optional[str]
    checkout: CheckoutClient
    session: SessionClient
    profile: ProfileClient
    http: HttpClient
    cookies: Dict[str, str] = field(default_factory=dict)


def _auth_token(request: Request) -> Optional[str]:
    raw = request.headers.get("authorization")
    if not raw:
        return None
    return raw[7:] if raw.lower().startswith("bearer ") else raw


def build_context(
    client: httpx.AsyncClient,
    auth_token: Optional[str] = None,
    cookies: Optional[Dict[str, str]] = None,
    account: Optional[str] = None,
    workspace: Optional[str] = None,
) -> ResolverContext:
    account = account or settings.account
    cookies = dict(cookies or {})

    # backend clients always act on behalf of the shopper, so they carry cookies;
    # the generic http client only gets them from descriptors that opt in
    backend_headers = {
        **with_auth_token(json_headers)(auth_token, cookies),
        **cookie_header(cookies),
    }

    return ResolverContext(
        account=account,
        workspace=workspace or settings.workspace,
        auth_token=auth_token,
        checkout=CheckoutClient(client, account, backend_headers),
        session=SessionClient(client, account, cookies, backend_headers),
        profile=ProfileClient(client, account, backend_headers),
        http=HttpClient(client),
        cookies=cookies,
    )


async def get_context(request: Request) -> AsyncIterator[ResolverContext]:
    """FastAPI dependency: one httpx client and one context per incoming request."""
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        yield build_context(
            client,
            auth_token=_auth_token(request),
            cookies=dict(request.cookies),
        )
