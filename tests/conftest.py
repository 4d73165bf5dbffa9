"""Shared fixtures: fake collaborators so tests never touch the store backend."""
from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

# Set env BEFORE any storegraph imports
os.environ["STORE_ACCOUNT"] = "teststore"
os.environ.pop("CHECKOUT_BASE_URL", None)

import pytest

from storegraph.context import ResolverContext

CHECKOUT_OPERATIONS = (
    "order_form",
    "orders",
    "shipping",
    "add_item",
    "update_order_form_marketing_data",
    "cancel_order",
    "set_order_form_custom_data",
    "update_items",
    "update_order_form_ignore_profile",
    "update_order_form_payment",
    "update_order_form_profile",
)

SEGMENT = {
    "utm_source": "newsletter",
    "utm_campaign": "black-friday",
    "utmi_campaign": "home-banner",
    "currencyCode": "BRL",
}

ORDER_FORM = {
    "orderFormId": "of-123",
    "value": 2590,
    "items": [
        {"id": "sku-1", "quantity": 1, "price": 1990, "listPrice": 2490, "sellingPrice": 1990, "name": "Mug"},
        {"id": "sku-2", "quantity": 2, "price": 300, "listPrice": 300, "sellingPrice": 300, "name": "Sticker"},
    ],
    "marketingData": {
        "utmSource": "newsletter",
        "utmCampaign": "black-friday",
        "utmiCampaign": "home-banner",
        "coupon": "WELCOME10",
    },
}


def make_checkout(order_form=None) -> MagicMock:
    checkout = MagicMock(name="checkout")
    for op in CHECKOUT_OPERATIONS:
        setattr(checkout, op, AsyncMock(name=op, return_value={"op": op}))
    checkout.order_form.return_value = order_form if order_form is not None else dict(ORDER_FORM)
    return checkout


def make_session(segment=None) -> MagicMock:
    session = MagicMock(name="session")
    session.get_segment_data = AsyncMock(return_value=segment if segment is not None else dict(SEGMENT))
    return session


def make_profile() -> MagicMock:
    profile = MagicMock(name="profile")
    profile.get_addresses = AsyncMock(return_value=[{"addressName": "home", "city": "Rio"}])
    profile.get_payments = AsyncMock(return_value=[{"id": "card-1", "paymentSystem": "2"}])
    profile.get_password_last_update = AsyncMock(return_value="2024-03-01T10:00:00Z")
    return profile


def make_http() -> MagicMock:
    http = MagicMock(name="http")
    http.request = AsyncMock(return_value={"ok": True})
    return http


@pytest.fixture()
def ctx() -> ResolverContext:
    return ResolverContext(
        account="teststore",
        workspace="master",
        auth_token="app-token",
        checkout=make_checkout(),
        session=make_session(),
        profile=make_profile(),
        http=make_http(),
        cookies={"VtexIdclientAutCookie": "user-token", "vtex_segment": "seg-token"},
    )


@pytest.fixture()
def client(ctx):
    """FastAPI TestClient (sync) with the per-request context swapped for fakes."""
    from fastapi.testclient import TestClient
    from storegraph.context import get_context
    from storegraph.main import app

    app.dependency_overrides[get_context] = lambda: ctx
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
