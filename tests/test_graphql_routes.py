"""Tests for the HTTP surface that executes resolvers."""
from __future__ import annotations

import httpx


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["message"]


def test_resolve_query(client, ctx):
    resp = client.post("/graphql/resolve", json={"typeName": "Query", "fieldName": "orderForm"})
    assert resp.status_code == 200
    assert resp.json()["data"]["orderFormId"] == "of-123"
    ctx.checkout.order_form.assert_awaited_once()


def test_resolve_field_with_parent(client):
    parent = {"orderFormId": "of-1", "value": 1050, "items": [{"id": "x", "price": 1050}]}
    resp = client.post(
        "/graphql/resolve",
        json={"typeName": "OrderForm", "fieldName": "items", "parent": parent},
    )
    assert resp.status_code == 200
    assert resp.json()["data"] == [{"id": "x", "price": 10.5}]


def test_resolve_add_item(client, ctx):
    resp = client.post(
        "/graphql/resolve",
        json={
            "typeName": "Mutation",
            "fieldName": "addItem",
            "args": {"orderFormId": "of-123", "items": [{"id": "sku-1", "quantity": 1, "seller": "1"}]},
        },
    )
    assert resp.status_code == 200
    assert resp.json()["data"] == {"op": "add_item"}
    ctx.checkout.add_item.assert_awaited_once()


def test_unknown_resolver_is_404(client):
    resp = client.post("/graphql/resolve", json={"typeName": "Query", "fieldName": "nope"})
    assert resp.status_code == 404
    assert "Query.nope" in resp.json()["detail"]


def test_missing_argument_is_400(client):
    resp = client.post("/graphql/resolve", json={"typeName": "Mutation", "fieldName": "cancelOrder"})
    assert resp.status_code == 400
    assert "orderFormId" in resp.json()["detail"]


def test_backend_status_error_is_502(client, ctx):
    request = httpx.Request("POST", "http://teststore.vtexcommercestable.com.br/api/checkout/pub/orderForm")
    response = httpx.Response(500, text="checkout unavailable", request=request)
    ctx.checkout.order_form.side_effect = httpx.HTTPStatusError("boom", request=request, response=response)

    resp = client.post("/graphql/resolve", json={"typeName": "Query", "fieldName": "orderForm"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Backend error 500: checkout unavailable"


def test_backend_transport_error_is_502(client, ctx):
    ctx.session.get_segment_data.side_effect = httpx.ConnectError("refused")

    resp = client.post(
        "/graphql/resolve",
        json={"typeName": "Mutation", "fieldName": "addItem", "args": {"orderFormId": "of-1", "items": []}},
    )
    assert resp.status_code == 502
    assert "refused" in resp.json()["detail"]
    ctx.checkout.add_item.assert_not_awaited()


def test_list_resolvers(client):
    resp = client.get("/graphql/resolvers")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 28
    names = {r["name"] for r in data["resolvers"]}
    assert "Mutation.updateOrderFormShipping" in names
    assert "Profile.customFields" in names


def test_backend_key_error_is_not_a_client_error(client, ctx):
    from fastapi.testclient import TestClient

    ctx.checkout.order_form.side_effect = KeyError("marketingData")
    unguarded = TestClient(client.app, raise_server_exceptions=False)

    resp = unguarded.post("/graphql/resolve", json={"typeName": "Query", "fieldName": "orderForm"})
    assert resp.status_code == 500


def test_field_resolve_without_parent_is_400(client):
    resp = client.post("/graphql/resolve", json={"typeName": "OrderForm", "fieldName": "items"})
    assert resp.status_code == 400
    assert "OrderForm.items" in resp.json()["detail"]


def test_missing_payment_session_id_is_400(client, ctx):
    resp = client.post(
        "/graphql/resolve",
        json={"typeName": "Mutation", "fieldName": "createPaymentTokens", "args": {"payments": []}},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "missing argument: sessionId"
    ctx.http.request.assert_not_awaited()
