# storegraph/paths.py
"""URL builders for the store backend endpoints."""
from __future__ import annotations

from typing import Any, Dict, Optional

from .settings import settings


def _host(account: str) -> str:
    return f"http://{account}.vtexcommercestable.com.br"


def checkout_base(account: str, base_url: Optional[str] = None) -> str:
    base = base_url or settings.checkout_base_url or _host(account)
    return f"{base.rstrip('/')}/api/checkout/pub"


def order_form(account: str) -> str:
    return f"{checkout_base(account)}/orderForm"


def order_form_by_id(account: str, order_form_id: str) -> str:
    return f"{order_form(account)}/{order_form_id}"


def order_form_items(account: str, order_form_id: str) -> str:
    return f"{order_form_by_id(account, order_form_id)}/items"


def order_form_update_items(account: str, order_form_id: str) -> str:
    return f"{order_form_items(account, order_form_id)}/update"


def order_form_attachment(account: str, order_form_id: str, attachment: str) -> str:
    return f"{order_form_by_id(account, order_form_id)}/attachments/{attachment}"


def order_form_ignore_profile(account: str, order_form_id: str) -> str:
    return f"{order_form_by_id(account, order_form_id)}/profile"


def order_form_custom_data(account: str, order_form_id: str, app_id: str, field: str) -> str:
    return f"{order_form_by_id(account, order_form_id)}/customData/{app_id}/{field}"


def order_form_payment_token(account: str, args: Dict[str, Any]) -> str:
    return f"{order_form_by_id(account, args['orderFormId'])}/paymentData/paymentToken"


def cancel_order(account: str, order_form_id: str) -> str:
    return f"{checkout_base(account)}/orders/{order_form_id}/user-cancel-request"


def orders(account: str) -> str:
    return f"{checkout_base(account)}/orders"


def shipping_simulation(account: str) -> str:
    return f"{checkout_base(account)}/orderForms/simulation"


def segment(account: str, token: Optional[str] = None) -> str:
    url = f"{_host(account)}/api/segments"
    return f"{url}/{token}" if token else url


# ---------- Profile system ----------

def profile(account: str, email: str) -> str:
    return f"{_host(account)}/api/profile-system/pvt/profiles/{email}"


def profile_addresses(account: str, email: str) -> str:
    return f"{profile(account, email)}/addresses"


def profile_payments(account: str, email: str) -> str:
    return f"{profile(account, email)}/vcs-checkout"


def authenticated_user() -> str:
    return "http://vtexid.vtex.com.br/api/vtexid/pub/authenticated/user"


# ---------- Payment gateway ----------

def gateway(account: str) -> str:
    return f"http://{account}.vtexpayments.com.br/api"


def gateway_payment_session(account: str, args: Dict[str, Any]) -> str:
    return f"{gateway(account)}/pub/sessions"


def gateway_tokenize_payment(account: str, args: Dict[str, Any]) -> str:
    return f"{gateway(account)}/pub/sessions/{args['sessionId']}/tokens"
