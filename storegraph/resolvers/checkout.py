# storegraph/resolvers/checkout.py
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict

from .. import paths
from ..headers import json as json_headers
from ..headers import with_auth_token
from .attribution import is_divergent, merge_attribution
from .http_resolver import HttpDescriptor, http_resolver
from .registry import Derived, Direct, Entry, prop, require
from .units import normalize_items, normalize_value

if TYPE_CHECKING:
    from ..context import ResolverContext

logger = logging.getLogger("storegraph.checkout")


async def add_item(parent: Any, args: Dict[str, Any], context: "ResolverContext") -> Any:
    """
    Add items to the cart, first making sure the order form carries the
    session's UTM attribution.

    Both reads run concurrently and either failing aborts before anything
    is written; the other read is cancelled. Attribution is persisted
    before the item add, never after.
    """
    order_form_id = require(args, "orderFormId")
    items = require(args, "items")

    fetches = [
        asyncio.ensure_future(context.checkout.order_form()),
        asyncio.ensure_future(context.session.get_segment_data()),
    ]
    try:
        order_form, segment_data = await asyncio.gather(*fetches)
    except BaseException:
        for task in fetches:
            task.cancel()
        raise
    marketing_data = (order_form or {}).get("marketingData")

    if is_divergent(marketing_data, segment_data):
        logger.info("orderForm=%s attribution diverges from session, updating", order_form_id)
        await context.checkout.update_order_form_marketing_data(
            order_form_id, merge_attribution(marketing_data, segment_data)
        )

    return await context.checkout.add_item(order_form_id, items)


field_resolvers: Dict[str, Dict[str, Entry]] = {
    "OrderForm": {
        "cacheId": prop("orderFormId"),
        "items": Derived(lambda order_form, args, context: normalize_items(order_form.get("items"))),
        "value": Derived(lambda order_form, args, context: normalize_value(order_form)),
    },
}

queries: Dict[str, Entry] = {
    "orderForm": Direct("order_form"),
    "orders": Direct("orders"),
    "shipping": Direct("shipping", None),
}

mutations: Dict[str, Entry] = {
    "addItem": Derived(add_item),

    "addOrderFormPaymentToken": http_resolver(HttpDescriptor(
        data=lambda args: require(args, "paymentToken"),
        enable_cookies=True,
        headers=with_auth_token(json_headers),
        method="PUT",
        url=paths.order_form_payment_token,
    )),

    "cancelOrder": Direct("cancel_order", ("orderFormId", "reason")),

    "createPaymentSession": http_resolver(HttpDescriptor(
        enable_cookies=True,
        headers=with_auth_token(json_headers),
        method="POST",
        secure=True,
        url=paths.gateway_payment_session,
    )),

    "createPaymentTokens": http_resolver(HttpDescriptor(
        data=lambda args: require(args, "payments"),
        enable_cookies=True,
        headers=with_auth_token(json_headers),
        method="POST",
        url=paths.gateway_tokenize_payment,
    )),

    "setOrderFormCustomData": Direct(
        "set_order_form_custom_data", ("orderFormId", "appId", "field", "value")
    ),
    "updateItems": Direct("update_items", ("orderFormId", "items")),
    "updateOrderFormIgnoreProfile": Direct(
        "update_order_form_ignore_profile", ("orderFormId", "ignoreProfileData")
    ),
    "updateOrderFormPayment": Direct("update_order_form_payment", ("orderFormId", "payments")),
    "updateOrderFormProfile": Direct("update_order_form_profile", ("orderFormId", "fields")),
    # TODO: confirm with product whether shipping should post to the shippingData
    # attachment instead of sharing the clientProfileData call
    "updateOrderFormShipping": Direct("update_order_form_profile", ("orderFormId", "address")),
}
