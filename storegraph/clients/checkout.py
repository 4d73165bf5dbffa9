# storegraph/clients/checkout.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .. import paths
from .http import HttpClient

# sections the backend must include when returning an order form
ORDER_FORM_SECTIONS = [
    "items",
    "totalizers",
    "clientProfileData",
    "shippingData",
    "paymentData",
    "sellers",
    "messages",
    "marketingData",
    "clientPreferencesData",
    "storePreferencesData",
    "giftRegistryData",
    "ratesAndBenefitsData",
    "openTextField",
    "commercialConditionData",
    "customData",
]


class CheckoutClient(HttpClient):
    """Order-form operations against the checkout API. Prices come back as scaled integers."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        account: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(client, headers)
        self.account = account

    async def order_form(self) -> Dict[str, Any]:
        return await self.post(
            paths.order_form(self.account),
            data={"expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def orders(self) -> List[Dict[str, Any]]:
        return await self.get(paths.orders(self.account))

    async def shipping(self, simulation: Dict[str, Any]) -> Dict[str, Any]:
        return await self.post(paths.shipping_simulation(self.account), data=simulation)

    async def add_item(self, order_form_id: str, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        return await self.post(
            paths.order_form_items(self.account, order_form_id),
            data={"orderItems": items, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def update_order_form_marketing_data(
        self, order_form_id: str, marketing_data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.post(
            paths.order_form_attachment(self.account, order_form_id, "marketingData"),
            data={**marketing_data, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def cancel_order(self, order_form_id: str, reason: str) -> Any:
        return await self.post(
            paths.cancel_order(self.account, order_form_id),
            data={"reason": reason},
        )

    async def set_order_form_custom_data(
        self, order_form_id: str, app_id: str, field: str, value: Any
    ) -> Dict[str, Any]:
        return await self.put(
            paths.order_form_custom_data(self.account, order_form_id, app_id, field),
            data={"value": value, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def update_items(self, order_form_id: str, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        return await self.post(
            paths.order_form_update_items(self.account, order_form_id),
            data={"orderItems": items, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def update_order_form_ignore_profile(
        self, order_form_id: str, ignore_profile_data: bool
    ) -> Dict[str, Any]:
        return await self.patch(
            paths.order_form_ignore_profile(self.account, order_form_id),
            data={"ignoreProfileData": ignore_profile_data},
        )

    async def update_order_form_payment(
        self, order_form_id: str, payments: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        return await self.post(
            paths.order_form_attachment(self.account, order_form_id, "paymentData"),
            data={"payments": payments, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )

    async def update_order_form_profile(
        self, order_form_id: str, fields: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.post(
            paths.order_form_attachment(self.account, order_form_id, "clientProfileData"),
            data={**fields, "expectedOrderFormSections": ORDER_FORM_SECTIONS},
        )
