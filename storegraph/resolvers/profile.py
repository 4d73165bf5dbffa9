# storegraph/resolvers/profile.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .registry import Derived, Entry, prop

if TYPE_CHECKING:
    from ..context import ResolverContext


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        # epoch milliseconds
        dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        dt = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(value: Any) -> str:
    """ISO-8601 in UTC with millisecond precision: 2000-01-31T00:00:00.000Z"""
    dt = _parse_datetime(value)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def birth_date(profile: Dict[str, Any]) -> Any:
    value = profile.get("birthDate")
    return format_timestamp(value) if value else value


def pick_custom_fields(names: str, profile: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    The backend may hand back customFields as the comma-separated list of
    profile keys that were requested; expand it into key/value pairs read
    off the profile itself.
    """
    keys = [name.strip() for name in names.split(",") if name.strip()]
    return [{"key": key, "value": profile.get(key)} for key in keys]


def custom_fields(profile: Dict[str, Any]) -> Optional[Any]:
    raw = profile.get("customFields")
    if isinstance(raw, str):
        return pick_custom_fields(raw, profile)
    return raw


async def addresses(profile: Dict[str, Any], args: Dict[str, Any], context: "ResolverContext") -> Any:
    return await context.profile.get_addresses(profile)


async def payments(profile: Dict[str, Any], args: Dict[str, Any], context: "ResolverContext") -> Any:
    return await context.profile.get_payments(profile)


async def password_last_update(profile: Dict[str, Any], args: Dict[str, Any], context: "ResolverContext") -> Any:
    return await context.profile.get_password_last_update()


field_resolvers: Dict[str, Dict[str, Entry]] = {
    "Address": {
        "cacheId": prop("addressName"),
        "id": prop("addressName"),
    },
    "PaymentProfile": {
        "cacheId": prop("id"),
    },
    "Profile": {
        "address": Derived(addresses),
        "addresses": Derived(addresses),
        "birthDate": Derived(lambda profile, args, context: birth_date(profile)),
        "cacheId": prop("email"),
        "customFields": Derived(lambda profile, args, context: custom_fields(profile)),
        "passwordLastUpdate": Derived(password_last_update),
        "payments": Derived(payments),
    },
    "ProfileCustomField": {
        "cacheId": prop("key"),
    },
}
