# storegraph/resolvers/units.py
"""
Currency unit conversion between the checkout API and schema consumers.

The checkout API collapses the decimal point into the integer part
(12.34 is sent as 1234), while the catalog side of the schema works
with floats. Everything that leaves through an OrderForm field has to
be converted exactly once; converting twice corrupts the value.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

PRICE_FIELDS = ("price", "listPrice", "sellingPrice")


def to_decimal(scaled: Optional[int]) -> Optional[float]:
    """Move the decimal point two places left: 1234 -> 12.34."""
    if scaled is None:
        return None
    return scaled / 100


def normalize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(item)
    for key in PRICE_FIELDS:
        if key in out:
            out[key] = to_decimal(out[key])
    return out


def normalize_items(items: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    """Same length, same order; only the three price fields change."""
    if items is None:
        return None
    return [normalize_item(item) for item in items]


def normalize_value(order_form: Dict[str, Any]) -> Optional[float]:
    return to_decimal(order_form.get("value"))
