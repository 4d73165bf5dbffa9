# storegraph/resolvers/attribution.py
"""
Marketing attribution (UTM) reconciliation between the order form and
the shopper's session segment.

The session is the source of truth: when the two disagree, the
session's values are written onto the order form before the cart
changes, so analytics attribute the activity to the right campaign.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

# order form key -> session segment key
TRACKED_FIELDS = (
    ("utmSource", "utm_source"),
    ("utmCampaign", "utm_campaign"),
    ("utmiCampaign", "utmi_campaign"),
)


def is_divergent(
    order_attribution: Optional[Dict[str, Any]],
    segment_data: Dict[str, Any],
) -> bool:
    """
    True when any tracked field differs. Absent fields count as None and
    comparison is strict ("" is not None, no case folding).
    """
    order_attribution = order_attribution or {}
    return any(
        order_attribution.get(order_key) != segment_data.get(segment_key)
        for order_key, segment_key in TRACKED_FIELDS
    )


def merge_attribution(
    order_attribution: Optional[Dict[str, Any]],
    segment_data: Dict[str, Any],
) -> Dict[str, Any]:
    """Shallow overlay: untracked order fields survive, tracked ones come from the session."""
    merged = dict(order_attribution or {})
    for order_key, segment_key in TRACKED_FIELDS:
        merged[order_key] = segment_data.get(segment_key)
    return merged
