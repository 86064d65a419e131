from __future__ import annotations
"""
Output record composition for the segment summary.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any

# Reserved for period-over-period comparison; always null for now
DELTA_FIELDS = (
    "sessionsDelta",
    "ordersDelta",
    "salesDelta",
    "conversionRateDelta",
    "labels",
    "series",
)


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round like a dashboard would (2.5 -> 3, 199.995 -> 200.0).
    Goes through the repr of the float so 199.996 is not read as 199.99599...
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def build_output_record(shopify: Dict[str, Any], ga: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge the Shopify order aggregate and the GA4 summary.

    Args:
        shopify: {"orders": int, "sales": float}
        ga: {"sessions": float, "conversionRate": float fraction}

    Returns:
        OutputRecord dict in display order
    """
    record = {
        "sessions": int(round_half_up(ga["sessions"])),
        "orders": shopify["orders"],
        "sales": round_half_up(shopify["sales"], 2),
        "conversionRate": round_half_up(ga["conversionRate"] * 100, 2),
    }
    for field in DELTA_FIELDS:
        record[field] = None
    return record
