# services/pricing_service.py

from __future__ import annotations
import logging
from typing import Any

from models.order import int_field, order_items

logger = logging.getLogger("pricing.subtotal")


def line_total(item: Any) -> int:
    # unit price x quantity; a missing or non-integer field makes it 0
    return int_field(item, "unit_price_cents") * int_field(item, "qty")


def subtotal(order: Any) -> int:
    """
    Order subtotal in cents: sum of line totals over all items.

    Negative unit prices are taken as given, but the result is
    clamped at 0 so a subtotal is never negative.
    """
    amount = sum(line_total(it) for it in order_items(order))
    if amount < 0:
        logger.debug(f"subtotal {amount} is negative, clamped to 0")
        return 0
    return amount
