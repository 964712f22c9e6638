# services/tax_service.py

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from models.order import FROZEN, HOT, item_field, order_items
from services.pricing_service import line_total

logger = logging.getLogger("pricing.tax")


class TaxRateTable:
    """
    Tax rate lookup keyed by item kind.

    Rates are per-mille integers (80 means 8%). Kinds missing from the
    table are untaxed.
        rates = {
            "hot":    80,   # prepared food, 8%
            "frozen": 0     # groceries
        }
    """

    def __init__(self, rates: Mapping[str, int]):
        self.rates = MappingProxyType(dict(rates))

    def lookup(self, kind: str) -> int:
        return self.rates.get(kind, 0)


DEFAULT_TAX_RATES = TaxRateTable({HOT: 80, FROZEN: 0})


def tax(
    order: Any,
    delivery: Any = None,
    known_subtotal: Optional[int] = None,
    rates: TaxRateTable = DEFAULT_TAX_RATES,
) -> int:
    """
    Tax owed in cents.

    Only hot items are taxed: floor(line total x rate / 1000) per item.
    Frozen items pay nothing whatever the rate table says. The delivery
    context and subtotal hint are accepted so every pricing function
    shares a call shape; neither changes the amount.
    """
    total = 0
    for it in order_items(order):
        kind = item_field(it, "kind")
        if kind != HOT:
            continue
        per_mille = rates.lookup(kind)
        total += max(0, line_total(it) * per_mille // 1000)

    logger.debug(f"tax {total}")
    return total
