# services/delivery_service.py

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Mapping

from models.customer import LOCAL, OUTER

logger = logging.getLogger("pricing.delivery")


class DeliveryFeeSchedule:
    """
    Flat per-order delivery fee by zone and rush flag.

    fees maps zone -> {"standard": cents, "rush": cents}. Zones missing
    from the schedule are charged like the fallback zone.
    """

    def __init__(self, fees: Mapping[str, Mapping[str, int]], fallback_zone: str = LOCAL):
        self.fees = MappingProxyType({
            zone: MappingProxyType(dict(row)) for zone, row in fees.items()
        })
        self.fallback_zone = fallback_zone

    def fee(self, zone: str, rush: bool) -> int:
        row = self.fees.get(zone) if isinstance(zone, str) else None
        if row is None:
            row = self.fees.get(self.fallback_zone, {})
        return row.get("rush" if rush else "standard", 0)


DEFAULT_DELIVERY_FEES = DeliveryFeeSchedule({
    LOCAL: {"standard": 299, "rush": 599},
    OUTER: {"standard": 499, "rush": 899},
})


def delivery_context(delivery: Any) -> tuple[str, bool]:
    # (zone, rush) of a DeliveryContext or dict; dicts may say "express".
    if delivery is None:
        return LOCAL, False
    if isinstance(delivery, Mapping):
        zone = delivery.get("zone", LOCAL)
        rush = delivery.get("rush", delivery.get("express", False))
    else:
        zone = getattr(delivery, "zone", LOCAL)
        rush = getattr(delivery, "rush", False)
    return zone, rush is True


def delivery_fee(
    order: Any,
    delivery: Any = None,
    profile: Any = None,
    schedule: DeliveryFeeSchedule = DEFAULT_DELIVERY_FEES,
) -> int:
    # One fee per order: the items and the customer do not change it.
    zone, rush = delivery_context(delivery)
    fee = max(0, schedule.fee(zone, rush))
    logger.debug(f"delivery fee {fee} (zone={zone!r}, rush={rush})")
    return fee
