# services/discount_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional

from models.customer import GUEST, REGULAR, VIP
from models.order import item_field, int_field, order_items
from services.membership_service import resolve_tier
from services.pricing_service import line_total, subtotal

logger = logging.getLogger("pricing.discounts")

# Volume discount schedule: tier -> {qty threshold: percent off the line}.
# The highest threshold met applies; thresholds never combine.
VOLUME_DISCOUNTS: Mapping[str, Mapping[int, int]] = MappingProxyType({
    GUEST: MappingProxyType({12: 5, 24: 10}),
    REGULAR: MappingProxyType({12: 8, 24: 12}),
    VIP: MappingProxyType({12: 5, 24: 10}),
})


def _volume_rate(qty: int, schedule: Mapping[int, int]) -> int:
    # percent for the highest threshold reached, 0 below the lowest
    met = [threshold for threshold in schedule if qty >= threshold]
    if not met:
        return 0
    return schedule[max(met)]


def volume_discount(order: Any, profile: Any = None) -> int:
    """
    Sum of per-item volume discounts for the customer's tier.

    Each item gets floor(line total x rate); an unknown or absent tier
    uses the guest schedule.
    """
    tier = resolve_tier(profile, VOLUME_DISCOUNTS)
    schedule = VOLUME_DISCOUNTS[tier]

    total = 0
    for it in order_items(order):
        pct = _volume_rate(int_field(it, "qty"), schedule)
        if pct:
            total += max(0, line_total(it) * pct // 100)
    return total


class CouponRule(ABC):
    # Abstract base class for coupon behaviours.
    # Each rule looks at the whole order and returns a discount in cents.

    @abstractmethod
    def apply(self, order: Any) -> int:
        pass


class PierogiBogoCoupon(CouponRule):
    """
    Buy one six-pack, get one half price.

    Six-packs (qty exactly pack_size) are grouped by filling; an empty
    filling counts as no filling. The first filling, in the order the
    fillings appear, that has two or more six-packs gets half off its
    cheapest six-pack. Six-packs of different fillings never pair up.
    """

    def __init__(self, pack_size: int = 6):
        self.pack_size = pack_size

    def apply(self, order):
        by_filling: dict[Any, list[int]] = {}
        for it in order_items(order):
            if int_field(it, "qty") == self.pack_size:
                filling = item_field(it, "filling") or None
                try:
                    hash(filling)
                except TypeError:
                    filling = None
                by_filling.setdefault(filling, []).append(line_total(it))

        for filling, lines in by_filling.items():
            if len(lines) >= 2:
                cheapest = min(lines)
                logger.debug(f"BOGO matched {len(lines)} x {filling!r} six-packs")
                return max(0, cheapest // 2)
        return 0


class MinimumSpendCoupon(CouponRule):
    # Percent off the whole subtotal once it reaches a minimum spend.
    # e.g. MinimumSpendCoupon(2000, 10) means "10% off orders of $20+".

    def __init__(self, minimum_cents: int, percent: int):
        self.minimum_cents = minimum_cents
        self.percent = percent

    def apply(self, order):
        amount = subtotal(order)
        if amount >= self.minimum_cents:
            return amount * self.percent // 100
        return 0


COUPONS: Mapping[str, CouponRule] = MappingProxyType({
    "PIEROGI-BOGO": PierogiBogoCoupon(pack_size=6),
    "FIRST10": MinimumSpendCoupon(minimum_cents=2000, percent=10),
})


def coupon_discount(
    code: Optional[str],
    order: Any,
    registry: Mapping[str, CouponRule] = COUPONS,
) -> int:
    # Discount from a single coupon code; unknown codes are worth 0.
    if order is None or not isinstance(item_field(order, "items"), (list, tuple)):
        return 0

    rule = registry.get(code) if isinstance(code, str) else None
    if rule is None:
        logger.debug(f"coupon {code!r} not recognised, no discount")
        return 0
    return max(0, rule.apply(order))


def discounts(order: Any, profile: Any = None, coupon_code: Optional[str] = None) -> int:
    """
    Total discount in cents for an order.

    Volume discounts and at most one coupon are independent and additive.
    The result is never negative.
    """
    total = volume_discount(order, profile)
    if coupon_code:
        total += coupon_discount(coupon_code, order)
    logger.debug(f"discount {total} (coupon={coupon_code!r})")
    return total
