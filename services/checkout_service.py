# services/checkout_service.py

from __future__ import annotations
import logging
from typing import Any, Optional

from models.order import OrderTotals
from services.delivery_service import DEFAULT_DELIVERY_FEES, DeliveryFeeSchedule, delivery_fee
from services.discount_service import discounts
from services.pricing_service import subtotal
from services.tax_service import DEFAULT_TAX_RATES, TaxRateTable, tax

logger = logging.getLogger("pricing.checkout")


class CheckoutService:
    # Prices a whole order with the tax and delivery tables it was built with.

    def __init__(
        self,
        tax_rates: TaxRateTable = DEFAULT_TAX_RATES,
        delivery_fees: DeliveryFeeSchedule = DEFAULT_DELIVERY_FEES,
    ):
        self.tax_rates = tax_rates
        self.delivery_fees = delivery_fees

    @classmethod
    def from_repository(cls, repo) -> CheckoutService:
        # Build from the tables in the pricing configuration repository.
        return cls(
            tax_rates=TaxRateTable(repo.get_tax_rates()),
            delivery_fees=DeliveryFeeSchedule(repo.get_delivery_fees()),
        )

    def quote(
        self,
        order: Any,
        profile: Any = None,
        delivery: Any = None,
        coupon_code: Optional[str] = None,
    ) -> OrderTotals:
        """
        Full price breakdown for an order.

        total = subtotal - discount + tax + delivery fee, where the
        discount is clamped to the subtotal so the total never goes
        negative. The clamped discount is what the breakdown reports.
        """
        sub = subtotal(order)
        disc = min(discounts(order, profile, coupon_code), sub)
        tax_cents = tax(order, delivery, sub, rates=self.tax_rates)
        fee = delivery_fee(order, delivery, profile, schedule=self.delivery_fees)

        totals = OrderTotals(
            subtotal=sub,
            discount=disc,
            tax=tax_cents,
            delivery_fee=fee,
            total=sub - disc + tax_cents + fee,
        )
        logger.info(
            f"Quote: subtotal={totals.subtotal} discount={totals.discount} "
            f"tax={totals.tax} delivery={totals.delivery_fee} total={totals.total}"
        )
        return totals


def total(
    order: Any,
    profile: Any = None,
    delivery: Any = None,
    coupon_code: Optional[str] = None,
    tax_rates: TaxRateTable = DEFAULT_TAX_RATES,
    delivery_fees: DeliveryFeeSchedule = DEFAULT_DELIVERY_FEES,
) -> int:
    # Amount owed in cents; see CheckoutService.quote for the breakdown.
    return CheckoutService(tax_rates, delivery_fees).quote(
        order, profile, delivery, coupon_code
    ).total
