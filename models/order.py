# models/order.py
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Iterable, Mapping, Optional

# Order model representing a customer order of packaged pierogi.
# Orders also arrive as plain JSON-shaped dicts, so the readers below
# accept either the dataclasses or mappings with camelCase keys.

HOT = "hot"
FROZEN = "frozen"

# attribute name -> key used in the JSON shape
_WIRE_KEYS = {
    "unit_price_cents": "unitPriceCents",
    "add_ons": "addOns",
}


@dataclass(frozen=True)
class OrderItem:
    kind: str
    sku: str
    title: str
    filling: Optional[str]
    qty: int
    unit_price_cents: int
    add_ons: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Order:
    items: tuple[OrderItem, ...] = ()


@dataclass(frozen=True)
class OrderTotals:
    # Breakdown of one priced order, all values in cents.
    subtotal: int
    discount: int
    tax: int
    delivery_fee: int
    total: int


def item_field(item: Any, name: str, default: Any = None) -> Any:
    # Read a field from an OrderItem or from a dict in either key style.
    if isinstance(item, Mapping):
        if name in item:
            return item[name]
        return item.get(_WIRE_KEYS.get(name, name), default)
    return getattr(item, name, default)


def int_field(item: Any, name: str) -> int:
    """
    Integer value of a numeric field, or 0 when the field is missing
    or not an integer (bools are not quantities).
    """
    value = item_field(item, name)
    if isinstance(value, bool) or not isinstance(value, Integral):
        return 0
    return int(value)


def order_items(order: Any) -> list:
    """
    Items of an Order or of an order dict.

    A missing order, missing items or an items value that is not a
    list/tuple all read as an empty order.
    """
    if order is None:
        return []
    items = item_field(order, "items")
    if isinstance(items, (list, tuple)):
        return list(items)
    return []


def build_order(items: Iterable[Mapping[str, Any]]) -> Order:
    # Convert JSON-shaped item dicts into an immutable Order.
    return Order(items=tuple(
        OrderItem(
            kind=item_field(it, "kind", FROZEN),
            sku=item_field(it, "sku", ""),
            title=item_field(it, "title", ""),
            filling=item_field(it, "filling"),
            qty=int_field(it, "qty"),
            unit_price_cents=int_field(it, "unit_price_cents"),
            add_ons=frozenset(item_field(it, "add_ons") or ()),
        )
        for it in items
    ))
