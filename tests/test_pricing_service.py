from models.order import Order, OrderItem
from services.pricing_service import line_total, subtotal


def item(qty, price, kind="hot", filling="potato"):
    return {"kind": kind, "sku": "P6-POTATO", "title": "Pierogi", "filling": filling,
            "qty": qty, "unitPriceCents": price, "addOns": []}


def test_subtotal_sums_line_totals():
    order = {"items": [item(6, 1000), item(12, 500)]}
    assert subtotal(order) == 12000


def test_subtotal_of_dataclass_order():
    order = Order(items=(
        OrderItem("frozen", "P24-POTATO", "Potato 24", "potato", 24, 950),
        OrderItem("hot", "P6-SAUER", "Sauerkraut 6", "sauerkraut", 6, 1100, frozenset({"bacon-bits"})),
    ))
    assert subtotal(order) == 24 * 950 + 6 * 1100


def test_line_total():
    assert line_total(item(6, 1250)) == 7500


def test_subtotal_of_missing_or_empty_order_is_zero():
    assert subtotal(None) == 0
    assert subtotal({}) == 0
    assert subtotal({"items": []}) == 0
    assert subtotal(Order()) == 0


def test_subtotal_ignores_non_list_items():
    assert subtotal({"items": "P6-POTATO"}) == 0
    assert subtotal({"items": {"qty": 6, "unitPriceCents": 100}}) == 0


def test_malformed_items_contribute_nothing():
    order = {"items": [
        {"kind": "hot", "qty": 6},                         # no price
        {"kind": "hot", "unitPriceCents": 1000},            # no qty
        {"qty": "6", "unitPriceCents": 1000},               # qty not a number
        {"qty": True, "unitPriceCents": 1000},
        None,
        item(6, 1000),
    ]}
    assert subtotal(order) == 6000


def test_negative_subtotal_is_clamped_to_zero():
    assert subtotal({"items": [item(2, -100)]}) == 0
    # negative lines still offset positive ones
    assert subtotal({"items": [item(2, -100), item(1, 500)]}) == 300
