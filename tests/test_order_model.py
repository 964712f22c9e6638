import dataclasses

import pytest

from models.customer import CustomerProfile, DeliveryContext
from models.order import Order, OrderItem, build_order, int_field, item_field, order_items


def test_item_field_reads_both_key_styles():
    assert item_field({"unitPriceCents": 500}, "unit_price_cents") == 500
    assert item_field({"unit_price_cents": 400, "unitPriceCents": 500}, "unit_price_cents") == 400
    assert item_field({"addOns": ["sour-cream"]}, "add_ons") == ["sour-cream"]
    assert item_field({}, "filling", "potato") == "potato"


def test_int_field_rejects_non_integers():
    assert int_field({"qty": 6}, "qty") == 6
    assert int_field({"qty": 6.0}, "qty") == 0
    assert int_field({"qty": "6"}, "qty") == 0
    assert int_field({"qty": False}, "qty") == 0
    assert int_field(None, "qty") == 0


def test_order_items_tolerates_bad_shapes():
    assert order_items(None) == []
    assert order_items({"items": "x"}) == []
    assert order_items({"items": ({"qty": 1},)}) == [{"qty": 1}]


def test_build_order_from_json_shape():
    order = build_order([
        {"kind": "hot", "sku": "P6-POTATO", "title": "Potato 6", "filling": "potato",
         "qty": 6, "unitPriceCents": 1000, "addOns": ["sour-cream", "sour-cream"]},
        {"sku": "P12-SAUER", "qty": 12},
    ])
    assert order.items[0] == OrderItem("hot", "P6-POTATO", "Potato 6", "potato", 6, 1000,
                                       frozenset({"sour-cream"}))
    assert order.items[1].kind == "frozen"
    assert order.items[1].unit_price_cents == 0
    assert order.items[1].filling is None


def test_models_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        OrderItem("hot", "P6", "t", "potato", 6, 100).qty = 12
    with pytest.raises(dataclasses.FrozenInstanceError):
        Order().items = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        CustomerProfile().tier = "vip"


def test_context_defaults():
    assert CustomerProfile().tier == "guest"
    assert DeliveryContext() == DeliveryContext(zone="local", rush=False)
