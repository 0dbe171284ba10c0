import math

import pytest

from pricing import compute_order_totals, delivery_fee_for, format_peso, new_user_price, to_number
from schemas import Voucher

CART = [{"original_price": 500, "quantity": 2}]


def test_new_user_scenario():
    totals = compute_order_totals(CART, "Same-Day Delivery", True)
    assert totals.original_subtotal == 1000
    assert totals.subtotal == pytest.approx(950)
    assert totals.new_user_discount == pytest.approx(50)
    assert totals.delivery_fee == 10
    assert totals.voucher_discount == 0
    assert totals.total == pytest.approx(960)


def test_new_user_with_voucher():
    totals = compute_order_totals(CART, "Same-Day Delivery", True, {"discount": 10})
    assert totals.voucher_discount == pytest.approx(95)
    assert totals.total == pytest.approx(865)


def test_returning_customer_pays_original_price():
    items = [{"price": 120.5, "quantity": 3}, {"original_price": 80, "price": 76, "quantity": 1}]
    totals = compute_order_totals(items, "Standard", False)
    assert totals.subtotal == totals.original_subtotal == pytest.approx(441.5)
    assert totals.new_user_discount == 0


@pytest.mark.parametrize("items", [
    [{"original_price": 999.99, "quantity": 1}],
    [{"price": 13.37, "quantity": 7}, {"price": 250, "quantity": 2}],
    [],
])
def test_new_user_subtotal_is_95_percent(items):
    totals = compute_order_totals(items, "Standard", True)
    assert totals.subtotal == pytest.approx(totals.original_subtotal * 0.95)
    assert totals.new_user_discount == totals.original_subtotal - totals.subtotal


@pytest.mark.parametrize("option,fee", [
    ("Standard", 5.0),
    ("Same-Day Delivery", 10.0),
    ("Pre-Order Exclusive", 10.0),
    ("Next-Day Specials", 10.0),
])
def test_delivery_fee(option, fee):
    assert delivery_fee_for(option) == fee
    assert compute_order_totals(CART, option, False).delivery_fee == fee


def test_total_is_unrounded_sum():
    totals = compute_order_totals([{"price": 33.333, "quantity": 3}], "Standard", True, {"discount": 12.5})
    assert totals.total == totals.subtotal + totals.delivery_fee - totals.voucher_discount


def test_total_can_go_negative():
    totals = compute_order_totals([{"price": 10, "quantity": 1}], "Standard", False, {"discount": 300})
    assert totals.voucher_discount == 30
    assert totals.total == -15


def test_free_shipping_voucher_keeps_delivery_fee():
    voucher = Voucher(code="FREESHIP", discount=0, free_shipping=True)
    totals = compute_order_totals(CART, "Standard", False, voucher)
    assert totals.delivery_fee == 5.0
    assert totals.total == 1005.0


def test_malformed_numbers_count_as_zero():
    items = [
        {"price": "abc", "quantity": 2},
        {"price": float("nan"), "quantity": 1},
        {"price": None, "quantity": 4},
        {"price": 100, "quantity": None},
        {"price": "50", "quantity": "2"},
    ]
    totals = compute_order_totals(items, "Standard", False, {"discount": "oops"})
    assert totals.subtotal == 100
    assert totals.voucher_discount == 0
    assert totals.total == 105
    assert not math.isnan(totals.total)


def test_accepts_objects():
    class Line:
        price = 200
        original_price = None
        quantity = 2

    assert compute_order_totals([Line()], "Standard", False).subtotal == 400


def test_helpers():
    assert new_user_price(200) == pytest.approx(190)
    assert to_number(True) == 0
    assert to_number(float("inf")) == 0


@pytest.mark.parametrize("amount,expected", [
    (960, "₱960.00"),
    (1234.5, "₱1,234.50"),
    (0.005, "₱0.01"),
    (None, "₱0.00"),
    ("n/a", "₱0.00"),
    (float("nan"), "₱0.00"),
])
def test_format_peso(amount, expected):
    assert format_peso(amount) == expected


def test_oversized_numbers_count_as_zero():
    totals = compute_order_totals([{"price": 10 ** 400, "quantity": 1}], "Standard", False)
    assert totals.subtotal == 0
    assert totals.total == 5.0
    assert format_peso(10 ** 400) == "₱0.00"
