"""
Checkout pricing for the flower shop.

Totals are computed in full float precision; only `format_peso` rounds, and
only for display.
"""
import math
from typing import Any, Iterable, Optional

from pydantic import BaseModel

NEW_USER_DISCOUNT_RATE = 0.05
STANDARD_DELIVERY = "Standard"
STANDARD_DELIVERY_FEE = 5.00
EXPRESS_DELIVERY_FEE = 10.00
DELIVERY_OPTIONS = ["Standard", "Same-Day Delivery", "Pre-Order Exclusive", "Next-Day Specials"]
PESO_SIGN = "₱"


class OrderTotals(BaseModel):
    subtotal: float
    original_subtotal: float
    delivery_fee: float
    new_user_discount: float
    voucher_discount: float
    total: float


def to_number(value: Any) -> float:
    """Coerce a stored price/quantity to float; None, NaN and junk become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def new_user_price(price: Any) -> float:
    return to_number(price) * (1 - NEW_USER_DISCOUNT_RATE)


def delivery_fee_for(option: Optional[str]) -> float:
    # Every non-standard option is a flat express rate
    if option == STANDARD_DELIVERY:
        return STANDARD_DELIVERY_FEE
    return EXPRESS_DELIVERY_FEE


def compute_order_totals(items: Iterable[Any], delivery_option: Optional[str], is_new_user: bool,
                         voucher: Any = None) -> OrderTotals:
    """
    Aggregate a cart into checkout totals.

    Each item may be a dict or an object exposing `price`, `original_price`
    and `quantity`. `original_price` falls back to `price`. New users pay
    95% of the original price on every line.

    `voucher.free_shipping` is not applied to the delivery fee, and the total
    is not clamped at zero.
    """
    original_subtotal = 0.0
    subtotal = 0.0
    for item in items or []:
        quantity = to_number(_field(item, "quantity"))
        original = _field(item, "original_price")
        if original is None:
            original = _field(item, "price")
        original = to_number(original)
        price = new_user_price(original) if is_new_user else original
        original_subtotal += original * quantity
        subtotal += price * quantity

    new_user_discount = original_subtotal - subtotal if is_new_user else 0.0
    delivery_fee = delivery_fee_for(delivery_option)
    voucher_discount = 0.0
    if voucher is not None:
        voucher_discount = subtotal * (to_number(_field(voucher, "discount")) / 100)
    total = subtotal + delivery_fee - voucher_discount

    return OrderTotals(
        subtotal=subtotal,
        original_subtotal=original_subtotal,
        delivery_fee=delivery_fee,
        new_user_discount=new_user_discount,
        voucher_discount=voucher_discount,
        total=total,
    )


def format_peso(amount: Any) -> str:
    return f"{PESO_SIGN}{to_number(amount):,.2f}"
