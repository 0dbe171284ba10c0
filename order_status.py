"""
Order status lifecycle and the customer-facing message for each status.

`describe_order_status` feeds both the notifications feed and the order
tracking view, so the two always show the same text for an order.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    CONFIRMED = "Confirmed"
    READY = "Ready"
    SHIPPED = "Shipped"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    REFUNDED = "Refunded"


FALLBACK_ITEM_NAME = "your order"


class StatusMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    icon: str
    color: str


# status -> (title, body template, icon, color)
STATUS_MESSAGES: Dict[str, Tuple[str, str, str, str]] = {
    "Pending": ("Order Received", "Awaiting confirmation for {desc}.", "clock-outline", "#FF9800"),
    "Confirmed": ("Order Confirmed", "We're preparing {desc}.", "check-circle-outline", "#4CAF50"),
    "Processing": ("Flowers in Progress", "Our florists are crafting {desc}.", "flower", "#E91E63"),
    "Ready": ("Ready for You!", "Your order for {desc} is ready!", "package-variant", "#2196F3"),
    "Out for Delivery": ("On The Way!", "Your order for {desc} is out for delivery!",
                         "truck-delivery-outline", "#9C27B0"),
    "Shipped": ("Items Shipped", "Your order for {desc} has been dispatched.", "truck-fast-outline", "#3F51B5"),
    "Delivered": ("Delivery Complete!", "Your order for {desc} has been delivered. Enjoy!",
                  "package-variant-closed-check", "#009688"),
    "Cancelled": ("Order Cancelled", "Your order for {desc} has been cancelled.", "close-circle-outline", "#F44336"),
    "Refunded": ("Refund Processed", "Your refund for {desc} has been processed.", "cash-refund", "#607D8B"),
}

DEFAULT_MESSAGE = ("Order Update", "Status of your order for {desc} has been updated.", "information-outline",
                   "#757575")


def _item_name(item: Any) -> Optional[str]:
    if isinstance(item, dict):
        return item.get("name")
    return getattr(item, "name", None)


def describe_items(items: Optional[List[Any]]) -> str:
    items = items or []
    first_name = (_item_name(items[0]) if items else None) or FALLBACK_ITEM_NAME
    additional = len(items) - 1
    desc = f'"{first_name}"'
    if additional > 0:
        desc += f" (+{additional} more)"
    return desc


def describe_order_status(status: Any, items: Optional[List[Any]]) -> StatusMessage:
    key = status.value if isinstance(status, OrderStatus) else status
    entry = STATUS_MESSAGES.get(key) if isinstance(key, str) else None
    title, template, icon, color = entry or DEFAULT_MESSAGE
    return StatusMessage(title=title, body=template.format(desc=describe_items(items)), icon=icon, color=color)


def order_items(order: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Line items of a stored order: its `items` list, else its single `product`."""
    items = order.get("items")
    if items:
        return list(items)
    product = order.get("product")
    return [product] if product else []
