import pytest

from order_status import (
    OrderStatus, STATUS_MESSAGES, describe_items, describe_order_status, order_items,
)


def test_table_covers_every_status():
    assert set(STATUS_MESSAGES) == {s.value for s in OrderStatus}
    assert len(STATUS_MESSAGES) == 9


@pytest.mark.parametrize("status", list(OrderStatus))
def test_every_status_has_text(status):
    message = describe_order_status(status.value, [{"name": "Classic Red Roses"}])
    assert message.title
    assert message.body
    assert '"Classic Red Roses"' in message.body
    assert message.title != "Order Update"


def test_pure_and_repeatable():
    items = [{"name": "Tulips"}, {"name": "Card"}]
    assert describe_order_status("Shipped", items) == describe_order_status("Shipped", items)


def test_enum_and_string_agree():
    items = [{"name": "Tulips"}]
    assert describe_order_status(OrderStatus.OUT_FOR_DELIVERY, items) == describe_order_status("Out for Delivery", items)


def test_pending_message():
    message = describe_order_status("Pending", [{"name": "Sunflower Sunshine"}])
    assert message.title == "Order Received"
    assert message.body == 'Awaiting confirmation for "Sunflower Sunshine".'
    assert message.icon == "clock-outline"
    assert message.color == "#FF9800"


def test_additional_items_suffix():
    items = [{"name": "Tulips"}, {"name": "Card"}, {"name": "Chocolates"}]
    message = describe_order_status("Delivered", items)
    assert message.body == 'Your order for "Tulips" (+2 more) has been delivered. Enjoy!'


def test_single_item_has_no_suffix():
    assert describe_items([{"name": "Tulips"}]) == '"Tulips"'


@pytest.mark.parametrize("status", ["UnknownStatus", "", None, 42, ["Pending"]])
def test_unknown_status_falls_back(status):
    message = describe_order_status(status, [])
    assert message.title == "Order Update"
    assert message.body == 'Status of your order for "your order" has been updated.'
    assert message.icon == "information-outline"
    assert message.color == "#757575"


def test_missing_item_name_uses_fallback():
    assert describe_items([{"price": 10}]) == '"your order"'
    assert describe_items(None) == '"your order"'


def test_order_items_prefers_items_then_product():
    assert order_items({"items": [{"name": "A"}], "product": {"name": "B"}}) == [{"name": "A"}]
    assert order_items({"product": {"name": "B"}}) == [{"name": "B"}]
    assert order_items({}) == []
