from datetime import datetime, timedelta, timezone

import pytest

from cancellation import (
    CANCELLATION_REASONS, cancellable_filter, cancellation_notice, is_cancellable, resolve_cancellation_reason,
)
from order_status import OrderStatus

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def order(status="Pending", age=timedelta(0)):
    return {"status": status, "timestamp": NOW - age}


def test_inside_window():
    assert is_cancellable(order(age=timedelta(minutes=9, seconds=59)), NOW)


def test_after_window():
    assert not is_cancellable(order(age=timedelta(minutes=10, seconds=1)), NOW)


def test_exact_boundary_is_not_cancellable():
    assert not is_cancellable(order(age=timedelta(minutes=10)), NOW)


def test_processing_is_cancellable():
    assert is_cancellable(order(status=OrderStatus.PROCESSING), NOW)


@pytest.mark.parametrize("status", ["Shipped", "Confirmed", "Delivered", "Cancelled", "Bogus", None])
def test_other_statuses_not_cancellable(status):
    assert not is_cancellable(order(status=status), NOW)


def test_missing_timestamp():
    assert not is_cancellable({"status": "Pending"}, NOW)
    assert not is_cancellable({"status": "Pending", "timestamp": "yesterday"}, NOW)


def test_naive_timestamps_are_utc():
    naive = {"status": "Pending", "timestamp": datetime(2024, 5, 1, 11, 55)}
    assert is_cancellable(naive, NOW)
    assert not is_cancellable(naive, NOW + timedelta(minutes=6))


def test_accepts_objects():
    class Stored:
        status = "Pending"
        timestamp = NOW

    assert is_cancellable(Stored(), NOW)


def test_reason_from_list():
    for reason in CANCELLATION_REASONS:
        assert resolve_cancellation_reason(reason) == reason
    assert len(CANCELLATION_REASONS) == 4


def test_other_reason_must_be_filled():
    assert resolve_cancellation_reason("Other", "  Wrong address  ") == "Wrong address"
    with pytest.raises(ValueError):
        resolve_cancellation_reason("Other", "   ")
    with pytest.raises(ValueError):
        resolve_cancellation_reason("Other")


def test_unknown_reason_rejected():
    with pytest.raises(ValueError):
        resolve_cancellation_reason(None)
    with pytest.raises(ValueError):
        resolve_cancellation_reason("Because")


def test_notice_text():
    assert cancellation_notice("65f0abcdef", "Changed my mind") == \
        "Order #65F0AB was cancelled. Reason: Changed my mind"


def test_cancellable_filter_matches_window():
    filt = cancellable_filter(NOW)
    assert filt["status"]["$in"] == ["Pending", "Processing"]
    assert filt["timestamp"]["$gt"] == datetime(2024, 5, 1, 11, 50)
    assert filt["timestamp"]["$gt"].tzinfo is None
