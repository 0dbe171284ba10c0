from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from order_status import OrderStatus

CANCELLATION_WINDOW = timedelta(minutes=10)
CANCELLABLE_STATUSES = {OrderStatus.PENDING.value, OrderStatus.PROCESSING.value}

CANCELLATION_REASONS = [
    "Changed my mind",
    "Found a cheaper option",
    "Order took too long",
    "Wrong item selected",
]
OTHER_REASON = "Other"


def _get(order: Any, name: str) -> Any:
    if isinstance(order, dict):
        return order.get(name)
    return getattr(order, name, None)


def _as_utc(moment: datetime) -> datetime:
    # Mongo hands back naive UTC datetimes
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def is_cancellable(order: Any, now: datetime) -> bool:
    """True while the order is Pending/Processing and younger than the cancellation window."""
    status = _get(order, "status")
    if isinstance(status, OrderStatus):
        status = status.value
    if status not in CANCELLABLE_STATUSES:
        return False
    placed_at = _get(order, "timestamp")
    if not isinstance(placed_at, datetime) or not isinstance(now, datetime):
        return False
    return _as_utc(now) - _as_utc(placed_at) < CANCELLATION_WINDOW


def resolve_cancellation_reason(selected: Optional[str], custom: Optional[str] = None) -> str:
    if selected == OTHER_REASON:
        reason = (custom or "").strip()
        if not reason:
            raise ValueError("Please provide your custom reason for cancellation.")
        return reason
    if selected not in CANCELLATION_REASONS:
        raise ValueError("Please select a reason for cancelling your order.")
    return selected


def cancellation_notice(order_id: str, reason: str) -> str:
    return f"Order #{str(order_id)[:6].upper()} was cancelled. Reason: {reason}"


def cancellable_filter(now: datetime) -> dict:
    """Mongo filter fragment matching orders `is_cancellable` would accept at `now`."""
    # BSON dates carry no zone; compare as naive UTC
    cutoff = (_as_utc(now) - CANCELLATION_WINDOW).replace(tzinfo=None)
    return {"status": {"$in": sorted(CANCELLABLE_STATUSES)}, "timestamp": {"$gt": cutoff}}
