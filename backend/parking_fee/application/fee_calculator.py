"""Parking fee rules: free period, then whole hours rounded up."""
from __future__ import annotations

import math
from datetime import datetime, timedelta

from parking_fee.domain.fee import FeeBreakdown, FeeConfig, NegativeDurationError

ONE_HOUR = timedelta(hours=1)


def compute_fee(entry: datetime, reference: datetime, config: FeeConfig) -> FeeBreakdown:
    """
    Price a stay from ``entry`` up to ``reference``.

    A stay that ends exactly on the free period boundary is still free. Past
    the boundary every started hour is charged in full.
    """
    if reference < entry:
        raise NegativeDurationError(
            f"Reference time {reference.isoformat()} is before entry time {entry.isoformat()}"
        )
    hours = (reference - entry) / ONE_HOUR

    if hours <= config.free_period_hours:
        return FeeBreakdown(hours=hours, fee=0, free_hour=True)

    billable_hours = math.ceil(hours - config.free_period_hours)
    fee = billable_hours * config.rate_per_hour
    return FeeBreakdown(hours=hours, fee=fee, free_hour=False, billable_hours=billable_hours)


def split_hours(hours: float) -> tuple[int, int]:
    """Split fractional hours into whole hours and minutes (0-59)."""
    if hours < 0:
        raise ValueError("Duration must be non-negative")
    whole = math.floor(hours)
    # half-minutes round up
    minutes = math.floor((hours - whole) * 60 + 0.5)
    if minutes == 60:
        whole += 1
        minutes = 0
    return whole, minutes


def format_duration(hours: float, hour_label: str = "hr", minute_label: str = "min") -> str:
    h, m = split_hours(hours)
    if h == 0:
        return f"{m} {minute_label}"
    if m == 0:
        return f"{h} {hour_label}"
    return f"{h} {hour_label} {m} {minute_label}"
