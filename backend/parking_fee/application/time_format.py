"""Timestamp parsing and display helpers used around fee quotes."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from parking_fee.domain.fee import InvalidTimestampError

DEFAULT_TIMEZONE = "Asia/Bangkok"


def parse_timestamp(value: Union[str, datetime, None]) -> datetime:
    """
    Turn a backend timestamp into an aware datetime.

    Accepts ISO-8601 strings with a ``Z`` suffix, an explicit offset or no
    offset at all. Values without an offset are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not value or not str(value).strip():
            raise InvalidTimestampError("Timestamp is missing")
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidTimestampError(f"Invalid ISO-8601 timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {name}") from exc


def format_time(instant: datetime, tz: str = DEFAULT_TIMEZONE) -> str:
    """Long form, e.g. ``January 5, 2025, 02:30:15 PM``."""
    local = parse_timestamp(instant).astimezone(get_zone(tz))
    return f"{local:%B} {local.day}, {local:%Y, %I:%M:%S %p}"


def format_short_time(instant: datetime, tz: str = DEFAULT_TIMEZONE) -> str:
    local = parse_timestamp(instant).astimezone(get_zone(tz))
    return f"{local:%I:%M %p}"


def format_fee(amount: float, symbol: str = "฿") -> str:
    if float(amount).is_integer():
        return f"{symbol}{int(amount)}"
    return f"{symbol}{amount:.2f}"
