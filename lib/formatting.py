"""
Display Formatting

Number and timestamp formatting shared by the report table, the summary
box and both exporters.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Union

Number = Union[Decimal, float, int]


def format_number(value: Number) -> str:
    """
    Format an amount with thousands separators and exactly two decimals.

    Example:
        format_number(Decimal("12345.678")) -> "12,345.68"
    """
    return f"{value:,.2f}"


def format_rate(rate: Number) -> str:
    """Format a tax rate as a plain number ("0.21", "1", "-0.05")."""
    if isinstance(rate, Decimal):
        # normalize() turns 0.210 into 0.21 but 100 into 1E+2
        normalized = rate.normalize()
        if normalized == normalized.to_integral_value():
            return str(normalized.quantize(Decimal(1)))
        return format(normalized, 'f')
    return f"{rate:g}"


def format_timestamp(ts: datetime) -> str:
    """
    Render an instant as a local date/time label, e.g. "3/7/2025, 2:05:09 PM".

    Naive datetimes are taken to be UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    local = ts.astimezone()

    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def to_iso_timestamp(ts: datetime) -> str:
    """Serialize an instant as ISO-8601 UTC with milliseconds ("2025-03-07T14:05:09.123Z")."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    utc = ts.astimezone(timezone.utc)
    return utc.strftime('%Y-%m-%dT%H:%M:%S.') + f"{utc.microsecond // 1000:03d}Z"


def from_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as written by to_iso_timestamp()."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts
