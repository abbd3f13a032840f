"""Unit Tests for display formatting."""

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from lib.formatting import (
    format_number,
    format_rate,
    format_timestamp,
    to_iso_timestamp,
    from_iso_timestamp,
)


class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (Decimal("7850"), "7,850.00"),
        (Decimal("12345.678"), "12,345.68"),
        (Decimal("-1500"), "-1,500.00"),
        (Decimal("0"), "0.00"),
        (Decimal("1234567.5"), "1,234,567.50"),
        (85000.0, "85,000.00"),
        (42, "42.00"),
    ])
    def test_grouping_and_two_decimals(self, value, expected):
        assert format_number(value) == expected


class TestFormatRate:

    @pytest.mark.parametrize("value,expected", [
        (Decimal("0.21"), "0.21"),
        (Decimal("0.2100"), "0.21"),
        (Decimal("1"), "1"),
        (Decimal("100"), "100"),
        (Decimal("0"), "0"),
        (0.35, "0.35"),
    ])
    def test_plain_number(self, value, expected):
        assert format_rate(value) == expected


class TestTimestamps:

    def test_local_label_shape(self, fixed_time):
        label = format_timestamp(fixed_time)

        assert re.fullmatch(r"\d{1,2}/\d{1,2}/\d{4}, \d{1,2}:\d{2}:\d{2} (AM|PM)", label)

    def test_local_label_uses_local_date(self, fixed_time):
        local = fixed_time.astimezone()

        assert format_timestamp(fixed_time).startswith(f"{local.month}/{local.day}/{local.year}, ")

    def test_naive_timestamp_is_utc(self, fixed_time):
        naive = fixed_time.replace(tzinfo=None)

        assert format_timestamp(naive) == format_timestamp(fixed_time)

    def test_iso_round_trip(self, fixed_time):
        text = to_iso_timestamp(fixed_time)

        assert text == "2025-03-07T14:05:09.123Z"
        assert from_iso_timestamp(text) == fixed_time

    def test_iso_converts_to_utc(self):
        ts = datetime(2025, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=-5)))

        assert to_iso_timestamp(ts) == "2025-01-01T14:00:00.000Z"
