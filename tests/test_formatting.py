"""Tests for text formatting helpers."""

from datetime import date, datetime, timezone

import pytest

from business_planner.utils.formatting import (
    bullets,
    capitalize_key,
    epoch_millis,
    format_amount,
    format_date,
    format_datetime,
    format_money,
    format_plain,
    humanize_key,
    labelled,
)


@pytest.mark.parametrize("value,expected", [
    (115000.0, "115,000"),
    (132249.99999999999, "132,250"),
    (10000 / 12, "833.333"),
    (0.5, "0.5"),
    (-2500.5, "-2,500.5"),
    (0, "0"),
    (-0.0001, "0"),
])
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_plain():
    assert format_plain(15.0) == "15"
    assert format_plain(12.5) == "12.5"


def test_format_money_fallback():
    assert format_money(250000) == "$250,000"
    assert format_money(None) == "To be determined"
    assert format_money(0, default="n/a") == "n/a"


def test_bullets_and_labelled():
    assert bullets(["a", "b"]) == "• a\n• b"
    assert labelled(["GDPR"], "Required") == "- **GDPR**: Required"


def test_key_helpers():
    assert capitalize_key("grossMargin") == "GrossMargin"
    assert humanize_key("customerAcquisitionCost") == "Customer Acquisition Cost"
    assert humanize_key("seo") == "Seo"


def test_format_date():
    assert format_date(date(2025, 3, 7)) == "3/7/2025"


@pytest.mark.parametrize("moment,expected", [
    (datetime(2025, 3, 7, 14, 5, 9), "3/7/2025, 2:05:09 PM"),
    (datetime(2025, 12, 31, 0, 0, 1), "12/31/2025, 12:00:01 AM"),
    (datetime(2025, 1, 1, 12, 30, 0), "1/1/2025, 12:30:00 PM"),
])
def test_format_datetime(moment, expected):
    assert format_datetime(moment) == expected


def test_epoch_millis():
    moment = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    assert epoch_millis(moment) == 1735787045678
