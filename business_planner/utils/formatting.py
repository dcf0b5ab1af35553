"""
Text helpers shared by the report templates

Numbers follow en-US locale conventions: thousands separators and at most
three fraction digits, trailing zeros dropped ("132,250", "833.333").
"""

import math
import re
from datetime import date, datetime
from typing import Iterable, Optional


def format_amount(value: float) -> str:
    """Format a number with grouping and up to 3 decimals

    Examples:
        format_amount(115000.0)   # "115,000"
        format_amount(10000 / 12) # "833.333"
        format_amount(-2500.5)    # "-2,500.5"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_plain(value: float) -> str:
    """Number as written inline, without grouping: 15.0 -> "15", 12.5 -> "12.5" """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_money(value: Optional[float], default: str = "To be determined") -> str:
    """Dollar amount, or the default phrase when no (or a zero) amount was given"""
    return f"${format_amount(value)}" if value else default


def bullets(items: Iterable[str], marker: str = "•") -> str:
    return "\n".join(f"{marker} {item}" for item in items)


def labelled(items: Iterable[str], note: str) -> str:
    """'- **item**: note' lines"""
    return "\n".join(f"- **{item}**: {note}" for item in items)


def capitalize_key(key: str) -> str:
    """grossMargin -> GrossMargin"""
    return key[:1].upper() + key[1:]


def humanize_key(key: str) -> str:
    """grossMargin -> Gross Margin"""
    return capitalize_key(key)[:1] + re.sub(r"([A-Z])", r" \1", key[1:])


def format_date(d: date) -> str:
    """en-US short date without zero padding: 3/7/2025"""
    return f"{d.month}/{d.day}/{d.year}"


def format_datetime(moment: datetime) -> str:
    """en-US date and 12-hour time: 3/7/2025, 2:05:09 PM"""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{format_date(moment)}, {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch (naive datetimes are local time)"""
    return int(moment.timestamp()) * 1000 + moment.microsecond // 1000
