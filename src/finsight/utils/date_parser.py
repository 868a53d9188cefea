"""Date and month parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

MonthLike = Union[str, date]


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(value: MonthLike) -> date:
    """Parse a month key into the first day of that calendar month.

    Args:
        value: "YYYY-MM" string, or a date/datetime inside the month

    Returns:
        Date of the first day of the month

    Raises:
        ValueError: If the month key is malformed or out of range
    """
    if isinstance(value, datetime):
        return value.date().replace(day=1)
    if isinstance(value, date):
        return value.replace(day=1)
    if not isinstance(value, str):
        raise ValueError(f"Could not parse month {value!r}: expected YYYY-MM")

    match = MONTH_KEY_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Could not parse month '{value}': expected YYYY-MM")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Could not parse month '{value}': month must be 01-12")
    return date(year, month, 1)


def month_key(value: date) -> str:
    """Format a date as its canonical YYYY-MM month key."""
    return value.strftime("%Y-%m")


def month_label(value: date) -> str:
    """Format a date as a short month label (e.g., 'Jun 2024')."""
    return value.strftime("%b %Y")


def shift_month(month_start: date, months: int) -> date:
    """Return the first day of the month `months` away from month_start."""
    return month_start.replace(day=1) + relativedelta(months=months)


def month_of(value: object) -> Optional[date]:
    """Return the first day of the calendar month containing value.

    Accepts dates, datetimes and ISO 8601 strings. Anything else, including
    strings that do not parse, yields None.
    """
    if isinstance(value, datetime):
        return value.date().replace(day=1)
    if isinstance(value, date):
        return value.replace(day=1)
    if isinstance(value, str) and value.strip():
        try:
            return date_parser.isoparse(value.strip()).date().replace(day=1)
        except (ValueError, OverflowError):
            return None
    return None


def get_month_range(value: MonthLike) -> tuple[date, date]:
    """Get the first and last day of a calendar month.

    Args:
        value: "YYYY-MM" string or a date inside the month

    Returns:
        Tuple of (start_date, end_date) for the month
    """
    start = parse_month(value)
    end = shift_month(start, 1) - timedelta(days=1)
    return (start, end)


def parse_timestamp(value: object) -> Optional[datetime]:
    """Return value as a datetime, parsing ISO 8601 strings.

    Plain dates become midnight of that day. Anything unparseable yields None.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            return date_parser.isoparse(value.strip())
        except (ValueError, OverflowError):
            return None
    return None
