"""Date manipulation utilities"""

from datetime import date, datetime

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_calendar_day(value: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(earlier: date, later: date) -> int:
    """Whole days from earlier to later, truncated (same day -> 0)"""
    return (to_calendar_day(later) - to_calendar_day(earlier)).days


def format_day(value: date) -> str:
    """Format as 'Jan 10, 2024'"""
    return f"{_MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"


def format_month(value: date) -> str:
    """Format as 'Jan 2024'"""
    return f"{_MONTH_ABBR[value.month - 1]} {value.year}"


def month_key(value: date) -> str:
    """Zero-padded 'YYYY-MM' key; sorts chronologically as a string"""
    return f"{value.year:04d}-{value.month:02d}"
