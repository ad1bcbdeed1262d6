"""Date window helpers for registry queries and card display."""

import re
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from .models import DateWindow

DEFAULT_WINDOW_MONTHS = 3

_COMPACT_DATE = re.compile(r"^\d{8}$")
_DOTTED_DATE = re.compile(r"^(\d{4})\.(\d{2})\.(\d{2})$")


def format_api_date(value: date) -> str:
    """Format a calendar date as the registry's YYYYMMDD string."""
    return value.strftime("%Y%m%d")


def resolve_date_window(
    start: Optional[str],
    end: Optional[str],
    today: Optional[date] = None,
    months: int = DEFAULT_WINDOW_MONTHS,
) -> DateWindow:
    """
    Resolve the registry query window.

    Args:
        start: Explicit start date (YYYYMMDD)
        end: Explicit end date (YYYYMMDD)
        today: Reference date, defaults to the local current date
        months: Half-width of the default window in months

    Returns:
        The explicit pair unchanged when both bounds are given, otherwise
        [today - months, today + months]
    """
    if start and end:
        return DateWindow(start=start, end=end)

    today = today or date.today()
    return DateWindow(
        start=format_api_date(today - relativedelta(months=months)),
        end=format_api_date(today + relativedelta(months=months)),
    )


def compact_date(value: Optional[str]) -> str:
    """Strip the dots from a registry date (2024.03.01 -> 20240301)."""
    return (value or "").replace(".", "")


def format_display_date(value: Optional[str]) -> str:
    """Format a registry date for display as YYYY.MM.DD."""
    if not value:
        return "날짜 미정"

    if _DOTTED_DATE.match(value):
        return value

    if _COMPACT_DATE.match(value):
        return f"{value[:4]}.{value[4:6]}.{value[6:]}"

    return "날짜 미정"
