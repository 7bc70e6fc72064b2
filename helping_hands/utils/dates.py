"""Date utilities."""

import calendar
from datetime import date, datetime, timezone


def utc_today() -> date:
    """Return the current calendar date in UTC.

    Returns:
        date: Today's date in UTC.
    """
    return datetime.now(timezone.utc).date()


def month_bounds(day: date) -> tuple[date, date]:
    """Get the first and last calendar day of the month containing a date.

    Args:
        day (date): Any day of the month.

    Returns:
        tuple[date, date]: The first and last day of that month.
    """
    last_day: int = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)
