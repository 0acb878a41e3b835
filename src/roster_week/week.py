"""
Resolution of ISO calendar weeks to their Monday and Sunday dates.
"""

from datetime import date, timedelta
from typing import Tuple

from .errors import InvalidWeekError

# Upper bound on days scanned from January 1st
MAX_SCAN_DAYS = 371


def resolve_week(year: int, iso_week: int) -> Tuple[date, date]:
    """
    Find the Monday and Sunday of an ISO week.

    Scans forward from January 1st of `year` one week at a time until a
    date in the requested ISO week is found, then steps back to Monday.

    Args:
        year: Calendar year
        iso_week: ISO 8601 week number

    Returns:
        Tuple of (monday, sunday)

    Raises:
        InvalidWeekError: If `year` has no ISO week `iso_week`
    """
    start = date(year, 1, 1)
    seeker = start

    while seeker.isocalendar()[:2] != (year, iso_week):
        seeker += timedelta(days=7)
        if seeker.year != year or (seeker - start).days > MAX_SCAN_DAYS:
            raise InvalidWeekError(f"Year {year} has no ISO week {iso_week}")

    monday = seeker - timedelta(days=seeker.weekday())
    sunday = monday + timedelta(days=6)
    return monday, sunday


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in a year (52 or 53)."""
    # December 28th always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]
