"""Civil-date arithmetic used by the recurrence expander.

All values are `datetime.date` (no time-of-day, no timezone), so there are no
daylight-saving artifacts. Month and year addition roll forward when the target
month is too short for the original day-of-month (Jan 31 + 1 month -> Mar 2 or 3);
they never clamp to the last valid day.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

ISO_DATE_FORMAT = "%Y-%m-%d"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def weekday_index(d: date) -> int:
    """Sunday-based weekday index (Sunday=0 ... Saturday=6)."""
    # Python isoweekday: Monday=1 ... Sunday=7
    return d.isoweekday() % 7


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def add_weeks(d: date, weeks: int) -> date:
    return add_days(d, weeks * 7)


def _rolled_date(year: int, month: int, day: int) -> date:
    """Build year/month/day, spilling excess days into the following month(s)."""
    if year < date.min.year or year > date.max.year:
        raise OverflowError(f"year {year} is out of range")
    return date(year, month, 1) + timedelta(days=day - 1)


def add_months(d: date, months: int) -> date:
    """Add calendar months, normalizing month overflow into the year."""
    total = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(total, 12)
    return _rolled_date(year, month0 + 1, d.day)


def add_years(d: date, years: int) -> date:
    """Add calendar years; Feb 29 lands on Mar 1 in non-leap years."""
    return _rolled_date(d.year + years, d.month, d.day)


def date_if_exists(year: int, month: int, day: int) -> date | None:
    """Return the date only if the month actually has that day."""
    if day < 1 or day > days_in_month(year, month):
        return None
    return date(year, month, day)


def parse_iso_date(value: str) -> date:
    """Parse a `YYYY-MM-DD` string into a civil date.

    The result carries no time-of-day, so it cannot shift across a day boundary
    the way a midnight timestamp in a local timezone can.
    """
    return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()


def format_iso_date(d: date) -> str:
    return d.strftime(ISO_DATE_FORMAT)
