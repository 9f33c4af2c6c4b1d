"""Resolve "the Nth <weekday> of a month" to a concrete date."""

from __future__ import annotations

from datetime import date
from typing import Optional

from recurdate.models.recurrence import Ordinal, Weekday
from recurdate.recurrence.calendar_math import days_in_month, weekday_index


def nth_weekday_of_month(year: int, month: int, ordinal: Ordinal, weekday: Weekday) -> Optional[date]:
    """Find the ordinal occurrence of `weekday` in the given month.

    Returns None when the month has fewer than `ordinal` occurrences of the weekday.
    Callers treat None as "skip this period", never as an error.
    """
    last_day = days_in_month(year, month)
    target = int(weekday)

    if ordinal == Ordinal.LAST:
        for day in range(last_day, 0, -1):
            candidate = date(year, month, day)
            if weekday_index(candidate) == target:
                return candidate
        return None

    count = 0
    for day in range(1, last_day + 1):
        candidate = date(year, month, day)
        if weekday_index(candidate) == target:
            count += 1
            if count == int(ordinal):
                return candidate
    return None
