"""Recurrence rule model for recurdate.

A RecurrenceRule is the single input to the expander. It is built once from user
input, validated on construction, and never mutated afterwards.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recurdate.models.constants import DEFAULT_RANGE_YEARS, MAX_INTERVAL, MIN_INTERVAL
from recurdate.recurrence.calendar_math import add_years


class RecurrenceFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class MonthlyPattern(str, Enum):
    """How a monthly rule picks its day."""

    DAY_OF_MONTH = "day_of_month"  # same day number as the start date
    NTH_WEEKDAY = "nth_weekday"  # e.g. "last Friday"


class Weekday(int, Enum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class Ordinal(int, Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    LAST = -1


class RecurrenceRule(BaseModel):
    """Recurrence configuration.

    Notes:
    - All dates are civil dates; no timezone is involved anywhere.
    - `selected_weekdays` only matters for weekly rules. Empty means "the start date's weekday".
    - `ordinal` and `weekday` only matter for monthly rules using the nth-weekday pattern.
    """

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: Optional[date] = Field(
        None, description="Last date (inclusive). Defaults to one year after start_date."
    )
    frequency: RecurrenceFrequency
    interval: int = Field(
        1, ge=MIN_INTERVAL, le=MAX_INTERVAL, description="Every N units (days/weeks/months/years)"
    )

    # Weekly specifics
    selected_weekdays: Tuple[Weekday, ...] = Field(
        default=(), description="For weekly recurrence: weekdays on which it occurs"
    )

    # Monthly specifics
    monthly_pattern: MonthlyPattern = MonthlyPattern.DAY_OF_MONTH
    ordinal: Ordinal = Ordinal.FIRST
    weekday: Weekday = Weekday.MONDAY

    @field_validator("end_date", mode="before")
    @classmethod
    def _blank_end_date(cls, v):
        # Date inputs submit "" when left empty
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator("end_date")
    @classmethod
    def _validate_end_date(cls, v, info):
        start = info.data.get("start_date")
        if v is not None and start is not None and v < start:
            raise ValueError("end_date must be >= start_date")
        return v

    @field_validator("selected_weekdays")
    @classmethod
    def _validate_selected_weekdays(cls, v):
        # Deduplicate but preserve order
        seen = set()
        out = []
        for day in v:
            if day not in seen:
                seen.add(day)
                out.append(day)
        return tuple(out)

    @property
    def effective_end_date(self) -> date:
        """End date used for expansion (explicit end, or start + 1 year)."""
        if self.end_date is not None:
            return self.end_date
        try:
            return add_years(self.start_date, DEFAULT_RANGE_YEARS)
        except OverflowError:
            return date.max
