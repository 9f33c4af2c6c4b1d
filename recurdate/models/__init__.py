"""Data models for recurdate."""

from recurdate.models.recurrence import (
    MonthlyPattern,
    Ordinal,
    RecurrenceFrequency,
    RecurrenceRule,
    Weekday,
)

__all__ = [
    "MonthlyPattern",
    "Ordinal",
    "RecurrenceFrequency",
    "RecurrenceRule",
    "Weekday",
]
