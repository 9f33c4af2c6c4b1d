"""Export RecurrenceRule to iCalendar RRULE strings (export-only)."""

from __future__ import annotations

from typing import List

from recurdate.models.recurrence import (
    MonthlyPattern,
    Ordinal,
    RecurrenceFrequency,
    RecurrenceRule,
    Weekday,
)


_WD_MAP: dict[Weekday, str] = {
    Weekday.SUNDAY: "SU",
    Weekday.MONDAY: "MO",
    Weekday.TUESDAY: "TU",
    Weekday.WEDNESDAY: "WE",
    Weekday.THURSDAY: "TH",
    Weekday.FRIDAY: "FR",
    Weekday.SATURDAY: "SA",
}


def rule_to_rrule(rule: RecurrenceRule) -> str:
    """Convert a rule to an RRULE (without the leading 'RRULE:' prefix).

    Weekly rules with selected days carry WKST=SU so interval weeks are counted
    Sunday-first, as the expander does.

    The export is an approximation where the expander's cursor drifts after a
    rolled-over month or year: a day-of-month rule past the 28th with interval > 1
    can shift month parity after a short month, and a Feb 29 yearly rule follows a
    Mar 1 cursor in common years. BYMONTHDAY/BYMONTH cannot express either, so the
    `dates` list from the expander stays authoritative.
    """
    parts: List[str] = []
    freq = {
        RecurrenceFrequency.DAILY: "DAILY",
        RecurrenceFrequency.WEEKLY: "WEEKLY",
        RecurrenceFrequency.MONTHLY: "MONTHLY",
        RecurrenceFrequency.YEARLY: "YEARLY",
    }[rule.frequency]
    parts.append(f"FREQ={freq}")
    if rule.interval != 1:
        parts.append(f"INTERVAL={rule.interval}")

    start = rule.start_date
    if rule.frequency == RecurrenceFrequency.WEEKLY and rule.selected_weekdays:
        parts.append("BYDAY=" + ",".join(_WD_MAP[d] for d in rule.selected_weekdays))
        parts.append("WKST=SU")
    elif rule.frequency == RecurrenceFrequency.MONTHLY:
        if rule.monthly_pattern == MonthlyPattern.NTH_WEEKDAY:
            prefix = "-1" if rule.ordinal == Ordinal.LAST else str(int(rule.ordinal))
            parts.append(f"BYDAY={prefix}{_WD_MAP[rule.weekday]}")
        else:
            parts.append(f"BYMONTHDAY={start.day}")
    elif rule.frequency == RecurrenceFrequency.YEARLY:
        parts.append(f"BYMONTH={start.month}")
        parts.append(f"BYMONTHDAY={start.day}")

    # UNTIL: date-only value, matching the civil-date expansion (no timezone drift).
    parts.append(f"UNTIL={rule.effective_end_date.strftime('%Y%m%d')}")
    return ";".join(parts)
