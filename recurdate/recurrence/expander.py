"""Expand a RecurrenceRule into concrete calendar dates.

One cursor walks from the start date toward the end date, one period per loop
step. Each frequency decides what (if anything) a period emits and how far the
cursor moves. The loop is bounded by an iteration cap so no rule can run long.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from recurdate import config
from recurdate.models.recurrence import MonthlyPattern, RecurrenceFrequency, RecurrenceRule
from recurdate.recurrence.calendar_math import (
    add_days,
    add_months,
    add_weeks,
    add_years,
    date_if_exists,
    format_iso_date,
    weekday_index,
)
from recurdate.recurrence.nth_weekday import nth_weekday_of_month

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpansionResult:
    """Result of expanding a rule."""

    dates: List[date] = field(default_factory=list)
    truncated: bool = False  # iteration cap hit before the end date was reached
    iterations: int = 0


def _in_range(d: date, start: date, end: date) -> bool:
    return start <= d <= end


def _emit_period(rule: RecurrenceRule, current: date, end: date) -> List[date]:
    """Dates produced by the period the cursor currently sits in."""
    start = rule.start_date
    freq = rule.frequency

    if freq == RecurrenceFrequency.DAILY:
        return [current]

    if freq == RecurrenceFrequency.WEEKLY:
        if not rule.selected_weekdays:
            return [current]
        # Offsets from the Sunday on/before the cursor; that Sunday may precede
        # start_date (or date.min), so each day is placed relative to the cursor.
        offset = weekday_index(current)
        out: List[date] = []
        for day in rule.selected_weekdays:
            try:
                candidate = add_days(current, int(day) - offset)
            except OverflowError:
                continue
            if _in_range(candidate, start, end):
                out.append(candidate)
        return out

    if freq == RecurrenceFrequency.MONTHLY:
        if rule.monthly_pattern == MonthlyPattern.NTH_WEEKDAY:
            found = nth_weekday_of_month(current.year, current.month, rule.ordinal, rule.weekday)
        else:
            # Months without the start's day-of-month are skipped, not clamped.
            found = date_if_exists(current.year, current.month, start.day)
        if found is None:
            logger.debug(f"No occurrence in {current.year}-{current.month:02d}; skipping")
            return []
        return [found] if _in_range(found, start, end) else []

    if freq == RecurrenceFrequency.YEARLY:
        found = date_if_exists(current.year, start.month, start.day)
        if found is None:
            logger.debug(f"No {start.month:02d}-{start.day:02d} in {current.year}; skipping")
            return []
        return [found] if _in_range(found, start, end) else []

    return []


def _advance(rule: RecurrenceRule, current: date) -> Optional[date]:
    """Move the cursor one interval forward; None if it leaves the representable range."""
    n = rule.interval
    try:
        if rule.frequency == RecurrenceFrequency.DAILY:
            return add_days(current, n)
        if rule.frequency == RecurrenceFrequency.WEEKLY:
            return add_weeks(current, n)
        if rule.frequency == RecurrenceFrequency.MONTHLY:
            return add_months(current, n)
        return add_years(current, n)
    except OverflowError:
        return None


def expand_rule(rule: RecurrenceRule, *, max_iterations: Optional[int] = None) -> ExpansionResult:
    """Expand a rule into its sorted occurrence dates.

    Args:
        rule: Validated recurrence rule (never mutated)
        max_iterations: Loop step cap (defaults to the configured cap, 1000 unless overridden)

    Returns:
        ExpansionResult with ascending dates and a truncated flag
    """
    cap = config.MAX_ITERATIONS if max_iterations is None else max_iterations
    if cap < 1:
        raise ValueError("max_iterations must be >= 1")

    start = rule.start_date
    end = rule.effective_end_date

    dates: List[date] = []
    current: Optional[date] = start
    iterations = 0

    while current is not None and current <= end and iterations < cap:
        iterations += 1
        dates.extend(_emit_period(rule, current, end))
        current = _advance(rule, current)

    truncated = current is not None and current <= end
    if truncated:
        logger.warning(
            f"Expansion of {rule.frequency.value} rule starting {format_iso_date(start)} "
            f"stopped at the {cap}-step cap before {format_iso_date(end)}"
        )

    dates.sort()
    logger.debug(f"Expanded {rule.frequency.value} rule into {len(dates)} dates in {iterations} steps")
    return ExpansionResult(dates=dates, truncated=truncated, iterations=iterations)


def expand(rule: RecurrenceRule, *, max_iterations: Optional[int] = None) -> List[date]:
    """Expand a rule and return only the dates."""
    return expand_rule(rule, max_iterations=max_iterations).dates
