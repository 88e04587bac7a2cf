"""Calendar-aligned monthly and weekly rollups."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from food_journal.domain.insights import DaySummary, MonthlyLogs, WeeklySummary
from food_journal.domain.journal import DAYS_PER_WEEK, DailyEntry
from food_journal.services.projection import empty_values, index_by_day, project_entry

# date.weekday(): Monday is 0, Sunday is 6
_SUNDAY = 6


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month."""
    _, days_in_month = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, days_in_month)


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Sunday and Saturday of the week containing a day."""
    week_start = day - timedelta(days=(day.weekday() - _SUNDAY + 7) % 7)
    return week_start, week_start + timedelta(days=DAYS_PER_WEEK - 1)


def monthly_rollup(
    year: int, month: int, entries: Iterable[DailyEntry]
) -> MonthlyLogs:
    """Return one summary per day of the month, with None for missing days."""
    first, last = month_bounds(year, month)
    by_day = index_by_day(entries)
    days = []
    for offset in range((last - first).days + 1):
        day = first + timedelta(days=offset)
        entry = by_day.get(day)
        if entry is None:
            days.append(
                DaySummary(
                    day=day, omad_compliant=None, alcohol_consumed=None, weight=None
                )
            )
            continue
        days.append(
            DaySummary(
                day=day,
                omad_compliant=entry.omad_compliant,
                alcohol_consumed=entry.alcohol_consumed,
                weight=entry.weight,
            )
        )
    return MonthlyLogs(year=year, month=month, days=days)


def weekly_rollup(day: date, entries: Iterable[DailyEntry]) -> WeeklySummary:
    """Return the seven days of the week containing a day, zero-filled."""
    week_start, week_end = week_bounds(day)
    by_day = index_by_day(entries)
    days = []
    for offset in range(DAYS_PER_WEEK):
        current = week_start + timedelta(days=offset)
        entry = by_day.get(current)
        days.append(project_entry(entry) if entry else empty_values(current))
    return WeeklySummary(week_start=week_start, week_end=week_end, days=days)
