"""Compliance streak calculation."""

from collections.abc import Iterable
from datetime import date, timedelta

from food_journal.domain.insights import StreakSummary
from food_journal.domain.journal import DailyEntry
from food_journal.services.projection import index_by_day

STREAK_LOOKBACK_DAYS = 365


def streak_window(today: date) -> tuple[date, date]:
    """Return the inclusive date range examined for a streak."""
    return today - timedelta(days=STREAK_LOOKBACK_DAYS), today


def calculate_streak(today: date, entries: Iterable[DailyEntry]) -> StreakSummary:
    """Count consecutive compliant days walking back from today.

    The walk halts at the first day that is missing, has no compliance flag,
    or is explicitly non-compliant. Unlogged days are not skipped.
    """
    by_day = index_by_day(entries)
    length = 0
    start_date: date | None = None
    for offset in range(STREAK_LOOKBACK_DAYS + 1):
        day = today - timedelta(days=offset)
        entry = by_day.get(day)
        if entry is None or entry.omad_compliant is not True:
            break
        length += 1
        start_date = day
    return StreakSummary(length=length, start_date=start_date)
