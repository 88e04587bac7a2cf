"""Insights service combining range reads with journal aggregations."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from food_journal.domain.errors import InvalidWindowError
from food_journal.domain.insights import (
    AlcoholCorrelation,
    MonthlyLogs,
    StreakSummary,
    WeeklySummary,
    WeightTrends,
)
from food_journal.domain.journal import DailyEntry, EntryValues
from food_journal.services.correlation import alcohol_correlation
from food_journal.services.projection import empty_values, project_entry
from food_journal.services.rollups import (
    month_bounds,
    monthly_rollup,
    week_bounds,
    weekly_rollup,
)
from food_journal.services.streaks import calculate_streak, streak_window
from food_journal.services.trends import build_trends, trend_window

MAX_WINDOW_DAYS = 365
DEFAULT_TREND_DAYS = 30
DEFAULT_CORRELATION_DAYS = 90
DECEMBER = 12
MAX_YEAR = 9999

_logger = logging.getLogger(__name__)


class DailyEntryRepository(Protocol):
    """Read interface for stored daily entries."""

    def get(self, user_id: str, day: date) -> DailyEntry | None:
        """Return the entry for a single day, if stored."""

    def get_range(self, user_id: str, start: date, end: date) -> list[DailyEntry]:
        """Return entries between two dates inclusive, ordered by date."""


@dataclass
class InsightsService:
    """Service for streaks, trends, correlations and calendar rollups."""

    repository: DailyEntryRepository
    default_trend_days: int = DEFAULT_TREND_DAYS
    default_correlation_days: int = DEFAULT_CORRELATION_DAYS
    debug: bool = False

    def get_day(self, user_id: str, day: date) -> EntryValues:
        """Return a day's values, empty when nothing was logged."""
        try:
            entry = self.repository.get(user_id, day)
        except Exception:
            _logger.warning("Daily entry read failed: user_id=%s day=%s", user_id, day)
            raise
        return project_entry(entry) if entry else empty_values(day)

    def get_streak(self, user_id: str, today: date) -> StreakSummary:
        """Return the compliance streak ending today."""
        start, end = streak_window(today)
        entries = self._read_range(user_id, start, end)
        return calculate_streak(today, entries)

    def get_weight_trends(
        self, user_id: str, today: date, days: int | None = None
    ) -> WeightTrends:
        """Return the gap-filled weight series for the trailing window."""
        window_days = self.default_trend_days if days is None else days
        _validate_window_days(window_days)
        start, end = trend_window(today, window_days)
        entries = self._read_range(user_id, start, end)
        return build_trends(today, window_days, entries)

    def get_alcohol_correlation(
        self, user_id: str, today: date, days: int | None = None
    ) -> AlcoholCorrelation:
        """Return weight averages split by alcohol consumption."""
        window_days = self.default_correlation_days if days is None else days
        _validate_window_days(window_days)
        start, end = trend_window(today, window_days)
        entries = self._read_range(user_id, start, end)
        return alcohol_correlation(window_days, entries)

    def get_monthly_logs(self, user_id: str, year: int, month: int) -> MonthlyLogs:
        """Return a calendar view of every day in a month."""
        _validate_month(year, month)
        start, end = month_bounds(year, month)
        entries = self._read_range(user_id, start, end)
        return monthly_rollup(year, month, entries)

    def get_weekly_summary(self, user_id: str, day: date) -> WeeklySummary:
        """Return the Sunday to Saturday week containing a day."""
        start, end = week_bounds(day)
        entries = self._read_range(user_id, start, end)
        return weekly_rollup(day, entries)

    def _read_range(self, user_id: str, start: date, end: date) -> list[DailyEntry]:
        try:
            entries = self.repository.get_range(user_id, start, end)
        except Exception:
            _logger.warning(
                "Daily entry range read failed: user_id=%s start=%s end=%s",
                user_id,
                start,
                end,
            )
            raise
        if self.debug:
            _logger.info(
                "Daily entry range read: user_id=%s start=%s end=%s rows=%s",
                user_id,
                start,
                end,
                len(entries),
            )
        return entries


def _validate_window_days(days: int) -> None:
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidWindowError(f"Window must be a whole number of days: {days!r}")
    if days < 1 or days > MAX_WINDOW_DAYS:
        raise InvalidWindowError(
            f"Window must be between 1 and {MAX_WINDOW_DAYS} days: {days}"
        )


def _validate_month(year: int, month: int) -> None:
    if not 1 <= month <= DECEMBER:
        raise InvalidWindowError(f"Month must be between 1 and {DECEMBER}: {month}")
    if not 1 <= year <= MAX_YEAR:
        raise InvalidWindowError(f"Year must be between 1 and {MAX_YEAR}: {year}")
