"""Weight trend series with carry-forward gap filling."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from food_journal.domain.insights import TrendPoint, WeightTrends
from food_journal.domain.journal import DailyEntry
from food_journal.services.projection import index_by_day


def trend_window(today: date, window_days: int) -> tuple[date, date]:
    """Return the inclusive date range of a trailing window."""
    return today - timedelta(days=window_days - 1), today


def build_trends(
    today: date, window_days: int, entries: Iterable[DailyEntry]
) -> WeightTrends:
    """Build a dense day-by-day weight series ending today.

    Days without a weight repeat the last weight seen inside the window and
    are flagged as carried forward. Carry-forward state never crosses the
    window start.
    """
    start, end = trend_window(today, window_days)
    in_window = [
        entry for entry in entries if start <= entry.day <= end and not entry.is_blank()
    ]
    if not in_window:
        return WeightTrends(points=[], total_days_logged=0, weight_change=None)

    by_day = index_by_day(in_window)
    points: list[TrendPoint] = []
    last_known_weight: Decimal | None = None
    first_weight: Decimal | None = None
    last_weight: Decimal | None = None

    for offset in range(window_days):
        day = start + timedelta(days=offset)
        entry = by_day.get(day)
        if entry is not None and entry.weight is not None:
            points.append(
                TrendPoint(
                    day=day,
                    weight=entry.weight,
                    is_carry_forward=False,
                    alcohol_consumed=entry.alcohol_consumed,
                )
            )
            last_known_weight = entry.weight
            last_weight = entry.weight
            if first_weight is None:
                first_weight = entry.weight
        else:
            points.append(
                TrendPoint(
                    day=day,
                    weight=last_known_weight,
                    is_carry_forward=last_known_weight is not None,
                    alcohol_consumed=entry.alcohol_consumed if entry else None,
                )
            )

    weight_change = (
        last_weight - first_weight
        if first_weight is not None and last_weight is not None
        else None
    )
    total_days_logged = sum(1 for entry in in_window if entry.weight is not None)
    return WeightTrends(
        points=points,
        total_days_logged=total_days_logged,
        weight_change=weight_change,
    )
