"""Alcohol and weight correlation."""

from collections.abc import Iterable
from decimal import Decimal

from food_journal.domain.insights import AlcoholCorrelation
from food_journal.domain.journal import DailyEntry


def alcohol_correlation(
    window_days: int, entries: Iterable[DailyEntry]
) -> AlcoholCorrelation:
    """Compare average weight on alcohol days against alcohol-free days.

    Entries missing either a weight or an alcohol flag are ignored entirely.
    """
    with_alcohol: list[Decimal] = []
    without_alcohol: list[Decimal] = []
    for entry in entries:
        if entry.weight is None or entry.alcohol_consumed is None:
            continue
        if entry.alcohol_consumed:
            with_alcohol.append(entry.weight)
        else:
            without_alcohol.append(entry.weight)

    if not with_alcohol or not without_alcohol:
        return AlcoholCorrelation(
            window_days=window_days,
            days_with_alcohol=len(with_alcohol),
            days_without_alcohol=len(without_alcohol),
            avg_with=None,
            avg_without=None,
            difference=None,
            has_sufficient_data=False,
        )

    avg_with = _mean(with_alcohol)
    avg_without = _mean(without_alcohol)
    return AlcoholCorrelation(
        window_days=window_days,
        days_with_alcohol=len(with_alcohol),
        days_without_alcohol=len(without_alcohol),
        avg_with=avg_with,
        avg_without=avg_without,
        difference=avg_with - avg_without,
        has_sufficient_data=True,
    )


def _mean(values: list[Decimal]) -> Decimal:
    return sum(values, Decimal(0)) / len(values)
