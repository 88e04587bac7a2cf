"""Result models for journal insights."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from food_journal.domain.journal import (
    DAIRY_TO_PROTEIN_FACTOR,
    EntryValues,
    UnitCategory,
)


@dataclass(frozen=True)
class StreakSummary:
    """Current run of compliant days ending today."""

    length: int
    start_date: date | None


@dataclass(frozen=True)
class TrendPoint:
    """One day of the weight trend series."""

    day: date
    weight: Decimal | None
    is_carry_forward: bool
    alcohol_consumed: bool | None


@dataclass(frozen=True)
class WeightTrends:
    """Dense weight series for a window of days."""

    points: list[TrendPoint]
    total_days_logged: int
    weight_change: Decimal | None


@dataclass(frozen=True)
class AlcoholCorrelation:
    """Average weight on alcohol days versus alcohol-free days."""

    window_days: int
    days_with_alcohol: int
    days_without_alcohol: int
    avg_with: Decimal | None
    avg_without: Decimal | None
    difference: Decimal | None
    has_sufficient_data: bool


@dataclass(frozen=True)
class DaySummary:
    """Calendar view of a single day."""

    day: date
    omad_compliant: bool | None
    alcohol_consumed: bool | None
    weight: Decimal | None


@dataclass(frozen=True)
class MonthlyLogs:
    """Every day of a calendar month."""

    year: int
    month: int
    days: list[DaySummary]


@dataclass(frozen=True)
class WeeklySummary:
    """Sunday to Saturday rollup with portion totals."""

    week_start: date
    week_end: date
    days: list[EntryValues]

    def total(self, category: UnitCategory) -> int:
        return sum(day.units(category) for day in self.days)

    @staticmethod
    def weekly_target(category: UnitCategory) -> int:
        return category.weekly_target

    @property
    def total_proteins(self) -> int:
        return self.total(UnitCategory.PROTEINS)

    @property
    def total_vegetables(self) -> int:
        return self.total(UnitCategory.VEGETABLES)

    @property
    def total_fruits(self) -> int:
        return self.total(UnitCategory.FRUITS)

    @property
    def total_starches(self) -> int:
        return self.total(UnitCategory.STARCHES)

    @property
    def total_fats(self) -> int:
        return self.total(UnitCategory.FATS)

    @property
    def total_dairy(self) -> int:
        return self.total(UnitCategory.DAIRY)

    @property
    def total_water_segments(self) -> int:
        return sum(day.water_segments for day in self.days)

    @property
    def dairy_as_protein_equivalent(self) -> int:
        """Dairy expressed in protein units (1 dairy = 2 protein)."""
        return self.total_dairy * DAIRY_TO_PROTEIN_FACTOR
