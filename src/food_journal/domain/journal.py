"""Domain models for daily journal entries."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

DAIRY_TO_PROTEIN_FACTOR = 2
WATER_TARGET_SEGMENTS = 8
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class CategoryInfo:
    """Static description of a portion unit category."""

    key: str
    display_name: str
    daily_target: int
    is_max: bool
    portion_size: str


class UnitCategory(Enum):
    """Portion unit categories (single source of truth for targets)."""

    PROTEINS = CategoryInfo("proteins", "Proteins", 15, False, "Palm-sized portion")
    VEGETABLES = CategoryInfo(
        "vegetables", "Vegetables", 5, False, "Fist-sized portion"
    )
    FRUITS = CategoryInfo("fruits", "Fruits", 2, False, "Fist-sized portion")
    STARCHES = CategoryInfo("starches", "Starches", 2, False, "Cupped-hand portion")
    FATS = CategoryInfo("fats", "Fats", 4, False, "Thumb-sized portion")
    # Dairy is a ceiling, not a goal.
    DAIRY = CategoryInfo("dairy", "Dairy", 3, True, "Cupped-hand portion")

    @property
    def daily_target(self) -> int:
        """Return the daily target (or maximum) for the category."""
        return self.value.daily_target

    @property
    def weekly_target(self) -> int:
        """Return the daily target scaled to a full week."""
        return self.value.daily_target * DAYS_PER_WEEK


@dataclass(frozen=True)
class DailyEntry:
    """A user's stored journal row for one calendar day."""

    user_id: str
    day: date
    proteins: int = 0
    vegetables: int = 0
    fruits: int = 0
    starches: int = 0
    fats: int = 0
    dairy: int = 0
    water_segments: int = 0
    weight: Decimal | None = None
    omad_compliant: bool | None = None
    alcohol_consumed: bool | None = None

    def is_blank(self) -> bool:
        """Return True when the row carries no logged data at all."""
        return (
            self.weight is None
            and self.omad_compliant is None
            and self.alcohol_consumed is None
            and self.water_segments == 0
            and not any(getattr(self, c.value.key) for c in UnitCategory)
        )


@dataclass(frozen=True)
class EntryValues:
    """Public values of a day, as seen by every aggregation."""

    day: date
    proteins: int
    vegetables: int
    fruits: int
    starches: int
    fats: int
    dairy: int
    water_segments: int
    weight: Decimal | None
    omad_compliant: bool | None
    alcohol_consumed: bool | None

    def units(self, category: UnitCategory) -> int:
        """Return the unit count logged for a category."""
        return getattr(self, category.value.key)

    def is_over_target(self, category: UnitCategory) -> bool:
        """Return True when the category count exceeds its daily target."""
        return self.units(category) > category.daily_target
