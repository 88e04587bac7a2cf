"""Projection of stored rows into public day values."""

from collections.abc import Iterable
from datetime import date

from food_journal.domain.journal import DailyEntry, EntryValues


def project_entry(entry: DailyEntry) -> EntryValues:
    """Return the public values of a stored entry."""
    return EntryValues(
        day=entry.day,
        proteins=entry.proteins,
        vegetables=entry.vegetables,
        fruits=entry.fruits,
        starches=entry.starches,
        fats=entry.fats,
        dairy=entry.dairy,
        water_segments=entry.water_segments,
        weight=entry.weight,
        omad_compliant=entry.omad_compliant,
        alcohol_consumed=entry.alcohol_consumed,
    )


def empty_values(day: date) -> EntryValues:
    """Return the values of a day with no stored row."""
    return EntryValues(
        day=day,
        proteins=0,
        vegetables=0,
        fruits=0,
        starches=0,
        fats=0,
        dairy=0,
        water_segments=0,
        weight=None,
        omad_compliant=None,
        alcohol_consumed=None,
    )


def index_by_day(entries: Iterable[DailyEntry]) -> dict[date, DailyEntry]:
    """Map each entry to its date for constant-time lookups."""
    return {entry.day: entry for entry in entries}
