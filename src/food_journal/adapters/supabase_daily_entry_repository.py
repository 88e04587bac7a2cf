"""Supabase repository for daily journal entries."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from supabase import Client

from food_journal.domain.journal import DailyEntry
from food_journal.services.insights import DailyEntryRepository

_COLUMNS = (
    "user_id, log_date, proteins, vegetables, fruits, starches, fats, dairy, "
    "water_segments, weight, omad_compliant, alcohol_consumed"
)


@dataclass
class SupabaseDailyEntryRepository(DailyEntryRepository):
    """Supabase implementation for daily entry reads."""

    client: Client
    table_name: str = "daily_logs"

    def get(self, user_id: str, day: date) -> DailyEntry | None:
        """Return the entry stored for a user and day."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("log_date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0], user_id)

    def get_range(self, user_id: str, start: date, end: date) -> list[DailyEntry]:
        """Return entries in the inclusive date range, oldest first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        entries = [_parse_row(row, user_id) for row in response.data or []]
        return sorted(entries, key=lambda entry: entry.day)


def _parse_row(row: dict[str, object], user_id: str) -> DailyEntry:
    log_date_raw = row.get("log_date")
    if not isinstance(log_date_raw, str) or not log_date_raw:
        raise RuntimeError("Daily log row is missing log_date")
    return DailyEntry(
        user_id=str(row.get("user_id") or user_id),
        day=date.fromisoformat(log_date_raw[:10]),
        proteins=int(row.get("proteins") or 0),
        vegetables=int(row.get("vegetables") or 0),
        fruits=int(row.get("fruits") or 0),
        starches=int(row.get("starches") or 0),
        fats=int(row.get("fats") or 0),
        dairy=int(row.get("dairy") or 0),
        water_segments=int(row.get("water_segments") or 0),
        weight=_parse_decimal(row.get("weight")),
        omad_compliant=_parse_flag(row.get("omad_compliant")),
        alcohol_consumed=_parse_flag(row.get("alcohol_consumed")),
    )


def _parse_decimal(value: object) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value))


def _parse_flag(value: object) -> bool | None:
    if value is None:
        return None
    return bool(value)
