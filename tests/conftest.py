"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

import pytest

from food_journal.app_logging import LOGGER_NAME
from food_journal.config import Settings
from food_journal.domain.journal import DailyEntry
from food_journal.services.insights import DailyEntryRepository, InsightsService

USER_ID = "dev-user"
# A Wednesday
TODAY = date(2024, 3, 13)


def make_entry(  # noqa: PLR0913
    day: date,
    *,
    weight: float | str | None = None,
    omad_compliant: bool | None = None,
    alcohol_consumed: bool | None = None,
    user_id: str = USER_ID,
    **counters: int,
) -> DailyEntry:
    """Build a daily entry with readable defaults."""
    return DailyEntry(
        user_id=user_id,
        day=day,
        weight=Decimal(str(weight)) if weight is not None else None,
        omad_compliant=omad_compliant,
        alcohol_consumed=alcohol_consumed,
        **counters,
    )


@dataclass
class InMemoryDailyEntryRepository(DailyEntryRepository):
    """In-memory daily entry repository for tests."""

    entries: dict[tuple[str, date], DailyEntry] = field(default_factory=dict)
    range_calls: list[tuple[str, date, date]] = field(default_factory=list)

    def add(self, *entries: DailyEntry) -> None:
        for entry in entries:
            self.entries[(entry.user_id, entry.day)] = entry

    def get(self, user_id: str, day: date) -> DailyEntry | None:
        return self.entries.get((user_id, day))

    def get_range(self, user_id: str, start: date, end: date) -> list[DailyEntry]:
        self.range_calls.append((user_id, start, end))
        return sorted(
            (
                entry
                for (owner, day), entry in self.entries.items()
                if owner == user_id and start <= day <= end
            ),
            key=lambda entry: entry.day,
        )


@dataclass
class FailingDailyEntryRepository(DailyEntryRepository):
    """Repository whose reads always fail."""

    error: Exception = field(default_factory=lambda: ConnectionError("store down"))

    def get(self, user_id: str, day: date) -> DailyEntry | None:
        raise self.error

    def get_range(self, user_id: str, start: date, end: date) -> list[DailyEntry]:
        raise self.error


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def repository() -> InMemoryDailyEntryRepository:
    return InMemoryDailyEntryRepository()


@pytest.fixture
def insights_service(repository: InMemoryDailyEntryRepository) -> InsightsService:
    return InsightsService(repository)
