"""Dependency container wiring for the journal."""

from dataclasses import dataclass

from supabase import create_client

from food_journal.adapters.supabase_daily_entry_repository import (
    SupabaseDailyEntryRepository,
)
from food_journal.app_logging import configure_logging
from food_journal.config import Settings
from food_journal.services.insights import DailyEntryRepository, InsightsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    daily_entry_repository: DailyEntryRepository
    insights_service: InsightsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    repository = SupabaseDailyEntryRepository(
        supabase_client, table_name=resolved_settings.daily_entries_table
    )
    insights_service = InsightsService(
        repository=repository,
        default_trend_days=resolved_settings.default_trend_days,
        default_correlation_days=resolved_settings.default_correlation_days,
        debug=resolved_settings.insights_debug,
    )
    return AppContainer(
        settings=resolved_settings,
        daily_entry_repository=repository,
        insights_service=insights_service,
    )
