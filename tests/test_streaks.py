"""Tests for streak calculation."""

from datetime import timedelta

from food_journal.services.streaks import STREAK_LOOKBACK_DAYS, calculate_streak
from tests.conftest import TODAY, make_entry


def _days_ago(days: int):
    return TODAY - timedelta(days=days)


def test_no_entries_returns_zero() -> None:
    result = calculate_streak(TODAY, [])

    assert result.length == 0
    assert result.start_date is None


def test_counts_consecutive_compliant_days() -> None:
    entries = [
        make_entry(_days_ago(offset), omad_compliant=True) for offset in range(4)
    ]

    result = calculate_streak(TODAY, entries)

    assert result.length == 4
    assert result.start_date == _days_ago(3)


def test_non_compliant_day_stops_the_walk() -> None:
    entries = [
        make_entry(TODAY, omad_compliant=True),
        make_entry(_days_ago(1), omad_compliant=False),
        make_entry(_days_ago(2), omad_compliant=True),
    ]

    result = calculate_streak(TODAY, entries)

    assert result.length == 1
    assert result.start_date == TODAY


def test_missing_day_stops_the_walk() -> None:
    entries = [
        make_entry(TODAY, omad_compliant=True),
        make_entry(_days_ago(1), omad_compliant=True),
        make_entry(_days_ago(3), omad_compliant=True),
        make_entry(_days_ago(4), omad_compliant=True),
    ]

    result = calculate_streak(TODAY, entries)

    assert result.length == 2
    assert result.start_date == _days_ago(1)


def test_unlogged_compliance_flag_stops_the_walk() -> None:
    entries = [
        make_entry(TODAY, omad_compliant=True),
        make_entry(_days_ago(1), weight=180.0),
        make_entry(_days_ago(2), omad_compliant=True),
    ]

    result = calculate_streak(TODAY, entries)

    assert result.length == 1
    assert result.start_date == TODAY


def test_today_not_compliant_returns_zero() -> None:
    for today_entry in (
        make_entry(TODAY, omad_compliant=False),
        make_entry(TODAY, alcohol_consumed=True),
    ):
        entries = [today_entry, make_entry(_days_ago(1), omad_compliant=True)]

        result = calculate_streak(TODAY, entries)

        assert result.length == 0
        assert result.start_date is None


def test_today_missing_returns_zero_even_with_earlier_run() -> None:
    entries = [make_entry(_days_ago(offset), omad_compliant=True) for offset in (1, 2)]

    result = calculate_streak(TODAY, entries)

    assert result.length == 0
    assert result.start_date is None


def test_walk_stops_at_lookback_boundary() -> None:
    entries = [
        make_entry(_days_ago(offset), omad_compliant=True)
        for offset in range(STREAK_LOOKBACK_DAYS + 10)
    ]

    result = calculate_streak(TODAY, entries)

    assert result.length == STREAK_LOOKBACK_DAYS + 1
    assert result.start_date == _days_ago(STREAK_LOOKBACK_DAYS)


def test_break_position_caps_length() -> None:
    for break_at in range(5):
        entries = [
            make_entry(_days_ago(offset), omad_compliant=offset != break_at)
            for offset in range(6)
        ]

        result = calculate_streak(TODAY, entries)

        assert result.length == break_at
