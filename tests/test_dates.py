# tests/test_dates.py

from __future__ import annotations

import time
from datetime import UTC, datetime

import pytest

from todo_companion.tasks.dates import format_date, parse_date, to_instant_string


def _local(*args: int) -> datetime:
    return datetime(*args).astimezone()


def test_iso_and_day_first_formats_agree() -> None:
    iso = parse_date("2025-12-01 18:00")
    dmy = parse_date("01/12/2025 18:00")
    assert iso is not None
    assert iso == dmy == _local(2025, 12, 1, 18, 0)


def test_iso_accepts_t_separator_and_date_only() -> None:
    assert parse_date("2025-12-01T18:00") == _local(2025, 12, 1, 18, 0)
    assert parse_date("2025-12-01") == _local(2025, 12, 1)


def test_day_first_defaults_to_midnight() -> None:
    # Unambiguous: 13 can only be a day.
    assert parse_date("13/01/2026") == _local(2026, 1, 13)


def test_surrounding_whitespace_is_ignored() -> None:
    assert parse_date("  2025-12-01 18:00  ") == _local(2025, 12, 1, 18, 0)


def test_results_are_timezone_aware() -> None:
    parsed = parse_date("01/12/2025 18:00")
    assert parsed is not None
    assert parsed.tzinfo is not None


def test_fallback_understands_full_instants() -> None:
    parsed = parse_date("2025-12-01T21:00:00.000Z")
    assert parsed == datetime(2025, 12, 1, 21, 0, tzinfo=UTC)


@pytest.mark.parametrize("text", ["not-a-date", "", "   ", None])
def test_unparsable_or_empty_input_returns_none(text) -> None:
    assert parse_date(text) is None


def test_to_instant_string_is_utc_with_millis() -> None:
    value = datetime(2025, 12, 1, 21, 0, 5, 123456, tzinfo=UTC)
    assert to_instant_string(value) == "2025-12-01T21:00:05.123Z"
    assert to_instant_string(None) is None


def test_instant_string_parses_back_to_same_instant() -> None:
    original = parse_date("2025-12-01 18:00")
    assert parse_date(to_instant_string(original)) == original


def test_format_date() -> None:
    assert format_date(parse_date("01/12/2025 18:00")) == "2025-12-01 18:00"
    assert format_date(None) == "Sin datos"


@pytest.mark.parametrize("text", ["01/01/0001", "0001-01-01", "0001-01-01 00:00", "31/12/9999 23:59", "9999-12-31"])
def test_dates_at_the_calendar_edges_return_none(text: str) -> None:
    assert parse_date(text) is None


@pytest.fixture()
def new_york_tz(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.usefixtures("new_york_tz")
def test_west_of_utc_rejects_dates_that_overflow_in_utc() -> None:
    assert parse_date("31/12/9999 23:59") is None

    late = parse_date("29/12/9999 23:59")
    assert late is not None
    assert to_instant_string(late) == "9999-12-30T04:59:00.000Z"
