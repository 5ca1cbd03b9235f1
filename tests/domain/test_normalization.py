"""Tests for date and currency normalization."""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.domain.errors import DataIntegrityError
from src.domain.services.dates import add_months, is_before_period
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_datetime,
    normalize_optional_datetime,
)


def test_naive_datetime_passes_through() -> None:
    value = datetime(2024, 2, 1, 10, 30)

    assert normalize_datetime(value) is value


def test_date_becomes_midnight_datetime() -> None:
    assert normalize_datetime(date(2024, 2, 1)) == datetime(2024, 2, 1)


def test_epoch_seconds_and_milliseconds_agree() -> None:
    expected = datetime(2024, 2, 1, 12, 0)
    seconds = expected.timestamp()

    assert normalize_datetime(seconds) == expected
    assert normalize_datetime(int(seconds * 1000)) == expected


def test_iso_string_with_zulu_suffix_is_converted_to_local_time() -> None:
    aware = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)

    result = normalize_datetime("2024-02-01T12:00:00Z")

    assert result.tzinfo is None
    assert result == aware.astimezone().replace(tzinfo=None)


def test_aware_datetime_is_made_naive() -> None:
    aware = datetime(2024, 2, 1, 12, 0, tzinfo=timezone(timedelta(hours=-3)))

    assert normalize_datetime(aware).tzinfo is None


@pytest.mark.parametrize("value", ["not a date", None, True, [2024, 2, 1]])
def test_unparsable_values_raise(value) -> None:
    with pytest.raises(DataIntegrityError):
        normalize_datetime(value, "due_date")


def test_optional_datetime_allows_missing_values() -> None:
    assert normalize_optional_datetime(None) is None
    assert normalize_optional_datetime("") is None


def test_add_months_clamps_to_month_end() -> None:
    assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert add_months(datetime(2024, 12, 15), 1) == datetime(2025, 1, 15)
    assert add_months(datetime(2024, 1, 15), -1) == datetime(2023, 12, 15)


def test_is_before_period_compares_calendar_months() -> None:
    assert is_before_period(datetime(2024, 1, 31), datetime(2024, 2, 1))
    assert not is_before_period(datetime(2024, 2, 1), datetime(2024, 2, 29))


def test_normalize_currency_code() -> None:
    assert normalize_currency_code(" usd ") == "USD"
    assert normalize_currency_code("") is None
    with pytest.raises(DataIntegrityError):
        normalize_currency_code("ARS")
