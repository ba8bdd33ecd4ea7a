"""Tests for instant coercion and calendar comparisons."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from tripview.domain.instants import (
    coerce_instant,
    coerce_span,
    load_timezone,
    same_day,
    same_month,
)
from tripview.errors import InvalidInstantError, InvalidTimezoneError


class TestCoerceInstant:
    def test_datetime_passthrough(self) -> None:
        moment = datetime(2024, 6, 5, 10, 0)
        assert coerce_instant(moment) is moment

    def test_date_is_midnight(self) -> None:
        assert coerce_instant(date(2024, 6, 5)) == datetime(2024, 6, 5)

    def test_iso_string(self) -> None:
        assert coerce_instant("2024-06-05T10:30") == datetime(2024, 6, 5, 10, 30)

    def test_iso_date_only(self) -> None:
        assert coerce_instant("2024-06-05") == datetime(2024, 6, 5)

    def test_iso_zulu(self) -> None:
        assert coerce_instant("2024-06-05T10:30:00Z") == datetime(2024, 6, 5, 10, 30, tzinfo=UTC)

    def test_epoch_milliseconds(self) -> None:
        assert coerce_instant(0) == datetime(1970, 1, 1, tzinfo=UTC)
        assert coerce_instant(86_400_000) == datetime(1970, 1, 2, tzinfo=UTC)

    def test_tz_converts_aware_values(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        result = coerce_instant("2024-06-05T23:30:00Z", tz=plus_two)
        assert (result.day, result.hour) == (6, 1)

    def test_tz_leaves_naive_values(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        assert coerce_instant("2024-06-05T23:30", tz=plus_two).hour == 23

    @pytest.mark.parametrize(
        "value",
        ["not a date", "2024-13-01", "", True, float("nan"), float("inf"), [2024, 6, 5], None],
    )
    def test_invalid_values_fail_fast(self, value: object) -> None:
        with pytest.raises(InvalidInstantError):
            coerce_instant(value)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            coerce_instant("nope")


class TestCoerceSpan:
    def test_mixed_awareness_rejected(self) -> None:
        with pytest.raises(InvalidInstantError, match="naive"):
            coerce_span("2024-06-05T10:00", "2024-06-05T12:00Z")

    def test_end_converted_to_start_zone(self) -> None:
        start, end = coerce_span("2024-06-05T23:00+02:00", "2024-06-05T22:30Z")
        assert end.utcoffset() == timedelta(hours=2)
        assert (end.day, end.hour) == (6, 0)


class TestCalendarComparisons:
    def test_same_day_ignores_time(self) -> None:
        assert same_day(datetime(2024, 6, 5, 0, 1), datetime(2024, 6, 5, 23, 59))

    def test_adjacent_days_differ_even_if_close(self) -> None:
        assert not same_day(datetime(2024, 6, 5, 23, 59), datetime(2024, 6, 6, 0, 1))

    def test_same_month_requires_same_year(self) -> None:
        assert same_month(datetime(2024, 6, 1), datetime(2024, 6, 30))
        assert not same_month(datetime(2023, 6, 1), datetime(2024, 6, 1))


class TestLoadTimezone:
    def test_none_and_empty(self) -> None:
        assert load_timezone(None) is None
        assert load_timezone("") is None

    def test_known_zone(self) -> None:
        zone = load_timezone("UTC")
        assert zone is not None
        assert datetime(2024, 1, 1, tzinfo=zone).utcoffset() == timedelta(0)

    def test_unknown_zone(self) -> None:
        with pytest.raises(InvalidTimezoneError):
            load_timezone("Mars/Olympus_Mons")
