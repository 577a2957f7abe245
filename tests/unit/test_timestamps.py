from __future__ import annotations

import pytest
from datetime import datetime, timedelta, timezone

from mela_recipes.services.timestamps import (
    REFERENCE_INSTANT,
    date_to_offset,
    offset_to_date,
)


class TestReferenceInstant:
    def test_matches_unix_milliseconds(self) -> None:
        assert REFERENCE_INSTANT.timestamp() * 1000 == 978307200000

    def test_zero_offset_is_reference_instant(self) -> None:
        assert offset_to_date(0) == datetime(2001, 1, 1, tzinfo=timezone.utc)


class TestOffsetToDate:
    def test_ten_years(self) -> None:
        assert offset_to_date(315532800) == datetime(2011, 1, 1, tzinfo=timezone.utc)

    def test_twenty_years(self) -> None:
        assert offset_to_date(631152000) == datetime(2021, 1, 1, tzinfo=timezone.utc)

    def test_fractional_seconds(self) -> None:
        assert offset_to_date(1.5) == REFERENCE_INSTANT + timedelta(seconds=1, microseconds=500000)

    def test_negative_offset(self) -> None:
        assert offset_to_date(-86400) == datetime(2000, 12, 31, tzinfo=timezone.utc)

    def test_result_is_utc(self) -> None:
        assert offset_to_date(123.0).utcoffset() == timedelta(0)

    def test_out_of_range_raises_overflow(self) -> None:
        with pytest.raises(OverflowError):
            offset_to_date(1e20)


class TestDateToOffset:
    @pytest.mark.parametrize("offset", [0, 1.25, -3600.5, 631152000, 712345678.123456])
    def test_round_trip(self, offset: float) -> None:
        assert date_to_offset(offset_to_date(offset)) == pytest.approx(offset, abs=1e-6)

    def test_naive_datetime_taken_as_utc(self) -> None:
        assert date_to_offset(datetime(2001, 1, 2)) == 86400.0

    def test_other_timezone(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        assert date_to_offset(datetime(2001, 1, 1, 2, tzinfo=plus_two)) == 0.0
