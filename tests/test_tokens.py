"""Tests for the format token renderer."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from period_formatter.tokens import canonical, ordinal_suffix, render

WEDNESDAY = datetime(2021, 1, 6, 14, 20, 5)


class TestRenderDayAndMonth:
    """Day, weekday, month and year tokens."""

    def test_long_names(self) -> None:
        assert render(WEDNESDAY, "l, F jS g:ia") == "Wednesday, January 6th 2:20pm"

    def test_short_names_and_padding(self) -> None:
        assert render(WEDNESDAY, "D M d Y") == "Wed Jan 06 2021"

    def test_numeric_date(self) -> None:
        assert render(WEDNESDAY, "n/j/y") == "1/6/21"
        assert render(WEDNESDAY, "m") == "01"

    def test_weekday_numbers_and_day_of_year(self) -> None:
        # ISO weekday 3, Sunday-based 3, zero-based day of year 5
        assert render(WEDNESDAY, "N w z") == "3 3 5"

    def test_sunday_is_zero(self) -> None:
        assert render(datetime(2021, 1, 10), "w N") == "0 7"

    def test_days_in_month_and_leap_year(self) -> None:
        assert render(WEDNESDAY, "t L") == "31 0"
        assert render(datetime(2020, 2, 1), "t L") == "29 1"

    def test_iso_week_year(self) -> None:
        """Jan 3 2021 is in ISO week 53 of 2020."""
        assert render(datetime(2021, 1, 3), "W o") == "53 2020"


class TestRenderTime:
    """Hour, minute, second and meridiem tokens."""

    def test_24_hour(self) -> None:
        assert render(WEDNESDAY, "H:i:s") == "14:20:05"
        assert render(WEDNESDAY, "G") == "14"

    def test_12_hour(self) -> None:
        assert render(WEDNESDAY, "h A") == "02 PM"
        assert render(WEDNESDAY, "g a") == "2 pm"

    def test_midnight_and_noon(self) -> None:
        assert render(datetime(2021, 1, 6, 0, 5), "g:ia") == "12:05am"
        assert render(datetime(2021, 1, 6, 12, 0), "g:ia") == "12:00pm"

    def test_fractional_seconds(self) -> None:
        dt = datetime(2021, 1, 6, 14, 20, 5, 123456)
        assert render(dt, "u v") == "123456 123"

    def test_swatch_beats(self) -> None:
        # 14:20:05 UTC is 15:20:05 BMT -> 55205 s / 86.4
        assert render(WEDNESDAY, "B") == "638"


class TestRenderTimezone:
    """Timezone tokens for naive and aware instants."""

    def test_naive_is_utc(self) -> None:
        assert render(WEDNESDAY, "e T P O Z p") == "UTC UTC +00:00 +0000 0 Z"

    def test_fixed_offset(self) -> None:
        dt = WEDNESDAY.replace(tzinfo=timezone(timedelta(hours=2)))
        assert render(dt, "P O Z p") == "+02:00 +0200 7200 +02:00"

    def test_negative_offset(self) -> None:
        dt = WEDNESDAY.replace(tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
        assert render(dt, "O") == "-0530"

    def test_no_dst_for_fixed_offset(self) -> None:
        assert render(WEDNESDAY.replace(tzinfo=UTC), "I") == "0"


class TestRenderFullRepresentations:
    """Tokens that render a whole date and time."""

    def test_iso_8601(self) -> None:
        assert render(WEDNESDAY.replace(tzinfo=UTC), "c") == "2021-01-06T14:20:05+00:00"

    def test_rfc_2822(self) -> None:
        assert render(WEDNESDAY.replace(tzinfo=UTC), "r") == "Wed, 06 Jan 2021 14:20:05 +0000"

    def test_unix_timestamp(self) -> None:
        assert render(datetime(1970, 1, 2), "U") == "86400"


class TestRenderLiterals:
    """Escapes and non-token characters."""

    def test_backslash_escapes_token(self) -> None:
        assert render(WEDNESDAY, "\\Y\\e\\a\\r: Y") == "Year: 2021"

    def test_other_characters_pass_through(self) -> None:
        assert render(WEDNESDAY, "Y • m") == "2021 • 01"

    def test_trailing_backslash_is_dropped(self) -> None:
        assert render(WEDNESDAY, "Y\\") == "2021"

    def test_date_renders_as_midnight(self) -> None:
        assert render(date(2021, 1, 6), "Y-m-d H:i") == "2021-01-06 00:00"


class TestOrdinalSuffix:
    """English ordinal suffixes."""

    @pytest.mark.parametrize(
        ("day", "suffix"),
        [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"), (21, "st"), (22, "nd"),
         (23, "rd"), (31, "st")],
    )
    def test_suffix(self, day: int, suffix: str) -> None:
        assert ordinal_suffix(day) == suffix


class TestCanonical:
    """Field-subset comparison keys."""

    def test_same_day_different_time(self) -> None:
        a = datetime(2021, 1, 6, 9, 0)
        b = datetime(2021, 1, 6, 18, 30)
        assert canonical(a, "Ymd") == canonical(b, "Ymd")
        assert canonical(a, "His") != canonical(b, "His")
