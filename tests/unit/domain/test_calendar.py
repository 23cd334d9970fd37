"""Unit tests for week windows, day keys and labels."""

from datetime import date, timedelta

import pytest

from worksync.domain.scheduling import (
    InvalidDayFormatError,
    InvalidTimeFormatError,
    WeekOutOfRangeError,
    day_key,
    day_label,
    is_canonical_day,
    normalize_day,
    parse_day,
    validate_time,
    week_range,
)
from worksync.domain.scheduling.calendar import monday_of

WEDNESDAY = date(2025, 7, 16)


class TestWeekRange:
    def test_wednesday_belongs_to_week_starting_monday(self):
        week = week_range(0, today=WEDNESDAY)

        assert week.start == date(2025, 7, 14)
        assert week.end == date(2025, 7, 20)
        assert week.range_key == ("2025-07-14", "2025-07-20")

    def test_sunday_belongs_to_preceding_monday(self):
        week = week_range(0, today=date(2025, 7, 20))

        assert week.start == date(2025, 7, 14)

    def test_monday_is_its_own_week_start(self):
        assert week_range(0, today=date(2025, 7, 14)).start == date(2025, 7, 14)

    @pytest.mark.parametrize("offset", [-3, -1, 0, 1, 2, 52])
    def test_start_is_monday_and_end_is_sunday(self, offset):
        for day_offset in range(7):
            today = WEDNESDAY + timedelta(days=day_offset)
            week = week_range(offset, today=today)

            assert week.start.weekday() == 0
            assert week.end.weekday() == 6
            assert week.end - week.start == timedelta(days=6)

    def test_next_week_starts_seven_days_later(self):
        this_week = week_range(0, today=WEDNESDAY)
        next_week = week_range(1, today=WEDNESDAY)
        last_week = week_range(-1, today=WEDNESDAY)

        assert next_week.start == this_week.start + timedelta(days=7)
        assert last_week.start == this_week.start - timedelta(days=7)

    def test_offset_crosses_year_boundary(self):
        week = week_range(1, today=date(2025, 12, 29))

        assert week.start == date(2026, 1, 5)

    @pytest.mark.parametrize("offset", [1_000_000, -1_000_000, 10**12])
    def test_offset_beyond_calendar_is_rejected(self, offset):
        with pytest.raises(WeekOutOfRangeError) as exc_info:
            week_range(offset, today=WEDNESDAY)

        assert exc_info.value.code.value == "VALIDATION_ERROR"

    def test_last_full_week_of_the_calendar(self):
        week = week_range(0, today=date(9999, 12, 20))

        assert week.start == date(9999, 12, 20)
        assert week.end == date(9999, 12, 26)

    def test_week_running_past_year_9999_is_rejected(self):
        with pytest.raises(WeekOutOfRangeError):
            week_range(0, today=date(9999, 12, 31))

    def test_days_are_seven_ascending_dates(self):
        days = list(week_range(0, today=WEDNESDAY).days())

        assert len(days) == 7
        assert days[0] == date(2025, 7, 14)
        assert days == sorted(days)
        assert days[-1] == date(2025, 7, 20)

    def test_labels(self):
        week = week_range(0, today=WEDNESDAY)

        assert week.start_label == "14 Jul"
        assert week.end_label == "20 Jul"

    def test_russian_labels(self):
        week = week_range(0, today=WEDNESDAY, locale="ru")

        assert week.start_label == "14 июл."

    def test_monday_of_sunday_goes_back_six_days(self):
        assert monday_of(date(2025, 7, 13)) == date(2025, 7, 7)


class TestDayKeys:
    def test_day_key_is_zero_padded(self):
        assert day_key(date(2025, 1, 5)) == "2025-01-05"

    def test_day_label(self):
        assert day_label(WEDNESDAY) == "Wednesday, 16 Jul"
        assert day_label(WEDNESDAY, locale="ru") == "среда, 16 июл"

    def test_lexical_order_matches_calendar_order(self):
        days = [date(2025, 12, 31), date(2025, 2, 1), date(2024, 11, 30)]

        assert sorted(day_key(d) for d in days) == [day_key(d) for d in sorted(days)]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-07-16", True),
            ("16.07.2025", False),
            ("2025-02-30", False),
            ("2025-7-16", False),
            ("", False),
        ],
    )
    def test_is_canonical_day(self, value, expected):
        assert is_canonical_day(value) is expected


class TestParseDay:
    def test_parses_canonical_day(self):
        assert parse_day("2025-07-16") == WEDNESDAY

    def test_converts_legacy_day(self):
        assert parse_day("16.07.2025") == WEDNESDAY
        assert normalize_day("16.07.2025") == "2025-07-16"

    def test_strips_whitespace(self):
        assert normalize_day(" 2025-07-16 ") == "2025-07-16"

    @pytest.mark.parametrize(
        "value",
        ["tomorrow", "2025/07/16", "31.02.2025", "2025-13-01", "16-07-2025"],
    )
    def test_rejects_unreadable_days(self, value):
        with pytest.raises(InvalidDayFormatError) as exc_info:
            parse_day(value)

        assert exc_info.value.code.value == "INVALID_DATE"


class TestValidateTime:
    @pytest.mark.parametrize("value", ["00:00", "09:30", "23:59"])
    def test_accepts_valid_times(self, value):
        assert validate_time(value) == value

    @pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "noon", "0900"])
    def test_rejects_invalid_times(self, value):
        with pytest.raises(InvalidTimeFormatError):
            validate_time(value)
