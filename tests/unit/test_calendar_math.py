from datetime import date, datetime

import pytest

from themeday.core.calendar_math import (
    add_days,
    day_of_year,
    format_month_day,
    get_dates_in_range,
    inclusive_days,
    nth_weekday_of_month,
    parse_month_day,
    rolled_date,
    sunday_weekday,
    to_civil_date,
)


def test_month_day_parsing_and_formatting():
    assert parse_month_day("01-07") == (1, 7)
    assert parse_month_day("12-26") == (12, 26)
    assert format_month_day(date(2025, 3, 4)) == "03-04"


def test_rolled_date_rolls_into_next_month():
    assert rolled_date(2025, 2, 29) == date(2025, 3, 1)
    assert rolled_date(2024, 2, 29) == date(2024, 2, 29)
    assert rolled_date(2025, 4, 31) == date(2025, 5, 1)


def test_add_days_crosses_year_boundary():
    assert add_days(date(2025, 12, 30), 3) == date(2026, 1, 2)
    assert add_days(date(2026, 1, 2), -3) == date(2025, 12, 30)


def test_sunday_based_weekday():
    assert sunday_weekday(date(2025, 11, 23)) == 0  # Sunday
    assert sunday_weekday(date(2025, 11, 27)) == 4  # Thursday
    assert sunday_weekday(date(2025, 11, 29)) == 6  # Saturday


@pytest.mark.parametrize("year,month,weekday,n,expected", [
    (2025, 11, 4, 4, date(2025, 11, 27)),   # Thanksgiving
    (2024, 11, 4, 4, date(2024, 11, 28)),
    (2025, 5, 0, 2, date(2025, 5, 11)),     # Mother's Day
    (2025, 1, 4, 5, date(2025, 1, 30)),
])
def test_nth_weekday_of_month(year, month, weekday, n, expected):
    assert nth_weekday_of_month(year, month, weekday, n) == expected


def test_nth_weekday_missing_occurrence():
    # February 2025 has only four Mondays
    assert nth_weekday_of_month(2025, 2, 1, 5) is None


def test_dates_in_range_inclusive():
    dates = get_dates_in_range(date(2025, 12, 30), date(2026, 1, 2))
    assert dates == [date(2025, 12, 30), date(2025, 12, 31), date(2026, 1, 1), date(2026, 1, 2)]
    assert get_dates_in_range(date(2025, 1, 2), date(2025, 1, 1)) == []


def test_add_days_clamps_to_supported_range():
    assert add_days(date.max, 1) == date.max
    assert add_days(date(1, 1, 3), -7) == date.min
    assert add_days(date(2025, 1, 1), 10 ** 10) == date.max
    assert add_days(date(2025, 1, 1), -(10 ** 10)) == date.min


@pytest.mark.parametrize("year,month,day,expected", [
    (2025, 1, 7, 7),
    (2024, 3, 19, 79),
    (2025, 3, 19, 78),
    (2025, 2, 29, 60),     # rolls to March 1st
    (10000, 3, 1, 61),     # beyond the range of date
])
def test_day_of_year(year, month, day, expected):
    assert day_of_year(year, month, day) == expected


def test_dates_in_range_ending_at_max_date():
    assert get_dates_in_range(date(9999, 12, 30), date.max) == [date(9999, 12, 30), date(9999, 12, 31)]


def test_inclusive_days():
    assert inclusive_days(date(2025, 1, 1), date(2025, 1, 1)) == 1
    assert inclusive_days(date(2025, 12, 26), date(2026, 1, 7)) == 13


def test_to_civil_date_drops_time():
    assert to_civil_date(datetime(2025, 12, 31, 23, 59)) == date(2025, 12, 31)
    assert to_civil_date(date(2025, 12, 31)) == date(2025, 12, 31)
