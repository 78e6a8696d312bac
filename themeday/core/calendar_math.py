"""Civil-date arithmetic shared by every rule kind.

All dates are timezone-naive (year, month, day) values. Weekdays follow the
Sunday-based convention used in rule data (0=Sunday .. 6=Saturday), which is
not Python's Monday-based ``date.weekday()``.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional, Tuple, Union
import calendar


DateLike = Union[date, datetime]


def to_civil_date(value: DateLike) -> date:
    """Reduce a date or datetime to its own calendar fields."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_month_day(value: str) -> Tuple[int, int]:
    """Split an ``MM-DD`` string into (month, day)."""
    month, day = value.split("-")
    return int(month), int(day)


def format_month_day(target_date: date) -> str:
    return f"{target_date.month:02d}-{target_date.day:02d}"


def rolled_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling day overflow into the following month(s).

    ``rolled_date(2025, 2, 29)`` is March 1st 2025.
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def add_days(target_date: date, days: int) -> date:
    """Shift a date by signed days, clamped to date.min and date.max."""
    try:
        return target_date + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def day_of_year(year: int, month: int, day: int) -> int:
    """Ordinal of a month-day within a year, counting overflow days past month end.

    Works for years outside the range ``date`` supports.
    """
    leap_day = 1 if month > 2 and calendar.isleap(year) else 0
    return sum(calendar.mdays[1:month]) + leap_day + day


def sunday_weekday(target_date: date) -> int:
    """Day of week with 0=Sunday, 6=Saturday."""
    return (target_date.weekday() + 1) % 7


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Sunday, 6=Saturday)
        n: Which occurrence (1=first, 2=second, etc.)

    Returns None when the month has fewer than n such weekdays.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    count = 0
    for day in range(1, days_in_month + 1):
        candidate = date(year, month, day)
        if sunday_weekday(candidate) == weekday:
            count += 1
            if count == n:
                return candidate
    return None


def iter_dates(start_date: date, end_date: date) -> Iterator[date]:
    current = start_date
    while current <= end_date:
        yield current
        if current == end_date:
            break
        current += timedelta(days=1)


def get_dates_in_range(start_date: date, end_date: date) -> List[date]:
    """Get list of all dates in range (inclusive)."""
    return list(iter_dates(start_date, end_date))


def inclusive_days(start_date: date, end_date: date) -> int:
    """Number of days from start to end, counting both ends."""
    return (end_date - start_date).days + 1
