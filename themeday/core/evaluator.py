"""Date rule evaluation and duration estimation.

``is_rule_active`` decides whether a rule matches a date; ``rule_duration_days``
gives the span used to rank concurrent matches (shorter = more specific).
Both dispatch exhaustively on the rule kind and never mutate the rule.
"""

from datetime import date
from typing import Union
import logging
import math

from .calendar_math import (
    add_days,
    day_of_year,
    format_month_day,
    inclusive_days,
    nth_weekday_of_month,
    parse_month_day,
    rolled_date,
)
from .errors import UnsupportedHolidayError
from .holidays import compute_holiday_date
from .rules import AlwaysRule, DateRule, HolidayOffsetRule, NthWeekdayRule, RangeRule

logger = logging.getLogger(__name__)

UNBOUNDED = math.inf


def is_rule_active(rule: DateRule, target_date: date, reference_year: int) -> bool:
    if isinstance(rule, RangeRule):
        return _is_in_range(rule, target_date)
    elif isinstance(rule, HolidayOffsetRule):
        return _is_holiday_offset_active(rule, target_date, reference_year)
    elif isinstance(rule, NthWeekdayRule):
        return _is_nth_weekday_active(rule, target_date, reference_year)
    elif isinstance(rule, AlwaysRule):
        return True
    raise TypeError(f"Unknown date rule: {rule!r}")


def rule_duration_days(rule: DateRule, reference_year: int) -> Union[int, float]:
    """Span of a rule in days, or ``UNBOUNDED`` for rules matching every date."""
    if isinstance(rule, RangeRule):
        start_date = rolled_date(reference_year, *parse_month_day(rule.from_))
        end_date = rolled_date(reference_year, *parse_month_day(rule.to))
        if end_date < start_date:
            # date cannot hold year 10000, so count the next year by ordinal
            year_end = date(reference_year, 12, 31)
            return inclusive_days(start_date, year_end) + day_of_year(reference_year + 1, *parse_month_day(rule.to))
        return inclusive_days(start_date, end_date)
    elif isinstance(rule, HolidayOffsetRule):
        return abs(rule.end - rule.start) + 1
    elif isinstance(rule, NthWeekdayRule):
        return rule.duration or 1
    elif isinstance(rule, AlwaysRule):
        return UNBOUNDED
    raise TypeError(f"Unknown date rule: {rule!r}")


def _is_in_range(rule: RangeRule, target_date: date) -> bool:
    # Zero-padded MM-DD strings order the same way as the dates they name
    current = format_month_day(target_date)
    if rule.wraps_year:
        return current >= rule.from_ or current <= rule.to
    return rule.from_ <= current <= rule.to


def _is_holiday_offset_active(rule: HolidayOffsetRule, target_date: date, reference_year: int) -> bool:
    try:
        holiday_date = compute_holiday_date(rule.holiday, reference_year)
    except UnsupportedHolidayError as e:
        logger.warning("%s; treating rule as inactive", e)
        return False

    start_date = add_days(holiday_date, min(rule.start, rule.end))
    end_date = add_days(holiday_date, max(rule.start, rule.end))
    return start_date <= target_date <= end_date


def _is_nth_weekday_active(rule: NthWeekdayRule, target_date: date, reference_year: int) -> bool:
    anchor = nth_weekday_of_month(reference_year, rule.month, rule.weekday, rule.n)
    if anchor is None:
        return False

    duration = rule.duration or 1
    if duration == 1:
        return target_date == anchor

    days_before = duration // 2
    days_after = duration - days_before - 1
    return add_days(anchor, -days_before) <= target_date <= add_days(anchor, days_after)
