"""Movable holiday calculations.

A movable holiday is one whose civil date changes from year to year. Each
holiday is a plain function ``(year) -> date`` registered under a stable id
that rule data refers to (``{"kind": "holiday-offset", "holiday": "easter"}``).
"""

from datetime import date
from typing import Callable, Dict, List, Optional

from .errors import UnsupportedHolidayError

HolidayCalculator = Callable[[int], date]


class HolidayRegistry:
    _calculators: Dict[str, HolidayCalculator] = {}

    @classmethod
    def register(cls, holiday: str, calculator: HolidayCalculator) -> None:
        if not callable(calculator):
            raise ValueError(f"Holiday calculator {calculator!r} must be callable")
        cls._calculators[holiday] = calculator

    @classmethod
    def unregister(cls, holiday: str) -> None:
        cls._calculators.pop(holiday, None)

    @classmethod
    def get_calculator(cls, holiday: str) -> Optional[HolidayCalculator]:
        return cls._calculators.get(holiday)

    @classmethod
    def list_holidays(cls) -> List[str]:
        return list(cls._calculators.keys())


def register_holiday(holiday: str):
    def decorator(func: HolidayCalculator) -> HolidayCalculator:
        HolidayRegistry.register(holiday, func)
        return func
    return decorator


def compute_holiday_date(holiday: str, year: int) -> date:
    """Compute the civil date of a movable holiday for a year.

    Raises:
        UnsupportedHolidayError: no calculator is registered for ``holiday``.
    """
    calculator = HolidayRegistry.get_calculator(holiday)
    if calculator is None:
        raise UnsupportedHolidayError(holiday)
    return calculator(year)


@register_holiday("easter")
def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian / Meeus algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
