"""Exception types raised by themeday."""


class ThemeDayError(Exception):
    """Base class for themeday errors."""


class CatalogError(ThemeDayError, ValueError):
    """Raised when a theme rule catalog is malformed."""


class UnsupportedHolidayError(ThemeDayError, ValueError):
    """Raised when no calculator is registered for a movable holiday."""

    def __init__(self, holiday: str):
        self.holiday = holiday
        super().__init__(f"Unsupported holiday: {holiday}")
