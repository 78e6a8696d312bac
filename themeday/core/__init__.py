"""Core themeday components - rule model, evaluation and resolution."""

from .catalog import load_catalog, load_default_catalog
from .errors import CatalogError, ThemeDayError, UnsupportedHolidayError
from .holidays import HolidayRegistry, compute_holiday_date, register_holiday
from .resolver import ThemeResolver, resolve_primary_theme_for_date, resolve_themes_for_date
from .rules import ResolvedTheme, ResolverOptions, ThemeCategory, ThemeRule, ThemeRulesConfig

__all__ = [
    "CatalogError",
    "HolidayRegistry",
    "ResolvedTheme",
    "ResolverOptions",
    "ThemeCategory",
    "ThemeDayError",
    "ThemeResolver",
    "ThemeRule",
    "ThemeRulesConfig",
    "UnsupportedHolidayError",
    "compute_holiday_date",
    "load_catalog",
    "load_default_catalog",
    "register_holiday",
    "resolve_primary_theme_for_date",
    "resolve_themes_for_date",
]
