"""themeday - resolve seasonal, holiday and cultural themes for calendar dates."""

__version__ = "0.1.0"
__description__ = "Date-based theme resolution from declarative rules"

from .core.resolver import ThemeResolver, resolve_primary_theme_for_date, resolve_themes_for_date
from .core.rules import ResolvedTheme, ResolverOptions

__all__ = [
    "ResolvedTheme",
    "ResolverOptions",
    "ThemeResolver",
    "resolve_primary_theme_for_date",
    "resolve_themes_for_date",
]
