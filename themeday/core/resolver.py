"""Theme resolution for calendar dates.

The resolver evaluates every available theme rule against a date, orders
the matches by specificity (shortest duration first) and falls back to the
catalog's ``everyday`` theme when nothing else applies::

    resolver = ThemeResolver(load_catalog("themes.yaml"))
    resolver.resolve_primary_theme_for_date(date(2025, 10, 31))
"""

from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

from .calendar_math import DateLike, iter_dates, to_civil_date
from .catalog import load_catalog, load_default_catalog
from .evaluator import is_rule_active, rule_duration_days
from .rules import ResolvedTheme, ResolverOptions, ThemeCategory, ThemeRule, ThemeRulesConfig

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Resolves themes against an injected, read-only catalog.

    Holds no state besides the catalog, so one instance can be shared
    between concurrent callers.
    """

    def __init__(self, catalog: ThemeRulesConfig):
        self.catalog = catalog

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ThemeResolver":
        return cls(load_catalog(path))

    def fallback_theme(self) -> Optional[ResolvedTheme]:
        if not self.catalog.everyday:
            return None
        return ResolvedTheme.from_rule(self.catalog.everyday[0], ThemeCategory.EVERYDAY)

    def resolve_themes_for_date(
        self, target: DateLike, options: Optional[ResolverOptions] = None
    ) -> List[ResolvedTheme]:
        options = options or ResolverOptions()
        target_date = to_civil_date(target)
        year = target_date.year

        matches = []
        for category, theme in self.catalog.iter_rules():
            if category == ThemeCategory.EVERYDAY:
                continue
            if not self._is_available(theme, options):
                continue
            if is_rule_active(theme.rule, target_date, year):
                matches.append(ResolvedTheme.from_rule(theme, category))

        # sorted() is stable, so equal durations keep catalog order
        matches = sorted(matches, key=lambda theme: rule_duration_days(theme.rule, year))

        if not matches:
            fallback = self.fallback_theme()
            if fallback is None:
                logger.debug("No themes for %s and catalog has no fallback", target_date)
                return []
            logger.debug("No themes for %s, using fallback %s", target_date, fallback.name)
            return [fallback]

        logger.debug("Resolved %d themes for %s: %s", len(matches), target_date,
                     [theme.name for theme in matches])
        return matches

    def resolve_primary_theme_for_date(
        self, target: DateLike, options: Optional[ResolverOptions] = None
    ) -> Optional[ResolvedTheme]:
        themes = self.resolve_themes_for_date(target, options)
        return themes[0] if themes else None

    def resolve_themes_between(
        self, start_date: DateLike, end_date: DateLike, options: Optional[ResolverOptions] = None
    ) -> Dict[date, List[ResolvedTheme]]:
        """Resolve every date from start to end (inclusive)."""
        start_date, end_date = to_civil_date(start_date), to_civil_date(end_date)
        if end_date < start_date:
            raise ValueError("end_date must be >= start_date")

        return {
            day: self.resolve_themes_for_date(day, options)
            for day in iter_dates(start_date, end_date)
        }

    @staticmethod
    def _is_available(theme: ThemeRule, options: ResolverOptions) -> bool:
        if not theme.is_opt_in:
            return True
        if theme.name in options.enabled_cultures:
            return True
        return bool(theme.region) and options.user_region is not None and options.user_region in theme.region


def default_resolver() -> ThemeResolver:
    return ThemeResolver(load_default_catalog())


def resolve_themes_for_date(
    target: DateLike, options: Optional[ResolverOptions] = None
) -> List[ResolvedTheme]:
    """Resolve themes for a date against the bundled catalog."""
    return default_resolver().resolve_themes_for_date(target, options)


def resolve_primary_theme_for_date(
    target: DateLike, options: Optional[ResolverOptions] = None
) -> Optional[ResolvedTheme]:
    """Most specific theme for a date against the bundled catalog."""
    return default_resolver().resolve_primary_theme_for_date(target, options)
