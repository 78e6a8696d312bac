"""Theme rule data model.

A catalog groups named themes into four categories. Each theme carries a
``DateRule``, a tagged union discriminated by its ``kind`` field:

- ``range``: inclusive ``MM-DD`` window, may wrap over New Year
- ``holiday-offset``: signed day offsets around a movable holiday
- ``nth-weekday``: nth weekday of a month, optionally widened to a window
- ``always``: matches every date
"""

from enum import Enum
from typing import Annotated, Iterator, List, Literal, Optional, Tuple, Union
import calendar
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


MONTH_DAY_PATTERN = re.compile(r"^(\d{2})-(\d{2})$")


class ThemeCategory(str, Enum):
    SEASONAL = "seasonal"
    HOLIDAYS = "holidays"
    CULTURAL = "cultural"
    EVERYDAY = "everyday"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class RangeRule(_FrozenModel):
    kind: Literal["range"] = "range"
    from_: str = Field(..., alias="from", description="Inclusive start (MM-DD)")
    to: str = Field(..., description="Inclusive end (MM-DD)")

    @field_validator("from_", "to")
    @classmethod
    def validate_month_day(cls, v: str) -> str:
        match = MONTH_DAY_PATTERN.match(v)
        if not match:
            raise ValueError(f"expected MM-DD, got {v!r}")
        month, day = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range in {v!r}")
        # 2000 is a leap year, so 02-29 is accepted
        if not 1 <= day <= calendar.monthrange(2000, month)[1]:
            raise ValueError(f"day out of range in {v!r}")
        return v

    @property
    def wraps_year(self) -> bool:
        return self.from_ > self.to


class HolidayOffsetRule(_FrozenModel):
    kind: Literal["holiday-offset"] = "holiday-offset"
    holiday: str = Field(..., description="Movable holiday id, e.g. 'easter'")
    start: int = Field(..., description="Signed day offset of the window start")
    end: int = Field(..., description="Signed day offset of the window end")


class NthWeekdayRule(_FrozenModel):
    kind: Literal["nth-weekday"] = "nth-weekday"
    month: int = Field(..., ge=1, le=12)
    weekday: int = Field(..., ge=0, le=6, description="0=Sunday .. 6=Saturday")
    n: int = Field(..., ge=1)
    duration: Optional[int] = Field(default=None, ge=1, description="Window length in days (default 1)")


class AlwaysRule(_FrozenModel):
    kind: Literal["always"] = "always"


DateRule = Annotated[
    Union[RangeRule, HolidayOffsetRule, NthWeekdayRule, AlwaysRule],
    Field(discriminator="kind"),
]


class ThemeMetadata(_FrozenModel):
    actual_date: Optional[str] = Field(default=None, alias="actualDate")
    description: Optional[str] = None


class ThemeRule(_FrozenModel):
    name: str
    rule: DateRule
    enabled: bool = True
    region: Optional[Tuple[str, ...]] = None
    metadata: Optional[ThemeMetadata] = None

    @property
    def is_opt_in(self) -> bool:
        return self.enabled is False


class ThemeRulesConfig(_FrozenModel):
    seasonal: Tuple[ThemeRule, ...] = ()
    holidays: Tuple[ThemeRule, ...] = ()
    cultural: Tuple[ThemeRule, ...] = ()
    everyday: Tuple[ThemeRule, ...] = ()

    @model_validator(mode="after")
    def validate_catalog(self) -> "ThemeRulesConfig":
        if len(self.everyday) > 1:
            raise ValueError("everyday category must hold at most one theme")

        seen = set()
        for _, theme in self.iter_rules():
            if theme.name in seen:
                raise ValueError(f"duplicate theme name: {theme.name}")
            seen.add(theme.name)
        return self

    def iter_rules(self) -> Iterator[Tuple[ThemeCategory, ThemeRule]]:
        """Yield (category, theme) pairs in catalog order."""
        for category in ThemeCategory:
            for theme in getattr(self, category.value):
                yield category, theme

    def theme_count(self) -> int:
        return sum(len(getattr(self, category.value)) for category in ThemeCategory)


class ResolvedTheme(_FrozenModel):
    name: str
    category: ThemeCategory
    rule: DateRule
    metadata: Optional[ThemeMetadata] = None

    @classmethod
    def from_rule(cls, theme: ThemeRule, category: ThemeCategory) -> "ResolvedTheme":
        return cls(name=theme.name, category=category, rule=theme.rule, metadata=theme.metadata)


class ResolverOptions(BaseModel):
    enabled_cultures: List[str] = Field(default_factory=list, description="Opt-in theme names to enable")
    user_region: Optional[str] = Field(default=None, description="Caller's region identifier")
