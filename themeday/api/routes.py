from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from .models import HealthResponse, HolidayDateResponse
from ..core.errors import UnsupportedHolidayError
from ..core.holidays import compute_holiday_date
from ..core.resolver import ThemeResolver
from ..core.rules import ResolvedTheme, ResolverOptions

router = APIRouter()


def _resolver(request: Request) -> ThemeResolver:
    return request.app.state.resolver


def _options(enabled_cultures: List[str], user_region: Optional[str]) -> ResolverOptions:
    return ResolverOptions(enabled_cultures=enabled_cultures, user_region=user_region)


@router.get("/", response_model=HealthResponse)
async def health_check(request: Request):
    return HealthResponse(themes_available=_resolver(request).catalog.theme_count())


@router.get("/themes/{day}", response_model=List[ResolvedTheme])
async def themes_for_date(
    request: Request,
    day: date,
    enabled_cultures: List[str] = Query(default=[]),
    user_region: Optional[str] = None,
):
    return _resolver(request).resolve_themes_for_date(day, _options(enabled_cultures, user_region))


@router.get("/themes/{day}/primary", response_model=ResolvedTheme)
async def primary_theme_for_date(
    request: Request,
    day: date,
    enabled_cultures: List[str] = Query(default=[]),
    user_region: Optional[str] = None,
):
    theme = _resolver(request).resolve_primary_theme_for_date(day, _options(enabled_cultures, user_region))
    if theme is None:
        raise HTTPException(status_code=404, detail=f"No theme for {day.isoformat()}")
    return theme


@router.get("/holidays/{holiday}/{year}", response_model=HolidayDateResponse)
async def holiday_date(holiday: str, year: int):
    if not 1 <= year <= 9999:
        raise HTTPException(status_code=400, detail=f"Year out of range: {year}")
    try:
        holiday_on = compute_holiday_date(holiday, year)
    except UnsupportedHolidayError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return HolidayDateResponse(holiday=holiday, year=year, calendar_date=holiday_on)
