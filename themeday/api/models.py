from datetime import date

from pydantic import BaseModel

from .. import __version__


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = __version__
    themes_available: int = 0


class HolidayDateResponse(BaseModel):
    holiday: str
    year: int
    calendar_date: date
