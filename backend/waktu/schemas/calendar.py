"""Calendar Schemas — response models for /calendar, /onthisday and /today.

Invariants:
    - Field names serialize in camelCase (monthName, weekdayShort) via aliases
    - `data` and `wiki` are typed Any: upstream payloads pass through untouched
    - Only /calendar carries `timestamp`; /today embeds CalendarFields

Design Decisions:
    - Schemas mirror core.calendar_facts.CalendarFact.to_response(): core keeps
      the derivation, schemas own the OpenAPI contract
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CalendarFields(BaseModel):
    """Gregorian calendar facts for one date."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    iso: str
    year: int
    month: int = Field(ge=1, le=12)
    month_name: str = Field(alias="monthName")
    day: int = Field(ge=1, le=31)
    weekday: str
    weekday_short: str = Field(alias="weekdayShort")


class CalendarFactResponse(CalendarFields):
    """Calendar facts plus the UTC instant of the parsed moment."""
    timestamp: str


class OnThisDayResponse(BaseModel):
    """Upstream feed payload wrapped with the request that produced it."""
    date: str
    type: str
    source: str
    data: Any


class TodayResponse(BaseModel):
    """Calendar facts plus the "all" feed, or an inline feed error."""
    calendar: CalendarFields
    wiki: Any


class ErrorResponse(BaseModel):
    """Uniform error envelope."""
    error: str
    details: str | None = None
