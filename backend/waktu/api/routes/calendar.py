"""Calendar Route — Gregorian calendar facts for a date.

Invariants:
    - GET /calendar with no date describes the current local date
    - Invalid dates raise InvalidDateError (400) before anything else runs
    - No network, no storage
"""

from datetime import datetime

from fastapi import APIRouter, Query

from waktu.core.calendar_facts import build_calendar_fact, parse_date
from waktu.core.errors import InvalidDateError
from waktu.schemas.calendar import CalendarFactResponse, ErrorResponse

router = APIRouter(tags=["calendar"])

DATE_QUERY_DESCRIPTION = "Date in YYYY-MM-DD format; defaults to today"


def resolve_date(raw: str | None) -> datetime:
    """parse_date() or InvalidDateError. Exported for the other routes."""
    moment = parse_date(raw)
    if moment is None:
        raise InvalidDateError(raw)
    return moment


@router.get(
    "/calendar",
    response_model=CalendarFactResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_calendar(
    date: str | None = Query(None, description=DATE_QUERY_DESCRIPTION),
):
    """Calendar facts for `date`, including the UTC timestamp."""
    moment = resolve_date(date)
    return build_calendar_fact(moment).to_response()
