"""Today Route — calendar facts combined with the full "On This Day" feed.

Invariants:
    - Invalid dates are rejected (400) before any network call
    - Feed failures never fail the request: they become an inline `wiki` error
      ({"error": "wikipedia_api_error" | "fetch_failed", "details"})
    - The embedded calendar omits `timestamp`
    - Only an unexpected exception yields 500 (global handler)
"""

import logging

from fastapi import APIRouter, Depends, Query

from waktu.api.dependencies import get_feed_client
from waktu.api.routes.calendar import DATE_QUERY_DESCRIPTION, resolve_date
from waktu.core.calendar_facts import build_calendar_fact, month_day
from waktu.core.domain_types import FeedCategory
from waktu.core.errors import FeedError
from waktu.core.feed_protocols import FeedClient
from waktu.schemas.calendar import ErrorResponse, TodayResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["today"])


@router.get(
    "/today",
    response_model=TodayResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_today(
    date: str | None = Query(None, description=DATE_QUERY_DESCRIPTION),
    feed: FeedClient = Depends(get_feed_client),
):
    """Calendar facts plus every feed category for `date`."""
    moment = resolve_date(date)
    calendar = build_calendar_fact(moment, include_timestamp=False)
    month, day = month_day(moment)

    try:
        wiki = await feed.fetch_category(FeedCategory.ALL.value, month, day)
    except FeedError as e:
        logger.warning(
            f"Feed unavailable for /today: {e.message}",
            extra={"error_code": e.inline_code, "path": "/today"},
        )
        wiki = e.to_inline()

    return {"calendar": calendar.to_response(), "wiki": wiki}
