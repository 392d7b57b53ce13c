"""On This Day Route — proxies the upstream historical-events feed.

Invariants:
    - Invalid dates are rejected (400) before any network call
    - `type` is forwarded as-is; unknown values are rejected upstream
    - Upstream non-2xx: same status, {"error": "wikipedia_api_error", "details"}
    - Transport failure: 500, {"error": "internal_server_error", "details"}
    - Success: upstream body returned untouched under `data`

Design Decisions:
    - FeedError propagates to the global WaktuError handler: the envelope and
      status come from the exception, so the route holds no error branches
"""

from fastapi import APIRouter, Depends, Query

from waktu.api.dependencies import get_feed_client
from waktu.api.routes.calendar import DATE_QUERY_DESCRIPTION, resolve_date
from waktu.core.calendar_facts import month_day
from waktu.core.domain_types import DEFAULT_CATEGORY, FeedCategory
from waktu.core.feed_protocols import FeedClient
from waktu.schemas.calendar import ErrorResponse, OnThisDayResponse

router = APIRouter(tags=["onthisday"])

_TYPE_DESCRIPTION = (
    "Feed type (" + "|".join(c.value for c in FeedCategory)
    + "); forwarded upstream without validation"
)


@router.get(
    "/onthisday",
    response_model=OnThisDayResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_on_this_day(
    date: str | None = Query(None, description=DATE_QUERY_DESCRIPTION),
    type: str | None = Query(None, description=_TYPE_DESCRIPTION),
    feed: FeedClient = Depends(get_feed_client),
):
    """Upstream "On This Day" entries for `date` and `type`."""
    category = type or DEFAULT_CATEGORY
    moment = resolve_date(date)
    month, day = month_day(moment)

    data = await feed.fetch_category(category, month, day)
    return {
        "date": moment.strftime("%Y-%m-%d"),
        "type": category,
        "source": feed.source_url(category, month, day),
        "data": data,
    }
