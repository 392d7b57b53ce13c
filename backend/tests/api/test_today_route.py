"""Today Route — GET /today.

Tests:
    - Combines calendar facts (no timestamp) with the "all" feed
    - Upstream HTTP and transport failures degrade to an inline `wiki` error
    - Unexpected faults return 500 internal_server_error
    - Invalid dates return 400 without calling the feed
"""

import httpx

from waktu.api.dependencies import get_feed_client
from waktu.core.errors import FeedFetchError, FeedHTTPError
from waktu.infrastructure.wikimedia_client import WikimediaFeedClient
from waktu.main import app

EXPECTED_CALENDAR = {
    "iso": "2024-07-04",
    "year": 2024,
    "month": 7,
    "monthName": "July",
    "day": 4,
    "weekday": "Thursday",
    "weekdayShort": "Thu",
}


async def test_today_combines_calendar_and_feed(client, fake_feed):
    fake_feed.result = {"selected": [], "holidays": [{"text": "Independence Day"}]}

    res = await client.get("/today", params={"date": "2024-07-04"})

    assert res.status_code == 200
    assert res.json() == {
        "calendar": EXPECTED_CALENDAR,
        "wiki": {"selected": [], "holidays": [{"text": "Independence Day"}]},
    }
    assert fake_feed.calls == [{"category": "all", "month": "07", "day": "04"}]


async def test_today_calendar_has_no_timestamp(client):
    res = await client.get("/today", params={"date": "2024-07-04"})
    assert "timestamp" not in res.json()["calendar"]


async def test_today_upstream_error_stays_200(client, fake_feed):
    fake_feed.result = FeedHTTPError(502, "Bad gateway")

    res = await client.get("/today", params={"date": "2024-07-04"})

    assert res.status_code == 200
    body = res.json()
    assert body["calendar"] == EXPECTED_CALENDAR
    assert body["wiki"] == {"error": "wikipedia_api_error", "details": "Bad gateway"}


async def test_today_transport_failure_stays_200(client, fake_feed):
    fake_feed.result = FeedFetchError("Connection refused")

    res = await client.get("/today", params={"date": "2024-07-04"})

    assert res.status_code == 200
    assert res.json()["wiki"] == {"error": "fetch_failed", "details": "Connection refused"}


async def test_today_unexpected_fault_is_500(lenient_client, fake_feed):
    fake_feed.result = RuntimeError("boom")

    res = await lenient_client.get("/today", params={"date": "2024-07-04"})

    assert res.status_code == 500
    assert res.json() == {"error": "internal_server_error", "details": "boom"}


async def test_today_invalid_date_skips_feed(client, fake_feed):
    res = await client.get("/today", params={"date": "2023-13-01"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid date. Use YYYY-MM-DD."}
    assert fake_feed.calls == []


async def test_today_unsendable_request_stays_200(client):
    """A header httpx cannot encode is a fetch failure, not a 500."""
    async def override_get_feed_client():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
        ) as http:
            yield WikimediaFeedClient(http, user_agent="waktu/1.0 (kontak: José)")

    app.dependency_overrides[get_feed_client] = override_get_feed_client

    res = await client.get("/today", params={"date": "2024-07-04"})

    assert res.status_code == 200
    body = res.json()
    assert body["calendar"] == EXPECTED_CALENDAR
    assert body["wiki"]["error"] == "fetch_failed"
