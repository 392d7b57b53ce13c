"""API test fixtures — FastAPI test client with a fake FeedClient.

Invariants:
    - No test reaches the network: get_feed_client is always overridden
    - fake_feed records every fetch_category call for assertions
    - fake_feed.result may be a payload, an exception instance, or a callable

Design Decisions:
    - Fake implements the FeedClient protocol structurally (no inheritance)
    - source_url delegates to the real URL builder so `source` assertions
      exercise the production encoding
"""

import pytest
from httpx import ASGITransport, AsyncClient

from waktu.api.dependencies import get_feed_client
from waktu.core.onthisday import build_feed_url
from waktu.main import app

FEED_BASE = "https://api.wikimedia.org/feed/v1/wikipedia/en/onthisday"


class FakeFeedClient:
    """Controllable FeedClient: returns `result` or raises it."""

    def __init__(self):
        self.calls = []
        self.result = {"events": [{"text": "Something happened", "year": 1776}]}

    def source_url(self, category, month, day):
        return build_feed_url(category, month, day, FEED_BASE)

    async def fetch_category(self, category, month, day):
        self.calls.append({"category": category, "month": month, "day": day})
        r = self.result
        if isinstance(r, BaseException):
            raise r
        return r() if callable(r) else r


@pytest.fixture
def fake_feed():
    return FakeFeedClient()


@pytest.fixture
async def client(fake_feed):
    """FastAPI test client with the feed dependency overridden."""
    async def override_get_feed_client():
        yield fake_feed

    app.dependency_overrides[get_feed_client] = override_get_feed_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def lenient_client(fake_feed):
    """Like `client`, but unhandled app exceptions become 500 responses."""
    async def override_get_feed_client():
        yield fake_feed

    app.dependency_overrides[get_feed_client] = override_get_feed_client

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
