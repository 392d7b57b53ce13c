"""API Dependencies — FastAPI providers for settings and the feed client.

Invariants:
    - Each request gets its own httpx.AsyncClient, closed after the response
    - Handlers depend on FeedClient (protocol), so tests override
      get_feed_client with a fake via app.dependency_overrides

Design Decisions:
    - Yield dependency mirrors a per-request DB session: no shared state
      between requests, cleanup guaranteed by FastAPI
"""

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends

from waktu.config import Settings, get_settings
from waktu.core.feed_protocols import FeedClient
from waktu.infrastructure.wikimedia_client import WikimediaFeedClient


async def get_feed_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[FeedClient]:
    """Yield a WikimediaFeedClient bound to a request-scoped httpx client."""
    async with httpx.AsyncClient(
        timeout=settings.feed_timeout_seconds, follow_redirects=True,
    ) as http:
        yield WikimediaFeedClient(
            http,
            user_agent=settings.user_agent,
            base_url=settings.feed_base_url,
        )
