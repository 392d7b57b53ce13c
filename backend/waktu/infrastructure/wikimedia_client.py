"""Wikimedia Feed Client — wraps httpx.AsyncClient for the "On This Day" feed.

Invariants:
    - One GET per call: no retry, no cache
    - Every request carries the configured User-Agent header
    - 2xx: parsed JSON body returned unmodified
    - Non-2xx: FeedHTTPError with the body text (or "status <code>")
    - Connection/DNS/read failures, unbuildable requests (bad URL, non-ASCII
      header) and undecodable bodies: FeedFetchError
    - A failure reading an error body never replaces the FeedHTTPError

Design Decisions:
    - Wrapper over raw client: isolates status/error mapping from route handlers
    - httpx client injected: lifecycle owned by the caller (see api.dependencies)
    - timeout=None unless configured: a hung upstream holds only its own request
"""

import logging
import time

import httpx

from waktu.core.domain_types import FeedResult
from waktu.core.errors import ErrorContext, FeedFetchError, FeedHTTPError
from waktu.core.onthisday import DEFAULT_FEED_BASE_URL, build_feed_url

logger = logging.getLogger(__name__)


class WikimediaFeedClient:
    """FeedClient implementation backed by the Wikimedia REST feed API."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        user_agent: str,
        base_url: str = DEFAULT_FEED_BASE_URL,
    ):
        self.http = http
        self.user_agent = user_agent
        self.base_url = base_url

    def source_url(self, category: str, month: str, day: str) -> str:
        """URL fetch_category() will request for these arguments."""
        return build_feed_url(category, month, day, self.base_url)

    async def fetch_category(
        self, category: str, month: str, day: str,
    ) -> FeedResult:
        """Fetch one feed category for a month/day pair."""
        url = self.source_url(category, month, day)
        context = ErrorContext(feed_url=url)
        started = time.perf_counter()
        try:
            response = await self.http.get(
                url, headers={"User-Agent": self.user_agent},
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning(
                f"Feed request failed: {e}",
                extra={"feed_url": url, "feed_category": category},
            )
            raise FeedFetchError(str(e) or type(e).__name__, context=context)

        self._log_response(response, url, category, started)

        if not response.is_success:
            raise FeedHTTPError(
                response.status_code, await self._read_text(response),
                context=context,
            )
        try:
            return response.json()
        except ValueError as e:
            raise FeedFetchError(
                f"Invalid JSON from upstream: {e}", context=context,
            )

    async def _read_text(self, response: httpx.Response) -> str | None:
        """Best-effort error body; read failures yield None."""
        try:
            await response.aread()
            return response.text
        except (httpx.HTTPError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read upstream error body: {e}")
            return None

    def _log_response(
        self, response: httpx.Response, url: str, category: str,
        started: float,
    ) -> None:
        """Log upstream status and latency."""
        logger.info(
            "Feed response received",
            extra={
                "feed_url": url,
                "feed_category": category,
                "upstream_status": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
