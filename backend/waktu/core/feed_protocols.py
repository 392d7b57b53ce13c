"""Boundary Protocols — contract between route handlers and the feed service.

Invariants:
    - Routes depend on FeedClient, never on a concrete HTTP client
    - fetch_category returns the upstream body unmodified or raises FeedError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from waktu.core.domain_types import FeedResult


class FeedClient(Protocol):
    """Contract for "On This Day" feed access — implemented by infrastructure."""

    def source_url(self, category: str, month: str, day: str) -> str: ...

    async def fetch_category(
        self, category: str, month: str, day: str,
    ) -> FeedResult: ...
