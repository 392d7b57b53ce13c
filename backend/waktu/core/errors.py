"""Error Hierarchy — typed, categorized exceptions for all Waktu failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the flat envelope {"error": code, "details"?: str}
    - FeedError.to_inline() produces the object embedded in /today's `wiki` field
    - `details` is omitted from envelopes when absent

Design Decisions:
    - Single hierarchy with WaktuError base: FastAPI global handler catches all
    - Feed failures are exceptions, not result objects: callers pick the
      envelope (HTTP response or inline field) at the catch site
"""

from dataclasses import dataclass
from enum import Enum

INVALID_DATE_MESSAGE = "Invalid date. Use YYYY-MM-DD."


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TRANSPORT = "transport"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to log records, never to responses."""
    feed_url: str | None = None


class WaktuError(Exception):
    """Base exception for all Waktu errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        details: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.details = details
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return error_envelope(self.code, self.details)


def error_envelope(code: str, details: str | None = None) -> dict:
    """Build {"error": code, "details": details}, dropping empty details."""
    envelope = {"error": code}
    if details is not None:
        envelope["details"] = details
    return envelope


# ─── Validation Errors (400) ────────────────────────────────────

class InvalidDateError(WaktuError):
    """Date query parameter is malformed or not a real calendar date."""
    def __init__(self, raw: str | None, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid date: {raw!r}",
            INVALID_DATE_MESSAGE, ErrorCategory.VALIDATION,
            400, None, context,
        )
        self.raw = raw


# ─── Upstream Feed Errors ───────────────────────────────────────

class FeedError(WaktuError):
    """Base for failures talking to the upstream feed service."""

    inline_code = "fetch_failed"

    def to_inline(self) -> dict:
        """Convert to the object embedded in a combined response."""
        return {"error": self.inline_code, "details": self.details}


class FeedHTTPError(FeedError):
    """Upstream answered with a non-2xx status."""

    inline_code = "wikipedia_api_error"

    def __init__(
        self,
        status_code: int,
        body: str | None,
        context: ErrorContext | None = None,
    ):
        details = body or f"status {status_code}"
        super().__init__(
            f"Upstream feed returned {status_code}",
            "wikipedia_api_error", ErrorCategory.EXTERNAL_API,
            status_code, details, context,
        )
        self.status_code = status_code


class FeedFetchError(FeedError):
    """Upstream could not be reached or its body could not be decoded."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream feed request failed: {message}",
            "internal_server_error", ErrorCategory.TRANSPORT,
            500, message, context,
        )
