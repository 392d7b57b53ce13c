"""Error Hierarchy — envelope shapes and status mapping.

Tests:
    - InvalidDateError is a 400 with the fixed message and no details
    - FeedHTTPError keeps the upstream status and falls back to "status <code>"
    - FeedFetchError is a 500 internal_server_error, inline fetch_failed
    - error_envelope drops missing details
"""

from waktu.core.errors import (
    ErrorCategory,
    FeedError,
    FeedFetchError,
    FeedHTTPError,
    InvalidDateError,
    WaktuError,
    error_envelope,
)


def test_invalid_date_error_envelope():
    err = InvalidDateError("2024-02-30")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"error": "Invalid date. Use YYYY-MM-DD."}
    assert err.raw == "2024-02-30"


def test_feed_http_error_keeps_status_and_body():
    err = FeedHTTPError(404, "Not found.")
    assert err.http_status == 404
    assert err.to_response() == {"error": "wikipedia_api_error", "details": "Not found."}
    assert err.to_inline() == {"error": "wikipedia_api_error", "details": "Not found."}


def test_feed_http_error_without_body():
    assert FeedHTTPError(502, None).details == "status 502"
    assert FeedHTTPError(502, "").details == "status 502"


def test_feed_fetch_error_envelopes():
    err = FeedFetchError("timed out")
    assert err.http_status == 500
    assert err.category == ErrorCategory.TRANSPORT
    assert err.to_response() == {"error": "internal_server_error", "details": "timed out"}
    assert err.to_inline() == {"error": "fetch_failed", "details": "timed out"}


def test_feed_errors_share_base():
    for err in (FeedHTTPError(500, None), FeedFetchError("x")):
        assert isinstance(err, FeedError)
        assert isinstance(err, WaktuError)


def test_error_envelope_omits_missing_details():
    assert error_envelope("x") == {"error": "x"}
    assert error_envelope("x", "why") == {"error": "x", "details": "why"}
