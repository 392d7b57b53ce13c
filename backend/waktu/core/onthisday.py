"""On This Day URL — pure construction of upstream feed URLs.

Invariants:
    - Category is percent-encoded exactly like JavaScript encodeURIComponent
    - Month and day are two-digit, zero-padded strings
    - Base URL trailing slashes are ignored
"""

from urllib.parse import quote

DEFAULT_FEED_BASE_URL = (
    "https://api.wikimedia.org/feed/v1/wikipedia/en/onthisday"
)

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_feed_url(
    category: str, month: str, day: str,
    base_url: str = DEFAULT_FEED_BASE_URL,
) -> str:
    """Return {base_url}/{category}/{MM}/{DD}."""
    encoded = quote(category, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/{encoded}/{month}/{day}"
