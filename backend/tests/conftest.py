"""Root conftest — shared test configuration."""

import os

# Tests never talk to the real feed or depend on a developer's .env
os.environ.setdefault("FEED_BASE_URL", "https://feed.test/onthisday")
os.environ.setdefault("USER_AGENT", "waktu-tests/1.0")
os.environ.setdefault("LOG_FORMAT", "text")
