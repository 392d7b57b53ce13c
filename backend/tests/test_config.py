"""Configuration — defaults and environment overrides for Settings."""

from waktu.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in ("PORT", "USER_AGENT", "FEED_BASE_URL", "FEED_TIMEOUT_SECONDS", "STATIC_DIR"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.user_agent == "waktu-redesign/1.0 (contact: your-email@example.com)"
    assert settings.feed_base_url == (
        "https://api.wikimedia.org/feed/v1/wikipedia/en/onthisday"
    )
    assert settings.feed_timeout_seconds is None
    assert settings.static_dir == "public"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("USER_AGENT", "custom/2.0")
    monkeypatch.setenv("FEED_TIMEOUT_SECONDS", "7.5")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.user_agent == "custom/2.0"
    assert settings.feed_timeout_seconds == 7.5


def test_empty_timeout_means_none(monkeypatch):
    monkeypatch.setenv("FEED_TIMEOUT_SECONDS", "")
    assert Settings(_env_file=None).feed_timeout_seconds is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
