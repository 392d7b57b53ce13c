"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Handlers receive settings through Depends(get_settings), never os.environ

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - feed_timeout_seconds defaults to None (no timeout) to keep a single
      best-effort request per call
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from waktu.core.onthisday import DEFAULT_FEED_BASE_URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000

    # Upstream feed
    user_agent: str = "waktu-redesign/1.0 (contact: your-email@example.com)"
    feed_base_url: str = DEFAULT_FEED_BASE_URL
    feed_timeout_seconds: float | None = None

    @field_validator("feed_timeout_seconds", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, v):
        """FEED_TIMEOUT_SECONDS= (empty) means no timeout."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    static_dir: str = "public"
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
