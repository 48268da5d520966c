"""Application settings loaded from environment variables via pydantic-settings.

pydantic-settings reads configuration from two sources, in priority order:

  1. **Environment variables** -- e.g. ``LASTFM_BASE_URL=https://...``
     (highest priority, always wins)
  2. **.env file** -- key=value lines in the working directory's .env file

The field name ``http_timeout`` maps to env var ``HTTP_TIMEOUT``.
Defaults are used when neither source sets a field.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """lastfmq transport and runtime settings.

    Per-query choices (band, stages, pages, workers) live on
    :class:`lastfmq.models.query.QueryOptions`; this class only holds what
    stays the same between queries.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Last.fm ===
    lastfm_base_url: str = "https://www.last.fm"
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    )

    # === Timeouts (seconds) ===
    http_timeout: float = 60.0
    concurrent_deadline: float = 30.0

    # === App Config ===
    app_env: str = "development"
    log_level: str = "WARNING"

    @field_validator("http_timeout", "concurrent_deadline")
    @classmethod
    def _positive_seconds(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeouts must be positive")
        return value
