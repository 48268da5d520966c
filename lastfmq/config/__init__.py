"""Configuration module -- exports Settings and a loader that maps failures."""

from pydantic import ValidationError as _PydanticValidationError

from lastfmq.config.settings import Settings
from lastfmq.utils.errors import ConfigurationError


def load_settings(**overrides: object) -> Settings:
    """Build :class:`Settings`, raising :class:`ConfigurationError` on bad input."""
    try:
        return Settings(**overrides)
    except _PydanticValidationError as exc:
        raise ConfigurationError(str(exc), provider_name="settings") from exc


__all__ = ["Settings", "load_settings"]
