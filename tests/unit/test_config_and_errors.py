"""Unit tests for settings loading and the error hierarchy."""

from __future__ import annotations

import pytest

from lastfmq.config import Settings, load_settings
from lastfmq.utils.errors import (
    ConfigurationError,
    LastFmQError,
    NotFoundError,
    ParseError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)


# ======================================================================
# Settings
# ======================================================================


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LASTFM_BASE_URL", "HTTP_TIMEOUT", "CONCURRENT_DEADLINE", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.lastfm_base_url == "https://www.last.fm"
        assert settings.http_timeout == 60.0
        assert settings.concurrent_deadline == 30.0
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONCURRENT_DEADLINE", "5")
        monkeypatch.setenv("LASTFM_BASE_URL", "http://localhost:8080")
        settings = Settings(_env_file=None)
        assert settings.concurrent_deadline == 5.0
        assert settings.lastfm_base_url == "http://localhost:8080"

    def test_load_settings_maps_invalid_values(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings(http_timeout=0)
        assert excinfo.value.provider_name == "settings"


# ======================================================================
# Errors
# ======================================================================


class TestErrors:
    @pytest.mark.parametrize(
        "cls",
        [ValidationError, ConfigurationError, NotFoundError, UnexpectedStatusError, TransportError, ParseError],
    )
    def test_hierarchy(self, cls: type) -> None:
        assert issubclass(cls, LastFmQError)

    def test_str_prefixes_provider_name(self) -> None:
        err = NotFoundError("band not found: Nope", provider_name="read_overview")
        assert str(err) == "read_overview: band not found: Nope"
        assert err.message == "band not found: Nope"

    def test_str_without_provider(self) -> None:
        assert str(ValidationError()) == "band name is required"

    def test_unexpected_status_keeps_code(self) -> None:
        err = UnexpectedStatusError("status: 429 Too Many Requests", provider_name="read_tags", status_code=429)
        assert err.status_code == 429
        assert str(err) == "read_tags: status: 429 Too Many Requests"

    def test_with_context_prefixes_and_keeps_type(self) -> None:
        err = UnexpectedStatusError("status: 503", provider_name="page 2", status_code=503)

        wrapped = err.with_context("read_similar_artists")

        assert isinstance(wrapped, UnexpectedStatusError)
        assert wrapped.status_code == 503
        assert wrapped.provider_name == "read_similar_artists"
        assert str(wrapped) == "read_similar_artists: page 2: status: 503"
        # The original is left untouched.
        assert str(err) == "page 2: status: 503"

    def test_with_context_on_unprefixed_error(self) -> None:
        wrapped = ParseError("tokenizer: bad markup").with_context("read_wiki")
        assert str(wrapped) == "read_wiki: tokenizer: bad markup"
