"""Custom exception hierarchy for lastfmq.

All application exceptions inherit from :class:`LastFmQError`, which
carries an optional ``provider_name`` so error handlers can identify which
stage or collaborator (e.g. "read_overview", "read_similar_artists")
caused the failure.

    LastFmQError  (base -- catch-all for any lastfmq error)
    +-- ValidationError        (empty band identifier, bad query options)
    +-- NotFoundError          (overview page absent -- HTTP 404)
    +-- UnexpectedStatusError  (any other non-success status)
    +-- TransportError         (request construction, network, deadline)
    +-- ParseError             (token-stream failure)
    +-- ConfigurationError     (invalid settings at startup)

Every stage raises immediately; the CLI catches :class:`LastFmQError`
at the top and turns it into a single stderr line.
"""

import copy


class LastFmQError(Exception):
    """Base exception for all lastfmq errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying the stage that raised it.  The
    ``__str__`` method prefixes the provider name, e.g.
    ``read_overview: band not found: Nope``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"{self._provider_name}: {self._message}"
        return self._message

    def with_context(self, context: str) -> "LastFmQError":
        """Return a copy of the same type whose message is prefixed with *context*.

        The current ``str()`` becomes the new message and *context* the new
        provider name, so ``page 2: tokenizer: ...`` wrapped with
        ``read_similar_artists`` reads ``read_similar_artists: page 2: ...``.
        Subclass state such as ``status_code`` is kept.
        """
        wrapped = copy.copy(self)
        wrapped._message = str(self)
        wrapped._provider_name = context
        wrapped.args = (wrapped._message,)
        return wrapped


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class ValidationError(LastFmQError):
    """Raised when a query is rejected before any request is issued."""

    def __init__(
        self,
        message: str = "band name is required",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(LastFmQError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# HTTP errors
# ---------------------------------------------------------------------------

class NotFoundError(LastFmQError):
    """Raised when the overview page for a band does not exist (HTTP 404)."""

    def __init__(
        self,
        message: str = "band not found",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class UnexpectedStatusError(LastFmQError):
    """Raised when Last.fm answers with a status other than 200.

    The offending status is kept on ``status_code`` so callers can tell
    a throttled request (429) from a server failure (5xx).
    """

    def __init__(
        self,
        message: str = "unexpected status",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self._status_code = status_code
        super().__init__(message=message, provider_name=provider_name)

    @property
    def status_code(self) -> int | None:
        return self._status_code


class TransportError(LastFmQError):
    """Raised when a request cannot be built, sent, or finished in time."""

    def __init__(
        self,
        message: str = "request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Parsing errors
# ---------------------------------------------------------------------------

class ParseError(LastFmQError):
    """Raised when the markup token stream fails for a reason other than EOF."""

    def __init__(
        self,
        message: str = "tokenizer failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
