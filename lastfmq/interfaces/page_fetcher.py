"""Abstract base class for Last.fm page fetchers.

Defines the contract for retrieving the raw HTML of each page kind the
extractors understand.  The adapter pattern keeps the collector and the
query service independent of the HTTP client, so tests can inject a fake
fetcher that serves canned markup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedPage:
    """A successfully fetched page.

    Attributes
    ----------
    url:
        The resolved URL after redirects.
    status_code:
        HTTP status of the final response (always 200 for a returned page).
    text:
        Decoded response body.
    served_page:
        Value of the resolved URL's ``page`` query parameter, or ``None``
        when it has none.  Compared with the requested page number to
        detect pagination overflow.
    """

    url: str
    status_code: int
    text: str
    served_page: str | None = None


class IPageFetcher(ABC):
    """Contract for fetching Last.fm artist pages.

    Every method issues exactly one GET and either returns the page or
    raises.  Implementations map failures onto the lastfmq error
    hierarchy.

    Raises
    ------
    lastfmq.utils.errors.NotFoundError
        Overview fetch answered 404.
    lastfmq.utils.errors.UnexpectedStatusError
        Any other non-200 status.
    lastfmq.utils.errors.TransportError
        The request could not be built, sent, or finished in time.
    """

    @abstractmethod
    async def fetch_overview(self, band: str) -> FetchedPage:
        """Fetch ``/music/{band}``."""

    @abstractmethod
    async def fetch_wiki(self, band: str) -> FetchedPage:
        """Fetch ``/music/{band}/+wiki``."""

    @abstractmethod
    async def fetch_tags(self, band: str) -> FetchedPage:
        """Fetch ``/music/{band}/+tags``."""

    @abstractmethod
    async def fetch_similar_page(
        self, band: str, page: int, timeout: float | None = None
    ) -> FetchedPage:
        """Fetch ``/music/{band}/+similar?page={page}``.

        Parameters
        ----------
        band:
            Band identifier.
        page:
            1-based listing page number.
        timeout:
            Seconds left before the caller's deadline.  ``None`` means the
            client's own timeout applies; ``<= 0`` fails without a request.
        """

    @abstractmethod
    async def fetch_events(self, band: str) -> FetchedPage:
        """Fetch ``/music/{band}/+events``."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this fetcher."""
