"""Last.fm page fetcher backed by ``httpx.AsyncClient``.

Implements IPageFetcher by issuing one GET per page against the public
Last.fm website.  Redirects are followed so that the resolved URL can be
inspected: a similar-artists request past the last page is redirected
to a different ``page`` value, which the extractor treats as the end of
the listing.

Unlike a best-effort scraper, every failure here is raised: the query is
all-or-nothing and the caller decides what to report.
"""

from __future__ import annotations

import asyncio
from urllib.parse import quote_plus

import httpx

from lastfmq.config.settings import Settings
from lastfmq.interfaces.page_fetcher import FetchedPage, IPageFetcher
from lastfmq.utils.errors import NotFoundError, TransportError, UnexpectedStatusError
from lastfmq.utils.logging import get_logger

_OVERVIEW_PATH = "/music/{band}"
_WIKI_PATH = "/music/{band}/+wiki"
_TAGS_PATH = "/music/{band}/+tags"
_SIMILAR_PATH = "/music/{band}/+similar"
_EVENTS_PATH = "/music/{band}/+events"


class LastFmHttpFetcher(IPageFetcher):
    """Fetch Last.fm artist pages over HTTP.

    The ``httpx.AsyncClient`` is injected via the constructor for
    testability; the CLI builds it with the configured timeout.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings | None = None) -> None:
        self._http = http_client
        self._settings = settings or Settings()
        self._base_url = self._settings.lastfm_base_url.rstrip("/")
        self._logger = get_logger(__name__)

    # -- Private helpers -------------------------------------------------------

    def _url(self, template: str, band: str) -> str:
        return self._base_url + template.format(band=quote_plus(band))

    async def _get(
        self,
        url: str,
        stage: str,
        params: dict[str, str] | None = None,
        timeout: float | None = None,
        missing_is_not_found: bool = False,
    ) -> FetchedPage:
        """GET *url* and return the page, raising on any failure."""
        if timeout is not None and timeout <= 0:
            raise TransportError(f"http_get: deadline exceeded: {url}", provider_name=stage)

        headers = {"User-Agent": self._settings.user_agent}
        try:
            request = self._http.get(url, params=params, headers=headers, follow_redirects=True)
            if timeout is None:
                response = await request
            else:
                response = await asyncio.wait_for(request, timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"http_get: deadline exceeded: {url}", provider_name=stage) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"http_get: {exc}", provider_name=stage) from exc

        status = response.status_code
        if status != 200:
            self._logger.warning("lastfm_fetch_bad_status", url=url, status=status)
            if missing_is_not_found and status == 404:
                raise NotFoundError(f"band not found: {url}", provider_name=stage)
            raise UnexpectedStatusError(
                f"status: {status} {response.reason_phrase}",
                provider_name=stage,
                status_code=status,
            )

        resolved = httpx.URL(str(response.url))
        self._logger.debug("lastfm_fetch_complete", url=str(resolved), status=status)
        return FetchedPage(
            url=str(resolved),
            status_code=status,
            text=response.text,
            served_page=resolved.params.get("page"),
        )

    # -- IPageFetcher implementation -------------------------------------------

    async def fetch_overview(self, band: str) -> FetchedPage:
        """Fetch the overview page; a 404 raises :class:`NotFoundError`."""
        return await self._get(
            self._url(_OVERVIEW_PATH, band), "read_overview", missing_is_not_found=True
        )

    async def fetch_wiki(self, band: str) -> FetchedPage:
        return await self._get(self._url(_WIKI_PATH, band), "read_wiki")

    async def fetch_tags(self, band: str) -> FetchedPage:
        return await self._get(self._url(_TAGS_PATH, band), "read_tags")

    async def fetch_similar_page(
        self, band: str, page: int, timeout: float | None = None
    ) -> FetchedPage:
        return await self._get(
            self._url(_SIMILAR_PATH, band),
            f"read_similar_artists: page {page}",
            params={"page": str(page)},
            timeout=timeout,
        )

    async def fetch_events(self, band: str) -> FetchedPage:
        return await self._get(self._url(_EVENTS_PATH, band), "read_event_years")

    def get_provider_name(self) -> str:
        """Return ``'lastfm_http'``."""
        return "lastfm_http"
