"""Shared pytest fixtures for the lastfmq test suite."""

from __future__ import annotations

import asyncio

import pytest

from lastfmq.interfaces.page_fetcher import FetchedPage, IPageFetcher
from lastfmq.utils.errors import NotFoundError, TransportError, UnexpectedStatusError
from lastfmq.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    """Configure structlog once so loggers never bind to a per-test stream."""
    configure_logging(log_level="WARNING")


# ---------------------------------------------------------------------------
# Canned Last.fm markup
# ---------------------------------------------------------------------------

OVERVIEW_HTML = """<!DOCTYPE html>
<html><head><title>The Beatles | Last.fm</title></head>
<body>
<header class="header-new">
<h1 class="header-new-title" itemprop="name">The Beatles</h1>
<ul class="header-metadata-tnew">
<li class="header-metadata-tnew-item">
<h4 class="header-metadata-tnew-title">Scrobbles</h4>
<div class="header-metadata-tnew-display"><p><abbr class="intabbr js-abbreviated-counter" title="1,234,567">1.2M</abbr></p></div>
</li>
<li class="header-metadata-tnew-item">
<h4 class="header-metadata-tnew-title">Listeners</h4>
<div class="header-metadata-tnew-display"><p><abbr class="intabbr js-abbreviated-counter" title="5,678">5.7K</abbr></p></div>
</li>
</ul>
</header>
<section class="catalogue-metadata-section">
<dl class="catalogue-metadata">
<dt class="catalogue-metadata-heading">Years Active</dt>
<dd class="catalogue-metadata-description">1960 &ndash; 1970 (10 years)</dd>
<dt class="catalogue-metadata-heading">Founded In</dt>
<dd class="catalogue-metadata-description">Liverpool, Merseyside, England</dd>
<dt class="catalogue-metadata-heading">Record Label</dt>
<dd class="catalogue-metadata-description">Apple</dd>
</dl>
</section>
<dl class="other"><dt>Born</dt><dd>Not metadata</dd></dl>
</body></html>
"""

WIKI_HTML = """<html><body>
<div class="wiki-columns">
<ul class="factbox">
<li class="factbox-item">
<h4 class="factbox-heading">Members</h4>
<ul class="factbox-list">
<li class="factbox-item-list"><a href="/music/John+Lennon">John Lennon</a> <span class="factbox-secondary">(1960 &ndash; 1970)</span></li>
<li class="factbox-item-list"><a href="/music/Paul+McCartney">Paul McCartney</a> <span class="factbox-secondary">(1960 &ndash; 1970)</span></li>
<li class="factbox-item-list"><a href="/music/Pete+Best">Pete Best</a></li>
</ul>
</li>
</ul>
<div class="wiki-content" itemprop="description">
<p>The Beatles were an English rock band formed in <a href="/place/Liverpool">Liverpool</a> in 1960.</p>
<p>The group comprised <a href="/music/John+Lennon">John Lennon</a>, Paul McCartney.<br>They were led by <a href="/music/John+Lennon/+wiki">John Lennon</a> again.</p>
</div>
<p>Outside the wiki content.</p>
</div>
</body></html>
"""

TAGS_HTML = """<html><body>
<section>
<ol class="big-tags">
<li class="big-tags-item-wrap"><div class="big-tags-item"><h3 class="big-tags-item-name"><a href="/tag/rock" class="link-block-target">rock</a></h3></div></li>
<li class="big-tags-item-wrap"><div class="big-tags-item"><h3 class="big-tags-item-name"><a href="/tag/classic+rock" class="link-block-target">classic rock</a></h3></div></li>
<li class="big-tags-item-wrap"><div class="big-tags-item"><h3 class="big-tags-item-name"><a href="/tag/60s" class="link-block-target">60s</a></h3></div></li>
</ol>
</section>
<aside>
<ol class="similar-items-sidebar">
<li class="similar-items-sidebar-item"><a class="link-block-target" href="/music/John+Lennon">John Lennon</a></li>
<li class="similar-items-sidebar-item"><a class="link-block-target" href="/music/The+Rolling+Stones">The Rolling Stones</a></li>
</ol>
</aside>
<ol class="big-tags">
<li><a class="link-block-target" href="/tag/late">late</a></li>
</ol>
</body></html>
"""

EVENTS_HTML = """<html><body>
<nav class="secondary-nav" aria-label="Event Year Navigation">
<ul class="secondary-nav-items">
<li><a class="secondary-nav-item-link secondary-nav-item-link--active" href="/music/Cher/+events">Upcoming</a></li>
<li><a class="secondary-nav-item-link" href="/music/Cher/+events/2019"> 2019 </a></li>
<li><a class="secondary-nav-item-link" href="/music/Cher/+events/2018">2018</a></li>
<li><a class="secondary-nav-item-link" href="/music/Cher/+events/2017">   </a></li>
</ul>
</nav>
<nav aria-label="Footer"><a class="secondary-nav-item-link" href="/about">About</a></nav>
</body></html>
"""


def similar_page_html(artists: list[str]) -> str:
    """Render a +similar listing page carrying *artists*."""
    items = "\n".join(
        '<li class="similar-artists-item-wrap"><div class="similar-artists-item">'
        f'<h3 class="similar-artists-item-name"><a class="link-block-target" href="/music/{a}">{a}</a></h3>'
        "</div></li>"
        for a in artists
    )
    return (
        "<html><body><section>"
        f'<ol class="similar-artists">\n{items}\n</ol>'
        '<ol class="similar-artists-footer"><li><a class="link-block-target">Not an artist</a></li></ol>'
        "</section></body></html>"
    )


def artists_for(page: int, count: int = 3) -> list[str]:
    """Deterministic artist names for listing *page*."""
    return [f"Artist {page}-{i}" for i in range(1, count + 1)]


# ---------------------------------------------------------------------------
# Fake fetcher
# ---------------------------------------------------------------------------


class FakeFetcher(IPageFetcher):
    """Scripted IPageFetcher serving canned pages.

    Parameters
    ----------
    last_page:
        Highest real +similar page; requests beyond it are "redirected"
        to this page, which the extractor reads as overflow.
    fail_pages:
        +similar pages that raise :class:`UnexpectedStatusError`.
    delays:
        Per-page artificial latency in seconds, to shuffle completion order.
    """

    def __init__(
        self,
        last_page: int = 100,
        fail_pages: set[int] | None = None,
        delays: dict[int, float] | None = None,
        overview: str = OVERVIEW_HTML,
        wiki: str = WIKI_HTML,
        tags: str = TAGS_HTML,
        events: str = EVENTS_HTML,
        missing: bool = False,
    ) -> None:
        self.last_page = last_page
        self.fail_pages = fail_pages or set()
        self.delays = delays or {}
        self.pages = {"overview": overview, "wiki": wiki, "tags": tags, "events": events}
        self.missing = missing
        self.calls: list[str] = []
        self.similar_calls: list[int] = []
        self.timeouts: list[float | None] = []

    def _page(self, kind: str, band: str) -> FetchedPage:
        self.calls.append(kind)
        return FetchedPage(url=f"https://www.last.fm/music/{band}", status_code=200, text=self.pages[kind])

    async def fetch_overview(self, band: str) -> FetchedPage:
        if self.missing:
            self.calls.append("overview")
            raise NotFoundError(f"band not found: {band}", provider_name="read_overview")
        return self._page("overview", band)

    async def fetch_wiki(self, band: str) -> FetchedPage:
        return self._page("wiki", band)

    async def fetch_tags(self, band: str) -> FetchedPage:
        return self._page("tags", band)

    async def fetch_events(self, band: str) -> FetchedPage:
        return self._page("events", band)

    async def fetch_similar_page(
        self, band: str, page: int, timeout: float | None = None
    ) -> FetchedPage:
        self.calls.append("similar")
        self.similar_calls.append(page)
        self.timeouts.append(timeout)
        if timeout is not None and timeout <= 0:
            raise TransportError("http_get: deadline exceeded", provider_name="read_similar_artists")

        delay = self.delays.get(page, 0.0)
        if delay:
            try:
                await asyncio.wait_for(asyncio.sleep(delay), timeout=timeout)
            except asyncio.TimeoutError as exc:
                raise TransportError(
                    "http_get: deadline exceeded", provider_name="read_similar_artists"
                ) from exc

        if page in self.fail_pages:
            raise UnexpectedStatusError(
                "status: 503 Service Unavailable",
                provider_name=f"read_similar_artists: page {page}",
                status_code=503,
            )

        served = min(page, self.last_page)
        return FetchedPage(
            url=f"https://www.last.fm/music/{band}/+similar?page={served}",
            status_code=200,
            text=similar_page_html(artists_for(served)),
            served_page=str(served),
        )

    def get_provider_name(self) -> str:
        return "fake"


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """A FakeFetcher whose similar-artists listing has three pages."""
    return FakeFetcher(last_page=3)
