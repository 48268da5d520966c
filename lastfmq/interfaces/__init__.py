"""Public interface definitions for external collaborators.

The query service and the collector talk to the network exclusively
through :class:`IPageFetcher`.  The concrete adapter lives in
``lastfmq/providers/`` and is injected at runtime:

    Interface       ->  Concrete implementation
    ----------------------------------------------------
    IPageFetcher    ->  LastFmHttpFetcher (httpx.AsyncClient)
"""

from lastfmq.interfaces.page_fetcher import FetchedPage, IPageFetcher

__all__ = ["FetchedPage", "IPageFetcher"]
