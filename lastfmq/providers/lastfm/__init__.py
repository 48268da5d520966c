"""Last.fm website adapters.

    LastFmHttpFetcher  -- httpx-backed IPageFetcher for the public website.
"""

from lastfmq.providers.lastfm.http_fetcher import LastFmHttpFetcher

__all__ = ["LastFmHttpFetcher"]
