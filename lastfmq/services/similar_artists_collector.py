"""Paginated similar-artists collection, sequential or via a worker pool.

Two modes share one page reader (fetch + overflow check + extract):

* **Sequential** (``workers == 1``) -- pages ``offset+1 .. offset+pages``
  in order; the first failing page aborts the whole call.
* **Concurrent** (``workers > 1``) -- ``workers`` asyncio tasks claim page
  numbers ``1 .. pages+offset`` from a shared :class:`PageCounter`.  Each
  outcome is handed to the caller through a one-slot queue, so a worker
  cannot claim more work until its last outcome was consumed.  A worker
  that reads an empty (overflowed) page stops claiming; a worker that
  fails records the error and keeps claiming.  Every worker runs to its
  natural end before the call returns, then the first recorded error, if
  any, is raised and all collected artists are discarded.

All concurrent fetches share a single deadline measured from call entry.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from lastfmq.extractors.similar_artists import SimilarArtistsPageExtractor
from lastfmq.interfaces.page_fetcher import IPageFetcher
from lastfmq.utils.concurrency import PageCounter, run_to_completion
from lastfmq.utils.errors import LastFmQError, ValidationError
from lastfmq.utils.logging import get_logger

_STAGE = "read_similar_artists"
_DEFAULT_DEADLINE = 30.0


@dataclass(frozen=True)
class _PageOutcome:
    """What one worker hands back for one claimed page."""

    page: int
    artists: list[str] | None = None
    error: BaseException | None = None


class SimilarArtistsCollector:
    """Collect similar artists across a contiguous range of listing pages.

    Parameters
    ----------
    fetcher:
        The :class:`IPageFetcher` issuing HTTP requests.
    extractor:
        Page extractor; a fresh default one when omitted.
    deadline:
        Seconds allowed for a whole concurrent collection (default 30).
    """

    def __init__(
        self,
        fetcher: IPageFetcher,
        extractor: SimilarArtistsPageExtractor | None = None,
        deadline: float = _DEFAULT_DEADLINE,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor or SimilarArtistsPageExtractor()
        self._deadline = deadline
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def collect(self, band: str, pages: int, offset: int = 0, workers: int = 1) -> list[str]:
        """Collect artists from *pages* listing pages, picking the mode by *workers*.

        Returns
        -------
        list[str]
            Artists ordered by page number, then by position on the page.

        Raises
        ------
        ValidationError
            If *band* is empty or *workers* is below 1.
        LastFmQError
            The first page failure (sequential) or first recorded failure
            after all workers finished (concurrent), of the same type and
            prefixed with ``read_similar_artists``.
        """
        if not band:
            raise ValidationError("band name is required", provider_name=_STAGE)
        if workers < 1:
            raise ValidationError("workers must be at least 1", provider_name=_STAGE)

        if workers > 1:
            return await self.collect_concurrent(band, pages, offset, workers)
        return await self.collect_sequential(band, pages, offset)

    async def collect_sequential(self, band: str, pages: int, offset: int = 0) -> list[str]:
        """Read pages ``offset+1 .. offset+pages`` in order, failing fast."""
        artists: list[str] = []
        for page in range(offset + 1, pages + offset + 1):
            try:
                artists.extend(await self._read_page(band, page))
            except LastFmQError as exc:
                raise exc.with_context(_STAGE) from exc

        self._logger.info(
            "similar_artists_collect_complete",
            band=band,
            mode="sequential",
            pages=pages,
            offset=offset,
            artist_count=len(artists),
        )
        return artists

    async def collect_concurrent(
        self, band: str, pages: int, offset: int = 0, workers: int = 2
    ) -> list[str]:
        """Read pages ``1 .. pages+offset`` with *workers* tasks; all-or-nothing."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._deadline
        last_page = pages + offset
        counter = PageCounter(last=last_page)
        # None is posted once every worker has finished.
        outcomes: asyncio.Queue[_PageOutcome | None] = asyncio.Queue(maxsize=1)

        async def _worker(worker_id: int) -> None:
            page = counter.claim()
            while page is not None:
                try:
                    artists = await self._read_page(band, page, timeout=deadline - loop.time())
                except LastFmQError as exc:
                    await outcomes.put(_PageOutcome(page, error=exc))
                else:
                    if not artists:
                        self._logger.debug(
                            "similar_artists_worker_stop", worker=worker_id, page=page
                        )
                        return
                    await outcomes.put(_PageOutcome(page, artists=artists))
                page = counter.claim()

        async def _watch() -> None:
            results = await run_to_completion([_worker(i) for i in range(workers)])
            for result in results:
                if isinstance(result, BaseException):
                    await outcomes.put(_PageOutcome(0, error=result))
            await outcomes.put(None)

        # Slot i holds page i+1, so order follows page numbers, not arrival.
        slots: list[list[str]] = [[] for _ in range(last_page)]
        errors: list[BaseException] = []

        watcher = asyncio.create_task(_watch())
        try:
            while True:
                item = await outcomes.get()
                if item is None:
                    break
                if item.error is not None:
                    self._logger.warning(
                        "similar_artists_page_failed", page=item.page, error=str(item.error)
                    )
                    errors.append(item.error)
                elif item.artists:
                    slots[item.page - 1] = item.artists
            await watcher
        finally:
            if not watcher.done():
                watcher.cancel()

        if errors:
            first = errors[0]
            if isinstance(first, LastFmQError):
                raise first.with_context(_STAGE) from first
            raise first

        artists = [artist for slot in slots for artist in slot]
        self._logger.info(
            "similar_artists_collect_complete",
            band=band,
            mode="concurrent",
            workers=workers,
            pages_claimed=min(counter.claimed, last_page),
            artist_count=len(artists),
        )
        return artists

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _read_page(self, band: str, page: int, timeout: float | None = None) -> list[str]:
        """Fetch and extract one listing page; ``[]`` past the last page."""
        fetched = await self._fetcher.fetch_similar_page(band, page, timeout=timeout)
        artists = self._extractor.extract_page(fetched, page)
        if not artists:
            self._logger.debug(
                "similar_artists_page_overflow",
                page=page,
                served_page=fetched.served_page,
            )
        return artists
