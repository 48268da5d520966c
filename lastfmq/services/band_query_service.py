"""Orchestrates a full band query across the Last.fm artist pages.

Stages run in a fixed order and each one adds fields to the record:

    1. Overview         (always)   -> name, statistics, metadata facts
    2. Wiki             (optional) -> members, biography, references
    3. Tags             (optional) -> tags + sidebar similar artists
    4. SimilarArtists   (optional) -> paginated list (replaces the sidebar)
    5. EventYears       (optional) -> event year labels

The query is fail-fast: the first stage error propagates unchanged and
no partial record is returned.
"""

from __future__ import annotations

from lastfmq.extractors.event_years import EventYearsExtractor
from lastfmq.extractors.overview import OverviewExtractor
from lastfmq.extractors.tags import TagsExtractor
from lastfmq.extractors.wiki import WikiExtractor
from lastfmq.interfaces.page_fetcher import IPageFetcher
from lastfmq.models.band import BandDescription, TagsResult, Wiki
from lastfmq.models.query import QueryOptions
from lastfmq.services.similar_artists_collector import SimilarArtistsCollector
from lastfmq.utils.errors import ValidationError
from lastfmq.utils.logging import get_logger


class BandQueryService:
    """Run the requested extraction stages for one band.

    Parameters
    ----------
    fetcher:
        The :class:`IPageFetcher` issuing HTTP requests.
    collector:
        Similar-artists collector; built on *fetcher* when omitted.
    """

    def __init__(
        self,
        fetcher: IPageFetcher,
        collector: SimilarArtistsCollector | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._collector = collector or SimilarArtistsCollector(fetcher)
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def query(self, options: QueryOptions) -> BandDescription:
        """Build the :class:`BandDescription` for ``options.band``.

        Raises
        ------
        ValidationError
            If the band identifier is empty.
        LastFmQError
            Whatever the first failing stage raised.
        """
        band = options.band
        if not band:
            raise ValidationError("band name is required", provider_name="read_overview")

        desc = await self.read_overview(band)
        self._stage_done(band, "overview")

        if options.wiki:
            desc = desc.model_copy(update={"wiki": await self.read_wiki(band, options.ref_format)})
            self._stage_done(band, "wiki")

        if options.tags:
            tags = await self.read_tags(band)
            desc = desc.model_copy(
                update={"tags": tags.tags, "similar_artists": tags.similar_artists}
            )
            self._stage_done(band, "tags")

        if options.similar_artists:
            similar = await self._collector.collect(
                band, options.pages, options.page_offset, options.workers
            )
            desc = desc.model_copy(update={"similar_artists": similar})
            self._stage_done(band, "similar_artists")

        if options.events:
            desc = desc.model_copy(update={"event_years": await self.read_event_years(band)})
            self._stage_done(band, "events")

        return desc

    async def read_overview(self, band: str) -> BandDescription:
        page = await self._fetcher.fetch_overview(band)
        return OverviewExtractor().parse(page.text)

    async def read_wiki(self, band: str, ref_format: str) -> Wiki:
        page = await self._fetcher.fetch_wiki(band)
        return WikiExtractor(ref_format).parse(page.text)

    async def read_tags(self, band: str) -> TagsResult:
        page = await self._fetcher.fetch_tags(band)
        return TagsExtractor().parse(page.text)

    async def read_event_years(self, band: str) -> list[str]:
        page = await self._fetcher.fetch_events(band)
        return EventYearsExtractor().parse(page.text)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _stage_done(self, band: str, stage: str) -> None:
        self._logger.info("band_query_stage_complete", band=band, stage=stage)
