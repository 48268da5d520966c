"""Single-pass page extractors, one per Last.fm page kind.

    OverviewExtractor            -- /music/{band}           -> BandDescription
    WikiExtractor                -- /music/{band}/+wiki     -> Wiki
    TagsExtractor                -- /music/{band}/+tags     -> TagsResult
    SimilarArtistsPageExtractor  -- /music/{band}/+similar  -> list[str]
    EventYearsExtractor          -- /music/{band}/+events   -> list[str]
"""

from lastfmq.extractors.base import PageExtractor
from lastfmq.extractors.event_years import EventYearsExtractor
from lastfmq.extractors.overview import OverviewExtractor
from lastfmq.extractors.similar_artists import SimilarArtistsPageExtractor, is_overflow
from lastfmq.extractors.tags import TagsExtractor
from lastfmq.extractors.wiki import WikiExtractor

__all__ = [
    "EventYearsExtractor",
    "OverviewExtractor",
    "PageExtractor",
    "SimilarArtistsPageExtractor",
    "TagsExtractor",
    "WikiExtractor",
    "is_overflow",
]
