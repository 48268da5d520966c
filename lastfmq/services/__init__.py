"""Services that sequence fetches and extractions.

    BandQueryService          -- the full multi-stage band query
    SimilarArtistsCollector   -- paginated similar-artists collection
"""

from lastfmq.services.band_query_service import BandQueryService
from lastfmq.services.similar_artists_collector import SimilarArtistsCollector

__all__ = ["BandQueryService", "SimilarArtistsCollector"]
