"""lastfmq domain models -- re-exports all public model classes.

The models are organized across two submodules by concern:
    - band.py   -- the band record and its parts (Wiki, Member, Ref, TagsResult)
    - query.py  -- immutable per-query options
"""

from __future__ import annotations

from lastfmq.models.band import BandDescription, Member, Ref, TagsResult, Wiki
from lastfmq.models.query import QueryOptions, build_query_options

__all__ = [
    "BandDescription",
    "Member",
    "QueryOptions",
    "Ref",
    "TagsResult",
    "Wiki",
    "build_query_options",
]
